class ConfigError(Exception):
    """Raised when user-supplied configuration cannot be applied."""


class InvalidColorError(ConfigError):
    """Raised when a hex color string cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid hex color: {value!r}")
        self.value = value


class StyleConflictError(ConfigError):
    """Raised when more than one tile style is requested."""

    def __init__(self, flags: list[str]) -> None:
        super().__init__(f"only one tile style may be chosen, got: {', '.join(flags)}")
        self.flags = flags


class UnknownPaletteSlotError(ConfigError):
    """Raised when a color override names a slot the palette does not have."""

    def __init__(self, slot: str) -> None:
        super().__init__(f"unknown palette slot: {slot}")
        self.slot = slot
