import pytest

from gitcal.errors import ConfigError
from gitcal.errors import InvalidColorError
from gitcal.errors import StyleConflictError
from gitcal.errors import UnknownPaletteSlotError
from gitcal.models import IntensityLevel
from gitcal.models import TileStyle
from gitcal.rendering.palette import Palette
from gitcal.rendering.palette import parse_hex_color


@pytest.mark.parametrize("raw", ["#ff8800", "ff8800", "FF8800", " #Ff8800 "])
def test_parse_hex_color_accepts_with_and_without_hash(raw: str) -> None:
    color = parse_hex_color(raw)

    assert tuple(color.get_truecolor()) == (255, 136, 0)


@pytest.mark.parametrize("raw", ["", "#fff", "zzzzzz", "#12345g", "#1234567", "red"])
def test_parse_hex_color_rejects_malformed_input(raw: str) -> None:
    with pytest.raises(InvalidColorError) as exc_info:
        parse_hex_color(raw)

    assert exc_info.value.value == raw
    assert repr(raw) in str(exc_info.value)
    assert isinstance(exc_info.value, ConfigError)


def test_default_palette_ramp_gets_brighter() -> None:
    palette = Palette()
    ramp = [palette.color0, palette.color1, palette.color2, palette.color3, palette.color4]

    brightness = [sum(color.get_truecolor()) for color in ramp]

    assert brightness == sorted(brightness)
    assert len(set(brightness)) == 5


def test_with_methods_replace_only_their_slot() -> None:
    palette = Palette()

    updated = palette.with_color2("#ff0000").with_base("000000")

    assert tuple(updated.color2.get_truecolor()) == (255, 0, 0)
    assert tuple(updated.base.get_truecolor()) == (0, 0, 0)
    assert updated.color1 == palette.color1
    assert updated.text == palette.text
    assert palette.color2 != updated.color2


def test_with_overrides_skips_unset_slots() -> None:
    palette = Palette().with_overrides({"text": "010203", "color4": None})

    assert tuple(palette.text.get_truecolor()) == (1, 2, 3)
    assert palette.color4 == Palette().color4


def test_with_overrides_propagates_invalid_color() -> None:
    with pytest.raises(InvalidColorError):
        Palette().with_overrides({"color0": "#nothex"})


def test_with_overrides_rejects_unknown_slot() -> None:
    with pytest.raises(UnknownPaletteSlotError) as exc_info:
        Palette().with_overrides({"color5": "ffffff"})

    assert exc_info.value.slot == "color5"
    assert isinstance(exc_info.value, ConfigError)


def test_level_color_maps_each_level_to_its_slot() -> None:
    palette = Palette()

    assert palette.level_color(IntensityLevel.NONE) == palette.color0
    assert palette.level_color(IntensityLevel.FIRST_QUARTILE) == palette.color1
    assert palette.level_color(IntensityLevel.SECOND_QUARTILE) == palette.color2
    assert palette.level_color(IntensityLevel.THIRD_QUARTILE) == palette.color3
    assert palette.level_color(IntensityLevel.FOURTH_QUARTILE) == palette.color4


def test_intensity_level_rejects_unknown_source_value() -> None:
    with pytest.raises(ValueError):
        IntensityLevel("FIFTH_QUARTILE")


def test_tile_style_widths() -> None:
    assert TileStyle.SMALL_SQUARE.width == 2
    assert TileStyle.FULL_BLOCK.width == 2
    assert TileStyle.CIRCLE.width == 2
    assert TileStyle.HALF_BLOCK.width == 1
    assert TileStyle.CIRCLE.endcap
    assert not TileStyle.SMALL_SQUARE.endcap


def test_tile_style_from_flags_defaults_to_small_square() -> None:
    assert TileStyle.from_flags() is TileStyle.SMALL_SQUARE
    assert TileStyle.from_flags(block=True) is TileStyle.FULL_BLOCK
    assert TileStyle.from_flags(half=True) is TileStyle.HALF_BLOCK
    assert TileStyle.from_flags(circle=True) is TileStyle.CIRCLE


def test_tile_style_from_flags_rejects_multiple_styles() -> None:
    with pytest.raises(StyleConflictError) as exc_info:
        TileStyle.from_flags(block=True, circle=True)

    assert exc_info.value.flags == ["block", "circle"]
