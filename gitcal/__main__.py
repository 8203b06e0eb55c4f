from gitcal.main import main


raise SystemExit(main())
