from toyc.cli import main

raise SystemExit(main())
