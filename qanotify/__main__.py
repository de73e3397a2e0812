from qanotify.cli import main

raise SystemExit(main())
