from kaiju.cli import main

raise SystemExit(main())
