from cldpy.cli import main

raise SystemExit(main())
