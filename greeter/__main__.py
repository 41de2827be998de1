from greeter.main import main

raise SystemExit(main())
