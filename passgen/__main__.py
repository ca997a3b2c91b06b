from passgen.cli import main

raise SystemExit(main())
