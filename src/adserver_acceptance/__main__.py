from adserver_acceptance.cli import main

raise SystemExit(main())
