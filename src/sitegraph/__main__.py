from sitegraph.cli import main

raise SystemExit(main())
