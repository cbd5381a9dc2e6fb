from kappa.repl import main

raise SystemExit(main())
