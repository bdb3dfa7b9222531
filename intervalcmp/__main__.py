from intervalcmp.harness import main

raise SystemExit(main())
