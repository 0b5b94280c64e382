from site_verify.verify_build import main

raise SystemExit(main())
