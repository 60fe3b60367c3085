from pdfgen.main import main

raise SystemExit(main())
