"""Allow ``python -m spring_arrangements``."""

from spring_arrangements.cli import main

raise SystemExit(main())
