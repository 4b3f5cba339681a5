"""Allow `python -m bulgogi`."""

from bulgogi.interfaces.cli.main import main

raise SystemExit(main())
