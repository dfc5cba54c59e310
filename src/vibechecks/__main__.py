"""Allow ``python -m vibechecks``."""

from __future__ import annotations

from vibechecks.cli.main import main

raise SystemExit(main())
