"""Allow ``python -m hilite``."""

from hilite.cli import main

main()
