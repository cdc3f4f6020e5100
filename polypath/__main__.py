"""Allow ``python -m polypath``."""

from polypath.cli import main

main()
