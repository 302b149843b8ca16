"""Allow ``python -m fluttergen``."""

from .cli import main

main()
