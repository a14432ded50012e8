"""Allow ``python -m luachflow``."""

from .main import main

main()
