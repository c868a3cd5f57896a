"""Allow running the CLI with ``python -m film_links.cli``."""

from .main import main

main()
