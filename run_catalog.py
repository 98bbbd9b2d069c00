"""Entry point wrapper for the card catalog generator."""
from __future__ import annotations

from loa_format.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
