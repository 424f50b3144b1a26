"""CLI entry point for slugforge."""

from __future__ import annotations

from slugforge.cli import main

if __name__ == "__main__":
    main()
