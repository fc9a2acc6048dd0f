"""CLI exports."""

from __future__ import annotations

from yamltree.cli_app import app, main

__all__ = ["app", "main"]


if __name__ == "__main__":
    main()
