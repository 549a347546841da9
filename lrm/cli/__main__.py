"""Module entry point for `python -m lrm.cli`."""
from __future__ import annotations

from lrm.cli import cli

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    cli()
