"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from lrm.cli.helpers import cli  # root group
from lrm.cli import compare_cmds  # noqa: F401
from lrm.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
