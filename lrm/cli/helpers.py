from __future__ import annotations
import click

from ..config import load_typed_config
from ..errors import ConfigurationError
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="list-reconcile-matcher")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Compare two lists and find which items they share.

    \b
    TYPICAL WORKFLOWS:

    \b
    Exact comparison (case-insensitive by default):
      lrm compare first.txt second.xlsx

    \b
    Fuzzy comparison:
      lrm compare a.txt b.txt --algorithm levenshtein --threshold 85
      lrm compare a.txt b.txt -a token-sort --report-dir out/

    \b
    Pick an algorithm:
      lrm compare-all a.txt b.txt   # match rate for every algorithm

    \b
    Configuration comes from .env / LRM__SECTION__KEY environment variables,
    e.g. LRM__MATCHING__ALGORITHM=jaro-winkler. Show it with: lrm config
    """
    if isinstance(ctx.obj, dict):
        cfg = ctx.obj
    else:
        overrides = {'log_level': log_level.upper()} if log_level else None
        try:
            cfg = load_typed_config(overrides).to_dict()
        except ConfigurationError as e:
            raise click.UsageError(str(e)) from e
    if log_level:
        cfg['log_level'] = log_level.upper()
    ctx.obj = cfg


__all__ = ["cli"]
