"""List comparison commands."""

from __future__ import annotations
import json as _json
import logging
from pathlib import Path
from typing import List

import click

from .helpers import cli
from ..config_types import AppConfig
from ..errors import ConfigurationError, ParseError
from ..ingest import extract_items
from ..match import Algorithm, MatchOptions
from ..reporting import write_comparison_reports
from ..services.compare_service import compare_all_algorithms, run_comparison
from ..utils.output import count_badge, divider, highlight_diff, report_files, section_header, success, warning

logger = logging.getLogger(__name__)

ALGORITHM_CHOICES = [a.value for a in Algorithm]


def _load_list(path: str, deduplicate: bool, extensions: List[str]) -> List[str]:
    try:
        items = extract_items(path, deduplicate=deduplicate, extensions=extensions)
    except ParseError as e:
        raise click.ClickException(f"{Path(path).name}: {e}") from e
    logger.debug(f"Loaded {len(items)} items from {path}")
    return items


def _resolve_options(app: AppConfig, algorithm: str | None, ignore_case: bool | None, threshold: float | None) -> MatchOptions:
    matching = app.matching
    if algorithm is not None:
        matching.algorithm = algorithm
    if ignore_case is not None:
        matching.ignore_case = ignore_case
    if threshold is not None:
        matching.threshold = threshold
    try:
        return matching.to_options()
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e


def _echo_leftovers(title: str, items: List[str], limit: int) -> None:
    if not items:
        return
    click.echo("")
    click.echo(section_header(f"{title} ({len(items)})"))
    for item in items[:limit]:
        click.echo(f"  {item}")
    if len(items) > limit:
        click.echo(click.style(f"  … {len(items) - limit} more", fg='bright_black'))


@cli.command()
@click.argument('file1', type=click.Path(exists=True, dir_okay=False))
@click.argument('file2', type=click.Path(exists=True, dir_okay=False))
@click.option('--algorithm', '-a', type=click.Choice(ALGORITHM_CHOICES, case_sensitive=False), default=None,
              help='Matching algorithm (default from config)')
@click.option('--ignore-case/--case-sensitive', default=None, help='Case-fold and trim items before comparing')
@click.option('--threshold', '-t', type=float, default=None, help='Minimum similarity 0-100 for fuzzy algorithms')
@click.option('--dedupe/--no-dedupe', default=None, help='Drop repeated items within each list')
@click.option('--report-dir', type=click.Path(file_okay=False), default=None,
              help='Write CSV/HTML reports into this directory')
@click.option('--report', 'write_reports', is_flag=True,
              help='Write CSV/HTML reports into the configured reports directory')
@click.option('--show-unmatched', type=int, default=None, help='Max unmatched items listed per side')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON instead of a summary')
@click.pass_context
def compare(
    ctx: click.Context,
    file1: str,
    file2: str,
    algorithm: str | None,
    ignore_case: bool | None,
    threshold: float | None,
    dedupe: bool | None,
    report_dir: str | None,
    write_reports: bool,
    show_unmatched: int | None,
    as_json: bool,
):
    """Compare two list files (.txt, .xlsx, .docx).

    Items are paired greedily in the order of the first list: each item takes
    the first (exact/soundex) or best-scoring (fuzzy) item of the second list
    that is still free.
    """
    app = AppConfig.from_dict(ctx.obj)
    options = _resolve_options(app, algorithm, ignore_case, threshold)
    deduplicate = app.ingest.deduplicate if dedupe is None else dedupe

    list1 = _load_list(file1, deduplicate, app.ingest.extensions)
    list2 = _load_list(file2, deduplicate, app.ingest.extensions)

    try:
        result = run_comparison(list1, list2, options)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    recon = result.reconciliation

    if as_json:
        click.echo(_json.dumps(recon.to_dict(), indent=2, ensure_ascii=False))
    else:
        click.echo(section_header(f"Comparing {Path(file1).name} ↔ {Path(file2).name} ({options.algorithm.value})"))
        click.echo(
            f"{count_badge(result.matched, 'matched', 'green')} | "
            f"{count_badge(len(recon.only_in_first), 'only in first', 'yellow')} | "
            f"{count_badge(len(recon.only_in_second), 'only in second', 'yellow')} | "
            f"match rate {result.match_rate:.1f}%"
        )
        if recon.matches:
            click.echo(divider())
        for pair in recon.matches:
            if pair.alignment is not None:
                seg1, seg2 = pair.alignment.segments()
                left, right = highlight_diff(seg1), highlight_diff(seg2)
            else:
                left, right = pair.item1, pair.item2
            score = f" ({pair.similarity:.1f}%)" if pair.similarity is not None else ""
            click.echo(f"  {left}  ↔  {right}{score}")

        limit = show_unmatched if show_unmatched is not None else app.matching.show_unmatched
        _echo_leftovers("Only in first", recon.only_in_first, limit)
        _echo_leftovers("Only in second", recon.only_in_second, limit)

    out_dir = report_dir or (app.reports.directory if write_reports else None)
    if out_dir:
        reports = write_comparison_reports(recon, Path(out_dir))
        if not as_json:
            click.echo("")
            click.echo(success("Generated reports:"))
            for label, (csv_path, html_path) in reports.items():
                click.echo(report_files(csv_path, html_path, label.replace('_', ' ')))


@cli.command(name="compare-all")
@click.argument('file1', type=click.Path(exists=True, dir_okay=False))
@click.argument('file2', type=click.Path(exists=True, dir_okay=False))
@click.option('--ignore-case/--case-sensitive', default=None, help='Case-fold and trim items before comparing')
@click.option('--threshold', '-t', type=float, default=None, help='Minimum similarity 0-100 for fuzzy algorithms')
@click.option('--dedupe/--no-dedupe', default=None, help='Drop repeated items within each list')
@click.pass_context
def compare_all(ctx: click.Context, file1: str, file2: str, ignore_case: bool | None, threshold: float | None, dedupe: bool | None):
    """Show the match rate of every algorithm for two list files."""
    app = AppConfig.from_dict(ctx.obj)
    options = _resolve_options(app, None, ignore_case, threshold)
    deduplicate = app.ingest.deduplicate if dedupe is None else dedupe

    list1 = _load_list(file1, deduplicate, app.ingest.extensions)
    list2 = _load_list(file2, deduplicate, app.ingest.extensions)

    try:
        rates = compare_all_algorithms(list1, list2, ignore_case=options.ignore_case, threshold=options.threshold)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    click.echo(section_header(f"Match rate per algorithm (threshold {options.threshold:g})"))
    best = max(rates, key=lambda r: r.match_rate)
    for rate in rates:
        line = f"  {rate.algorithm.value:<22}{rate.matched:>6} matched  {rate.match_rate:6.1f}%"
        if rate is best and best.matched > 0:
            line = click.style(line, fg='green', bold=True)
        click.echo(line)
    if best.matched == 0:
        click.echo(warning("No algorithm found any match"))


__all__ = ["compare", "compare_all"]
