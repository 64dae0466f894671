"""solidpatterns CLI, entry point.

Commands:
    solidpatterns                      Demo: journal "Hello", "world" and print it
    solidpatterns journal <text>...    Build a journal, optionally save it
    solidpatterns products             Filter the sample product catalog
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from .catalog.filters import SpecificationFilter
from .catalog.product import Color, Size, sample_catalog
from .catalog.specifications import ColorSpecification, SizeSpecification, Specification
from .config import settings
from .journal.entry_log import EntryLog, shared_ids
from .journal.persistence import Persistence

err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _new_log() -> EntryLog:
    return EntryLog(ids=shared_ids if settings.shared_entry_ids else None)


# ── CLI root ─────────────────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version="1.0.0", prog_name="solidpatterns")
@click.pass_context
def main(ctx: click.Context) -> None:
    """solidpatterns: single-responsibility and open/closed, by example."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    if ctx.invoked_subcommand is None:
        log = _new_log()
        log.append("Hello")
        log.append("world")
        click.echo(log.render())


# ── journal ──────────────────────────────────────────────────────────────────


@main.command()
@click.argument("texts", nargs=-1, required=True)
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
    help="Save the journal to this file.",
)
@click.option("--save", is_flag=True, help="Save to the configured journal path.")
@click.option(
    "--overwrite/--no-overwrite", default=None,
    help="Replace an existing file (default from SOLIDPATTERNS_OVERWRITE).",
)
def journal(texts: tuple[str, ...], output: Path | None, save: bool, overwrite: bool | None) -> None:
    """Append TEXTS to a new journal and print it.

    \b
    Examples:
      solidpatterns journal "Hello" "world"
      solidpatterns journal "Dear diary" --output diary.txt --overwrite
      solidpatterns journal "Note" --save
    """
    log = _new_log()
    for text in texts:
        log.append(text)
    click.echo(log.render())

    path = output or (settings.journal_path if save else None)
    if path is None:
        return

    replace = settings.overwrite if overwrite is None else overwrite
    if Persistence().save(path, log, overwrite=replace):
        err_console.print(f"[dim]Saved {len(log)} entries to {path}[/dim]")
    else:
        err_console.print(f"[yellow]{path} exists, not overwritten (use --overwrite).[/yellow]")


# ── products ─────────────────────────────────────────────────────────────────


@main.command()
@click.option(
    "--color", "-c", default=None,
    type=click.Choice([c.value for c in Color], case_sensitive=False),
    help="Keep products of this color.",
)
@click.option(
    "--size", "-s", default=None,
    type=click.Choice([s.value for s in Size], case_sensitive=False),
    help="Keep products of this size.",
)
@click.option("--any", "match_any", is_flag=True, help="Match either criterion instead of both.")
@click.option(
    "--output", "-o", "output_fmt", default="table",
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Output format.",
    show_default=True,
)
def products(color: str | None, size: str | None, match_any: bool, output_fmt: str) -> None:
    """Filter the sample product catalog.

    \b
    Examples:
      solidpatterns products --size large
      solidpatterns products --size large --color blue
      solidpatterns products --size small --color blue --any --output json
    """
    from .visualization.tables import print_products_table

    specs: list[Specification] = []
    if color:
        specs.append(ColorSpecification(Color(color.lower())))
    if size:
        specs.append(SizeSpecification(Size(size.lower())))

    catalog = sample_catalog()
    if specs:
        spec = specs[0]
        for extra in specs[1:]:
            spec = (spec | extra) if match_any else (spec & extra)
        logger.debug("Filtering with %r", spec)
        matched = list(SpecificationFilter().apply(catalog, spec))
    else:
        matched = catalog

    if output_fmt == "json":
        for p in matched:
            click.echo(json.dumps({"name": p.name, "color": p.color.value, "size": p.size.value}))
        return

    print_products_table(matched, title=f"{len(matched)} of {len(catalog)} products")


if __name__ == "__main__":
    main()
