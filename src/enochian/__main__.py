"""CLI entry point for the Enochian translator."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from enochian import __version__
from enochian.config import LEXICON_ENV, ROOTS_ENV, Settings
from enochian.ingest.loader import LoaderError, load_translator
from enochian.pipeline.enhanced import EnhancedTranslator

console = Console()

VIEWS = ("words", "phonetic", "symbols", "all")


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _fail(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


def _translator(ctx: click.Context) -> EnhancedTranslator:
    obj = ctx.obj
    if obj.get("translator") is None:
        try:
            obj["translator"] = load_translator(
                obj["settings"],
                lexicon_path=obj["lexicon"],
                roots_path=obj["roots"],
            )
        except LoaderError as e:
            _fail(str(e))
    return obj["translator"]


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--lexicon",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Lexicon JSON file (default: <data dir>/enochian_lexicon.json)",
)
@click.option(
    "--roots",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Root table JSON file (default: <data dir>/enochian_root_table.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log matching decisions")
@click.pass_context
def cli(ctx: click.Context, lexicon: Path | None, roots: Path | None, verbose: bool):
    """Enochian Translator - English to Enochian with root analysis."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("settings", Settings())
    ctx.obj.setdefault("translator", None)
    ctx.obj["lexicon"] = lexicon
    ctx.obj["roots"] = roots


@cli.command()
@click.argument("text")
@click.option(
    "--view",
    type=click.Choice(VIEWS),
    default="all",
    show_default=True,
    help="Which rendering to show",
)
@click.option("--no-fuzzy", is_flag=True, help="Disable negation, stem and substring matching")
@click.option("--no-plurals", is_flag=True, help="Disable plural handling")
@click.option("--no-roots", is_flag=True, help="Disable letter-root construction")
@click.option("--no-phrases", is_flag=True, help="Disable multi-word phrase matching")
@click.option("--json", "output_json", is_flag=True, help="Output result as JSON")
@click.option("--details", is_flag=True, help="Show how each word was resolved")
@click.pass_context
def translate(
    ctx: click.Context,
    text: str,
    view: str,
    no_fuzzy: bool,
    no_plurals: bool,
    no_roots: bool,
    no_phrases: bool,
    output_json: bool,
    details: bool,
):
    """Translate English text to Enochian.

    Example: enochian translate "with all truth"
    """
    translator = _translator(ctx)
    options = {
        "fuzzy_matching": not no_fuzzy,
        "plural_handling": not no_plurals,
        "root_construction": not no_roots,
        "check_phrases": not no_phrases,
    }
    result = translator.translate(text, options)

    if output_json:
        _echo_json(result.to_dict())
        return

    views = {
        "words": ("Enochian", result.translation_text),
        "phonetic": ("Phonetic", result.phonetic_text),
        "symbols": ("Symbols", result.symbol_text),
    }
    shown = list(views) if view == "all" else [view]
    body = "\n".join(
        f"[cyan]{views[name][0]}:[/cyan] {escape(views[name][1])}" for name in shown
    )
    console.print(Panel(body, title="Translation"))

    stats = result.stats
    console.print(
        f"[dim]direct {stats.direct} · partial {stats.partial} · "
        f"constructed {stats.constructed} · missing {stats.missing} · "
        f"total {stats.total}[/dim]"
    )

    if details and result.construction_details:
        table = Table(title="Resolution", show_header=True, header_style="bold dim")
        table.add_column("English", style="cyan")
        table.add_column("Enochian", style="green")
        table.add_column("Method")
        table.add_column("Explanation", style="dim")
        for detail in result.construction_details.values():
            table.add_row(
                escape(detail.original),
                escape(detail.result),
                detail.method.value,
                escape(detail.explanation),
            )
        console.print(table)


@cli.command()
@click.argument("word")
@click.pass_context
def analyze(ctx: click.Context, word: str):
    """Show the Enochian root of each letter of WORD."""
    translator = _translator(ctx)

    table = Table(title=f"Letter roots: {escape(word)}")
    table.add_column("Letter", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Symbol")
    table.add_column("Value", justify="right")
    table.add_column("Meaning", style="dim")
    for lr in translator.analyze_roots(word):
        if lr.root is None:
            table.add_row(lr.letter, "-", "", "", "[dim]no root[/dim]")
        else:
            table.add_row(
                lr.letter,
                escape(lr.root.name),
                escape(lr.root.symbol),
                str(lr.root.numeric_value),
                escape(lr.root.meaning),
            )
    console.print(table)

    reading = translator.analyze_word_by_roots(word)
    if reading:
        console.print(f"[bold]Root reading:[/bold] {escape(reading)}")


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def alphabet(ctx: click.Context, output_json: bool):
    """List the Enochian alphabet and its root meanings."""
    roots = _translator(ctx).root_table.roots

    if output_json:
        _echo_json([root.to_dict() for root in roots])
        return

    table = Table(title="Enochian Alphabet")
    table.add_column("Letter", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Symbol")
    table.add_column("Value", justify="right")
    table.add_column("Meaning", style="dim")
    for root in roots:
        table.add_row(
            root.letter.upper(),
            escape(root.name),
            escape(root.symbol),
            str(root.numeric_value),
            escape(root.meaning),
        )
    console.print(table)


@cli.command()
@click.argument("term")
@click.option("--limit", default=25, show_default=True, help="Maximum results")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def lookup(ctx: click.Context, term: str, limit: int, output_json: bool):
    """Search the lexicon for English meanings containing TERM."""
    matches = _translator(ctx).index.search(term, limit=limit)

    if output_json:
        _echo_json([{"word": w, "meaning": m} for w, m in matches])
        return

    if not matches:
        console.print(f"[yellow]No lexicon entries match {escape(term)!r}[/yellow]")
        return

    table = Table(title=f"Lexicon: {escape(term)}")
    table.add_column("Enochian", style="green")
    table.add_column("Meaning")
    for word, meaning in matches:
        table.add_row(escape(word), escape(meaning))
    console.print(table)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind")
@click.option("--port", default=8000, type=int, help="Port to bind")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server.

    Data paths given to the group are handed to the server through the
    environment, so reload workers see them too.
    """
    import uvicorn

    for key, env in (("lexicon", LEXICON_ENV), ("roots", ROOTS_ENV)):
        if ctx.obj.get(key) is not None:
            os.environ[env] = str(Path(ctx.obj[key]).resolve())

    console.print(
        f"[bold blue]Starting Enochian API at http://{host}:{port}[/bold blue]"
    )
    uvicorn.run("enochian.api.main:app", host=host, port=port, reload=reload)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
