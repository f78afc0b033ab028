"""
browser-auto - CLI Entry Point.

Configuration Priority:
    1. CLI arguments (--limit, --keys, ...)
    2. Environment variables (BROWSER_AUTO__STRUCTURE__LIMIT, etc.)
    3. Config file (browser-auto.yaml)

Usage:
    browser-auto selectors page.html --target "form button"
    browser-auto structure https://example.com --limit 3000
"""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from browser_auto.browsers.playwright_browser import PlaywrightBrowser
from browser_auto.config import Settings, load_config
from browser_auto.dom.document import HTMLDocument
from browser_auto.exceptions import BrowserAutoError, DocumentLoadError, ElementNotFoundError
from browser_auto.selectors.synthesizer import SelectorSynthesizer
from browser_auto.structure.snapshot import StructureSnapshotter
from browser_auto.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="browser-auto",
    help="Unique selectors and size-budgeted structure snapshots for web pages",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _settings(config: Optional[Path], verbose: bool) -> Settings:
    settings = load_config(config_path=config)
    level = "DEBUG" if verbose else settings.logging.level
    setup_logging(level, settings.logging.file, settings.logging.json_format)
    return settings


async def _capture(url: str, settings: Settings) -> HTMLDocument:
    async with PlaywrightBrowser(settings.browser) as browser:
        return await browser.capture(url)


def load_document(source: str, settings: Settings) -> HTMLDocument:
    """
    Load a document from a file path or an http(s) URL.

    URLs are opened in a live browser so visibility reflects real layout.
    """
    if source.startswith(("http://", "https://")):
        logger.info(f"Capturing {source}")
        return asyncio.run(_capture(source, settings))

    path = Path(source)
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read HTML file: {e}", source=source) from e
    return HTMLDocument.from_html(html)


def _pick(document: HTMLDocument, selector: str):
    try:
        node = document.select_one(selector)
    except Exception as e:
        raise ElementNotFoundError(f"Invalid selector: {e}", selector=selector) from e
    if node is None:
        raise ElementNotFoundError("No element matches the selector", selector=selector)
    return node


def _fail(error: BrowserAutoError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


@app.command()
def selectors(
    source: str = typer.Argument(..., help="HTML file path or http(s) URL"),
    target: str = typer.Option(..., "--target", "-t", help="CSS selector picking the element"),
    block: Optional[List[str]] = typer.Option(
        None, "--block", "-b", help='Blocked fragment such as "#app" (repeatable)'
    ),
    path: bool = typer.Option(False, "--path", help="Also print the structural path selector"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """
    Generate primary and secondary selectors for an element.
    """
    try:
        settings = _settings(config, verbose)
        synthesizer = SelectorSynthesizer(settings.selectors)
        document = load_document(source, settings)
        node = _pick(document, target)
        pair = synthesizer.synthesize(document, node, block or ())
        path_selector = synthesizer.path_selector(document, node, block or ()) if path else None
    except BrowserAutoError as e:
        _fail(e)
        return

    if as_json:
        payload = pair.to_dict()
        if path_selector is not None:
            payload["path"] = path_selector
        typer.echo(json.dumps(payload, ensure_ascii=False))
        return

    table = Table(title="Selectors", show_header=True)
    table.add_column("Kind", style="bold")
    table.add_column("Selector")
    table.add_column("Tier", style="dim")
    table.add_column("Unique", justify="center")
    table.add_row("primary", escape(pair.primary), pair.primary_tier, "✓" if pair.primary_verified else "?")
    table.add_row("secondary", escape(pair.secondary), pair.secondary_tier, "✓" if pair.secondary_verified else "?")
    if path_selector is not None:
        table.add_row("path", escape(path_selector), "path", "")
    console.print(table)


@app.command()
def structure(
    source: str = typer.Argument(..., help="HTML file path or http(s) URL"),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="CSS selector of the subtree root"),
    keys: Optional[str] = typer.Option(None, "--keys", "-k", help="Comma-separated attribute keys"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Target serialized length"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """
    Snapshot page structure at the depth closest to a size limit.
    """
    attribute_keys = [k.strip() for k in keys.split(",") if k.strip()] if keys else None

    try:
        settings = _settings(config, verbose)
        structure_settings = settings.structure
        if limit is not None:
            structure_settings = structure_settings.model_copy(update={"limit": limit})
        document = load_document(source, settings)
        root_node = _pick(document, root) if root else None
    except BrowserAutoError as e:
        _fail(e)
        return

    result = StructureSnapshotter(structure_settings).recognize(document, root_node, attribute_keys)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False))
        return

    console.print(Panel.fit(
        f"[bold blue]Structure[/bold blue]\n"
        f"[dim]Depth:[/dim] {result.depth}\n"
        f"[dim]Length:[/dim] {result.length}\n"
        f"[dim]Limit:[/dim] {structure_settings.limit}",
        border_style="blue",
    ))
    if result.tree is not None:
        pretty = json.dumps(result.tree.to_dict(), ensure_ascii=False, indent=2)
        console.print(Syntax(pretty, "json"))
    else:
        console.print("[yellow]Nothing visible to outline[/yellow]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
