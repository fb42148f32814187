"""Command-line interface for docusaurus-scraper."""

import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from docusaurus_scraper import __version__
from docusaurus_scraper.core.models import Platform, ScrapeConfig, ScrapeReport, ScrapeStatus
from docusaurus_scraper.engine.scraper import DocumentationScraper
from docusaurus_scraper.platforms.registry import get_platform_config, list_platforms

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]docusaurus-scraper[/bold] version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route library logging to the console."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = RichHandler(console=console, show_path=False, markup=False)
    root = logging.getLogger("docusaurus_scraper")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def _default_output_path() -> Path:
    """Name the output file after the current time, e.g. docs-1718000000000.md."""
    return Path(f"docs-{int(time.time() * 1000)}.md")


def _normalize_url(url: str) -> str:
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


async def _run_scraper(
    config: ScrapeConfig, url: str, output: Path, report_path: Optional[Path]
) -> ScrapeReport:
    """Run the scraper asynchronously."""
    scraper = DocumentationScraper(config)

    # Display header
    if not config.quiet:
        console.print()
        console.print(
            Panel(
                f"[bold cyan]Platform:[/bold cyan] {config.platform.value}\n"
                f"[bold green]URL:[/bold green] {url}\n"
                f"[bold yellow]Output:[/bold yellow] {output}\n"
                f"[bold magenta]Discovery:[/bold magenta] "
                f"{'recursive' if config.recursive else 'sitemap'}",
                title="[bold]docusaurus-scraper[/bold]",
                border_style="blue",
            )
        )
        console.print()

    report = await scraper.scrape_with_report(url, output)

    if report_path is not None:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")

    return report


def _print_summary(report: ScrapeReport, output: Path) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold cyan]Platform:[/bold cyan] {report.platform.value}\n"
            f"[bold green]Successful:[/bold green] {report.successful}\n"
            f"[bold yellow]Skipped:[/bold yellow] {report.skipped}\n"
            f"[bold red]Failed:[/bold red] {report.failed}\n"
            f"[bold yellow]Output:[/bold yellow] {output}",
            title="[bold green]Scrape Complete![/bold green]",
            border_style="green",
        )
    )

    failed = [o for o in report.outcomes if o.status is ScrapeStatus.FAILED]
    if failed:
        console.print()
        console.print("[yellow]Failed URLs:[/yellow]")
        for outcome in failed[:5]:
            console.print(f"  [dim]-[/dim] {outcome.url}")
        if len(failed) > 5:
            console.print(f"  [dim]... and {len(failed) - 5} more[/dim]")


def _list_platforms() -> None:
    """List the supported platforms and their discovery settings."""
    table = Table(
        title="[bold]Supported Platforms[/bold]",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Platform", style="cyan")
    table.add_column("Sitemap", style="green")
    table.add_column("Content selectors", style="yellow")

    for platform in list_platforms():
        config = get_platform_config(platform)
        table.add_row(
            platform.value,
            "yes" if config.use_sitemap else "no",
            str(len(config.content_selectors)),
        )

    console.print()
    console.print(table)
    console.print()
    console.print("[dim]Note: 'auto' detects the platform from the first page it renders.[/dim]")


app = typer.Typer(
    name="docusaurus-scraper",
    help="Extract documentation from Docusaurus and Mintlify sites to Markdown.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def _main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
) -> None:
    """Extract documentation from Docusaurus and Mintlify sites to Markdown."""


@app.command()
def scrape(
    url: Annotated[
        str,
        typer.Argument(help="Base URL of the documentation site"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "-o",
            "--output",
            help="Output Markdown file [default: docs-<timestamp>.md]",
        ),
    ] = None,
    headless: Annotated[
        bool,
        typer.Option(
            "--headless/--no-headless",
            help="Run the browser without a visible window",
        ),
    ] = True,
    timeout: Annotated[
        float,
        typer.Option(
            "-t",
            "--timeout",
            help="Page timeout in seconds",
        ),
    ] = 10.0,
    delay: Annotated[
        float,
        typer.Option(
            "-d",
            "--delay",
            help="Delay between requests in seconds",
        ),
    ] = 0.5,
    metadata: Annotated[
        bool,
        typer.Option(
            "--metadata/--no-metadata",
            help="Include the metadata header in the output",
        ),
    ] = True,
    platform: Annotated[
        Platform,
        typer.Option(
            "-p",
            "--platform",
            case_sensitive=False,
            help="Documentation platform",
        ),
    ] = Platform.AUTO,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive/--sitemap",
            help="Crawl links recursively, or try the sitemap first",
        ),
    ] = True,
    selector: Annotated[
        Optional[list[str]],
        typer.Option(
            "-s",
            "--selector",
            help="Extra CSS selector for navigation links",
        ),
    ] = None,
    include: Annotated[
        Optional[list[str]],
        typer.Option(
            "-i",
            "--include",
            help="URL patterns to include (regex)",
        ),
    ] = None,
    exclude: Annotated[
        Optional[list[str]],
        typer.Option(
            "-e",
            "--exclude",
            help="URL patterns to exclude (regex)",
        ),
    ] = None,
    max_pages: Annotated[
        int,
        typer.Option(
            "-m",
            "--max-pages",
            help="Maximum pages to extract (0 = unlimited); discovery still crawls the whole site",
        ),
    ] = 0,
    report: Annotated[
        Optional[Path],
        typer.Option(
            "--report",
            help="Write a JSON report of per-page outcomes",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "-v",
            "--verbose",
            help="Verbose output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "-q",
            "--quiet",
            help="Only print warnings and errors",
        ),
    ] = False,
) -> None:
    """Scrape a documentation site into a single Markdown file.

    \b
    Examples:
        docusaurus-scraper scrape https://docusaurus.io
        docusaurus-scraper scrape https://docs.example.com -o docs.md --sitemap
        docusaurus-scraper scrape https://mintlify.com/docs -p mintlify -v
    """
    configure_logging(verbose=verbose, quiet=quiet)

    url = _normalize_url(url)
    if output is None:
        output = _default_output_path()

    try:
        config = ScrapeConfig(
            headless=headless,
            timeout=timeout,
            request_delay=delay,
            include_metadata=metadata,
            platform=platform,
            recursive=recursive,
            custom_selectors=selector or [],
            include_patterns=include or [],
            exclude_patterns=exclude or [],
            max_pages=max_pages,
            verbose=verbose,
            quiet=quiet,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    try:
        result = asyncio.run(_run_scraper(config, url, output, report))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"\n[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not quiet:
        _print_summary(result, output)


@app.command("platforms")
def platforms() -> None:
    """List supported documentation platforms."""
    _list_platforms()


def main() -> None:
    """Main entry point with smart argument handling.

    Allows both:
        docusaurus-scraper https://docs.example.com
        docusaurus-scraper scrape https://docs.example.com
    """
    if len(sys.argv) > 1:
        first_arg = sys.argv[1]
        if first_arg.startswith(("http://", "https://")) or (
            "." in first_arg
            and first_arg not in ("platforms", "scrape", "--help", "-h", "--version", "-V")
        ):
            sys.argv.insert(1, "scrape")

    app()


if __name__ == "__main__":
    main()
