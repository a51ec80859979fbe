"""
Crawl Starter - CLI Entry Point

Runs one of the crawler templates and optionally exports its dataset.
"""

import asyncio
import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from crawl_starter.config import config
from crawl_starter.crawlers import TEMPLATES, UnknownTemplateError, get_template


console = Console()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_urls_from_file(filepath: str) -> list[str]:
    """Load URLs from a text file (one per line)."""
    path = Path(filepath)
    if not path.exists():
        console.print(f"[red]File not found: {filepath}[/red]")
        sys.exit(1)

    urls = []
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                urls.append(line)

    return urls


async def main_async(args: argparse.Namespace) -> None:
    """Async main function."""
    setup_logging(args.log_level or config.log_level)

    if args.list:
        for name in TEMPLATES:
            console.print(name)
        return

    try:
        factory = get_template(args.crawler)
    except UnknownTemplateError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        sys.exit(1)

    # Collect URLs; template seeds are used when none are given
    urls = list(args.url or [])
    if args.file:
        urls.extend(load_urls_from_file(args.file))

    bundle = await factory(urls=urls or None, label=args.label)

    console.print(f"\n[bold blue]Crawl Starter[/bold blue]")
    console.print(f"Template: {bundle.name}")
    console.print()

    stats = await bundle.crawler.run()

    if args.output:
        await bundle.crawler.export_data(args.output, dataset_name=bundle.dataset.name)
        console.print(f"\n[green]Results exported to: {args.output}[/green]")

    console.print("\n[bold]Final Statistics:[/bold]")
    for key, value in stats.to_dict().items():
        console.print(f"  {key}: {value}")


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Crawl Starter - run a crawler template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --crawler beautifulsoup
  %(prog)s --crawler firefox --url https://example.com --label DETAIL
  %(prog)s --crawler http --file urls.txt --output results.json
        """,
    )

    parser.add_argument(
        "--crawler", "-c",
        default="beautifulsoup",
        help=f"Crawler template ({', '.join(TEMPLATES)}; default: beautifulsoup)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available crawler templates and exit",
    )

    # URL sources
    parser.add_argument(
        "--url", "-u",
        action="append",
        help="URL to crawl (repeatable, replaces the template's seed URLs)",
    )
    parser.add_argument(
        "--file", "-f",
        help="File containing URLs (one per line)",
    )
    parser.add_argument(
        "--label",
        help="Router label for the seed URLs (e.g. DETAIL, SPECIAL)",
    )

    # Output options
    parser.add_argument(
        "--output", "-o",
        help="Export the dataset to this .json or .csv file after the run",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()

    # Ctrl-C cancels the crawl task; asyncio.run re-raises it here
    try:
        asyncio.run(main_async(args))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
