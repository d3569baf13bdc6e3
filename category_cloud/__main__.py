"""Category Cloud - Command Line Interface.

This module provides a command-line interface for rendering category tag
clouds from a CSV export of category page counts.
"""

import argparse
import logging
import os
import random
import sys
from typing import Dict, List

from dotenv import load_dotenv

from . import __version__
from .config import parse_render_config
from .data_source import DEFAULT_COUNT_COLUMN, DEFAULT_NAME_COLUMN, DataFrameCategorySource, fetch_categories
from .renderer import TagCloudRenderer
from .titles import DEFAULT_BASE_URL, DEFAULT_NAMESPACE, WikiTitleResolver
from .utils.file_io import save_html
from .visualization import compute_font_size, render_page

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

# CLI flags passed through as tag attributes
ATTRIBUTE_FLAGS = ('min', 'max', 'exclude', 'only', 'minsize', 'maxsize', 'refresh')


def parse_args(args: List[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description='Category Cloud - Render category page counts as a tag cloud')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Parent parser with the source and filter arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument('input', type=str, help='Input CSV file with category page counts')
    parent_parser.add_argument('--name-column', default=DEFAULT_NAME_COLUMN,
                               help=f'Column with category names (default: {DEFAULT_NAME_COLUMN})')
    parent_parser.add_argument('--count-column', default=DEFAULT_COUNT_COLUMN,
                               help=f'Column with page counts (default: {DEFAULT_COUNT_COLUMN})')
    parent_parser.add_argument('--min', type=str, help='Minimum page count (default: 1)')
    parent_parser.add_argument('--max', type=str, help='Maximum number of categories, 0 for all (default: 0)')
    parent_parser.add_argument('--exclude', type=str, help='Comma-separated categories to leave out')
    parent_parser.add_argument('--only', type=str, help='Comma-separated categories to restrict to')
    parent_parser.add_argument('--minsize', type=str, help='Smallest font size in percent (default: 80)')
    parent_parser.add_argument('--maxsize', type=str, help='Largest font size in percent (default: 200)')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a tag cloud to HTML', parents=[parent_parser])
    render_parser.add_argument('--output', '-o', type=str,
                               help='Output HTML file (default: print to stdout)')
    render_parser.add_argument('--refresh', type=str, help='Requested cache lifetime in seconds (default: 3600)')
    render_parser.add_argument('--seed', type=int, help='Seed for the shuffle, for repeatable output')
    render_parser.add_argument('--fragment', action='store_true',
                               help='Write only the cloud fragment instead of a full page')
    render_parser.add_argument('--title', default='Category Cloud', help='Page title (default: Category Cloud)')
    render_parser.add_argument('--base-url', default=None,
                               help=f'Base URL for category links (default: {DEFAULT_BASE_URL})')
    render_parser.add_argument('--namespace', default=None,
                               help=f'Category namespace prefix (default: {DEFAULT_NAMESPACE})')

    # List command
    subparsers.add_parser('list', help='List the qualifying categories and their font sizes',
                          parents=[parent_parser])

    # If no arguments provided, show help
    if len(args) == 0:
        parser.print_help()
        sys.exit(0)

    return parser.parse_args(args)


def build_attributes(args: argparse.Namespace) -> Dict[str, str]:
    """Collect the tag attributes given on the command line."""
    attrs = {}
    for flag in ATTRIBUTE_FLAGS:
        value = getattr(args, flag, None)
        if value is not None:
            attrs[flag] = value
    return attrs


def load_source(args: argparse.Namespace) -> DataFrameCategorySource:
    return DataFrameCategorySource.from_csv(
        args.input,
        name_column=args.name_column,
        count_column=args.count_column,
    )


class _CacheHintLogger:
    """Reports the requested cache lifetime; there is no page cache on the CLI."""

    def update_cache_expiry(self, seconds: int) -> None:
        logger.info(f"Requested cache expiry: {seconds}s")


def render_command(args: argparse.Namespace) -> None:
    """Handle the render command.

    Args:
        args: Parsed command line arguments
    """
    source = load_source(args)
    resolver = WikiTitleResolver(
        base_url=args.base_url or os.getenv('CATEGORY_CLOUD_BASE_URL', DEFAULT_BASE_URL),
        namespace=args.namespace if args.namespace is not None
        else os.getenv('CATEGORY_CLOUD_NAMESPACE', DEFAULT_NAMESPACE),
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    renderer = TagCloudRenderer(source, resolver, cache=_CacheHintLogger(), rng=rng)
    fragment = renderer.render(build_attributes(args))
    content = fragment if args.fragment else render_page(fragment, title=args.title)

    if args.output:
        save_html(content, args.output)
        logger.info(f"Tag cloud saved to {args.output}")
    else:
        sys.stdout.write(content + "\n")


def list_command(args: argparse.Namespace) -> None:
    """Handle the list command.

    Args:
        args: Parsed command line arguments
    """
    source = load_source(args)
    config = parse_render_config(build_attributes(args))
    categories = fetch_categories(
        source,
        min_count=config.min_count,
        max_results=config.max_results,
        exclude=config.exclude,
        only=config.only,
    )

    if not categories:
        print("No categories found.")
        return

    counts = [cat.count for cat in categories]
    low, high = min(counts), max(counts)
    width = max(len(cat.name) for cat in categories)
    for cat in categories:
        size = compute_font_size(cat.count, low, high, config.min_font_percent, config.max_font_percent)
        print(f"{cat.name:<{width}}  {cat.count:>8}  {size:>4}%")


def main() -> None:
    """Main entry point for the Category Cloud CLI."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    args = parse_args(sys.argv[1:])

    # Configure logging
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.getLogger().setLevel(log_level)
    log_file = os.getenv("CATEGORY_CLOUD_LOG_FILE")
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logging.getLogger().addHandler(file_handler)

    commands = {
        "render": render_command,
        "list": list_command,
    }
    command = commands.get(args.command)
    if command is None:
        logger.error(f"Unknown command: {args.command}")
        sys.exit(1)

    try:
        command(args)
    except (FileNotFoundError, KeyError, ValueError) as e:
        logger.error(f"Could not load categories: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
