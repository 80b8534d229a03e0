"""Command-line interface for the hutupy helpers."""

import sys
from typing import Optional, Tuple

import click

from .dates import timestamps
from .dates.datetimes import format_current, reformat as reformat_datetime
from .fs.files import read_dirs
from .numeric.arithmetic import average, max_in_array, min_in_array
from .numeric.statistics import (
    variance, sample_variance, standard_deviation, sample_standard_deviation,
)
from .paging.pagination import page_to_range, total_pages, page_rainbow
from .text.hex_codec import hex_encoding, hex_decoding
from .utils.io import Settings, save_results
from .utils.logging import configure_package_logging, get_logger
from .utils.timers import Stopwatch

logger = get_logger("hutupy_cli")

def _fail(message: str) -> None:
    logger.error(message)
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)

@click.group()
@click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False),
              help='YAML file with default settings')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str]):
    """hutupy helper CLI."""
    try:
        settings = Settings.from_file(config_path) if config_path else Settings()
    except (OSError, ValueError) as e:
        _fail(f"Could not load config: {e}")

    try:
        configure_package_logging(settings.log_level, settings.log_file)
    except OSError as e:
        _fail(f"Could not open log file {settings.log_file}: {e}")
    ctx.obj = settings

@cli.command()
@click.option('--format', '-f', 'fmt', help='Output pattern (defaults to config datetime_format)')
@click.pass_obj
def now(settings: Settings, fmt: Optional[str]):
    """Print the current local time and Unix timestamp."""
    fmt = fmt or settings.datetime_format
    formatted = format_current(fmt)
    if formatted is None:
        _fail(f"Invalid pattern: {fmt}")

    click.echo(formatted)
    click.echo(f"timestamp: {timestamps.current_timestamp()}")

@cli.command()
@click.argument('content')
@click.option('--from', 'original_fmt', default=None,
              help='Pattern of CONTENT (defaults to config datetime_format)')
@click.option('--to', 'new_fmt', required=True, help='Target pattern')
@click.pass_obj
def reformat(settings: Settings, content: str, original_fmt: Optional[str], new_fmt: str):
    """Re-render a date-time string in another pattern."""
    original_fmt = original_fmt or settings.datetime_format
    result = reformat_datetime(content, original_fmt, new_fmt)
    if result is None:
        _fail(f"{content!r} does not match pattern {original_fmt!r}")
    click.echo(result)

@cli.command('hex-encode')
@click.argument('text')
def hex_encode(text: str):
    """Hex-encode TEXT."""
    click.echo(hex_encoding(text))

@cli.command('hex-decode')
@click.argument('hex_string')
def hex_decode(hex_string: str):
    """Decode a hex string back to text."""
    try:
        click.echo(hex_decoding(hex_string))
    except ValueError as e:
        _fail(str(e))

@cli.command()
@click.option('--total', '-t', required=True, type=int, help='Total number of records')
@click.option('--page', '-p', default=1, type=int, help='Current page (1-based)')
@click.option('--size', '-s', default=None, type=int, help='Page size (defaults to config page_size)')
@click.option('--display', '-d', default=None, type=int,
              help='Pages shown in the pager (defaults to config rainbow_display_count)')
@click.pass_obj
def paginate(settings: Settings, total: int, page: int, size: Optional[int], display: Optional[int]):
    """Show the index range and pager window for a page."""
    if size is None:
        size = settings.page_size
    if display is None:
        display = settings.rainbow_display_count
    if display <= 0:
        _fail(f"--display must be positive, got {display}")

    try:
        pages = total_pages(total, size)
    except ValueError as e:
        _fail(str(e))

    start, end = page_to_range(page, size)
    click.echo(f"Total pages: {pages}")
    click.echo(f"Range: [{start}, {min(end, total)})")
    click.echo(f"Pager: {page_rainbow(page, pages, display)}")

@cli.command()
@click.argument('values', nargs=-1, type=float, required=True)
@click.option('--output', '-o', help='Write results to a JSON file')
def stats(values: Tuple[float, ...], output: Optional[str]):
    """Summary statistics for VALUES."""
    data = list(values)
    results = {
        'count': len(data),
        'mean': average(data),
        'min': min_in_array(data),
        'max': max_in_array(data),
        'variance': variance(data),
        'sample_variance': sample_variance(data),
        'standard_deviation': standard_deviation(data),
        'sample_standard_deviation': sample_standard_deviation(data),
    }

    for key, value in results.items():
        click.echo(f"{key:<26} {value}")

    if output:
        save_results(results, output)
        click.echo(f"\nResults saved to {output}")

@cli.command()
@click.argument('path', default='.')
def ls(path: str):
    """List the immediate entries of a directory."""
    try:
        entries = read_dirs(path)
    except (OSError, ValueError) as e:
        _fail(f"Cannot list {path}: {e}")

    for entry in entries:
        suffix = '/' if entry.is_dir() else ''
        click.echo(f"{entry.name}{suffix}")

@cli.command()
@click.pass_obj
def demo(settings: Settings):
    """Run a short tour of the helpers."""
    sw = Stopwatch.start_new()

    ts = timestamps.current_timestamp()
    click.echo(f"Current timestamp: {ts}")
    click.echo(f"Current timestamp plus 4 hours: {timestamps.add_seconds(ts, 4 * 60 * 60)}")
    click.echo(f"Current time: {format_current(settings.datetime_format)}")
    click.echo(f"Reformatted: {reformat_datetime('2023-04-01 12:00:00', '%F %T', '%F')}")

    encoded = hex_encoding("hello, world!")
    click.echo(f"Hex: {encoded} -> {hex_decoding(encoded)}")

    click.echo(f"Page 2 of size 10: {page_to_range(2, 10)}")
    click.echo(f"Pager around page 5 of 20: {page_rainbow(5, 20, 6)}")

    sample = [1.0, 2.0, 3.0, 4.0, 5.0]
    click.echo(f"Variance of {sample}: {variance(sample)}")
    click.echo(f"Standard deviation of {sample}: {standard_deviation(sample):.4f}")

    sw.stop()
    click.echo(f"\nDemo completed in {sw}")

if __name__ == '__main__':
    cli()
