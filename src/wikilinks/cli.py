"""CLI entry point for mdbook-wikilinks."""

from __future__ import annotations

import logging
import sys

import click

from wikilinks import __version__
from wikilinks.core.errors import WikilinksError

# Renderer name reported as unsupported
_UNSUPPORTED_RENDERER = "not-supported"


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.version_option(version=__version__, prog_name="mdbook-wikilinks")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Path to a YAML config file (none is read by default)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(config_path: str | None, verbose: bool, args: tuple[str, ...]) -> None:
    """mdBook preprocessor rewriting [[wiki links]] into Markdown links.

    `supports RENDERER` exits 0 if RENDERER is supported, 1 otherwise.
    With any other arguments, reads the book JSON from stdin and writes
    the rewritten book to stdout.
    """
    if len(args) == 2 and args[0] == "supports":
        sys.exit(1 if args[1] == _UNSUPPORTED_RENDERER else 0)

    _setup_logging(verbose)

    from wikilinks.config import load_config
    from wikilinks.container import Container
    from wikilinks.preprocessor import read_envelope, read_input, run, write_output
    from wikilinks.protocol import preprocessor_options

    try:
        raw = read_input(click.get_binary_stream("stdin"))
        context, payload = read_envelope(raw)
        config = load_config(config_path, preprocessor_options(context))
    except WikilinksError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not verbose:
        logging.getLogger().setLevel(config.log_level)
    container = Container.create_default(config)

    try:
        write_output(click.get_binary_stream("stdout"), run(container, payload))
    except WikilinksError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _setup_logging(verbose: bool) -> None:
    """Configure logging on stderr; stdout carries the book."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
