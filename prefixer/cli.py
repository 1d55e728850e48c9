"""
Command-line entry point for prefixer.

Examples:
    prefixer "1 + 2 * 3"              # (+ 1 (* 2 3))
    prefixer --tree "-1 * 2 + 3"      # tree view
    prefixer --tokens "(a+b)/c"       # token list
    echo "1 - 2 - 3" | prefixer       # one expression per stdin line

Author: xwest
"""

import logging
import sys
from typing import Iterable, Tuple

import click
from rich.console import Console

from . import __version__
from .lexer import tokenize
from .parser import parse, ParseError
from .render import render, render_tree

logger = logging.getLogger(__name__)


def _read_inputs(expressions: Tuple[str, ...]) -> Iterable[Tuple[str, str]]:
    """Yield (filename, source) pairs from arguments or stdin lines."""
    if expressions:
        for index, source in enumerate(expressions, 1):
            yield f"<arg{index}>", source
        return

    for line_number, line in enumerate(sys.stdin, 1):
        if line.strip():
            yield f"<stdin:{line_number}>", line.rstrip("\n")


@click.command()
@click.argument("expressions", nargs=-1)
@click.option("--tokens", "show_tokens", is_flag=True, help="Print the token list instead of the tree.")
@click.option("--tree", "show_tree", is_flag=True, help="Print a tree view of each expression.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="prefixer")
def main(expressions, show_tokens, show_tree, verbose):
    """Convert infix arithmetic EXPRESSIONS to fully-parenthesized prefix notation.

    With no arguments, expressions are read from stdin, one per line.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = Console(highlight=False)
    failures = 0

    for filename, source in _read_inputs(expressions):
        if show_tokens:
            click.echo(" ".join(repr(token) for token in tokenize(source, filename)))
            continue

        try:
            expression = parse(source, filename)
        except ParseError as e:
            failures += 1
            logger.debug("parse of %s failed with %s", filename, e.code)
            click.echo(str(e), err=True, nl=False)
            continue

        if show_tree:
            console.print(render_tree(expression))
        else:
            click.echo(render(expression))

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
