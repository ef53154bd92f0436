"""CLI command: cssbuilder build -- assemble a selector from steps."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import SelectorError, StepSyntaxError
from cssbuilder.selector import build_from_steps


@click.command()
@click.argument("steps", nargs=-1, required=True)
def build(steps: tuple[str, ...]) -> None:
    """Build a selector from STEPS and print it.

    Each step is kind=value, where kind is one of element, id, class, attr,
    pseudo-class or pseudo-element. A step without '=' is a combinator:

        cssbuilder build element=div id=main + element=table
    """
    try:
        selector = build_from_steps(steps)
    except (SelectorError, StepSyntaxError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
