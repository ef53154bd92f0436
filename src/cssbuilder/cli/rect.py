"""CLI command: cssbuilder rect -- rectangle JSON and area."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import SerializationError
from cssbuilder.serialization import from_json, get_json
from cssbuilder.shapes import Rectangle


def _integral(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=click.FLOAT, required=False)
@click.argument("height", type=click.FLOAT, required=False)
@click.option("--from-json", "json_text", default=None, help="Rectangle as JSON")
def rect(width: float | None, height: float | None, json_text: str | None) -> None:
    """Print a rectangle's JSON and area.

    Give either WIDTH and HEIGHT, or --from-json '{"width":10,"height":20}'.
    """
    if json_text is not None:
        if width is not None or height is not None:
            raise click.UsageError("Give WIDTH and HEIGHT or --from-json, not both")
        try:
            rectangle = from_json(Rectangle, json_text)
        except SerializationError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
    elif width is not None and height is not None:
        rectangle = Rectangle(_integral(width), _integral(height))
    else:
        raise click.UsageError("Give WIDTH and HEIGHT or --from-json")

    click.echo(get_json(rectangle))
    click.echo(f"area: {rectangle.get_area():g}")
