"""JSON round-trip helpers.

``get_json`` renders compact JSON; ``from_json`` rebuilds a typed instance by
passing the decoded object's values to a constructor in document order.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable, TypeVar

from cssbuilder.config import DEFAULT_CONFIG, CssBuilderConfig
from cssbuilder.errors import SerializationError

__all__ = ["get_json", "from_json"]

logger = logging.getLogger("cssbuilder.serialization")

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, *, config: CssBuilderConfig = DEFAULT_CONFIG) -> str:
    """Return the JSON representation of *obj*.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    """
    try:
        return json.dumps(
            obj,
            default=_default,
            separators=config.json_separators,
            sort_keys=config.json_sort_keys,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), cause=exc) from exc


def from_json(cls: Callable[..., T], text: str) -> T:
    """Build an instance of *cls* from a JSON object.

    The object's values are passed positionally, in the order they appear
    in *text*, so keys must follow the constructor's parameter order.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    name = getattr(cls, "__name__", repr(cls))
    logger.debug("from_json %s with %d value(s)", name, len(data))
    try:
        return cls(*data.values())
    except TypeError as exc:
        raise SerializationError(
            f"Cannot construct {name} from {list(data)}: {exc}", cause=exc
        ) from exc
