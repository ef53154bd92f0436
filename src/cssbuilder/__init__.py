"""cssbuilder: CSS compound selector builder with small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import DEFAULT_CONFIG, CssBuilderConfig  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    CssBuilderError,
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorError,
    SerializationError,
    StepSyntaxError,
)
from cssbuilder.selector import (  # noqa: E402
    FragmentKind,
    SelectorBuilder,
    build_from_steps,
    css_selector_builder,
)
from cssbuilder.serialization import from_json, get_json  # noqa: E402
from cssbuilder.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    # config
    "CssBuilderConfig",
    "DEFAULT_CONFIG",
    # errors
    "CssBuilderError",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "StepSyntaxError",
    "SerializationError",
    # selector
    "FragmentKind",
    "SelectorBuilder",
    "css_selector_builder",
    "build_from_steps",
    # objects
    "Rectangle",
    "get_json",
    "from_json",
]
