"""Build selectors from a flat list of ``kind=value`` steps.

Used by the command line, which takes the steps as positional arguments:

    element=div id=main + element=table id=data

Any step without ``=`` is a combinator joining everything built so far with
the chain that follows it.
"""

from __future__ import annotations

from typing import Iterable

from cssbuilder.errors import StepSyntaxError
from cssbuilder.selector.model import FragmentKind, SelectorBuilder

__all__ = ["parse_step", "build_from_steps"]

_STEP_KINDS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

_APPENDERS = {
    FragmentKind.ELEMENT: SelectorBuilder.element,
    FragmentKind.ID: SelectorBuilder.id,
    FragmentKind.CLASS: SelectorBuilder.class_,
    FragmentKind.ATTRIBUTE: SelectorBuilder.attr,
    FragmentKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
    FragmentKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
}


def parse_step(step: str) -> tuple[FragmentKind, str]:
    """Split a ``kind=value`` step into its fragment kind and value."""
    name, sep, value = step.partition("=")
    if not sep:
        raise StepSyntaxError(f"Expected kind=value, got {step!r}", step=step)
    kind = _STEP_KINDS.get(name.strip().lower().replace("_", "-"))
    if kind is None:
        raise StepSyntaxError(f"Unknown fragment kind {name!r}", step=step)
    if not value:
        raise StepSyntaxError(f"Empty value in step {step!r}", step=step)
    return kind, value


def build_from_steps(steps: Iterable[str]) -> SelectorBuilder:
    """Apply *steps* in order and return the resulting selector."""
    combined: SelectorBuilder | None = None
    combinator: str | None = None
    current = SelectorBuilder()

    for step in steps:
        if "=" not in step:
            if current.last_kind is None:
                raise StepSyntaxError(
                    f"Combinator {step!r} has no selector on its left", step=step
                )
            combined = _join(combined, combinator, current)
            combinator = step
            current = SelectorBuilder()
            continue
        kind, value = parse_step(step)
        current = _APPENDERS[kind](current, value)

    if current.last_kind is None:
        if combinator is not None:
            raise StepSyntaxError(
                f"Combinator {combinator!r} has no selector on its right",
                step=combinator,
            )
        raise StepSyntaxError("No selector steps given")
    return _join(combined, combinator, current)


def _join(
    left: SelectorBuilder | None, combinator: str | None, right: SelectorBuilder
) -> SelectorBuilder:
    if left is None or combinator is None:
        return right
    return SelectorBuilder.combine(left, combinator, right)
