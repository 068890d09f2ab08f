"""Selection resolver.

Turns either an explicit ``--template`` identifier or a per-axis
``Selection`` into exactly one registered ``TemplateInfo``.  Resolution is a
pure function of its input and the static tables in
:mod:`create_gsp.scaffolder.catalog`; any substitution made along the way is
reported back as a notice for the caller to display.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from create_gsp.errors import InvalidInput, UnknownTemplate

from .catalog import (
    AXES,
    FALLBACKS,
    TEMPLATE_REGISTRY,
    Fallback,
    Selection,
    TemplateInfo,
)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a selection."""

    template: TemplateInfo
    selection: Selection
    notices: tuple[str, ...] = field(default=())

    @property
    def identifier(self) -> str:
        return self.template.identifier


def resolve_template(
    identifier: str,
    registry: Mapping[str, TemplateInfo] = TEMPLATE_REGISTRY,
) -> Resolution:
    """Resolve an explicit template identifier.

    Raises:
        UnknownTemplate: If *identifier* is not an exact registry key.  The
            exception carries every valid identifier.
    """
    info = registry.get(identifier)
    if info is None:
        raise UnknownTemplate(identifier, registry.keys())
    return Resolution(template=info, selection=info.selection)


def resolve_selection(
    selection: Selection,
    registry: Mapping[str, TemplateInfo] = TEMPLATE_REGISTRY,
    fallbacks: Iterable[Fallback] = FALLBACKS,
) -> Resolution:
    """Resolve per-axis choices, applying the fallback table when needed.

    The fallbacks are tried in table order, each one only if its option is
    currently selected.  Every applied substitution contributes its notice.

    Raises:
        InvalidInput: If an axis holds an option key the catalog does not know.
        UnknownTemplate: If no registered template matches even after every
            applicable fallback.
    """
    _validate(selection)

    notices: list[str] = []
    current = selection
    for fallback in (None, *fallbacks):
        if fallback is not None:
            if getattr(current, fallback.axis) != fallback.option:
                continue
            current = current.replace(fallback.axis, fallback.replacement)
            notices.append(fallback.notice)
        info = registry.get(current.key())
        if info is not None:
            return Resolution(template=info, selection=current, notices=tuple(notices))

    raise UnknownTemplate(selection.key(), registry.keys())


def _validate(selection: Selection) -> None:
    for axis in AXES:
        value = getattr(selection, axis.key)
        if axis.get(value) is None:
            raise InvalidInput(
                f"Unknown {axis.title.lower()} option {value!r}; "
                f"expected one of: {', '.join(axis.keys)}"
            )
