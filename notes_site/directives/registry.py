"""Name-to-handler mapping for directives.

A directive is one of two variants. A :class:`ValueDirective` handler receives
the trimmed argument text and the :class:`DirectiveContext`. A
:class:`BlockDirective` handler also receives a render callback that expands
directives inside its block.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .expander import DirectiveContext

ValueHandler = typ.Callable[[str, "DirectiveContext"], str]
BlockHandler = typ.Callable[[str, "DirectiveContext", typ.Callable[[str], str]], str]


@dc.dataclass(frozen=True, slots=True)
class ValueDirective:
    """Directive computed from its argument text alone."""

    name: str
    handler: ValueHandler


@dc.dataclass(frozen=True, slots=True)
class BlockDirective:
    """Directive wrapping a block that it may render recursively."""

    name: str
    handler: BlockHandler


Directive = ValueDirective | BlockDirective


class DirectiveRegistry:
    """Ordered registry of directives keyed by name."""

    def __init__(self, directives: cabc.Iterable[Directive] = ()) -> None:
        self._directives: dict[str, Directive] = {}
        for directive in directives:
            self.register(directive)

    def register(self, directive: Directive) -> None:
        """Add ``directive``; names must be unique."""
        if directive.name in self._directives:
            msg = f"Directive '{directive.name}' is already registered."
            raise ValueError(msg)
        self._directives[directive.name] = directive

    def get(self, name: str) -> Directive | None:
        """Return the directive registered as ``name``, if any."""
        return self._directives.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._directives

    def __iter__(self) -> cabc.Iterator[Directive]:
        return iter(self._directives.values())

    def __len__(self) -> int:
        return len(self._directives)


__all__ = [
    "BlockDirective",
    "BlockHandler",
    "Directive",
    "DirectiveRegistry",
    "ValueDirective",
    "ValueHandler",
]
