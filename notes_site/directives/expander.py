"""Expand directive invocations and variables in note sources.

:func:`expand` scans text left to right. Each ``@name(...)`` or ``@name{...}``
naming a registered directive is replaced by its handler's output; unknown
names are left as written. Value handlers get the trimmed argument and may
call :meth:`DirectiveContext.render` themselves. Block handlers get the raw
block plus a render callback bound to the same context. Either delimiter may
be used with either variant, which lets an argument carry an unbalanced
parenthesis or brace.

Errors propagate unchanged. Each directive level adds a note naming the
directive and line, so a failure deep inside an ``aside`` still points at the
invocation that caused it.

Example
-------
>>> from notes_site.config import Reference
>>> from notes_site.symbols import SymbolTable
>>> context = DirectiveContext(
...     symbols=SymbolTable(references=[Reference("k", "Knuth", "https://k")]),
... )
>>> expand("See @ref(k:TAOCP).", context)
'See [TAOCP](https://k).'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types
import typing as typ
from pathlib import Path

from notes_site.paths import PathResolver
from notes_site.symbols import SymbolLookupError, SymbolTable

from .grammar import TOKEN_PATTERN, find_closing, line_number
from .handlers import build_default_registry
from .math import render_math
from .registry import BlockDirective, Directive, DirectiveRegistry, ValueDirective

if typ.TYPE_CHECKING:
    from notes_site.config import SiteConfig

    from .math import MathRenderer


@dc.dataclass(frozen=True, slots=True)
class DirectiveContext:
    """Everything a directive may read while rendering.

    Attributes
    ----------
    symbols : SymbolTable
        Pages, terms, and references addressable by id.
    resolver : PathResolver
        Resolver used by ``include``.
    registry : DirectiveRegistry
        Directives recognised during expansion.
    math : MathRenderer
        LaTeX renderer used by ``math``, ``dmath``, and ``bigo``.
    variables : Mapping[str, Any]
        Values reachable through ``{{ dotted.path }}`` interpolation.
    """

    symbols: SymbolTable = dc.field(default_factory=SymbolTable)
    resolver: PathResolver = dc.field(default_factory=lambda: PathResolver(Path()))
    registry: DirectiveRegistry = dc.field(default_factory=build_default_registry)
    math: MathRenderer = render_math
    variables: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    @classmethod
    def from_config(
        cls,
        config: SiteConfig,
        *,
        registry: DirectiveRegistry | None = None,
        math: MathRenderer | None = None,
    ) -> DirectiveContext:
        """Build the context for ``config``, resolving paths from its root."""
        return cls(
            symbols=SymbolTable.from_config(config),
            resolver=PathResolver(config.paths.root, config.aliases),
            registry=registry or build_default_registry(),
            math=math or render_math,
            variables=types.MappingProxyType(config.variables()),
        )

    def render(self, text: str) -> str:
        """Expand ``text`` against this context."""
        return expand(text, self)


def expand(text: str, context: DirectiveContext) -> str:
    """Return ``text`` with every directive and variable expanded.

    Raises
    ------
    DirectiveParseError
        If an invocation is unterminated or an argument grammar is malformed.
    SymbolLookupError
        If a directive or interpolation names an unknown id or variable.
    """
    parts: list[str] = []
    position = 0
    while match := TOKEN_PATTERN.search(text, position):
        parts.append(text[position : match.start()])
        position = match.end()
        if match.group(0) == "@@":
            parts.append("@")
            continue
        if variable := match.group("var"):
            parts.append(str(_resolve_variable(variable, context.variables)))
            continue
        name = match.group("name")
        directive = context.registry.get(name)
        if directive is None:
            parts.append(f"@{name}")
            position = match.start("open")
            continue
        line = line_number(text, match.start())
        try:
            close = find_closing(text, match.start("open"))
            parts.append(_invoke(directive, text[match.end() : close], context))
        except Exception as exc:
            exc.add_note(f"in @{name} at line {line}")
            raise
        position = close + 1
    parts.append(text[position:])
    return "".join(parts)


def _invoke(directive: Directive, argument: str, context: DirectiveContext) -> str:
    match directive:
        case BlockDirective(handler=handler):
            return handler(argument, context, context.render)
        case ValueDirective(handler=handler):
            return handler(argument.strip(), context)
    msg = f"Unsupported directive type {type(directive).__name__}."
    raise TypeError(msg)


def _resolve_variable(path: str, variables: typ.Mapping[str, typ.Any]) -> typ.Any:
    """Walk ``path`` through mappings, sequences, and attributes."""
    value: typ.Any = variables
    for step in path.split("."):
        if isinstance(value, cabc.Mapping) and step in value:
            value = value[step]
        elif (
            isinstance(value, cabc.Sequence)
            and not isinstance(value, str)
            and step.isdigit()
            and int(step) < len(value)
        ):
            value = value[int(step)]
        elif not isinstance(value, cabc.Mapping) and hasattr(value, step):
            value = getattr(value, step)
        else:
            raise SymbolLookupError("variables", path)
    return value


__all__ = ["DirectiveContext", "expand"]
