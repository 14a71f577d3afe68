"""Built-in directive handlers.

Every handler is a pure function of its argument text, the
:class:`~notes_site.directives.expander.DirectiveContext`, and (for block
directives) the render callback. Handlers that emit raw HTML end it with a
newline so Python-Markdown does not fold the following line into the element
or treat it as an indented code block.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from .grammar import parse_reference
from .registry import BlockDirective, DirectiveRegistry, ValueDirective

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from notes_site.config import Term
    from notes_site.symbols import SymbolTable

    from .expander import DirectiveContext

WILDCARD = "*"
LINE_BREAK_PATTERN = re.compile(r"\s*\n\s*")


def inline_math(text: str, context: DirectiveContext) -> str:
    """Typeset ``text`` as inline math wrapped in a ``<span>``.

    No trailing newline is added so the result stays inside its paragraph or
    table cell.
    """
    return f'<span class="math">{context.math(text)}</span>'


def display_math(
    text: str, context: DirectiveContext, render: cabc.Callable[[str], str]
) -> str:
    """Typeset a multi-line block as display math on a single line."""
    expression = LINE_BREAK_PATTERN.sub(" ", render(text).strip())
    return context.math(expression, display=True) + "\n"


def big_o(text: str, context: DirectiveContext) -> str:
    """Typeset ``O(text)`` through :func:`inline_math`."""
    return inline_math(f"O({text})", context)


def define(text: str, context: DirectiveContext) -> str:
    """Render a term's title and definition inline."""
    term: Term = context.symbols.lookup("terms", text)
    definition = context.render(term.definition).strip()
    return (
        f'<span class="definition"><dfn>{escape(term.title, quote=False)}</dfn>: '
        f"{definition}</span>\n"
    )


def definition_list(text: str, context: DirectiveContext) -> str:
    """Render a ``<dl>`` for ``*`` or a whitespace-separated list of term ids.

    Terms appear in glossary order whatever order the ids were given in. Each
    ``see`` id is resolved to its title; an unknown id aborts the render.
    """
    lines = ['<dl markdown="1">']
    for term in _select_terms(text, context.symbols):
        lines.append(
            f'<dt id="term-{escape(term.id)}">{escape(term.title, quote=False)}</dt>'
        )
        lines.append('<dd markdown="block">')
        lines.append(context.render(term.definition).strip())
        if term.see:
            titles = ", ".join(
                escape(context.symbols.lookup("terms", see_id).title, quote=False)
                for see_id in term.see
            )
            lines.extend(("", f'<p class="see">See: {titles}</p>'))
        lines.append("</dd>")
    lines.append("</dl>")
    return "\n".join(lines) + "\n"


def _select_terms(text: str, symbols: SymbolTable) -> tuple[Term, ...]:
    if text.strip() == WILDCARD:
        return symbols.terms
    wanted = {symbols.lookup("terms", term_id).id for term_id in text.split()}
    return tuple(term for term in symbols.terms if term.id in wanted)


def include(text: str, context: DirectiveContext) -> str:
    """Return the raw content of a file or of its ``[start..end]`` lines."""
    return context.resolver.read(text)


def aside(
    text: str, context: DirectiveContext, render: cabc.Callable[[str], str]
) -> str:
    """Wrap the rendered block in an ``<aside>`` that Markdown still parses."""
    return f'<aside markdown="1">\n\n{render(text).strip()}\n\n</aside>\n'


def reference_link(text: str, context: DirectiveContext) -> str:
    """Link to a reference, labelled by the rename or the reference title."""
    reference_id, rename = parse_reference(text)
    reference = context.symbols.lookup("references", reference_id)
    return f"[{rename or reference.title}]({reference.url})"


def page_link(text: str, context: DirectiveContext) -> str:
    """Link to a sibling page, or name it in plain text when it is hidden."""
    page_id, rename = parse_reference(text)
    page = context.symbols.lookup("pages", page_id)
    label = context.render(rename).strip() if rename else page.title.lower()
    if page.hidden:
        return label
    return f"[{label}](../{page.url})"


DEFAULT_DIRECTIVES = (
    ValueDirective("math", inline_math),
    BlockDirective("dmath", display_math),
    ValueDirective("bigo", big_o),
    ValueDirective("dfn", define),
    ValueDirective("dl", definition_list),
    ValueDirective("include", include),
    BlockDirective("aside", aside),
    ValueDirective("ref", reference_link),
    ValueDirective("page", page_link),
)


def build_default_registry() -> DirectiveRegistry:
    """Return a registry holding every built-in directive."""
    return DirectiveRegistry(DEFAULT_DIRECTIVES)


__all__ = [
    "DEFAULT_DIRECTIVES",
    "aside",
    "big_o",
    "build_default_registry",
    "define",
    "definition_list",
    "display_math",
    "include",
    "inline_math",
    "page_link",
    "reference_link",
]
