r"""Token grammar for directive invocations embedded in note sources.

Three token kinds are recognised:

* ``@name(argument)`` or ``@name{block}`` invokes a registered directive. The
  argument runs to the matching delimiter, so nested invocations and LaTeX
  groups survive intact.
* ``@@`` emits a literal ``@``.
* ``{{ dotted.path }}`` interpolates a render variable.

The ``id[:rename]`` argument form used by ``ref`` and ``page`` is parsed by
:func:`parse_reference`.

Example
-------
>>> parse_reference("sicp:the wizard book")
('sicp', 'the wizard book')
>>> parse_reference(" sicp ")
('sicp', None)
"""

from __future__ import annotations

import re

TOKEN_PATTERN = re.compile(
    r"@@"
    r"|(?<!\w)@(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?P<open>[({])"
    r"|\{\{\s*(?P<var>[A-Za-z_][\w.]*)\s*\}\}"
)
CLOSERS = {"(": ")", "{": "}"}


class DirectiveParseError(ValueError):
    """Raised when directive syntax or an argument grammar is malformed."""


def line_number(text: str, index: int) -> int:
    """Return the 1-based line of ``index`` within ``text``."""
    return text.count("\n", 0, index) + 1


def find_closing(text: str, open_index: int) -> int:
    """Return the index of the delimiter closing the one at ``open_index``.

    Raises
    ------
    DirectiveParseError
        If the delimiter is never balanced.
    """
    opener = text[open_index]
    closer = CLOSERS[opener]
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
    msg = f"Unterminated '{opener}' opened at line {line_number(text, open_index)}."
    raise DirectiveParseError(msg)


def parse_reference(text: str) -> tuple[str, str | None]:
    """Split an ``id[:rename]`` argument into its id and optional rename.

    Raises
    ------
    DirectiveParseError
        If ``text`` holds more than one colon or the id is empty.
    """
    parts = text.split(":")
    if len(parts) > 2:
        msg = f"Expected 'id' or 'id:rename', got '{text.strip()}'."
        raise DirectiveParseError(msg)
    entity_id = parts[0].strip()
    if not entity_id:
        msg = f"Missing id in '{text.strip()}'."
        raise DirectiveParseError(msg)
    rename = parts[1].strip() if len(parts) == 2 else ""
    return entity_id, rename or None


__all__ = [
    "CLOSERS",
    "TOKEN_PATTERN",
    "DirectiveParseError",
    "find_closing",
    "line_number",
    "parse_reference",
]
