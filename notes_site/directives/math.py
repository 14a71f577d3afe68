"""Render LaTeX expressions to MathML with latex2mathml."""

from __future__ import annotations

import typing as typ

from latex2mathml.converter import convert


class MathRenderer(typ.Protocol):
    """Callable turning a LaTeX expression into markup."""

    def __call__(self, latex: str, *, display: bool = False) -> str: ...


def render_math(latex: str, *, display: bool = False) -> str:
    """Return MathML for ``latex``; ``display`` selects block layout."""
    return convert(latex.strip(), display="block" if display else "inline")


__all__ = ["MathRenderer", "render_math"]
