"""Shared fixtures describing a small notes site on disk.

``site_config_path`` writes a complete site under ``tmp_path``: a
``config.yml`` with three pages (one hidden), a three-term glossary, one
reference, an ``@snippets`` alias, notes exercising every directive, a
per-page asset directory, and a static stylesheet. Tests overwrite individual
notes when they need different content.

``fake_math`` replaces latex2mathml with a predictable tag wrapper so
assertions do not depend on MathML output details.
"""

from __future__ import annotations

import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

RECURSION_NOTE = """
# Recursion

Every call pushes a frame onto the @dfn(stack)

Naive evaluation costs @bigo(2^n) calls.

See @ref(clrs:CLRS) and @page(sorting).

@aside{Remember @page(drafts).}

```python
@include(@snippets/fib.py[2..3])
```
""".lstrip()

FIB_SOURCE = """def fib(n):
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)
"""


def fake_math_renderer(latex: str, *, display: bool = False) -> str:
    """Wrap ``latex`` in a tag naming the requested math mode."""
    tag = "dmath" if display else "math"
    return f"<{tag}>{latex}</{tag}>"


@pytest.fixture
def fake_math() -> typ.Callable[..., str]:
    """Return the predictable math renderer used across tests."""
    return fake_math_renderer


@pytest.fixture
def site_config_path(tmp_path: Path) -> Path:
    """Write a sample notes site and return the path to its config file."""
    site_dir = tmp_path / "site"
    notes_dir = site_dir / "notes"
    (notes_dir / "recursion").mkdir(parents=True)
    (site_dir / "snippets").mkdir()
    (site_dir / "static").mkdir()

    config_path = site_dir / "config.yml"
    config_path.write_text(
        """
site:
  title: Algorithm Notes
  description: Companion notes for @ref(clrs).
paths:
  notes: notes
  static: static
  output: build
aliases:
  "@snippets": snippets
pages:
  - id: recursion
    srcPath: recursion.md
    title: Recursion
    description: Functions calling themselves
  - id: sorting
    srcPath: sorting.md
    title: Sorting
  - id: drafts
    srcPath: drafts.md
    title: Draft Ideas
    hidden: true
terms:
  - id: stack
    title: Stack
    definition: A last-in first-out collection.
  - id: queue
    title: Queue
    definition: A first-in first-out collection.
    see: [stack]
  - id: heap
    title: Heap
    definition: A tree ordered by priority.
references:
  - id: clrs
    title: Introduction to Algorithms
    url: https://example.org/clrs
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    (notes_dir / "recursion.md").write_text(RECURSION_NOTE, encoding="utf-8")
    (notes_dir / "sorting.md").write_text(
        "# Sorting\n\n@dl(queue stack)\n", encoding="utf-8"
    )
    (notes_dir / "drafts.md").write_text("Nothing yet.\n", encoding="utf-8")
    (notes_dir / "recursion" / "diagram.txt").write_text("f -> f\n", encoding="utf-8")
    (site_dir / "snippets" / "fib.py").write_text(FIB_SOURCE, encoding="utf-8")
    (site_dir / "static" / "style.css").write_text(
        "body { margin: 0; }\n", encoding="utf-8"
    )
    return config_path
