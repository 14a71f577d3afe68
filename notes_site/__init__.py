"""Build a small notes website from Markdown with embedded directives.

Notes are Markdown files that may invoke directives such as ``@math(x^2)``,
``@dfn(recursion)``, ``@page(sorting:sorts)``, ``@include(@notes/a.py[3..5])``,
or ``@aside{...}``. The package expands those directives against the pages,
terms, and references in ``config.yml``, converts the result to HTML, and
wraps it in Jinja shell templates.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from notes_site import main
>>> main()  # doctest: +SKIP
>>> from notes_site import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
