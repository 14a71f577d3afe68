"""Common literal values used across notes_site.

These constants keep filenames and path defaults centralized so the loader,
builder, and tests can import the same values without drifting. Intended for
internal use within the notes_site package.

Examples
--------
>>> from notes_site import _constants
>>> _constants.PAGE_FILENAME
'index.html'
>>> ".md" in _constants.MARKDOWN_SUFFIXES
True
"""

from pathlib import Path

DEFAULT_CONFIG_NAME = "config.yml"
PAGE_FILENAME = "index.html"
PAGE_TEMPLATE = "page.html"
INDEX_TEMPLATE = "index.html"
MARKDOWN_SUFFIXES = (".md", ".markdown")
PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_PATHS = {
    "notes": "../notes",
    "static": "static",
    "output": "build",
}
