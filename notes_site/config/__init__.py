"""Load and validate site configuration YAML for notes builds.

This subpackage parses the project's ``config.yml`` file into frozen
dataclasses (:class:`SiteConfig`, :class:`Page`, :class:`Term`,
:class:`Reference`) that the symbol table and generators consume. The primary
entry point is :func:`load_site_config`, which checks required fields, rejects
duplicate ids, and resolves build directories and path aliases against the
config file's directory.

Examples
--------
>>> from pathlib import Path
>>> from notes_site.config import load_site_config
>>> site = load_site_config(Path("config.yml"))  # doctest: +SKIP
>>> site.pages[0].url  # doctest: +SKIP
'recursion'
"""

from .loader import load_site_config
from .models import Page, Reference, SiteConfig, SiteConfigError, SitePaths, Term

__all__ = [
    "Page",
    "Reference",
    "SiteConfig",
    "SiteConfigError",
    "SitePaths",
    "Term",
    "load_site_config",
]
