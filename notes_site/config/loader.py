"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import types
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from notes_site._constants import DEFAULT_PATHS, PACKAGE_TEMPLATES_DIR

from .helpers import (
    _build_page,
    _build_reference,
    _build_term,
    _ensure_unique_ids,
    _optional_str,
    _records,
    _resolve_dir,
)
from .models import SiteConfig, SiteConfigError, SitePaths


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing pages, terms, and references.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config.yml``). Relative ``paths`` and ``aliases`` entries resolve
        against the directory holding this file.

    Returns
    -------
    SiteConfig
        Parsed configuration with pages in listing order, the glossary,
        references, resolved build directories, and path aliases.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping, a record is missing a
        required field, or a collection repeats an id.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from notes_site.config import load_site_config
    >>> config = load_site_config(Path("config.yml"))  # doctest: +SKIP
    >>> [page.url for page in config.pages][:1]  # doctest: +SKIP
    ['recursion']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    root = path.resolve().parent

    pages = tuple(
        _build_page(record, where=f"pages[{index}]")
        for index, record in enumerate(_records(raw, "pages"))
    )
    terms = tuple(
        _build_term(record, where=f"terms[{index}]")
        for index, record in enumerate(_records(raw, "terms"))
    )
    references = tuple(
        _build_reference(record, where=f"references[{index}]")
        for index, record in enumerate(_records(raw, "references"))
    )
    _ensure_unique_ids("pages", (page.id for page in pages))
    _ensure_unique_ids("terms", (term.id for term in terms))
    _ensure_unique_ids("references", (reference.id for reference in references))

    paths = _build_paths(root, _mapping(raw, "paths"))
    aliases = _build_aliases(root, _mapping(raw, "aliases"), paths)

    return SiteConfig(
        paths=paths,
        pages=pages,
        terms=terms,
        references=references,
        aliases=types.MappingProxyType(aliases),
        site=types.MappingProxyType(_mapping(raw, "site")),
    )


def _mapping(raw: typ.Mapping[str, typ.Any], name: str) -> dict[str, typ.Any]:
    """Return the optional ``name`` mapping from ``raw``."""
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        msg = f"'{name}' must be a mapping."
        raise SiteConfigError(msg)
    return dict(value)


def _build_paths(root: Path, payload: typ.Mapping[str, typ.Any]) -> SitePaths:
    """Resolve build directories relative to the config root."""
    return SitePaths(
        root=root,
        notes_dir=_resolve_dir(root, payload.get("notes"), DEFAULT_PATHS["notes"]),
        templates_dir=_resolve_dir(
            root, payload.get("templates"), PACKAGE_TEMPLATES_DIR
        ),
        static_dir=_resolve_dir(root, payload.get("static"), DEFAULT_PATHS["static"]),
        output_dir=_resolve_dir(root, payload.get("output"), DEFAULT_PATHS["output"]),
    )


def _build_aliases(
    root: Path, payload: typ.Mapping[str, typ.Any], paths: SitePaths
) -> dict[str, str]:
    """Return alias prefixes mapped to absolute targets, in registration order."""
    aliases: dict[str, str] = {}
    for alias, target in payload.items():
        text = _optional_str(target)
        if text is None:
            msg = f"Alias '{alias}' has no target directory."
            raise SiteConfigError(msg)
        aliases[str(alias)] = str(_resolve_dir(root, text, text))
    aliases.setdefault("@notes", str(paths.notes_dir))
    return aliases


__all__ = ["load_site_config"]
