"""Utility helpers shared by the notes site configuration loader."""

from __future__ import annotations

import types
import typing as typ
from pathlib import Path

from .models import Page, Reference, SiteConfigError, Term

PAGE_FIELDS = frozenset({"id", "srcPath", "src_path", "title", "hidden"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(
    payload: typ.Mapping[str, typ.Any], field: str, *, where: str
) -> str:
    """Return the stripped ``field`` from ``payload`` or raise SiteConfigError."""
    value = _optional_str(payload.get(field))
    if value is None:
        msg = f"{where} is missing required field '{field}'."
        raise SiteConfigError(msg)
    return value


def _require_bool(
    payload: typ.Mapping[str, typ.Any], field: str, *, where: str
) -> bool:
    """Return the boolean ``field`` from ``payload``, defaulting to False."""
    value = payload.get(field)
    if value is None:
        return False
    if not isinstance(value, bool):
        msg = f"{where} field '{field}' must be true or false, got {value!r}."
        raise SiteConfigError(msg)
    return value


def _normalize_ids(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize a ``see`` list into a tuple of non-empty id strings."""
    if isinstance(value, str):
        return tuple(segment for segment in value.split() if segment)
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return tuple(normalized)
    return ()


def _records(raw: typ.Mapping[str, typ.Any], name: str) -> list[typ.Any]:
    """Return the ``name`` collection from ``raw`` as a list of records."""
    value = raw.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"'{name}' must be a sequence of records."
        raise SiteConfigError(msg)
    for index, record in enumerate(value):
        if not isinstance(record, dict):
            msg = f"{name}[{index}] must be a mapping."
            raise SiteConfigError(msg)
    return value


def _build_page(payload: typ.Mapping[str, typ.Any], *, where: str) -> Page:
    """Build a Page from a config record, keeping unknown keys as metadata."""
    src_path = _optional_str(payload.get("srcPath")) or _optional_str(
        payload.get("src_path")
    )
    if src_path is None:
        msg = f"{where} is missing required field 'srcPath'."
        raise SiteConfigError(msg)
    extra = {key: value for key, value in payload.items() if key not in PAGE_FIELDS}
    return Page(
        src_path=src_path,
        title=_require_str(payload, "title", where=where),
        id=_optional_str(payload.get("id")),
        hidden=_require_bool(payload, "hidden", where=where),
        extra=types.MappingProxyType(extra),
    )


def _build_term(payload: typ.Mapping[str, typ.Any], *, where: str) -> Term:
    """Build a Term from a config record."""
    return Term(
        id=_require_str(payload, "id", where=where),
        title=_require_str(payload, "title", where=where),
        definition=str(payload.get("definition") or "").strip(),
        see=_normalize_ids(payload.get("see")),
    )


def _build_reference(payload: typ.Mapping[str, typ.Any], *, where: str) -> Reference:
    """Build a Reference from a config record."""
    return Reference(
        id=_require_str(payload, "id", where=where),
        title=_require_str(payload, "title", where=where),
        url=_require_str(payload, "url", where=where),
    )


def _ensure_unique_ids(name: str, ids: typ.Iterable[str | None]) -> None:
    """Raise SiteConfigError when a collection repeats an id."""
    seen: set[str] = set()
    for entity_id in ids:
        if entity_id is None:
            continue
        if entity_id in seen:
            msg = f"Duplicate id '{entity_id}' in '{name}'."
            raise SiteConfigError(msg)
        seen.add(entity_id)


def _resolve_dir(root: Path, value: object | None, default: Path | str) -> Path:
    """Resolve a configured directory against the config root."""
    text = _optional_str(value)
    candidate = Path(text) if text else Path(default)
    if not candidate.is_absolute():
        candidate = root / candidate
    return candidate.resolve()


__all__ = [
    "_build_page",
    "_build_reference",
    "_build_term",
    "_ensure_unique_ids",
    "_normalize_ids",
    "_optional_str",
    "_records",
    "_require_str",
    "_resolve_dir",
]
