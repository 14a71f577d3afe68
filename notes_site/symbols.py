"""Id-keyed index over the pages, terms, and references of a site config.

Directives resolve every id they are handed through :class:`SymbolTable`.
A miss is fatal: :meth:`SymbolTable.lookup` raises :class:`SymbolLookupError`
rather than returning ``None`` so a bad id aborts the build with the id and
collection in the message.

Example
-------
>>> from notes_site.config import Reference
>>> table = SymbolTable(references=[Reference("sicp", "SICP", "https://x")])
>>> table.lookup("references", " sicp ").title
'SICP'
"""

from __future__ import annotations

import types
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from notes_site.config import Page, Reference, SiteConfig, Term


class SymbolLookupError(LookupError):
    """Raised when an id is not present in the named collection."""

    def __init__(self, collection: str, entity_id: str) -> None:
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"Unknown id '{entity_id}' in '{collection}'.")


class SymbolTable:
    """Read-only lookup over config collections, keyed by exact id."""

    def __init__(
        self,
        *,
        pages: cabc.Iterable[Page] = (),
        terms: cabc.Iterable[Term] = (),
        references: cabc.Iterable[Reference] = (),
    ) -> None:
        self._collections: dict[str, tuple[typ.Any, ...]] = {
            "pages": tuple(pages),
            "terms": tuple(terms),
            "references": tuple(references),
        }
        self._index = types.MappingProxyType(
            {
                name: types.MappingProxyType(
                    {entity.id: entity for entity in entities if entity.id}
                )
                for name, entities in self._collections.items()
            }
        )

    @classmethod
    def from_config(cls, config: SiteConfig) -> SymbolTable:
        """Build a table over the collections of ``config``."""
        return cls(
            pages=config.pages, terms=config.terms, references=config.references
        )

    @property
    def terms(self) -> tuple[Term, ...]:
        """Return every term in table order."""
        return self._collections["terms"]

    def lookup(self, collection: str, entity_id: str) -> typ.Any:
        """Return the entity with ``entity_id`` in ``collection``.

        Parameters
        ----------
        collection : str
            One of ``"pages"``, ``"terms"``, or ``"references"``.
        entity_id : str
            Identifier to match; surrounding whitespace is ignored and the
            comparison is case-sensitive.

        Returns
        -------
        Page | Term | Reference
            The frozen entity registered under ``entity_id``.

        Raises
        ------
        SymbolLookupError
            If the collection is unknown or holds no entity with that id.
        """
        key = entity_id.strip()
        entities = self._index.get(collection)
        if entities is None or key not in entities:
            raise SymbolLookupError(collection, key)
        return entities[key]


__all__ = ["SymbolLookupError", "SymbolTable"]
