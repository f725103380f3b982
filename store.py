"""Document-style query interface over the SQLAlchemy models.

Pages talk to the catalog through ``DocumentStore``: ``find`` / ``find_one``
return an unresolved ``QueryBuilder``; nothing touches the database until
``resolve()`` is awaited. Records come back as plain documents (dicts keyed by
document field names such as ``_id``, ``book`` or ``author``).
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, selectinload

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A store query could not be built or executed."""


class SortDirection(str, Enum):
    ascending = "ascending"
    descending = "descending"

    @classmethod
    def parse(cls, raw: Any) -> "SortDirection":
        if isinstance(raw, SortDirection):
            return raw
        if raw in (1, "1", "asc", "ascending"):
            return cls.ascending
        if raw in (-1, "-1", "desc", "descending"):
            return cls.descending
        raise StoreError(f"Invalid sort direction '{raw}'")


@dataclass(frozen=True)
class QueryBuilder:
    store: "DocumentStore"
    filter: dict = field(default_factory=dict, hash=False)
    single: bool = False
    sort: tuple[tuple[str, SortDirection], ...] = ()
    populate: tuple[str, ...] = ()
    projection: tuple[str, ...] | None = None

    def with_sort(self, spec: Iterable[Iterable[Any]]) -> "QueryBuilder":
        """Add ``[(field, direction), ...]`` sort keys, applied in order."""
        keys = []
        for item in spec:
            try:
                field_name, direction = item
            except (TypeError, ValueError):
                raise StoreError(
                    f"Invalid sort item '{item}', expected (field, direction)"
                ) from None
            keys.append((field_name, SortDirection.parse(direction)))
        return replace(self, sort=self.sort + tuple(keys))

    def with_populate(self, relation: str) -> "QueryBuilder":
        return replace(self, populate=self.populate + (relation,))

    def with_projection(self, fields: str) -> "QueryBuilder":
        """Restrict returned documents to a space separated field list."""
        names = tuple(fields.split())
        if not names:
            raise StoreError("Projection needs at least one field")
        return replace(self, projection=names)

    async def resolve(self) -> list[dict] | dict | None:
        return await self.store.execute(self)


class DocumentStore:
    def __init__(self, db: AsyncSession, model):
        self.db = db
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def find(self, filter: dict | None = None) -> QueryBuilder:
        return QueryBuilder(self, dict(filter or {}))

    def find_one(self, filter: dict | None = None) -> QueryBuilder:
        return QueryBuilder(self, dict(filter or {}), single=True)

    async def count(self, filter: dict | None = None) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(*self._where(filter or {}))
        )
        try:
            return (await self.db.execute(stmt)).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreError(f"Counting {self.name} failed") from exc

    async def execute(self, query: QueryBuilder) -> list[dict] | dict | None:
        stmt = self.build_statement(query)
        try:
            result = await self.db.execute(stmt)
            rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Query on {self.name} failed") from exc

        logger.debug("%s query %r returned %d row(s)", self.name, query.filter, len(rows))
        documents = [self._to_document(row, query) for row in rows]
        if query.single:
            return documents[0] if documents else None
        return documents

    def build_statement(self, query: QueryBuilder):
        stmt = select(self.model).where(*self._where(query.filter))

        if query.projection is not None:
            stmt = stmt.options(
                load_only(*(self._column(name) for name in query.projection))
            )

        for relation in query.populate:
            stmt = stmt.options(selectinload(self._relationship(relation)))

        order_exprs = []
        for field_name, direction in query.sort:
            col = self._column(field_name)
            order_exprs.append(
                asc(col) if direction is SortDirection.ascending else desc(col)
            )
        order_exprs.append(self.model.id.asc())
        stmt = stmt.order_by(*order_exprs)

        if query.single:
            stmt = stmt.limit(1)
        return stmt

    def _column(self, field_name: str):
        try:
            attr = self.model.__document_fields__[field_name]
        except KeyError:
            raise StoreError(f"Unknown field '{field_name}' for {self.name}") from None
        return getattr(self.model, attr)

    def _relationship(self, name: str):
        if name not in self.model.__mapper__.relationships:
            raise StoreError(f"Unknown relation '{name}' for {self.name}")
        return getattr(self.model, name)

    def _where(self, filter: dict) -> list:
        clauses = []
        for field_name, value in filter.items():
            col = self._column(field_name)
            clauses.append(col.is_(None) if value is None else col == value)
        return clauses

    def _to_document(self, row, query: QueryBuilder) -> dict:
        if query.projection is None:
            doc = row.to_document()
        else:
            # deferred columns must not be touched outside the greenlet
            doc = {
                name: getattr(row, self.model.__document_fields__[name])
                for name in query.projection
            }

        for relation in query.populate:
            if query.projection is not None and relation not in query.projection:
                continue
            related = getattr(row, relation)
            if related is None:
                doc[relation] = None
            elif isinstance(related, list):
                doc[relation] = [item.to_document() for item in related]
            else:
                doc[relation] = related.to_document()
        return doc
