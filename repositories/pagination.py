"""Page/search/sort translation for list endpoints.

A ``PageRequest`` is validated once and then turned into a bounded,
deterministically ordered SELECT. Ordering always ends with the primary key
in the same direction as the requested order, so equal sort values come back
in insertion order for ``asc`` and reverse insertion order for ``desc``, and
repeated queries without intervening writes return identical pages.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from core.config import settings
from core.errors import ValidationError

T = TypeVar("T")

SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = field(default_factory=lambda: settings.VOCAB_PAGE_SIZE)
    search: str | None = None
    sort: str = "createdAt"
    order: str = "desc"

    def __post_init__(self):
        if self.page < 1:
            raise ValidationError("page must be 1 or greater")
        if self.limit < 1:
            raise ValidationError("limit must be 1 or greater")
        if self.limit > settings.VOCAB_MAX_PAGE_SIZE:
            raise ValidationError(f"limit must not exceed {settings.VOCAB_MAX_PAGE_SIZE}")
        if self.order not in SORT_ORDERS:
            raise ValidationError("order must be 'asc' or 'desc'")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def search_tokens(self) -> list[str]:
        if not self.search:
            return []
        return self.search.split()


@dataclass
class Page(Generic[T]):
    items: list[T]
    total_items: int
    total_pages: int
    current_page: int


def total_pages(total_items: int, limit: int) -> int:
    return math.ceil(total_items / limit) if total_items else 0


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_clause(columns: Sequence[InstrumentedAttribute], tokens: Sequence[str]) -> ColumnElement | None:
    """Case-insensitive match of any token as a substring of any column.

    A phrase that matches as a whole also matches on each of its tokens, so
    token matching covers both.
    """
    if not tokens:
        return None
    conditions = []
    for token in tokens:
        pattern = f"%{_escape_like(token)}%"
        conditions.extend(column.ilike(pattern, escape="\\") for column in columns)
    return or_(*conditions)


def order_clauses(
    request: PageRequest,
    sort_columns: dict[str, InstrumentedAttribute],
    tie_breaker: InstrumentedAttribute,
) -> list[Any]:
    column = sort_columns.get(request.sort)
    if column is None:
        allowed = ", ".join(sort_columns)
        raise ValidationError(f"sort must be one of: {allowed}")
    if request.order == "asc":
        return [column.asc(), tie_breaker.asc()]
    return [column.desc(), tie_breaker.desc()]


def paginate(
    db: Session,
    model,
    *,
    request: PageRequest,
    filters: Sequence[ColumnElement],
    search_columns: Sequence[InstrumentedAttribute],
    sort_columns: dict[str, InstrumentedAttribute],
) -> Page:
    conditions = list(filters)
    matcher = search_clause(search_columns, request.search_tokens)
    if matcher is not None:
        conditions.append(matcher)

    ordering = order_clauses(request, sort_columns, model.id)

    count_stmt = select(func.count(model.id)).where(*conditions)
    total_items = db.execute(count_stmt).scalar_one()

    items = []
    # pages past the end are empty; their offset may not fit a SQL integer
    if request.offset < total_items:
        stmt = (
            select(model)
            .where(*conditions)
            .order_by(*ordering)
            .offset(request.offset)
            .limit(request.limit)
        )
        items = list(db.execute(stmt).scalars())
    return Page(
        items=items,
        total_items=total_items,
        total_pages=total_pages(total_items, request.limit),
        current_page=request.page,
    )
