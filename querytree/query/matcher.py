# querytree/query/matcher.py
"""Matching strategy interface consumed by query nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from querytree.query.nodes import PhraseQuery, TextQuery

ANY_FIELD = "*"

OP_EQUAL = "="
OP_NOT_EQUAL = "!="
OP_LESS = "<"
OP_LESS_EQUAL = "<="
OP_GREATER = ">"
OP_GREATER_EQUAL = ">="

COMPARE_OPERATORS = frozenset(
    {OP_EQUAL, OP_NOT_EQUAL, OP_LESS, OP_LESS_EQUAL, OP_GREATER, OP_GREATER_EQUAL}
)


class QueryMatcher(ABC):
    """Decides whether field and range conditions hold against a data source."""

    @abstractmethod
    def match_field(
        self, field: str, operator: str, value: TextQuery | PhraseQuery
    ) -> bool:
        """Match `field operator value`. `field` may be ANY_FIELD."""
        ...

    @abstractmethod
    def match_range(
        self,
        start: TextQuery,
        start_inclusive: bool,
        end: TextQuery,
        end_inclusive: bool,
    ) -> bool:
        """Match values between start and end."""
        ...

    @abstractmethod
    def get_field_matcher(self, field: str) -> QueryMatcher | None:
        """Return a matcher scoped to `field`, or None if the field is unsupported."""
        ...
