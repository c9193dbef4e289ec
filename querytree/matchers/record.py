# querytree/matchers/record.py
"""Reference matcher over in-memory records."""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from querytree.query.matcher import (
    ANY_FIELD,
    COMPARE_OPERATORS,
    OP_EQUAL,
    OP_GREATER,
    OP_GREATER_EQUAL,
    OP_LESS,
    OP_LESS_EQUAL,
    OP_NOT_EQUAL,
    QueryMatcher,
)
from querytree.query.nodes import PhraseQuery, TextQuery

logger = logging.getLogger(__name__)

OPEN_BOUND = "*"


class RecordMatcher(QueryMatcher):
    """Matches queries against a mapping of field name to value(s).

    A value may be a scalar or an iterable of scalars. Unquoted terms match
    any whitespace-separated token of a value; quoted terms and phrases must
    equal the whole value. Ordering is numeric when both sides are numbers,
    lexicographic otherwise.
    """

    def __init__(
        self,
        record: Mapping[str, Any],
        *,
        case_sensitive: bool = False,
        field: str | None = None,
    ) -> None:
        self._record = record
        self._case_sensitive = case_sensitive
        self._field = field

    @property
    def field(self) -> str | None:
        return self._field

    def match_field(self, field: str, operator: str, value: TextQuery | PhraseQuery) -> bool:
        if operator not in COMPARE_OPERATORS:
            logger.warning("Unsupported operator %r for field %r", operator, field)
            return False
        values = [v for name in self._fields(field) for v in self._values(name)]
        if operator == OP_NOT_EQUAL:
            # No value of the selected fields equals the term.
            return not any(self._equals(v, value) for v in values)
        return any(self._compare(v, operator, value) for v in values)

    def match_range(
        self,
        start: TextQuery,
        start_inclusive: bool,
        end: TextQuery,
        end_inclusive: bool,
    ) -> bool:
        for name in self._fields(ANY_FIELD):
            for v in self._values(name):
                if self._within(v, start, start_inclusive, end, end_inclusive):
                    return True
        return False

    def get_field_matcher(self, field: str) -> "RecordMatcher | None":
        if self._field is not None and field != self._field:
            return None
        if field not in self._record:
            return None
        return RecordMatcher(self._record, case_sensitive=self._case_sensitive, field=field)

    def _fields(self, field: str) -> list[str]:
        if self._field is not None:
            return [self._field] if field in (ANY_FIELD, self._field) else []
        if field == ANY_FIELD:
            return list(self._record)
        return [field]

    def _values(self, name: str) -> list[Any]:
        value = self._record.get(name)
        if value is None:
            return []
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            return [value]
        return [v for v in value if v is not None]

    def _normalize(self, value: Any) -> str:
        s = value.decode(errors="replace") if isinstance(value, bytes) else str(value)
        return s if self._case_sensitive else s.casefold()

    def _coerce(self, value: Any, term: str) -> tuple[Any, Any]:
        """Return a comparable (value, term) pair."""
        try:
            left, right = float(value), float(term)
        except (TypeError, ValueError, OverflowError):
            return self._normalize(value), self._normalize(term)
        if math.isfinite(left) and math.isfinite(right):
            return left, right
        return self._normalize(value), self._normalize(term)

    def _equals(self, value: Any, term: TextQuery | PhraseQuery) -> bool:
        left, right = self._coerce(value, term.text)
        if left == right:
            return True
        if term.is_exact_match or not isinstance(left, str):
            return False
        return right in left.split()

    def _compare(self, value: Any, operator: str, term: TextQuery | PhraseQuery) -> bool:
        if operator == OP_EQUAL:
            return self._equals(value, term)

        left, right = self._coerce(value, term.text)
        match operator:
            case "<":
                return left < right
            case "<=":
                return left <= right
            case ">":
                return left > right
            case ">=":
                return left >= right
        return False

    def _within(
        self,
        value: Any,
        start: TextQuery,
        start_inclusive: bool,
        end: TextQuery,
        end_inclusive: bool,
    ) -> bool:
        if start.text != OPEN_BOUND:
            op = OP_GREATER_EQUAL if start_inclusive else OP_GREATER
            if not self._compare(value, op, start):
                return False
        if end.text != OPEN_BOUND:
            op = OP_LESS_EQUAL if end_inclusive else OP_LESS
            if not self._compare(value, op, end):
                return False
        return True
