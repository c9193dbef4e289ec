# querytree/query/builders.py
from collections.abc import Iterable

from querytree.query.nodes import (
    AndQuery,
    FieldCompareQuery,
    FieldScope,
    GroupQuery,
    NotQuery,
    OrQuery,
    PhraseQuery,
    Query,
    RangeQuery,
    TextQuery,
)


def _as_text(value: TextQuery | str) -> TextQuery:
    return value if isinstance(value, TextQuery) else TextQuery(value)


def text(value: str, exact: bool = False) -> TextQuery:
    return TextQuery(value, is_exact_match=exact)


def phrase(words: str | Iterable[str]) -> PhraseQuery:
    """Build a phrase from a string (split on whitespace) or a list of words."""
    parts = words.split() if isinstance(words, str) else list(words)
    return PhraseQuery(" ".join(parts), tuple(TextQuery(w) for w in parts))


def field(name: str, child: Query | str) -> FieldScope:
    return FieldScope(name, _as_text(child) if isinstance(child, str) else child)


def compare(name: str, operator: str, value: TextQuery | str) -> FieldCompareQuery:
    return FieldCompareQuery(name, operator, _as_text(value))


def between(
    start: TextQuery | str,
    end: TextQuery | str,
    start_inclusive: bool = True,
    end_inclusive: bool = True,
) -> RangeQuery:
    return RangeQuery(_as_text(start), _as_text(end), start_inclusive, end_inclusive)


def all_of(*queries: Query) -> AndQuery:
    return AndQuery(queries)


def any_of(*queries: Query) -> OrQuery:
    return OrQuery(queries)


def group(query: Query) -> GroupQuery:
    return GroupQuery(query)


def negate(query: Query) -> NotQuery:
    return NotQuery(query)
