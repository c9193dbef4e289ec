# querytree/__init__.py
"""querytree - AST and evaluation protocol for a small search query language."""

from querytree.filter import count_matches, filter_records
from querytree.matchers import RecordMatcher
from querytree.query import (
    ANY_FIELD,
    OP_EQUAL,
    AndQuery,
    FieldCompareQuery,
    FieldScope,
    GroupQuery,
    NotQuery,
    OrQuery,
    PhraseQuery,
    Query,
    QueryMatcher,
    RangeQuery,
    TextQuery,
    all_of,
    any_of,
    between,
    compare,
    field,
    group,
    negate,
    phrase,
    text,
)

__all__ = [
    # Query nodes
    "Query",
    "TextQuery",
    "PhraseQuery",
    "FieldScope",
    "FieldCompareQuery",
    "RangeQuery",
    "NotQuery",
    "GroupQuery",
    "AndQuery",
    "OrQuery",
    # Builders
    "text",
    "phrase",
    "field",
    "compare",
    "between",
    "all_of",
    "any_of",
    "group",
    "negate",
    # Matching
    "QueryMatcher",
    "ANY_FIELD",
    "OP_EQUAL",
    "RecordMatcher",
    "filter_records",
    "count_matches",
]
