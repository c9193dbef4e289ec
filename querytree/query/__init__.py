# querytree/query/__init__.py
from querytree.query.builders import (
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

__all__ = [
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
    "QueryMatcher",
    "ANY_FIELD",
    "COMPARE_OPERATORS",
    "OP_EQUAL",
    "OP_NOT_EQUAL",
    "OP_LESS",
    "OP_LESS_EQUAL",
    "OP_GREATER",
    "OP_GREATER_EQUAL",
    "text",
    "phrase",
    "field",
    "compare",
    "between",
    "all_of",
    "any_of",
    "group",
    "negate",
]
