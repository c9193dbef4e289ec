from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from querytree.query.matcher import QueryMatcher
from querytree.query.nodes import PhraseQuery, Query, TextQuery


@dataclass
class FakeMatcher(QueryMatcher):
    """Answers from fixed tables and records every call it receives."""

    fields: dict[tuple[str, str, str], bool] = field(default_factory=dict)
    ranges: dict[tuple[str, bool, str, bool], bool] = field(default_factory=dict)
    scopes: dict[str, FakeMatcher] = field(default_factory=dict)
    calls: list[tuple] = field(default_factory=list)

    def match_field(self, field: str, operator: str, value: TextQuery | PhraseQuery) -> bool:
        self.calls.append(("field", field, operator, value))
        return self.fields.get((field, operator, value.text), False)

    def match_range(
        self,
        start: TextQuery,
        start_inclusive: bool,
        end: TextQuery,
        end_inclusive: bool,
    ) -> bool:
        self.calls.append(("range", start, start_inclusive, end, end_inclusive))
        return self.ranges.get((start.text, start_inclusive, end.text, end_inclusive), False)

    def get_field_matcher(self, field: str) -> QueryMatcher | None:
        self.calls.append(("scope", field))
        return self.scopes.get(field)


@dataclass(frozen=True)
class Const(Query):
    """Query with a fixed result."""

    result: bool

    def to_string(self, debug: bool = False) -> str:
        return str(self.result).lower()

    def match(self, matcher: QueryMatcher) -> bool:
        return self.result


@dataclass(frozen=True)
class Explode(Query):
    """Query that fails if it is ever evaluated."""

    def to_string(self, debug: bool = False) -> str:
        return "boom"

    def match(self, matcher: QueryMatcher) -> bool:
        raise AssertionError("should not be evaluated")


@pytest.fixture
def matcher() -> FakeMatcher:
    return FakeMatcher()


PAPERS = [
    {
        "title": "Attention Is All You Need",
        "author": ["Ashish Vaswani", "Noam Shazeer"],
        "year": 2017,
        "tags": ["transformer", "nlp"],
    },
    {
        "title": "BERT: Pre-training of Deep Bidirectional Transformers",
        "author": ["Jacob Devlin"],
        "year": 2018,
        "tags": ["nlp"],
    },
    {
        "title": "Deep Residual Learning for Image Recognition",
        "author": ["Kaiming He"],
        "year": 2015,
        "tags": ["vision"],
    },
]


@pytest.fixture
def papers() -> list[dict]:
    return PAPERS
