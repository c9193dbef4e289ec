# querytree/query/nodes.py
"""AST nodes of the search query language.

Every node serializes back to query syntax with `to_string()` and evaluates
itself against a `QueryMatcher` with `match()`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from querytree.query.matcher import ANY_FIELD, OP_EQUAL, QueryMatcher

logger = logging.getLogger(__name__)


def _debug(debug: bool, expr: str) -> str:
    return f"<{expr}>" if debug else expr


@dataclass(frozen=True)
class Query(ABC):
    """Base AST node for search queries."""

    @abstractmethod
    def to_string(self, debug: bool = False) -> str:
        """Serialize to query syntax.

        With `debug`, leaf and comparison nodes are wrapped in `<...>` so
        node boundaries are unambiguous in the output.
        """
        ...

    @abstractmethod
    def match(self, matcher: QueryMatcher) -> bool:
        """Evaluate this query against `matcher`."""
        ...

    def __str__(self) -> str:
        return self.to_string()

    def __and__(self, other: Query) -> AndQuery:
        if isinstance(self, AndQuery):
            return AndQuery((*self.children, other))
        return AndQuery((self, other))

    def __or__(self, other: Query) -> OrQuery:
        if isinstance(self, OrQuery):
            return OrQuery((*self.children, other))
        return OrQuery((self, other))

    def __invert__(self) -> NotQuery:
        return NotQuery(self)


def _match_text(term: TextQuery | PhraseQuery, matcher: QueryMatcher) -> bool:
    return matcher.match_field(ANY_FIELD, OP_EQUAL, term)


@dataclass(frozen=True)
class TextQuery(Query):
    """Text term; `is_exact_match` is set when the term was quoted."""

    text: str
    is_exact_match: bool = False

    def to_string(self, debug: bool = False) -> str:
        return _debug(debug, f'"{self.text}"' if self.is_exact_match else self.text)

    def match(self, matcher: QueryMatcher) -> bool:
        return _match_text(self, matcher)


@dataclass(frozen=True)
class PhraseQuery(Query):
    """Quoted list of words, matched as a single exact text value."""

    text: str
    children: tuple[TextQuery, ...]

    @property
    def is_exact_match(self) -> bool:
        return True

    def to_string(self, debug: bool = False) -> str:
        return '"' + " ".join(c.to_string(debug) for c in self.children) + '"'

    def match(self, matcher: QueryMatcher) -> bool:
        # Words are informational only; the matcher sees the joined text.
        return _match_text(self, matcher)


@dataclass(frozen=True)
class FieldScope(Query):
    """Scopes `child` to be applied only on `field`."""

    field: str
    child: Query

    def to_string(self, debug: bool = False) -> str:
        return f"{self.field}:{self.child.to_string(debug)}"

    def match(self, matcher: QueryMatcher) -> bool:
        field_matcher = matcher.get_field_matcher(self.field)
        if field_matcher is None:
            logger.debug("No matcher for field %r, treating as no match", self.field)
            return False
        return self.child.match(field_matcher)


@dataclass(frozen=True)
class FieldCompareQuery(Query):
    """A `field operator text` triple, e.g. year<2000."""

    field: str
    operator: str
    text: TextQuery

    def to_string(self, debug: bool = False) -> str:
        return _debug(debug, f"{self.field}{self.operator}{self.text}")

    def match(self, matcher: QueryMatcher) -> bool:
        return matcher.match_field(self.field, self.operator, self.text)


@dataclass(frozen=True)
class RangeQuery(Query):
    """Range between `start` and `end`, each bound inclusive or exclusive."""

    start: TextQuery
    end: TextQuery
    start_inclusive: bool = True
    end_inclusive: bool = True

    def to_string(self, debug: bool = False) -> str:
        open_ = "[" if self.start_inclusive else "]"
        close = "]" if self.end_inclusive else "["
        return _debug(
            debug,
            f"{open_}{self.start.to_string(debug)} TO {self.end.to_string(debug)}{close}",
        )

    def match(self, matcher: QueryMatcher) -> bool:
        return matcher.match_range(
            self.start, self.start_inclusive, self.end, self.end_inclusive
        )


@dataclass(frozen=True)
class NotQuery(Query):
    """Logical NOT of a query."""

    child: Query

    def to_string(self, debug: bool = False) -> str:
        return f"-{self.child.to_string(debug)}"

    def match(self, matcher: QueryMatcher) -> bool:
        return not self.child.match(matcher)


@dataclass(frozen=True)
class GroupQuery(Query):
    """Parenthesized query, used to override implicit precedence."""

    child: Query

    def to_string(self, debug: bool = False) -> str:
        return f"({self.child.to_string(debug)})"

    def match(self, matcher: QueryMatcher) -> bool:
        return self.child.match(matcher)


@dataclass(frozen=True)
class AndQuery(Query):
    """Logical AND of queries. Empty matches everything."""

    children: tuple[Query, ...]

    def to_string(self, debug: bool = False) -> str:
        return "(" + " ".join(c.to_string(debug) for c in self.children) + ")"

    def match(self, matcher: QueryMatcher) -> bool:
        for child in self.children:
            if not child.match(matcher):
                return False
        return True


@dataclass(frozen=True)
class OrQuery(Query):
    """Logical OR of queries. Empty matches nothing."""

    children: tuple[Query, ...]

    def to_string(self, debug: bool = False) -> str:
        return "(" + " OR ".join(c.to_string(debug) for c in self.children) + ")"

    def match(self, matcher: QueryMatcher) -> bool:
        for child in self.children:
            if child.match(matcher):
                return True
        return False
