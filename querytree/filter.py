# querytree/filter.py
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from querytree.matchers.record import RecordMatcher
from querytree.query.nodes import Query

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


def filter_records(
    query: Query,
    records: Iterable[Record],
    *,
    case_sensitive: bool = False,
) -> Iterator[Record]:
    """
    Yield the records matching a query, in input order.

    Args:
        query: Query AST to evaluate
        records: Mappings of field name to value or list of values
        case_sensitive: Whether text comparisons respect case

    Examples:
        for record in filter_records(field("author", "vaswani"), papers):
            print(record["title"])
    """
    logger.debug("Filtering records with query: %s", query)
    seen = matched = 0
    for record in records:
        seen += 1
        if query.match(RecordMatcher(record, case_sensitive=case_sensitive)):
            matched += 1
            yield record
    logger.info("Filter complete: %s of %s records matched", matched, seen)


def count_matches(
    query: Query,
    records: Iterable[Record],
    *,
    case_sensitive: bool = False,
) -> int:
    """Count the records matching a query."""
    return sum(1 for _ in filter_records(query, records, case_sensitive=case_sensitive))
