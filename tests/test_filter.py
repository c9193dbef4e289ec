import logging

from querytree import count_matches, filter_records
from querytree.query import AndQuery, OrQuery, between, compare, field, text


def test_filter_by_field(papers):
    result = list(filter_records(field("tags", "nlp"), papers))
    assert [p["year"] for p in result] == [2017, 2018]


def test_filter_combined(papers):
    q = field("tags", "nlp") & ~compare("year", "<", "2018")
    result = list(filter_records(q, papers))
    assert [p["author"] for p in result] == [["Jacob Devlin"]]


def test_filter_is_lazy(papers):
    it = filter_records(text("deep"), papers)
    assert next(it)["year"] == 2018


def test_filter_range(papers):
    q = field("year", between("2015", "2017"))
    assert count_matches(q, papers) == 2


def test_empty_and_matches_everything(papers):
    assert count_matches(AndQuery(()), papers) == 3
    assert count_matches(OrQuery(()), papers) == 0


def test_case_sensitive_filter(papers):
    assert count_matches(text("bert:"), papers) == 1
    assert count_matches(text("bert:"), papers, case_sensitive=True) == 0


def test_filter_logs_summary(papers, caplog):
    with caplog.at_level(logging.INFO, logger="querytree.filter"):
        count_matches(field("tags", "vision"), papers)
    assert "1 of 3 records matched" in caplog.text
