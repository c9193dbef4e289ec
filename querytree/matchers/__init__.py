# querytree/matchers/__init__.py
from querytree.matchers.record import RecordMatcher

__all__ = ["RecordMatcher"]
