from .result import Result, legacy_result
from .matcher import Matcher, matcher, predicate
from .assertions import assert_that, should, should_not
from .errors import MatcherAssertionError

__all__ = [
    "Result", "legacy_result", "Matcher", "matcher", "predicate",
    "assert_that", "should", "should_not", "MatcherAssertionError",
]
