import pytest

from verdict import Result, Matcher, predicate


@pytest.fixture
def is_positive() -> Matcher[int]:
    return predicate(lambda v: v > 0, "expected positive", "expected non-positive")


@pytest.fixture
def is_even() -> Matcher[int]:
    return predicate(lambda v: v % 2 == 0, "expected even", "expected odd")


@pytest.fixture
def passed() -> Result:
    return Result(True, "fail", "negated fail")
