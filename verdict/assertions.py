from .errors import MatcherAssertionError
from .logging import logger
from .matcher import Matcher

log = logger()


def assert_that[T](value: T, matcher: Matcher[T], negated: bool = False) -> None:
    """Check `value` against `matcher`, raising `MatcherAssertionError` with
    the message relevant to the direction of the assertion if it fails.

    Exceptions raised by the matcher itself are passed on untouched.
    """
    result = matcher.test(value)
    if result.passed == negated:
        message = result.message_for(negated)
        log.debug(f"assertion failed for `{value!r}`: {message}")
        raise MatcherAssertionError(message, result)


def should[T](value: T, matcher: Matcher[T]) -> None:
    assert_that(value, matcher)


def should_not[T](value: T, matcher: Matcher[T]) -> None:
    assert_that(value, matcher, negated=True)
