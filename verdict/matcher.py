from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from .result import Result


class Matcher[T](ABC):
    """A reusable predicate over values of type `T` that explains itself.

    Implementations provide a single method, `test`, returning a `Result`.
    The combinators below never mutate the receiver: each one builds a new
    matcher that holds on to its operands. Exceptions raised while testing a
    value are not caught; a matcher signals failure through its `Result`.

    For example, given matchers `is_positive` and `is_even`:

        (is_positive & is_even).test(4)    # both must pass
        (~is_positive).test(-1)            # passes, messages swapped
        is_even.compose(len).test("ab")    # tests len("ab")
    """
    @abstractmethod
    def test(self, value: T) -> Result:
        ...

    def __call__(self, value: T) -> Result:
        return self.test(value)

    def invert(self) -> Matcher[T]:
        return Inverted(self)

    def compose[U](self, fn: Callable[[U], T]) -> Matcher[U]:
        return Composed(self, fn)

    def and_(self, other: Matcher[T]) -> Matcher[T]:
        return Conjunction(self, other)

    def or_(self, other: Matcher[T]) -> Matcher[T]:
        return Disjunction(self, other)

    def __invert__(self) -> Matcher[T]:
        return self.invert()

    def __and__(self, other: Matcher[T]) -> Matcher[T]:
        if not isinstance(other, Matcher):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: Matcher[T]) -> Matcher[T]:
        if not isinstance(other, Matcher):
            return NotImplemented
        return self.or_(other)


@dataclass(frozen=True)
class Inverted[T](Matcher[T]):
    inner: Matcher[T]

    def test(self, value: T) -> Result:
        return self.inner.test(value).negate()


@dataclass(frozen=True)
class Composed[T, U](Matcher[U]):
    inner: Matcher[T]
    fn: Callable[[U], T]

    def test(self, value: U) -> Result:
        return self.inner.test(self.fn(value))


@dataclass(frozen=True)
class Conjunction[T](Matcher[T]):
    """Short-circuit `and`: the right-hand side only runs if the left passes.

    The returned result is that of whichever operand decided the outcome, so
    on success the messages are those of `right`.
    """
    left: Matcher[T]
    right: Matcher[T]

    def test(self, value: T) -> Result:
        r = self.left.test(value)
        if not r.passed:
            return r
        return self.right.test(value)


@dataclass(frozen=True)
class Disjunction[T](Matcher[T]):
    """Short-circuit `or`: the right-hand side only runs if the left fails,
    in which case its result is returned whatever the outcome."""
    left: Matcher[T]
    right: Matcher[T]

    def test(self, value: T) -> Result:
        r = self.left.test(value)
        if r.passed:
            return r
        return self.right.test(value)


@dataclass(frozen=True)
class FunctionMatcher[T](Matcher[T]):
    fn: Callable[[T], Result]

    def test(self, value: T) -> Result:
        return self.fn(value)


def matcher[T](fn: Callable[[T], Result]) -> Matcher[T]:
    """Turn a function `T -> Result` into a `Matcher[T]`. Works as a decorator."""
    return FunctionMatcher(fn)


type Message[T] = str | Callable[[T], str]


def _render[T](msg: Message[T], value: T) -> str:
    if callable(msg):
        return msg(value)
    return msg


def predicate[T](
    check: Callable[[T], bool],
    failure_message: Message[T],
    negated_failure_message: Message[T],
) -> Matcher[T]:
    """Build a matcher from a boolean predicate. Messages are either fixed
    strings, or functions that render a message from the tested value."""
    def _test(value: T) -> Result:
        return Result(
            bool(check(value)),
            _render(failure_message, value),
            _render(negated_failure_message, value),
        )

    return FunctionMatcher(_test)
