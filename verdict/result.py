from dataclasses import dataclass
import warnings


@dataclass(frozen=True)
class Result:
    """Outcome of evaluating a matcher against a single value.

    Both messages are always filled in, whatever the verdict: a combinator
    decides which of them is relevant, not the matcher that produced it.

    `failure_message` is shown when the matcher was asserted directly and
    did not pass, e.g. "list should have size 5". `negated_failure_message`
    is shown when the matcher was asserted in negated form and the value did
    satisfy it, e.g. "list should not have size 5".
    """
    passed: bool
    failure_message: str
    negated_failure_message: str

    def __bool__(self):
        return self.passed

    def negate(self) -> "Result":
        return Result(not self.passed, self.negated_failure_message, self.failure_message)

    def message_for(self, negated: bool) -> str:
        return self.negated_failure_message if negated else self.failure_message


def legacy_result(passed: bool, failure_message: str) -> Result:
    warnings.warn(
        "legacy_result is deprecated, give a specific negated_failure_message",
        DeprecationWarning,
        stacklevel=2,
    )
    return Result(
        passed, failure_message, f"Test passed which should have failed: {failure_message}"
    )
