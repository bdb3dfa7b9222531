"""Two-outcome scenario harness around :func:`compare`.

The harness builds two intervals, compares them once and maps the result onto
a terminal outcome whose value is the process status code. ``Outcome.ERROR``
is the state external verifiers probe for reachability.
"""

from dataclasses import dataclass
from enum import IntEnum

from intervalcmp.compare import compare
from intervalcmp.interval import Interval
from intervalcmp.log import configure_logging, get_logger
from intervalcmp.nondet import ValueSource

logger = get_logger(__name__)


class Outcome(IntEnum):
    """Terminal state of a scenario; the value is the process status code."""

    EXIT = 0
    ERROR = 1


@dataclass(frozen=True)
class Scenario:
    """The two intervals a harness run compares."""

    first: Interval
    second: Interval

    @classmethod
    def from_source(cls, source: ValueSource) -> "Scenario":
        """Build a scenario reading first.left, first.right, second.left, second.right."""
        first = Interval(left=source.next_int(), right=source.next_int())
        second = Interval(left=source.next_int(), right=source.next_int())
        return cls(first, second)


FIXED_SCENARIO = Scenario(
    first=Interval(left=5, right=4),
    second=Interval(left=1, right=3),
)


def run(scenario: Scenario = FIXED_SCENARIO) -> Outcome:
    """Compare the scenario's intervals once; a result of 0 is ERROR."""
    logger.debug(
        "scenario.start",
        first=str(scenario.first),
        second=str(scenario.second),
    )
    result = compare(scenario.first, scenario.second)
    outcome = Outcome.ERROR if result == 0 else Outcome.EXIT
    logger.info("scenario.outcome", result=result, outcome=outcome.name)
    return outcome


def main() -> int:
    """Run the fixed scenario with logging on stderr and return its status."""
    configure_logging()
    return int(run())
