from .compare import Ordering, compare
from .harness import FIXED_SCENARIO, Outcome, Scenario, main, run
from .interval import Interval
from .nondet import FixedValues, RandomValues, ValueSource, ValueSourceExhausted

__all__ = [
    "Interval",
    "Ordering",
    "compare",
    "Outcome",
    "Scenario",
    "FIXED_SCENARIO",
    "run",
    "main",
    "ValueSource",
    "FixedValues",
    "RandomValues",
    "ValueSourceExhausted",
]
