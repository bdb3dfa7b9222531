from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Inclusive integer range ``[left, right]``.

    Inverted intervals (``left > right``) are legal values and are never
    normalised.
    """

    left: int
    right: int

    def __post_init__(self) -> None:
        for edge in ("left", "right"):
            value = getattr(self, edge)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Interval {edge} bound must be an int.\n"
                    f"Got {type(value).__name__!r}: {value!r}\n"
                    f"Hint: convert explicitly, e.g. Interval(left=int(x), right=int(y))"
                )

    @property
    def is_inverted(self) -> bool:
        return self.left > self.right

    def __str__(self) -> str:
        return f"Interval[{self.left}, {self.right}]"
