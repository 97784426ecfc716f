import dataclasses

from rangeoverlap.context import getcontext
from rangeoverlap.overlap import RangeOverlap, classify_any
from rangeoverlap.typing import Comparable


@dataclasses.dataclass(frozen=True, slots=True)
class Range[T: Comparable]:
    """Range of ordered values, possibly unbounded on either side.

    Parameters
    ----------
    start : Comparable | None, default=None
        Start of the range, or ``None`` if the range is unbounded below.
    end : Comparable | None, default=None
        End of the range, or ``None`` if the range is unbounded above.

    Warnings
    --------
    `start` must not exceed `end`. This is not checked on construction; see
    :meth:`isvalid` and the `strict` setting of
    :class:`~rangeoverlap.context.Context`.

    Examples
    --------
    >>> a = Range(0, 10)
    >>> b = Range(5)
    >>> a.classify(b, inclusive=False)
    <RangeOverlap.A_ENDS_IN_B>
    >>> 10 in a
    False
    >>> a.contains(10, inclusive=True)
    True
    """

    start: T | None = None
    end: T | None = None

    def classify(self, other: "Range[T]", inclusive: bool | None = None) -> RangeOverlap:
        """Return the relationship of the range to `other`.

        See Also
        --------
        rangeoverlap.overlap.classify_any
        """
        return classify_any(self.start, self.end, other.start, other.end, inclusive)

    def contains(self, value: T, inclusive: bool | None = None) -> bool:
        """Return ``True`` if `value` is a member of the range."""
        if inclusive is None:
            inclusive = getcontext().inclusive

        if self.start is not None:
            if not (self.start <= value if inclusive else self.start < value):
                return False

        if self.end is not None:
            if not (value <= self.end if inclusive else value < self.end):
                return False

        return True

    def isbounded(self) -> bool:
        """Return ``True`` if both `start` and `end` are present."""
        return self.start is not None and self.end is not None

    def isvalid(self) -> bool:
        """Return ``True`` unless both bounds are present and `start` exceeds `end`."""
        return not self.isbounded() or self.start <= self.end

    def overlaps(self, other: "Range[T]", inclusive: bool | None = None) -> bool:
        """Return ``True`` if the range has a value in common with `other`."""
        return self.classify(other, inclusive).has_overlap()

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __str__(self) -> str:
        inclusive = getcontext().inclusive

        if self.start is None:
            lower = "(-inf"
        else:
            lower = f"{'[' if inclusive else '('}{self.start}"

        if self.end is None:
            upper = "+inf)"
        else:
            upper = f"{self.end}{']' if inclusive else ')'}"

        return f"{lower}, {upper}"
