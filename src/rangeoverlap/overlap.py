import enum
from typing import Final, Self

from rangeoverlap.context import getcontext
from rangeoverlap.typing import Comparable


class RangeOverlap(enum.Enum):
    """Relationship of a range A to a range B.

    The relationship is directional: ``A_CONTAINS_B`` for ``(a, b)`` corresponds to
    ``B_CONTAINS_A`` for ``(b, a)``. Use :meth:`swap` to look at the relationship from
    the side of B.

    Attributes
    ----------
    A_EQUALS_B
        Both ranges have exactly the same bounds.
    A_CONTAINS_B
        Every value of B is also in A, and the ranges are not equal.
    B_CONTAINS_A
        Every value of A is also in B, and the ranges are not equal.
    A_STARTS_IN_B
        The start of A lies in B and the end of A lies after the end of B.
    A_ENDS_IN_B
        The end of A lies in B and the start of A lies before the start of B.
    NO_OVERLAP
        The ranges have no value in common.

    Notes
    -----
    Ranges are compared by their bounds. A zero-width range such as ``(10, 10)`` is
    therefore contained in any range sharing that bound, even under the exclusive
    policy where it has no members.
    """

    A_EQUALS_B = enum.auto()
    A_CONTAINS_B = enum.auto()
    B_CONTAINS_A = enum.auto()
    A_STARTS_IN_B = enum.auto()
    A_ENDS_IN_B = enum.auto()
    NO_OVERLAP = enum.auto()

    def has_overlap(self) -> bool:
        """Return ``True`` unless the relationship is ``NO_OVERLAP``."""
        return self is not RangeOverlap.NO_OVERLAP

    def swap(self) -> Self:
        """Return the same relationship seen from the side of B.

        Examples
        --------
        >>> RangeOverlap.A_STARTS_IN_B.swap()
        <RangeOverlap.A_ENDS_IN_B>
        >>> RangeOverlap.A_EQUALS_B.swap()
        <RangeOverlap.A_EQUALS_B>
        """
        match self:
            case RangeOverlap.A_CONTAINS_B:
                return RangeOverlap.B_CONTAINS_A

            case RangeOverlap.B_CONTAINS_A:
                return RangeOverlap.A_CONTAINS_B

            case RangeOverlap.A_STARTS_IN_B:
                return RangeOverlap.A_ENDS_IN_B

            case RangeOverlap.A_ENDS_IN_B:
                return RangeOverlap.A_STARTS_IN_B

        return self

    def __repr__(self):
        return f"<{self.__class__.__name__}.{self.name}>"


A_EQUALS_B: Final = RangeOverlap.A_EQUALS_B
A_CONTAINS_B: Final = RangeOverlap.A_CONTAINS_B
B_CONTAINS_A: Final = RangeOverlap.B_CONTAINS_A
A_STARTS_IN_B: Final = RangeOverlap.A_STARTS_IN_B
A_ENDS_IN_B: Final = RangeOverlap.A_ENDS_IN_B
NO_OVERLAP: Final = RangeOverlap.NO_OVERLAP


class _Endpoint:
    """Bound that may be absent, ordered so that an absent start precedes and an
    absent end follows every present value."""

    __slots__ = ("value", "rank")

    def __init__(self, value, is_end: bool):
        self.value = value

        if value is not None:
            self.rank = 0
        else:
            self.rank = 1 if is_end else -1

    def __eq__(self, other) -> bool:
        if not isinstance(other, _Endpoint):
            return NotImplemented

        if self.rank == other.rank == 0:
            return self.value == other.value

        return self.rank == other.rank

    def __lt__(self, other: Self) -> bool:
        if self.rank == other.rank == 0:
            return self.value < other.value

        return self.rank < other.rank

    def __le__(self, other: Self) -> bool:
        if self.rank == other.rank == 0:
            return self.value <= other.value

        return self.rank <= other.rank

    def __gt__(self, other: Self) -> bool:
        return other.__lt__(self)

    def __ge__(self, other: Self) -> bool:
        return other.__le__(self)


def _check(name: str, start, end) -> None:
    if start is not None and end is not None and start > end:
        raise ValueError(f"range {name} start must not exceed its end")


def _resolve(a_start, a_end, b_start, b_end, inclusive: bool | None) -> bool:
    ctx = getcontext()

    if ctx.strict:
        _check("A", a_start, a_end)
        _check("B", b_start, b_end)

    return ctx.inclusive if inclusive is None else inclusive


def _decide(a_start, a_end, b_start, b_end, inclusive: bool) -> RangeOverlap:
    # Equality and containment must be tested first: a contained range also
    # passes the partial overlap tests below.
    if a_start == b_start and a_end == b_end:
        return A_EQUALS_B

    if a_start <= b_start and a_end >= b_end:
        return A_CONTAINS_B

    if b_start <= a_start and b_end >= a_end:
        return B_CONTAINS_A

    if a_start > b_start and a_end > b_end:
        if (a_start <= b_end) if inclusive else (a_start < b_end):
            return A_STARTS_IN_B

        return NO_OVERLAP

    if a_start < b_start and a_end < b_end:
        if (a_end >= b_start) if inclusive else (a_end > b_start):
            return A_ENDS_IN_B

    return NO_OVERLAP


def classify[T: Comparable](
    a_start: T, a_end: T, b_start: T, b_end: T, inclusive: bool | None = None
) -> RangeOverlap:
    """Classify the relationship of the bounded range A to the bounded range B.

    Parameters
    ----------
    a_start, a_end : Comparable
        Start and end of A.
    b_start, b_end : Comparable
        Start and end of B.
    inclusive : bool, optional
        If ``True``, the start and end values are members of the ranges. The default
        is taken from :func:`~rangeoverlap.context.getcontext`.

    Returns
    -------
    RangeOverlap

    Raises
    ------
    ValueError
        If the current context is strict and either range starts after its end.

    Warnings
    --------
    Both ranges must satisfy ``start <= end``. Unless the current context is strict,
    this is not checked and the result for a malformed range is unspecified.

    Notes
    -----
    Equality and containment compare starts with starts and ends with ends, so they do
    not depend on `inclusive`. The policy only decides whether ranges touching at a
    single value overlap.

    See Also
    --------
    classify_any, excl_classify, incl_classify

    Examples
    --------
    >>> classify(0, 20, 5, 10, False)
    <RangeOverlap.A_CONTAINS_B>
    >>> classify(10, 20, 5, 15, False)
    <RangeOverlap.A_STARTS_IN_B>
    >>> classify(0, 10, 10, 20, False)
    <RangeOverlap.NO_OVERLAP>
    >>> classify(0, 10, 10, 20, True)
    <RangeOverlap.A_ENDS_IN_B>
    """
    inclusive = _resolve(a_start, a_end, b_start, b_end, inclusive)
    return _decide(a_start, a_end, b_start, b_end, inclusive)


def incl_classify[T: Comparable](
    a_start: T, a_end: T, b_start: T, b_end: T
) -> RangeOverlap:
    """Equivalent to ``classify(a_start, a_end, b_start, b_end, True)``."""
    return classify(a_start, a_end, b_start, b_end, True)


def excl_classify[T: Comparable](
    a_start: T, a_end: T, b_start: T, b_end: T
) -> RangeOverlap:
    """Equivalent to ``classify(a_start, a_end, b_start, b_end, False)``."""
    return classify(a_start, a_end, b_start, b_end, False)


def classify_any[T: Comparable](
    a_start: T | None,
    a_end: T | None,
    b_start: T | None,
    b_end: T | None,
    inclusive: bool | None = None,
) -> RangeOverlap:
    """Classify the relationship of A to B, where any bound may be absent.

    An absent bound, given as ``None``, leaves the range unbounded on that side. An
    absent start precedes every present start and an absent end follows every present
    end; two absent bounds on the same side are equal. Otherwise the classification is
    exactly that of :func:`classify`.

    Parameters
    ----------
    a_start, a_end : Comparable | None
        Start and end of A.
    b_start, b_end : Comparable | None
        Start and end of B.
    inclusive : bool, optional
        If ``True``, present start and end values are members of the ranges. The
        default is taken from :func:`~rangeoverlap.context.getcontext`.

    Returns
    -------
    RangeOverlap

    Raises
    ------
    ValueError
        If the current context is strict and either range starts after its end.

    Examples
    --------
    >>> classify_any(None, None, 0, 10, False)
    <RangeOverlap.A_CONTAINS_B>
    >>> classify_any(None, 10, 5, None, False)
    <RangeOverlap.A_ENDS_IN_B>
    >>> classify_any(1, None, None, 1, False)
    <RangeOverlap.NO_OVERLAP>
    """
    inclusive = _resolve(a_start, a_end, b_start, b_end, inclusive)
    return _decide(
        _Endpoint(a_start, False),
        _Endpoint(a_end, True),
        _Endpoint(b_start, False),
        _Endpoint(b_end, True),
        inclusive,
    )


def has_overlap[T: Comparable](
    a_start: T, a_end: T, b_start: T, b_end: T, inclusive: bool | None = None
) -> bool:
    """Return ``True`` if the bounded ranges A and B have a value in common.

    The result is symmetric in A and B. Ranges of nonzero width touching at a single
    value overlap only if `inclusive` is ``True``. The result is
    ``classify(...).has_overlap()``, so a zero-width range sharing a bound with the
    other range overlaps it under either policy.

    See Also
    --------
    classify, has_excl_overlap, has_incl_overlap, has_overlap_any

    Examples
    --------
    >>> has_overlap(0, 10, 5, 15, True)
    True
    >>> has_overlap(0, 10, 10, 20, True)
    True
    >>> has_overlap(0, 10, 10, 20, False)
    False
    """
    return classify(a_start, a_end, b_start, b_end, inclusive).has_overlap()


def has_incl_overlap[T: Comparable](
    a_start: T, a_end: T, b_start: T, b_end: T
) -> bool:
    """Equivalent to ``has_overlap(a_start, a_end, b_start, b_end, True)``."""
    return has_overlap(a_start, a_end, b_start, b_end, True)


def has_excl_overlap[T: Comparable](
    a_start: T, a_end: T, b_start: T, b_end: T
) -> bool:
    """Equivalent to ``has_overlap(a_start, a_end, b_start, b_end, False)``.

    A zero-width range sharing a bound with the other range still overlaps it, since
    it is classified as contained; see :class:`RangeOverlap`.
    """
    return has_overlap(a_start, a_end, b_start, b_end, False)


def has_overlap_any[T: Comparable](
    a_start: T | None,
    a_end: T | None,
    b_start: T | None,
    b_end: T | None,
    inclusive: bool | None = None,
) -> bool:
    """Return ``True`` if A and B have a value in common, where any bound may be
    absent.

    See Also
    --------
    classify_any, has_overlap
    """
    return classify_any(a_start, a_end, b_start, b_end, inclusive).has_overlap()
