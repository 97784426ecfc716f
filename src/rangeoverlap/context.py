import contextlib
import contextvars
from typing import Self


class Context:
    """Create a new context.

    The context holds the default settings used by the classifiers in
    :mod:`rangeoverlap.overlap` when they are not given explicitly.

    Parameters
    ----------
    inclusive : bool, default=False
        Default inclusivity policy. If `inclusive` is ``True``, the start and end
        values of a range are members of the range.
    strict : bool, default=False
        If `strict` is ``True``, classifiers raise :exc:`ValueError` when a range
        starts after it ends instead of returning an unspecified result.
    """

    __slots__ = ("_inclusive", "_strict")
    _inclusive: bool
    _strict: bool

    def __init__(self, inclusive: bool = False, strict: bool = False):
        self._inclusive = inclusive
        self._strict = strict

    @property
    def inclusive(self) -> bool:
        """Default inclusivity policy for calls that do not pass `inclusive`."""
        return self._inclusive

    @property
    def strict(self) -> bool:
        """Whether classifiers reject ranges that start after they end."""
        return self._strict

    def copy(self) -> Self:
        return self.__class__(self._inclusive, self._strict)

    def __str__(self):
        return (
            f"{type(self).__name__}(inclusive={self._inclusive!r}, "
            f"strict={self._strict!r})"
        )

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("rangeoverlap")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    inclusive: bool | None = None,
    strict: bool | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> from rangeoverlap import has_overlap
    >>> with localcontext(inclusive=True):
    ...     has_overlap(0, 10, 10, 20)
    True
    >>> has_overlap(0, 10, 10, 20)
    False
    """
    if ctx is None:
        ctx = getcontext()

    if inclusive is None:
        inclusive = ctx._inclusive

    if strict is None:
        strict = ctx._strict

    ctx = Context(inclusive, strict)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
