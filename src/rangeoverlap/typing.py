"""
###################################
Typing (:mod:`rangeoverlap.typing`)
###################################

This module provides type definitions commonly used between modules.

.. autoclass:: Comparable
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self


class Comparable(Protocol):
    """Protocol for totally ordered values that can be used as bounds of a range.

    Only the rich comparison operators are required; no arithmetic is ever
    performed on bounds.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __le__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __gt__(self, rhs: Self) -> bool: ...

    @abstractmethod
    def __ge__(self, rhs: Self) -> bool: ...
