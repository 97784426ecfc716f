"""
##################################################
Range overlap classification (:mod:`rangeoverlap`)
##################################################

.. currentmodule:: rangeoverlap

This package classifies the relationship between two one-dimensional ranges of
ordered values.

Classification
==============

.. autosummary::
    :toctree: generated/

    RangeOverlap
    classify
    classify_any
    excl_classify
    incl_classify

Overlap tests
=============

.. autosummary::
    :toctree: generated/

    has_overlap
    has_overlap_any
    has_excl_overlap
    has_incl_overlap

Ranges
======

.. autosummary::
    :toctree: generated/

    Range

Context
=======

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

from .context import Context, getcontext, localcontext, setcontext
from .overlap import (
    A_CONTAINS_B,
    A_ENDS_IN_B,
    A_EQUALS_B,
    A_STARTS_IN_B,
    B_CONTAINS_A,
    NO_OVERLAP,
    RangeOverlap,
    classify,
    classify_any,
    excl_classify,
    has_excl_overlap,
    has_incl_overlap,
    has_overlap,
    has_overlap_any,
    incl_classify,
)
from .range import Range

__all__ = [
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
    "A_CONTAINS_B",
    "A_ENDS_IN_B",
    "A_EQUALS_B",
    "A_STARTS_IN_B",
    "B_CONTAINS_A",
    "NO_OVERLAP",
    "RangeOverlap",
    "classify",
    "classify_any",
    "excl_classify",
    "has_excl_overlap",
    "has_incl_overlap",
    "has_overlap",
    "has_overlap_any",
    "incl_classify",
    "Range",
]
