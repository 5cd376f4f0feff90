#!/usr/bin/env python
"""Effective lengths of features whose sub-intervals may overlap.

A gene annotated by several transcripts typically lists the same exon, or
overlapping versions of it, more than once. The effective length of the gene
counts each covered position exactly once: it is the total length of the
union of its exons.

Because coordinates are end-included, intervals that merely touch
(e.g. `(1,10)` and `(11,20)`) leave no gap between them, and are merged.

Important functions
-------------------
:func:`merge_intervals`
    Merge a list of |Intervals| into a sorted list of non-overlapping,
    non-adjacent |Intervals|

:func:`get_effective_length`
    Total length of the union of a list of |Intervals|

:func:`resolve`
    Effective lengths of every feature in a dictionary produced by
    :func:`~fpkmtools.genomics.features.aggregate`
"""
from fpkmtools.genomics.features import Interval
from fpkmtools.util.io.openers import NullWriter
from fpkmtools.util.services.exceptions import InvalidIntervalError, DataWarning, warn


def merge_intervals(intervals):
    """Merge overlapping or adjacent intervals

    Parameters
    ----------
    intervals : list
        |Intervals|, in any order. All must have `start <= end`.

    Returns
    -------
    list
        New list of |Intervals|, sorted by position, in which no two intervals
        overlap or touch. Empty if `intervals` is empty.
    """
    merged = []
    for start, end in sorted(intervals):
        if len(merged) > 0 and start <= merged[-1].end + 1:
            if end > merged[-1].end:
                merged[-1] = Interval(merged[-1].start,end)
        else:
            merged.append(Interval(start,end))

    return merged

def get_effective_length(intervals):
    """Return the number of positions covered by at least one interval

    Parameters
    ----------
    intervals : list
        |Intervals|, in any order. All must have `start <= end`.

    Returns
    -------
    int
    """
    return sum(X.length for X in merge_intervals(intervals))

def _check_intervals(feature_id,intervals):
    for iv in intervals:
        if iv.start > iv.end:
            raise InvalidIntervalError(feature_id,iv)

def resolve(features,strict=True,printer=None):
    """Resolve the effective length of each feature

    Parameters
    ----------
    features : dict
        Dictionary mapping feature identifiers to lists of |Intervals|,
        as returned by :func:`~fpkmtools.genomics.features.aggregate`

    strict : bool, optional
        If `True` (default), an interval with `start > end` aborts resolution
        of all features by raising |InvalidIntervalError|. If `False`, only
        the offending feature is dropped, and a |DataWarning| is issued.

    printer : file-like, optional
        Logger implementing a ``write()`` method. Default: |NullWriter|

    Returns
    -------
    dict
        Dictionary mapping feature identifiers to positive integer lengths.
        Features with no intervals are absent.

    Raises
    ------
    InvalidIntervalError
        If `strict` is `True` and any feature has an invalid interval
    """
    printer = NullWriter() if printer is None else printer
    lengths = {}
    for n, (feature_id, intervals) in enumerate(features.items()):
        if n % 10000 == 0 and n > 0:
            printer.write("Resolved lengths of %s features ..." % n)

        if len(intervals) == 0:
            continue

        try:
            _check_intervals(feature_id,intervals)
        except InvalidIntervalError as e:
            if strict:
                raise
            warn("Skipping feature '%s': %s" % (feature_id,e),DataWarning)
            continue

        lengths[feature_id] = get_effective_length(intervals)

    return lengths
