#!/usr/bin/env python
"""Normalization of raw feature counts to :term:`FPKM`.

FPKM (fragments per kilobase of feature per million mapped fragments)
corrects raw counts for both feature length and sequencing depth::

    fpkm = count * 10**9 / (effective length * total mapped reads)

The total is taken over every feature in the count table, including those
for which no annotation was found, because their reads were still mapped.

Important functions
-------------------
:func:`sum_counts`
    Total mapped reads in a count table

:func:`calculate_fpkm`
    FPKM of a single feature

:func:`compute`
    FPKM of every feature that is both counted and annotated, sorted
    by feature identifier

:func:`write_fpkm_table`
    Write the output of :func:`compute` as tab-delimited text

:func:`format_fpkm`
    Format a single value as it appears in output
"""
from collections import OrderedDict
from types import MappingProxyType

import numpy

from fpkmtools.util.services.exceptions import UndefinedFpkmWarning, warn


def sum_counts(counts):
    """Return the total number of mapped reads in a count table

    Parameters
    ----------
    counts : dict
        Dictionary mapping feature identifiers to integer counts

    Returns
    -------
    int
    """
    return sum(counts.values())

def calculate_fpkm(count,length,total):
    """Calculate the FPKM of a single feature

    Parameters
    ----------
    count : int
        Raw count for the feature

    length : int
        Effective length of the feature, in nucleotides. Must be positive.

    total : int
        Total number of mapped reads in the dataset

    Returns
    -------
    float
        FPKM, or :obj:`numpy.nan` if `total` is zero
    """
    if total == 0:
        return numpy.nan

    return (float(count) * 1e9) / (float(length) * float(total))

def _sort_key(feature_id):
    # byte-wise, not locale-aware, ordering
    return feature_id.encode("utf-8")

def compute(counts,lengths):
    """Calculate FPKM for every feature present in both `counts` and `lengths`

    Features present in only one of the two inputs are left out of the result.

    If `counts` sums to zero, every FPKM is undefined. Instead of failing,
    each value is set to :obj:`numpy.nan`, and an |UndefinedFpkmWarning|
    is issued.

    Parameters
    ----------
    counts : dict
        Dictionary mapping feature identifiers to non-negative integer counts

    lengths : dict
        Dictionary mapping feature identifiers to effective lengths, as
        returned by :func:`~fpkmtools.genomics.lengths.resolve`

    Returns
    -------
    mapping
        Read-only mapping of feature identifiers to FPKM values, ordered by
        the byte-wise lexicographic order of the identifiers
    """
    total = sum_counts(counts)
    if total == 0:
        warn("Total count over all features is zero. Reporting all FPKM values as nan.",
             UndefinedFpkmWarning)

    fpkms = OrderedDict()
    for feature_id in sorted(set(counts) & set(lengths),key=_sort_key):
        fpkms[feature_id] = calculate_fpkm(counts[feature_id],lengths[feature_id],total)

    return MappingProxyType(fpkms)

def format_fpkm(fpkm):
    """Format an FPKM value in positional notation, e.g. `0.00001`
    rather than `1e-05`. Returns `nan` for undefined values."""
    return numpy.format_float_positional(float(fpkm),trim="0")

def write_fpkm_table(fpkms,stream):
    """Write FPKM values as a headerless, two-column tab-delimited table

    Values are written in positional (not scientific) notation, with the
    fewest digits that identify each value exactly, e.g. `0.00001` or
    `5000000.0`. Undefined values are written as `nan`.

    Parameters
    ----------
    fpkms : mapping
        Feature identifiers mapped to FPKM, as returned by :func:`compute`

    stream : file-like
        Open stream to write to
    """
    for feature_id, fpkm in fpkms.items():
        stream.write("%s\t%s\n" % (feature_id,format_fpkm(fpkm)))
