#!/usr/bin/env python
"""Welcome to fpkmtools!

This package calculates :term:`FPKM` values for genomic features from a table
of raw read counts and a `GTF2`_ or `GFF3`_ annotation. It provides:

  #. A command-line script that implements the whole workflow (see |bin|).

  #. Readers that parse annotation files and count tables into simple
     record types (see |readers|).

  #. Functions that derive effective feature lengths from overlapping
     sub-features, and normalize counts by length and sequencing depth
     (see |genomics|).


Package overview
----------------
fpkmtools is divided into the following subpackages:

    ==============    =========================================================
    Package           Contents
    --------------    ---------------------------------------------------------
    |bin|             Command-line scripts
    |genomics|        Feature records, interval merging, and FPKM normalization
    |readers|         Parsers for annotation files and count tables
    |util|            Utilities (e.g. file openers, exceptions, argument parsers)
    |test|            Unit and functional tests
    ==============    =========================================================
"""
__version__ = "0.1.0"

from fpkmtools.genomics.features import AnnotationRecord, Interval, aggregate
from fpkmtools.genomics.lengths import merge_intervals, resolve
from fpkmtools.genomics.quantification import compute, sum_counts

from fpkmtools.readers.gff import GTF2_Reader, GFF3_Reader
from fpkmtools.readers.counts import read_counts

from fpkmtools.util.io.openers import read_fpkm_table

from fpkmtools.util.services.exceptions import formatwarning
