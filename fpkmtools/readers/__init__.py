#!/usr/bin/env python
"""
Package overview
================

This package contains parsers for annotation files and count tables. All
parsers behave as iterators. Annotation readers keep the coordinates of the
file: 1-based, with both endpoints included. `GTF2`_ and `GFF3`_ files may be
gzipped, bzipped, or `tabix`_-compressed, the latter supported via `Pysam`_.

    ======================================    =======================================
    **Module**                                **Contents**
    --------------------------------------    ---------------------------------------
    :py:mod:`fpkmtools.readers.gff`           `GTF2`_ and `GFF3`_
    :py:mod:`fpkmtools.readers.counts`        Tables of raw counts per feature
    :py:mod:`fpkmtools.readers.gff_tokens`    Parsing of attributes in the ninth
                                              column of `GTF2`_ and `GFF3`_ files
    :py:mod:`fpkmtools.readers.common`        Helpers shared by annotation readers
    ======================================    =======================================
"""
