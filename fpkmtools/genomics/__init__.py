#!/usr/bin/env python
"""This package contains the object types and functions used to turn
annotations and counts into FPKM values.

Package overview
================

    ==================================================  ==================================================================
    **Submodule**                                       **Description**
    --------------------------------------------------  ------------------------------------------------------------------
    :py:mod:`~fpkmtools.genomics.features`              Annotation records, intervals, and grouping of
                                                        sub-intervals by feature

    :py:mod:`~fpkmtools.genomics.lengths`               Merging of overlapping intervals into effective
                                                        feature lengths

    :py:mod:`~fpkmtools.genomics.quantification`        Normalization of counts to :term:`FPKM`
    ==================================================  ==================================================================
"""
