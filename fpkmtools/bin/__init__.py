#!/usr/bin/env python
"""Command-line scripts

    =========================   =============================================================================
    **Script**                  **Purpose**
    -------------------------   -----------------------------------------------------------------------------
    |fpkm|                      Calculate :term:`FPKM` for each feature in a count table, using
                                effective feature lengths derived from a `GTF2`_ or `GFF3`_ annotation
    =========================   =============================================================================
"""
