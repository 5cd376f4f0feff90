#!/usr/bin/env python
"""Utilities for opening files and filtering streams of text

    =====================================    ==========================================================
    **Module**                               **Contents**
    -------------------------------------    ----------------------------------------------------------
    :py:mod:`~fpkmtools.util.io.filters`     Reader and writer filters for text streams
    :py:mod:`~fpkmtools.util.io.openers`     Functions that open compressed files and output tables
    =====================================    ==========================================================
"""
