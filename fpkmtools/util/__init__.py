#!/usr/bin/env python
"""Miscellaneous, general utilities useful for scripting

Package overview
================

    ===================================   ====================================================================
    **Subpackages**                       **Contents**
    -----------------------------------   --------------------------------------------------------------------
    :py:obj:`~fpkmtools.util.io`           Wrappers for file I/O, stream filters, and logging to stderr
    :py:obj:`~fpkmtools.util.scriptlib`    Tools for writing command-line scripts
    :py:obj:`~fpkmtools.util.services`     Exception and warning classes, and warning filters
    ===================================   ====================================================================
"""
