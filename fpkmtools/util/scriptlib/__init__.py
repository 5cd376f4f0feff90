#!/usr/bin/env python
"""Library components for writing command-line scripts

Package overview
================

    =================================================    =========================
    **Package module**                                   **Contents**
    -------------------------------------------------    -------------------------
    :py:mod:`~fpkmtools.util.scriptlib.argparsers`        :class:`~argparse.ArgumentParser` factories for options shared by scripts
    :py:mod:`~fpkmtools.util.scriptlib.help_formatters`   Utilities to reformat module docstrings for use as command-line help text
    =================================================    =========================
"""
