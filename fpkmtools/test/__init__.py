#!/usr/bin/env python
"""Unit and functional tests for :data:`fpkmtools`

Tests are run with `pytest`_, and are marked by kind::

    $ pytest -m unit fpkmtools
    $ pytest -m functional fpkmtools

Test data is stored in `fpkmtools/test/data`, and catalogued in
:mod:`fpkmtools.test.ref_files`.
"""
