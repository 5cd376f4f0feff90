#!/usr/bin/env python
"""Exception and warning classes used throughout :data:`fpkmtools`

See :py:mod:`~fpkmtools.util.services.exceptions`
"""
