#!/usr/bin/env python
"""Various wrappers and utilities for opening, closing, and writing files.

Important methods
-----------------
:py:func:`opener`
    Guesses whether a file is bzipped, gzipped, or uncompressed based upon
    file extension, opens it appropriately in text mode, and returns a
    file-like object.

:py:func:`multiopen`
    Normalize a filename, open filehandle, or list of either into a sequence
    of open file-like objects

:py:func:`read_fpkm_table`
    Open a table written by the :mod:`~fpkmtools.bin.fpkm` script into a
    :class:`pandas.DataFrame`.

:py:class:`NullWriter`
    A writer that discards its input
"""
import os
import re
from collections.abc import Iterable

import pandas as pd

from fpkmtools.util.io.filters import AbstractWriter


class NullWriter(AbstractWriter):
    """Discards everything written to it. Used as the default `printer`
    of functions that report progress, so that they may log unconditionally.
    No file is opened.
    """

    def __init__(self):
        AbstractWriter.__init__(self,stream=None)

    def write(self,data):
        pass

    def flush(self):
        pass

    def filter(self,data):
        return data

    def __repr__(self):
        return "NullWriter()"

    def __str__(self):
        return self.__repr__()


def multiopen(inp,fn=None,args=None,kwargs=None):
    """Normalize filename/file-like/list of filename or file-like to a list of appropriate objects

    If not list-like, `inp` is converted to a list. Then, for each element `x` in
    `inp`, if `x` is file-like, it is yielded. Otherwise, `fn` is applied to `x`,
    and the result yielded.

    Parameters
    ----------
    inp : str, file-like, or list-like of either of those
        Input describing file(s) to open

    fn : callable, optional
        Callable to apply to input to open it

    args : tuple, optional
        Tuple of positional arguments to pass to `fn`

    kwargs : keyword arguments
        Arguments to pass to `fn`

    Yields
    ------
    Object
        Result of applying `fn` to filename(s) in `inp`
    """
    if fn is None:
        fn = lambda x, *y, **z: x

    if args is None:
        args = ()

    if kwargs is None:
        kwargs = {}

    if isinstance(inp,str) or not isinstance(inp,Iterable) or hasattr(inp,"read"):
        out = [inp]
    else:
        out = inp

    for obj in out:
        if isinstance(obj,str):
            yield fn(obj,*args,**kwargs)
        else:
            yield obj


def opener(filename,mode="r",**kwargs):
    """Open a file, detecting whether it is compressed or not, based upon
    its file extension. Extensions are tested in the following order:

       +----------------+------------------+
       | File ends with | Presumed to be   |
       +================+==================+
       | gz             |    gzipped       |
       +----------------+------------------+
       | bz2            |    bzipped       |
       +----------------+------------------+
       | anything else  |    uncompressed  |
       +----------------+------------------+

    Compressed files are opened in text mode unless `mode` contains `'b'`,
    so that readers always receive lines of :class:`str`.

    Parameters
    ----------
    filename : str
        Name of file to open

    mode : str
        Mode in which to open file (e.g. "r", "w", with or without "b")

    **kwargs
        Other parameters to pass to appropriate file opener
    """
    if filename.endswith(".gz"):
        import gzip
        call_func = gzip.open
        if "b" not in mode and "t" not in mode:
            mode += "t"
    elif filename.endswith(".bz2"):
        import bz2
        call_func = bz2.open
        if "b" not in mode and "t" not in mode:
            mode += "t"
    else:
        call_func = open

    return call_func(filename,mode,**kwargs)


def read_fpkm_table(filename,**kwargs):
    """Open a table written by :mod:`fpkmtools.bin.fpkm`, passing default
    arguments to :func:`pandas.read_csv`:

        ==========   ===========================
        Key          Value
        ----------   ---------------------------
        sep          `"\\t"`
        header       `None`
        names        `["feature_id", "fpkm"]`
        dtype        `{"feature_id" : str}`
        ==========   ===========================

    Parameters
    ----------
    filename : str or file-like
        Name of file. Can be gzipped or bzipped.

    kwargs : keyword arguments
        Other keyword arguments to pass to :func:`pandas.read_csv`.
        Will override defaults.

    Returns
    -------
    :class:`pandas.DataFrame`
        Table of results
    """
    args = { "sep"    : "\t",
             "header" : None,
             "names"  : ["feature_id","fpkm"],
             "dtype"  : { "feature_id" : str },
             "keep_default_na" : False,
             "na_values" : { "fpkm" : ["nan"] },
           }
    args.update(kwargs)
    return pd.read_csv(filename,**args)


def get_short_name(inpt,separator=os.path.sep,terminator=""):
    """Gives the basename of a filename or module name passed as a string.
    If the string doesn't match the pattern specified by the separator
    and terminator, it is returned unchanged.

    Examples
    --------
    >>> get_short_name("fpkm")
    'fpkm'

    >>> get_short_name("fpkm.py",terminator=".py")
    'fpkm'

    >>> get_short_name("/usr/local/bin/fpkm.py",terminator=".py")
    'fpkm'

    >>> get_short_name("fpkmtools.bin.fpkm",separator=r"\\.")
    'fpkm'

    Parameters
    ----------
    inpt : str
        Input

    separator : str
        Path separator, as a regex fragment (default: :obj:`os.path.sep`)

    terminator : str
        File terminator (default: "")

    Returns
    -------
    str
    """
    tlen = len(terminator)
    if tlen > 0 and inpt.endswith(terminator):
        inpt = inpt[:-tlen]

    pat = r"([^%s]+)$" % separator
    match = re.search(pat,inpt)
    if match is None:
        return inpt

    return match.group(1)
