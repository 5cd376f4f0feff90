#!/usr/bin/env python
"""Functions used by multiple readers in this subpackage

Functions
---------
:func:`open_annotation_streams`
    Open one or more annotation files, or pass through open streams,
    and chain them into a single iterator over lines

:func:`decode_line`
    Decode a line read from a file opened in binary mode
"""
import itertools
import pysam
from fpkmtools.util.io.openers import multiopen, opener

ENCODING = "utf-8"
"""Text encoding of annotation files and count tables"""


def _tabix_iteradaptor(stream):
    """Open `stream` as an iterator over a `tabix`_ file, returning raw strings from tabix data.

    Parameters
    ----------
    stream : open file-like, or :class:`pysam.libctabix.tabix_file_iterator`

    Returns
    -------
    generator
        Generator of tab-delimited string records in `tabix`_ file
    """
    if not isinstance(stream,(pysam.tabix_generic_iterator,
                              pysam.tabix_file_iterator)
                      ):
        stream = pysam.tabix_file_iterator(stream,pysam.asTuple())

    return (str(X) for X in stream)

def open_annotation_streams(streams,tabix=False):
    """Chain one or more annotation files into a single iterator over lines

    Parameters
    ----------
    streams : str, file-like, or list of either
        Filenames or open filehandles. Filenames ending in `.gz` or `.bz2`
        are decompressed on the fly.

    tabix : bool, optional
        `streams` point to `tabix`_-compressed files, or are open
        :class:`pysam.tabix_file_iterator` objects (Default: `False`)

    Returns
    -------
    iterator
        Lines. Lines from files opened here are :class:`bytes`, to be
        decoded one at a time by :func:`decode_line`, so that decoding
        errors can be traced to a line number.
    """
    if tabix == True:
        streams = multiopen(streams,fn=open,kwargs=dict(mode="rb"))
        return itertools.chain.from_iterable((_tabix_iteradaptor(X) for X in streams))

    streams = multiopen(streams,fn=opener,kwargs=dict(mode="rb"))
    return itertools.chain.from_iterable(streams)

def decode_line(line):
    """Decode `line` as :data:`ENCODING` if it is :class:`bytes`

    Parameters
    ----------
    line : bytes or str
        Line read from a file or stream

    Returns
    -------
    str

    Raises
    ------
    UnicodeDecodeError
        If `line` is not valid text
    """
    if isinstance(line,bytes):
        return line.decode(ENCODING)

    return line
