#!/usr/bin/env python
"""Reader for tables of raw read counts per feature, such as those produced
by `htseq-count`_.

Count tables are tab-delimited, headerless, and have two columns: a feature
identifier, and a non-negative integer count::

    AAAS	645
    AC009952.3	1
    RPL37AP1	5714
    __no_feature	136550
    __ambiguous	3224

`htseq-count`_ appends summary counters, whose identifiers begin with `'__'`,
after the per-feature counts. These are not features, and reading stops at
the first of them.

Important classes & functions
-----------------------------
|CountReader|
    Iterate over `(feature identifier, count)` pairs in a count table

:func:`read_counts`
    Read a whole count table into a dictionary, rejecting duplicate
    identifiers
"""
import re
from collections import OrderedDict
from fpkmtools.util.io.filters import AbstractReader
from fpkmtools.util.io.openers import opener
from fpkmtools.readers.common import decode_line
from fpkmtools.util.services.exceptions import MalformedCountLineError

SUMMARY_PREFIX = "__"
"""Prefix of the summary counters that `htseq-count`_ writes after feature counts"""

_integer_pat = re.compile(r"^-?[0-9]+$")


class CountReader(AbstractReader):
    """Parse a count table into `(feature identifier, count)` tuples

    Blank lines are skipped. Iteration stops at the first identifier
    beginning with :data:`SUMMARY_PREFIX`.

    Attributes
    ----------
    filename : str
        Name of the input, used in error messages

    counter : int
        Number of lines read so far
    """

    def __init__(self,stream):
        """Create a |CountReader|

        Parameters
        ----------
        stream : str or file-like
            Filename or open filehandle of count table. Filenames ending
            in `.gz` or `.bz2` are decompressed on the fly. Files are read
            as UTF-8 text.
        """
        if isinstance(stream,str):
            self.filename = stream
            stream = opener(stream,"rb")
        else:
            self.filename = getattr(stream,"name","<stream>")

        self.counter = 0
        self._finished = False
        AbstractReader.__init__(self,stream)

    def _next_line(self):
        try:
            line = next(self.stream)
        except UnicodeDecodeError as e:
            raise MalformedCountLineError(self.filename,"Could not decode text: %s" % e)

        self.counter += 1
        try:
            return decode_line(line)
        except UnicodeDecodeError as e:
            self._fail("Line is not valid %s text: %s" % (e.encoding,e.reason),
                       line.decode(e.encoding,"backslashreplace"))

    def __next__(self):
        while self._finished == False:
            line = self._next_line()
            if len(line.strip()) > 0:
                return self.filter(line)

        raise StopIteration()

    def _fail(self,message,line):
        raise MalformedCountLineError(self.filename,message,line_num=self.counter,line=line)

    def filter(self,line):
        """Parse a line of a count table

        Parameters
        ----------
        line : str
            Non-blank line of text

        Returns
        -------
        tuple
            `(feature identifier, count)`

        Raises
        ------
        MalformedCountLineError
            If the line does not have exactly two columns, or the count
            is not a non-negative integer
        """
        items = line.rstrip("\r\n").split("\t")
        if len(items) != 2:
            self._fail("Expected 2 tab-delimited columns, found %s" % len(items),line)

        feature_id, count_str = items
        if feature_id.startswith(SUMMARY_PREFIX):
            self._finished = True
            raise StopIteration()

        if len(feature_id) == 0:
            self._fail("Feature identifier is empty",line)

        if _integer_pat.match(count_str) is None:
            self._fail("Count '%s' is not an integer" % count_str,line)

        count = int(count_str)
        if count < 0:
            self._fail("Count '%s' is negative" % count_str,line)

        return feature_id, count


def read_counts(stream):
    """Read a count table into a dictionary

    Parameters
    ----------
    stream : str or file-like
        Filename or open filehandle of count table

    Returns
    -------
    :class:`collections.OrderedDict`
        Feature identifiers mapped to integer counts, in file order

    Raises
    ------
    MalformedCountLineError
        If any line is malformed, or an identifier appears more than once
    """
    reader = CountReader(stream)
    counts = OrderedDict()
    for feature_id, count in reader:
        if feature_id in counts:
            raise MalformedCountLineError(reader.filename,
                                          "Duplicate feature identifier '%s'" % feature_id,
                                          line_num=reader.counter)
        counts[feature_id] = count

    return counts
