#!/usr/bin/env python
"""Utility classes, analagous to Unix-style pipes, for filtering or processing
text streams such as annotation files, count tables, or the terminal.

Readers:

    :class:`AbstractReader`
        Base class for all Readers. To create a Reader, subclass this and
        override the :py:meth:`~AbstractReader.filter` method.

    :class:`~fpkmtools.readers.counts.CountReader` and the annotation readers in
    :mod:`fpkmtools.readers.gff` are built on it.

Writers:

    :class:`AbstractWriter`
        Base class for writers. Subclasses define
        :py:meth:`~AbstractWriter.filter`, which transforms each unit of
        data before it reaches the underlying stream.

    :class:`ColorWriter`
        Colors text only when the underlying stream is a terminal.

    :class:`NameDateWriter`
        Writes each message on its own line, after the program name and a
        timestamp. Command-line scripts use it as their logger.

And one convenience function:

    :func:`colored`
        Color text with :func:`termcolor.colored`, but only if
        :obj:`sys.stderr` is a terminal


Examples
--------
Create a reader that upper-cases each line of a file::

    >>> class UpperReader(AbstractReader):
    >>>     def filter(self,line):
    >>>         return line.upper()
    >>>
    >>> for line in UpperReader(open("counts.txt")):
    >>>     pass # do something with each line

Log progress messages to stderr, prepending name and date::

    >>> printer = NameDateWriter("fpkm")
    >>> printer.write("Reading annotations ...")
"""
import sys
import datetime
from abc import abstractmethod
from io import IOBase

import termcolor

if hasattr(sys.stderr,"isatty") and sys.stderr.isatty():
    colored = termcolor.colored
else:
    colored = lambda x, **kwargs: str(x)



#===============================================================================
# INDEX: readers
#===============================================================================

class AbstractReader(IOBase):
    """Abstract base class for stream-reading filters. These may be wrapped around
    open-file like objects, for example, to remove blank lines from text,
    or to convert lines of input into records.

    Create a filter by subclassing this, and defining `self.filter()`

    See also
    --------
    fpkmtools.readers.counts.CountReader
        A reader that parses lines of a count table into records
    """

    def __init__(self,stream):
        """Create an |AbstractReader|

        Parameters
        ----------
        stream : file-like
            Input data
        """
        self.stream=stream

    def isatty(self):
        return hasattr(self.stream,"isatty") and self.stream.isatty()

    def writable(self):
        return False

    def seekable(self):
        return False

    def readable(self):
        return True

    def fileno(self):
        raise IOError()

    def __next__(self):
        return self.filter(next(self.stream))

    def __iter__(self):
        return self

    def readlines(self):
        """Similar to :py:func:`file.readlines`.

        Returns
        -------
        list
            processed data
        """
        return [X for X in self]

    def close(self):
        """Close stream"""
        try:
            self.stream.close()
        except AttributeError:
            pass

    @abstractmethod
    def filter(self,data):
        """Method that filters or processes each unit of data.
        Override this in subclasses

        Parameters
        ----------
        data : unit of data
            Whatever data to filter/format. Often string, but not necessary

        Returns
        -------
        object
            formatted data. Often string, but not necessarily
        """
        pass


#===============================================================================
# INDEX: writers
#===============================================================================

class AbstractWriter(IOBase):
    """Base class for writers that transform each unit of data before
    passing it to an underlying stream. Subclasses define :meth:`filter`.

    Parameters
    ----------
    stream : file-like, open for writing
        Destination of transformed data
    """
    def __init__(self,stream):
        self.stream = stream

    def isatty(self):
        return hasattr(self.stream,"isatty") and self.stream.isatty()

    def writable(self):
        return True

    def seekable(self):
        return False

    def readable(self):
        return False

    def fileno(self):
        raise IOError()

    def write(self,data):
        """Pass `data` through :meth:`filter`, and write the result to `self.stream`

        Parameters
        ----------
        data : object
            Data to write, usually a `str`
        """
        self.stream.write(self.filter(data))

    def flush(self):
        """Flush `self.stream`"""
        self.stream.flush()

    def close(self):
        """Flush and close `self.stream`, if it can be"""
        try:
            self.flush()
            self.stream.close()
        except (AttributeError, ValueError):
            pass

    @abstractmethod
    def filter(self,data):
        """Transform one unit of data for output

        Parameters
        ----------
        data : object
            Data passed to :meth:`write`

        Returns
        -------
        object
            Data to write to `self.stream`
        """
        pass


class ColorWriter(AbstractWriter):
    """Writer whose :meth:`color` adds ANSI colors only when `stream` is a terminal

    Parameters
    ----------
    stream : file-like
        Stream to write to (Default: :obj:`sys.stderr`)
    """
    def __init__(self,stream=None):
        stream = sys.stderr if stream is None else stream
        AbstractWriter.__init__(self,stream=stream)
        if self.isatty():
            self.color = termcolor.colored

    def color(self,text,**kwargs):
        """Return `text`, colored by :func:`termcolor.colored` with `kwargs`
        if `stream` is a terminal, and unchanged otherwise

        Returns
        -------
        str
        """
        return text

    def filter(self,data):
        return data


class NameDateWriter(ColorWriter):
    """Log writer used by command-line scripts. Each message is written on
    its own line, after the program name and a timestamp::

        fpkm [2024-05-01 12:00:00]: Reading counts from 'counts.txt' ...
    """

    def __init__(self,name,line_delimiter="\n",stream=None):
        """
        Parameters
        ----------
        name : str
            Program name shown before each message

        stream : file-like
            Stream to write to (Default: :obj:`sys.stderr`)

        line_delimiter : str, optional
            Ends each message. Copies at either end of a message are
            removed first. (Default `'\n'`)
        """
        ColorWriter.__init__(self,stream=stream)
        self.name = name
        self.delimiter = line_delimiter
        self.fmtstr = "%s %s%s %s%s: {2}%s" % (self.color(name,color="blue",attrs=["bold"]),
                                               self.color("[",color="blue",attrs=["bold"]),
                                               self.color("{0}",color="green"),
                                               self.color("{1}",color="green",attrs=["bold"]),
                                               self.color("]",color="blue",attrs=["bold"]),
                                               self.delimiter
                                              )

    def filter(self,line):
        """Add the program name and the current date and time to `line`

        Parameters
        ----------
        line : str
            Message

        Returns
        -------
        str
        """
        now = datetime.datetime.now()
        d   = now.strftime("%Y-%m-%d")
        t   = now.strftime("%H:%M:%S")
        return self.fmtstr.format(d,t,line.strip(self.delimiter))

    def __call__(self,line):
        self.write(line)
