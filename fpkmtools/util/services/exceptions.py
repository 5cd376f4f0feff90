#!/usr/bin/env python
"""Exceptions and warnings raised by :data:`fpkmtools`, and the machinery
that decides how often each warning is shown.

Contents:

.. contents::
   :local:

Showing one warning per family
------------------------------
A large annotation file can trip the same warning thousands of times, once
per skipped feature or per duplicated attribute, each time with a different
feature name in the message. Python's `once` action does not help, because
no two messages are identical. This module therefore adds a filter action,
`"onceperfamily"`, that keys on a regular expression instead of the literal
message: a *family* is every message the expression matches, and only the
first member of each family is shown.

Families are registered with :func:`filterwarnings`, which accepts every
action :func:`warnings.filterwarnings` does, plus `"onceperfamily"`. They
take effect only for warnings issued through :func:`warn` or
:func:`warn_explicit`, which all modules of this package use in place of
their counterparts in :mod:`warnings`. :func:`reset_filters` forgets all
families, e.g. between tests.

Command-line scripts register one family per entry of
:data:`fpkmtools.util.scriptlib.argparsers.FPKM_WARNINGS`.


Exception types
---------------
|MalformedFileError|
    Raised when a file cannot be parsed as expected, and
    execution must halt

|MalformedCountLineError|
    Raised when a line of a count table cannot be parsed into an
    identifier and a non-negative integer count

|InvalidIntervalError|
    Raised when an annotated sub-interval of a feature ends before it
    starts


Warning types
-------------
|FileFormatWarning|
    Warning for slightly malformed but usable files

|DataWarning|
    Warning raised when:

      - data has unexpected attributes
      - data has nonsensical, but recoverable values for attributes
      - when values are out of the domain of a given operation,
        but skipping the operation or estimating the value is permissible

|UndefinedFpkmWarning|
    Raised when no reads were counted at all, so that every FPKM value
    is undefined and reported as `nan`


See also
--------
:mod:`warnings`
    Warnings module
"""
import re
import warnings
import inspect
import linecache
import textwrap
from fpkmtools.util.io.filters import colored

_wrapper = textwrap.TextWrapper(break_long_words=False,width=77)



#===============================================================================
# INDEX: Warning and exception classes
#===============================================================================

class MalformedFileError(Exception):
    """Exception class for when files cannot be parsed as they should be
    """

    def __init__(self,filename,message,line_num=None):
        """Create a |MalformedFileError|

        Parameters
        ----------
        filename : str
            Name of file causing problem

        message : str
            Message explaining how the file is malformed.

        line_num : int or None, optional
            Number of line causing problems
        """
        Exception.__init__(self,filename,message,line_num)
        self.filename = filename
        self.msg      = message
        self.line_num = line_num

    def __str__(self):
        if self.line_num is None:
            return "Error reading file '%s': %s" % (self.filename, self.msg)
        else:
            return "Error reading file '%s' at line %s: %s" % (self.filename, self.line_num, self.msg)


class MalformedCountLineError(MalformedFileError):
    """Exception class for lines of a count table that cannot be parsed
    into a feature identifier and a non-negative integer count
    """

    def __init__(self,filename,message,line_num=None,line=None):
        """Create a |MalformedCountLineError|

        Parameters
        ----------
        filename : str
            Name of count file

        message : str
            Message explaining how the line is malformed

        line_num : int or None, optional
            Number of offending line

        line : str or None, optional
            Text of offending line
        """
        MalformedFileError.__init__(self,filename,message,line_num=line_num)
        self.line = line

    def __str__(self):
        stmp = MalformedFileError.__str__(self)
        if self.line is not None:
            stmp += "\n    %r" % self.line.rstrip("\n")
        return stmp


class InvalidIntervalError(ValueError):
    """Exception class for annotated sub-intervals whose end coordinate
    precedes their start coordinate"""

    def __init__(self,feature_id,interval):
        """Create an |InvalidIntervalError|

        Parameters
        ----------
        feature_id : str
            Identifier of feature to which the interval belongs

        interval : |Interval|
            Offending interval
        """
        ValueError.__init__(self,feature_id,interval)
        self.feature_id = feature_id
        self.interval   = interval

    def __str__(self):
        return "Feature '%s' has an interval that ends before it starts: %s-%s" % (self.feature_id,
                                                                                   self.interval.start,
                                                                                   self.interval.end)


class FileFormatWarning(Warning):
    """Warning for slightly malformed but usable files"""
    pass


class DataWarning(Warning):
    """Warning for unexpected attributes of data.
    Raised when:

      - data has unexpected attributes
      - data has nonsensical, but recoverable values
      - values are out of the domain of a given operation, but execution
        can continue if the value is estimated or the operation skipped
    """


class UndefinedFpkmWarning(DataWarning):
    """Warning raised when the total number of mapped reads is zero,
    making every FPKM value undefined"""



#===============================================================================
# INDEX: families of warnings shown once
#===============================================================================

fpkm_once_registry = {}
"""Families for which a warning has already been shown, keyed by
`(pattern, category, module pattern, line number)`"""

fpkm_filters       = []
"""`onceperfamily` filters, as tuples of `(action, message pattern,
category, module pattern, line number)`"""

def filterwarnings(action,message="",category=Warning,module="",lineno=0,append=0):
    """Register a warnings filter

    `"onceperfamily"` filters are kept in :data:`fpkm_filters`. Filters with
    any other action are handed to :func:`warnings.filterwarnings` unchanged.

    Parameters
    ----------
    action : str
        `"onceperfamily"`, or any action understood by :mod:`warnings`
        (`"error"`, `"ignore"`, `"always"`, `"default"`, `"module"`, `"once"`)

    message : str, optional
        Regular expression matched, case-insensitively, against the start of
        each message. For `"onceperfamily"`, every message it matches belongs
        to one family. (Default: `""`, every message)

    category : class, optional
        :class:`Warning` subclass to which the filter applies, including its
        own subclasses (Default: :class:`Warning`)

    module : str, optional
        Regular expression matched against the module issuing the warning
        (Default: `""`, every module)

    lineno : int, optional
        Line number issuing the warning, or 0 for any line (Default: 0)

    append : int, optional
        If 1, the filter is checked after existing filters. If 0 (default),
        before them.
    """
    tup = (action,re.compile(message,re.I),category,re.compile(module),lineno)
    if action == "onceperfamily":
        if tup in fpkm_filters:
            return
        elif append == 1:
            fpkm_filters.append(tup)
        else:
            fpkm_filters.insert(0,tup)
    else:
        warnings.filterwarnings(action,message=message,
                                category=category,module=module,
                                lineno=lineno,append=append)

def reset_filters():
    """Remove all `onceperfamily` filters and forget which families have been shown"""
    del fpkm_filters[:]
    fpkm_once_registry.clear()

def warn(message,category=None,stacklevel=1):
    """Issue a warning, subject to `onceperfamily` filters

    Parameters
    ----------
    message : str
        Text of warning

    category : class, optional
        :class:`Warning` subclass (Default: :class:`UserWarning`)

    stacklevel : int, optional
        Which caller the warning is attributed to. 1, the default, is the
        function calling :func:`warn`.
    """
    if category is None:
        category = UserWarning

    _, filename, lineno, _, _, _ = inspect.stack()[stacklevel]
    warn_explicit(message,category,filename,lineno,module=filename)

def warn_explicit(message,category,filename,lineno,module=None,registry=None,module_globals=None):
    """Issue a warning attributed to an explicit source location, subject
    to `onceperfamily` filters

    If the warning belongs to a family already shown, nothing happens.
    Otherwise, the family is recorded, and the warning passes on to
    :func:`warnings.warn_explicit`, where the ordinary filters apply.

    Parameters
    ----------
    message : str
        Text of warning

    category : class
        :class:`Warning` subclass

    filename : str
        File to which the warning is attributed

    lineno : int
        Line to which the warning is attributed

    module : str, optional
        Module name. If `None`, the name of the calling module

    registry : dict, optional
        Passed to :func:`warnings.warn_explicit`

    module_globals : dict, optional
        Passed to :func:`warnings.warn_explicit`
    """
    if module is None:
        frame = inspect.currentframe()
        if frame is None:
            module = __name__
        else:
            try:
                module = inspect.getmodule(frame.f_back.f_code).__name__
            finally:
                del frame

    for _, pat, filter_category, mod, filter_line in fpkm_filters:
        if pat.match(message) and issubclass(category,filter_category) and\
           (module is None or mod.match(module)) and\
           (filter_line == 0 or filter_line == lineno):

            tup = (pat.pattern,filter_category,mod,filter_line)
            if tup in fpkm_once_registry:
                return
            else:
                fpkm_once_registry[tup] = 1
                break

    warnings.warn_explicit(message,category,filename,lineno,
                           module=module,registry=registry,
                           module_globals=module_globals)


def formatwarning(message,category,filename,lineno,file=None,line=None):
    """Format a warning for the terminal. Installed as :func:`warnings.formatwarning`
    when this module is imported.

    The warning category and message are set off by horizontal rules, followed
    by the location that issued the warning and up to five lines of source
    around it. Output is colored if :obj:`sys.stderr` supports it.

    Parameters
    ----------
    message : str or Warning
        Warning message

    category : class
        :class:`Warning` subclass

    filename : str
        File to which the warning is attributed

    lineno : int
        Line to which the warning is attributed

    file : file-like, optional
        Ignored

    line : str, optional
        Source text to show. If `None`, lines around `lineno` are read
        from `filename`

    Returns
    -------
    str
    """
    sep     = colored("-"*75,color="cyan")
    message = str(message)
    if not "\n" in message:
        message = _wrapper.fill(message)

    message = colored(message,color="white",attrs=["bold"])
    name    = colored(category.__name__,color="cyan",attrs=["bold"])

    if line is None:
        numwidth = len(str(lineno+3))
        fmtstr   = "{0: >%ss} {1}" % (numwidth)
        lines    = []
        for x in range(max(0,lineno-2),lineno+3):
            tmpline = linecache.getline(filename,x).strip("\n")
            if tmpline:
                attrs = ["bold"] if x == lineno else []
                lines.append(fmtstr.format(colored(x,color="green",attrs=attrs),
                                           colored(tmpline,attrs=attrs)
                                           ))
        line = "\n".join(lines)

    filename = "in %s, line %s:" % (colored(filename,color="cyan"),lineno)

    ltmp = [sep,name,message,filename,"",line,"",sep,""]

    return "\n".join(ltmp)


warnings.formatwarning = formatwarning
