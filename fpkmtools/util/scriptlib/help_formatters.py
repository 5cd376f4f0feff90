#!/usr/bin/env python
"""Post-processors that reformat module docstrings for use as command-line
help, by removing `reStructuredText`_ markup and `numpydoc`_ sections.

See also
--------
`reStructuredText <http://docutils.sourceforge.net/rst.html>`_
    Markup language used throughout the docstrings in this package

`numpydoc <https://numpydoc.readthedocs.io/en/latest/format.html>`_
    Docstring standard used throughout this package
"""
import re

pyrst_pattern = re.compile(r"(?P<spacing>^|\s+)(?::(?P<domain>[^:`<>]+))?:(?P<role>[^:`]*):`(?P<argument>[^`<>]+)(?: +<(?P<pointer>[^`]+)>)?`")
"""RegEx pattern that detects `reStructuredText`_ roles of the form
``:domain:role:`argument``` or ``:role:`argument```"""

subst_pattern = re.compile(r"\|([^|]*)\|")
"""RegEx pattern that matches `reStructuredText`_ substitutions, ``|substitution|``"""

link_pattern = re.compile(r"`([^`<>]+)( <[^`]+>)?`_")
"""RegEx pattern that matches `reStructuredText`_ link references of forms ```Linkname`_``
and ```Link text <url>`_``"""

_numpydoc_sections = ["Parameters",
                      "Returns",
                      "Yields",
                      "Raises",
                      "Attributes",
                      "See also",
                      "See Also",
                      ]

_separator = "\n" + (78*"-") + "\n"


def shorten_help(inp):
    """Strip `reStructuredText`_ markup from a docstring, and truncate it
    at its first `numpydoc`_ section heading

    Parameters
    ----------
    inp : str
        Docstring to format

    Returns
    -------
    str
        Cleaned help text
    """
    inp = pyrst_pattern.sub(r"\g<spacing>\g<argument>",inp)
    inp = subst_pattern.sub(r"\g<1>",inp)
    inp = link_pattern.sub(r"\g<1>",inp)

    indices = [inp.find("\n%s\n" % X) for X in _numpydoc_sections]
    indices = [X for X in indices if X != -1]
    end = min(indices) if len(indices) > 0 else len(inp)

    return inp[:end].strip() + "\n"

def format_module_docstring(inp):
    """Format a module docstring for use as the description of a command-line
    script, surrounding the cleaned text with separators

    Parameters
    ----------
    inp : str
        Module docstring to format

    Returns
    -------
    str
        Formatted docstring
    """
    return _separator + "\n" + shorten_help(inp) + "\n" + _separator
