#!/usr/bin/env python
"""This module contains functions for unescaping and parsing tokens from the
ninth (attributes) column of `GTF2`_ and `GFF3`_ files.

Important methods
-----------------
:py:func:`parse_GTF2_tokens`
    Parse `GTF2`_ column 9 tokens into a dictionary of key-value pairs

:py:func:`parse_GFF3_tokens`
    Parse `GFF3`_ column 9 tokens into a dictionary of key-value pairs

See also
--------
  - `The Sequence Ontology GFF3 specification <http://www.sequenceontology.org/gff3.shtml>`_
  - `The Brent lab GTF2.2 specification <http://mblab.wustl.edu/GTF22.html>`_
"""
import shlex
from fpkmtools.util.services.exceptions import FileFormatWarning, warn


#===============================================================================
# INDEX: helper functions for unescaping
#===============================================================================

# percent signs are escaped first when writing, so are unescaped last
_GFF3_escape_sequences = [('%', '%25'),
                          (';', '%3B'),
                          (',', '%2C'),
                          ('=', '%3D'),
                          ('&', '%26'),
                          ('\t', '%09'),
                          ('\n', '%0A'),
                          ('\r', '%0D'),
                         ]
_GFF3_escape_sequences += [(chr(X),"%%%02X" % X) for X in range(32) if X not in (9,10,13)]
_GFF3_escape_sequences.append((chr(127),"%7F"))
"""List mapping characters to their escape sequences, per the `GFF3`_ specification"""

_GTF2_escape_sequences = _GFF3_escape_sequences + [("\"","%22")]
"""List mapping characters to their escape sequences for `GTF2`_. These are undefined,
but we use `GFF3`_ characters plus double quotation marks as a convention.
"""


def unescape(inp,char_pairs):
    """Unescape reserved characters specified in the list of tuples `char_pairs`

    Parameters
    ----------
    inp : str
        Input string

    char_pairs : list
        List of tuples of (character, escape sequence for character)

    Returns
    -------
    str
        Unescaped output
    """
    for repl, char_ in reversed(char_pairs):
        inp = inp.replace(char_,repl)

    return inp

def unescape_GFF3(inp):
    """Unescape reserved characters in `GFF3`_ tokens using percentage notation.

    Parameters
    ----------
    inp : str
        Input string

    Returns
    -------
    str
        Unescaped output
    """
    return unescape(inp,_GFF3_escape_sequences)

def unescape_GTF2(inp):
    """Unescape reserved characters in `GTF2`_ tokens using percentage notation.
    `GTF2`_ does not define escaping. As a convention, we unescape the characters
    specified in the `GFF3`_ spec, as well as double quotation marks.

    Parameters
    ----------
    inp : str
        Input string

    Returns
    -------
    str
        Unescaped output
    """
    return unescape(inp,_GTF2_escape_sequences)



#===============================================================================
# INDEX: attribute token parsing
#===============================================================================

def _add_token(d,key,val,inp,format_name):
    if key in d:
        warn("Found duplicate attribute key '%s' in %s line. Catenating value with previous value for key in attr dict:\n    %s" % (key,format_name,inp),
             FileFormatWarning)
        d[key] = "%s,%s" % (d[key],val)
    else:
        d[key] = val

def parse_GFF3_tokens(inp):
    """Helper function to parse tokens in the final column of a `GFF3`_ file
    into a dictionary of attributes. All values are returned as strings,
    unescaped following the `GFF3`_ specification. Multi-valued attributes
    (e.g. `Parent=tx1,tx2`) are left as comma-separated strings.

    If duplicate keys are present, their values are catenated, separated
    by a comma.

    Examples
    --------
        >>> parse_GFF3_tokens('ID=exon01;Parent=tx01,tx02;Name=some%3Bname')
        {'ID': 'exon01', 'Parent': 'tx01,tx02', 'Name': 'some;name'}

    Parameters
    ----------
    inp : str
        Ninth column of `GFF3`_ entry

    Returns
    -------
    dict : key-value pairs

    Raises
    ------
    ValueError
        If a token is not of the form `key=value`
    """
    d = {}
    items = inp.strip("\n").strip(";").split(";")
    for item in items:
        if len(item.strip()) == 0:
            continue

        key, sep, val = item.partition("=")
        if sep == "":
            raise ValueError("Attribute '%s' is not of the form key=value" % item.strip())

        _add_token(d,unescape_GFF3(key.strip(" ")),unescape_GFF3(val.strip(" ")),inp,"GFF3")

    return d

def _split_GTF2_tokens(inp):
    lexer = shlex.shlex(inp,posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    # only double quotes delimit values. apostrophes, as in 5'UTR, are literal
    lexer.quotes = '"'
    return list(lexer)

def parse_GTF2_tokens(inp):
    """Helper function to parse tokens in the final column of a `GTF2`_ file
    into a dictionary of attributes. All attributes are returned as strings,
    and are unescaped if GFF escape sequences (e.g. *'%3B'*) are present.

    If duplicate keys are present (e.g. as in GENCODE `GTF2`_ files),
    their values are catenated, separated by a comma.

    Examples
    --------
        >>> parse_GTF2_tokens('gene_id "mygene"; transcript_id "mytranscript";')
        {'gene_id': 'mygene', 'transcript_id': 'mytranscript'}

        >>> parse_GTF2_tokens('gene_id "mygene;"; level 2')
        {'gene_id': 'mygene;', 'level': '2'}

        >>> parse_GTF2_tokens('gene_id "mygene"; tag "basic"; tag "CCDS";')
        {'gene_id': 'mygene', 'tag': 'basic,CCDS'}

        >>> parse_GTF2_tokens("gene_id mygene; note 5'UTR;")
        {'gene_id': 'mygene', 'note': "5'UTR"}

    Parameters
    ----------
    inp : str
        Ninth column of `GTF2`_ entry

    Returns
    -------
    dict : key-value pairs

    Raises
    ------
    ValueError
        If tokens cannot be paired into keys and values, or pairs are
        not separated by semicolons
    """
    d = {}
    items = _split_GTF2_tokens(inp.strip("\n"))
    if len(items) % 2 != 0:
        raise ValueError("Odd number of tokens in GTF2 attributes: %s" % inp.strip("\n"))

    for i in range(0,len(items),2):
        key = unescape_GTF2(items[i])
        val = items[i+1]
        # all but the final pair must be terminated by a semicolon
        if i + 2 < len(items) and not val.endswith(";"):
            raise ValueError("GTF2 attribute '%s' is not terminated by a semicolon" % key)

        if val.endswith(";"):
            val = val[:-1]

        _add_token(d,key,unescape_GTF2(val),inp,"GTF2")

    return d
