#!/usr/bin/env python
"""Readers for GFF file subtypes (e.g. `GTF2`_ and `GFF3`_).

|GTF2_Reader| and |GFF3_Reader| read `GTF2`_/`GFF3`_ files line-by-line, and
yield an |AnnotationRecord| for each feature line. These records represent
things like individual exons, CDS fragments, or whole genes. Coordinates
are left exactly as in the file: 1-based, and end-included.

Both readers:

  - collect metadata from `##` header and directive lines into ``metadata``,
    and `##sequence-region` directives into ``sequence_regions``

  - stop at a `##FASTA` directive, after which a `GFF3`_ holds only sequence

  - skip comments, `###` forward-reference directives, and blank lines

  - raise |MalformedFileError| for lines that cannot be decoded as UTF-8
    or parsed, naming the offending line

  - accept filenames (optionally gzipped or bzipped), open filehandles,
    or `tabix`_-compressed files if ``tabix=True``


Examples
--------
Count exons in a `GTF2`_ file::

    >>> reader = GTF2_Reader("annotations.gtf")
    >>> len([X for X in reader if X.feature_type == "exon"])
    1342


See Also
--------
`GFF3 specification <http://song.sourceforge.net/gff3.shtml>`_
    GFF3 specification by the Sequence Ontology consortium

`GTF2.2 specification <http://mblab.wustl.edu/GTF22.html>`_
    Hosted by the Brent lab
"""
from abc import abstractmethod
from fpkmtools.util.io.filters import AbstractReader
from fpkmtools.util.services.exceptions import MalformedFileError
from fpkmtools.genomics.features import AnnotationRecord
from fpkmtools.readers.common import open_annotation_streams, decode_line
from fpkmtools.readers.gff_tokens import parse_GFF3_tokens, parse_GTF2_tokens


def _get_stream_name(streams):
    if isinstance(streams,str):
        return streams
    elif hasattr(streams,"read") or hasattr(streams,"__next__"):
        return getattr(streams,"name","<stream>")

    return ", ".join(_get_stream_name(X) for X in streams)


class AbstractGFF_Reader(AbstractReader):
    """Abstract base class for GFF readers.

    Parses GFF streams line by line into |AnnotationRecord|

    Attributes
    ----------
    metadata : dict
        Dictionary of metadata found in file headers

    sequence_regions : dict
        Dictionary mapping sequence names to `(start, end)` tuples
        of strings, from `##sequence-region` directives

    counter : int
        Cumulative line number over all streams
    """

    def __init__(self,streams,tabix=False):
        """Create an |AbstractGFF_Reader|

        Parameters
        ----------
        streams : str, file-like, or list of either
            Filename(s) or open filehandle(s) pointing to GFF information

        tabix : boolean, optional
            `streams` are `tabix`_-compressed (Default: `False`)
        """
        self.filename = _get_stream_name(streams)
        self.metadata = {}
        self.sequence_regions = {}
        self.counter = 0
        self._finished = False
        AbstractReader.__init__(self,open_annotation_streams(streams,tabix=tabix))

    def _next_line(self):
        try:
            line = next(self.stream)
        except UnicodeDecodeError as e:
            raise MalformedFileError(self.filename,"Could not decode text: %s" % e)

        self.counter += 1
        try:
            return decode_line(line)
        except UnicodeDecodeError as e:
            raise MalformedFileError(self.filename,
                                     "Line is not valid %s text: %s" % (e.encoding,e.reason),
                                     line_num=self.counter)

    def __next__(self):
        while self._finished == False:
            line = self._next_line()
            record = self.filter(line)
            if record is not None:
                return record

        raise StopIteration()

    def _parse_metatokens(self,inp):
        """Parses metadata embedded in a GFF stream, and stores
        these in appropriate attributes.

        Parameters
        ----------
        inp : str
            line of GFF input, minus leading `'##'`
        """
        items = inp.rstrip().split()
        if len(items) > 0:
            key = items[0]
            if key == "FASTA":
                self._finished = True
            elif key == "sequence-region":
                try:
                    self.sequence_regions[items[1]] = (items[2],items[3])
                except IndexError:
                    self.sequence_regions[items[1]] = tuple(items[2:])
            elif key in self.metadata:
                self.metadata[key] += ";" + " ".join(items[1:])
            else:
                self.metadata[key] = " ".join(items[1:])

    @abstractmethod
    def _parse_tokens(self,attr_string):
        """Placeholder function to parse column 9, which is formatted
        differently in different GFF subtypes. Implement this
        in subclasses

        Parameters
        ----------
        attr_string : str
            Ninth column of GFF

        Returns
        -------
        dict
            Dictionary of parsed tokens from ninth GFF column
        """
        pass

    def _parse_genomic_feature(self,line):
        """Parse a GFF feature line into an |AnnotationRecord|

        Parameters
        ----------
        line : str
            Feature line of a GFF formatted file

        Returns
        -------
        |AnnotationRecord|

        Raises
        ------
        MalformedFileError
            If the line does not have 8 or 9 columns, has non-integer
            coordinates, or has unparseable attributes
        """
        items = line.rstrip("\r\n").split("\t")
        if len(items) not in (8,9):
            raise MalformedFileError(self.filename,
                                     "Expected 9 tab-delimited columns, found %s: %s" % (len(items),line.rstrip()),
                                     line_num=self.counter)
        try:
            start = int(items[3])
            end   = int(items[4])
        except ValueError:
            raise MalformedFileError(self.filename,
                                     "Start and end coordinates must be integers: '%s', '%s'" % (items[3],items[4]),
                                     line_num=self.counter)

        attr_string = items[8].strip() if len(items) == 9 else ""
        if attr_string in ("","."):
            attributes = {}
        else:
            try:
                attributes = self._parse_tokens(attr_string)
            except ValueError as e:
                raise MalformedFileError(self.filename,
                                         "Could not parse attributes: %s" % e,
                                         line_num=self.counter)

        return AnnotationRecord(sequence_name = items[0],
                                source        = items[1],
                                feature_type  = items[2],
                                start         = start,
                                end           = end,
                                strand        = items[6],
                                attributes    = attributes)

    def filter(self,line):
        """Parses lines of the GFF stream into |AnnotationRecord|
        When metadata is found, delegates processing to :meth:`_parse_metatokens`.

        Parameters
        ----------
        line : str
            Next line from GFF stream

        Returns
        -------
        |AnnotationRecord| or None
            `None` if `line` is not a feature line
        """
        if len(line.strip()) == 0 or line[0:3] == "###":
            return None
        elif line[0:2] == "##":
            self._parse_metatokens(line[2:])
            return None
        elif line[0:1] == "#":
            return None

        return self._parse_genomic_feature(line)


class GFF3_Reader(AbstractGFF_Reader):
    """Parse each feature line of a `GFF3`_ into an |AnnotationRecord|.

    `GFF3`_ attributes (from column 9) are stored in the ``attributes``
    dictionary of each record as unescaped strings. Multi-valued attributes
    such as `Parent` are kept as comma-separated strings.

    Attributes
    ----------
    metadata : dict
        Dictionary of metadata found in file headers
    """

    def _parse_tokens(self,inp):
        return parse_GFF3_tokens(inp)


class GTF2_Reader(AbstractGFF_Reader):
    """Parse each feature line of a `GTF2`_ into an |AnnotationRecord|.

    `GTF2`_ attributes (from column 9) are stored in the ``attributes``
    dictionary of each record, with quotation marks and trailing
    semicolons removed.

    Attributes
    ----------
    metadata : dict
        Dictionary of metadata found in file headers
    """

    def _parse_tokens(self,inp):
        return parse_GTF2_tokens(inp)


ANNOTATION_READERS = { "GTF2" : GTF2_Reader,
                       "GFF3" : GFF3_Reader,
                     }
"""Reader classes, keyed by file format name"""
