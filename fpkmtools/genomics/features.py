#!/usr/bin/env python
"""Value types for annotated genomic features, and aggregation of annotation
records into per-feature collections of sub-intervals.

Coordinates here follow the convention of `GTF2`_ and `GFF3`_ files: they are
1-based, and both endpoints are included in the feature.

Important types & functions
---------------------------
|AnnotationRecord|
    A single line of an annotation file, as produced by the readers in
    :mod:`fpkmtools.readers.gff`

|Interval|
    A contiguous, end-included span of a feature, e.g. an exon

:func:`aggregate`
    Group the sub-intervals of a stream of |AnnotationRecords| by a feature
    identifier taken from each record's attributes


Examples
--------
Collect the exons of each gene in a `GTF2`_ file::

    >>> from fpkmtools.readers.gff import GTF2_Reader
    >>> reader = GTF2_Reader(open("annotations.gtf"))
    >>> features = aggregate(reader,feature_type="exon",id_attribute="gene_id")
    >>> features["ENSG00000223972.5"]
    [Interval(start=11869, end=12227), Interval(start=12613, end=12721), ...]
"""
from collections import namedtuple

DEFAULT_FEATURE_TYPE = "exon"
"""Feature type whose records contribute sub-intervals by default"""

DEFAULT_ID_ATTRIBUTE = "gene_id"
"""Attribute naming the feature to which a record belongs, by default"""


AnnotationRecord = namedtuple("AnnotationRecord",["sequence_name",
                                                  "source",
                                                  "feature_type",
                                                  "start",
                                                  "end",
                                                  "strand",
                                                  "attributes"])
AnnotationRecord.__doc__ = """One feature line of a `GTF2`_ or `GFF3`_ file

Attributes
----------
sequence_name : str
    Chromosome or contig name (column 1)

source : str
    Program or database that produced the feature (column 2)

feature_type : str
    Feature type, e.g. `'exon'` or `'CDS'` (column 3)

start : int
    1-based start coordinate, included in the feature (column 4)

end : int
    1-based end coordinate, included in the feature (column 5)

strand : str
    `'+'`, `'-'`, or `'.'` (column 7)

attributes : dict
    Key-value pairs parsed from column 9
"""


class Interval(namedtuple("Interval",["start","end"])):
    """A contiguous, end-included span of a feature

    Attributes
    ----------
    start : int
        First position in the interval

    end : int
        Last position in the interval. Should be no less than `start`;
        this is checked by :func:`fpkmtools.genomics.lengths.resolve`,
        not here.
    """
    __slots__ = ()

    @property
    def length(self):
        """Number of positions covered by the interval"""
        return self.end - self.start + 1


def aggregate(records,feature_type=DEFAULT_FEATURE_TYPE,id_attribute=DEFAULT_ID_ATTRIBUTE):
    """Collect the sub-intervals of each feature from a stream of annotation records

    Records whose `feature_type` is not exactly `feature_type` are ignored.
    Records of the right type that lack `id_attribute` are skipped without
    complaint, because annotation files routinely omit attributes from some
    records.

    Intervals are neither sorted, deduplicated, nor validated. Records with
    `start > end` are passed through, so that they may be rejected when
    lengths are resolved.

    Parameters
    ----------
    records : iterable
        |AnnotationRecords|, e.g. from a |GTF2_Reader|

    feature_type : str, optional
        Type of record that contributes sub-intervals (Default: `'exon'`)

    id_attribute : str, optional
        Attribute whose value identifies the feature a record belongs to
        (Default: `'gene_id'`)

    Returns
    -------
    dict
        Dictionary mapping feature identifiers to lists of |Interval|, in the
        order identifiers were first seen
    """
    features = {}
    for record in records:
        if record.feature_type != feature_type:
            continue

        feature_id = record.attributes.get(id_attribute)
        if feature_id is None:
            continue

        features.setdefault(feature_id,[]).append(Interval(record.start,record.end))

    return features
