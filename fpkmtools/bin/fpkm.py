#!/usr/bin/env python
"""Calculate :term:`FPKM` (fragments per kilobase of feature per million
mapped fragments) for each feature in a table of raw read counts, using
feature lengths derived from a `GTF2`_ or `GFF3`_ annotation file.

The effective length of a feature is the number of nucleotides covered by
at least one of its sub-features (by default, exons sharing a `gene_id`).
Overlapping exons from alternative transcripts are therefore counted once.

The total number of mapped reads is the sum of all counts in the count table,
excluding the summary counters (e.g. `__no_feature`) that `htseq-count`_
appends to its output.

Results are written to standard output as a headerless, tab-delimited table
with the following columns:

    ========================  ==================================================
    **Column**                **Definition**
    ------------------------  --------------------------------------------------
    feature identifier        Value of the identifying attribute

    fpkm                      FPKM of the feature, or `nan` if the count table
                              sums to zero
    ========================  ==================================================

Rows are sorted by feature identifier. Only features that are both counted
and annotated are reported. Progress messages are written to standard error.
"""
import argparse
import inspect
import sys

from fpkmtools.util.io.filters import NameDateWriter
from fpkmtools.util.io.openers import get_short_name
from fpkmtools.util.scriptlib.argparsers import AnnotationParser, BaseParser
from fpkmtools.util.scriptlib.help_formatters import format_module_docstring
from fpkmtools.util.services.exceptions import MalformedFileError, InvalidIntervalError, \
                                               DataWarning, FileFormatWarning
from fpkmtools.genomics.lengths import resolve
from fpkmtools.genomics.quantification import compute, sum_counts, write_fpkm_table
from fpkmtools.readers.counts import read_counts

printer = NameDateWriter(get_short_name(inspect.stack()[-1][1]))


def main(argv=sys.argv[1:]):
    """Command-line program

    Parameters
    ----------
    argv : list, optional
        A list of command-line arguments, which will be processed
        as if the script were called from the command line if
        :func:`main` is called directly.

        Default: `sys.argv[1:]`. The command-line arguments, if the script is
        invoked from the command line

    Returns
    -------
    int
        Exit status. 0 on success, 1 if an input file could not be
        read or is malformed, or if a warning was raised as an error
    """
    base_parser = BaseParser()
    annotation_parser = AnnotationParser()

    parser = argparse.ArgumentParser(description=format_module_docstring(__doc__),
                                     formatter_class=argparse.RawDescriptionHelpFormatter,
                                     parents=[base_parser.get_parser(),
                                              annotation_parser.get_parser()],
                                     )
    parser.add_argument("count_file",type=str,
                        help="Tab-delimited table of feature identifiers and raw counts (e.g. from htseq-count)")
    args = parser.parse_args(argv)
    base_parser.get_base_ops_from_args(args)

    # nothing is written to stdout until all input has been read and checked
    try:
        printer.write("Reading counts from '%s' ..." % args.count_file)
        counts = read_counts(args.count_file)
        total = sum_counts(counts)
        printer.write("Found %s counted features, with %s total counts." % (len(counts),total))

        features = annotation_parser.get_features_from_args(args,printer=printer)
        lengths = resolve(features,strict=not args.skip_invalid,printer=printer)
        fpkms = compute(counts,lengths)
    except (MalformedFileError, InvalidIntervalError, IOError) as e:
        printer.write("Error: %s" % e)
        return 1
    except (DataWarning, FileFormatWarning) as e:
        # raised instead of issued when warnings are made errors with -vv
        printer.write("Error: %s: %s" % (type(e).__name__,e))
        return 1

    num_unannotated = len(set(counts) - set(lengths))
    if num_unannotated > 0:
        printer.write("%s counted features have no annotation, and are excluded from output." % num_unannotated)

    write_fpkm_table(fpkms,sys.stdout)
    printer.write("Wrote FPKM for %s features." % len(fpkms))
    printer.write("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
