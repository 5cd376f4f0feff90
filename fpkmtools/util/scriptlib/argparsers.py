#!/usr/bin/env python
"""This module contains classes that:

  - build :class:`argparse.ArgumentParser` objects for the options shared
    by command-line scripts

  - parse those arguments into readers, records, and configured warnings


Arguments are grouped into the following sets:

    ===========================================================   ======================================
    **Parameter/argument set**                                    **Parser building class**
    -----------------------------------------------------------   --------------------------------------
    Generic parameters (e.g. for warnings and verbosity)          :class:`BaseParser`

    Annotation files and feature definitions                      :class:`AnnotationParser`
    ===========================================================   ======================================


Example
-------
To use any of these in your own command line scripts, follow these steps:

  #. Create the parser factory, and supply the :class:`~argparse.ArgumentParser`
     it creates as a `parent` when you build your script's parser::

         >>> import argparse
         >>> ap = AnnotationParser()
         >>> my_own_parser = argparse.ArgumentParser(parents=[ap.get_parser()])
         >>> my_own_parser.add_argument("count_file",type=str)

  #. Then, parse the arguments, and fetch the per-feature sub-intervals::

         >>> args = my_own_parser.parse_args()
         >>> features = ap.get_features_from_args(args)


See Also
--------
:py:mod:`argparse`
    Python documentation on argument parsing

:py:obj:`fpkmtools.bin`
    Source code of command-line scripts, for further examples
"""
import argparse

from fpkmtools.util.services.exceptions import DataWarning, FileFormatWarning, \
                                               UndefinedFpkmWarning, filterwarnings
from fpkmtools.util.io.openers import NullWriter
from fpkmtools.genomics.features import aggregate, DEFAULT_FEATURE_TYPE, DEFAULT_ID_ATTRIBUTE
from fpkmtools.readers.gff import ANNOTATION_READERS


#===============================================================================
# INDEX: Constants used in parsers below
#===============================================================================

_DEFAULT_ANNOTATION_PARSER_TITLE = "annotation file options"

_DEFAULT_ANNOTATION_PARSER_DESCRIPTION = \
"""Open a GTF2 or GFF3 annotation file, and define which of its records
contribute to the length of each feature."""

_DEFAULT_BASE_PARSER_TITLE = "warning/error options"

FPKM_WARNINGS = [
    # genomics.lengths
    (DataWarning,"Skipping feature"),

    # genomics.quantification
    (UndefinedFpkmWarning,"Total count over all features is zero"),

    # readers.gff_tokens
    (FileFormatWarning,"Found duplicate attribute key"),
]
"""Families of warnings issued by this package, as tuples of `(category, message regex)`"""



#===============================================================================
# INDEX: Base class for parsers
#===============================================================================

class Parser(object):
    """Base class for argument parser factories used below

    Parameters
    ----------
    groupname : str, optional
        Name of argument group. If not `None`, an argument group with
        the specified name will be created and added to the parser.
        If not, arguments will be in the main group.

    prefix : str, optional
        string prefix to add to default argument options (Default: "")

    disabled : list, optional
        list of parameter names that should be disabled from parser,
        without preceding dashes
    """

    def __init__(self,groupname=None,prefix="",disabled=None):
        self.prefix = prefix
        self.disabled = [] if disabled is None else disabled
        self.groupname = groupname

        # define in __init__ of subclass
        self.arguments = []

    def get_parser(self,parser=None,groupname=None,arglist=None,title=None,description=None,**kwargs):
        """Create and populate :class:`argparse.ArgumentParser` with arguments

        Parameters
        ----------
        parser : :class:`argparse.ArgumentParser` or None, optional
            If `None`, a new parser will be created, and arguments will be added
            to it. If not `None`, arguments will be added to `parser`.

        groupname : str or None, optional
            If `None`, default to `self.groupname`. If either is not `None`,
            arguments are added to an option group, to which `title` and
            `description` are applied.

        arglist : list, optional
            List of tuples of `('argument_name', dict_of_options)`. If `None`,
            arguments are taken from `self.arguments`.

        title : str, optional
            Optional title for parser

        description : str, optional
            Optional description for parser

        kwargs : keyword arguments
            Additional arguments passed during creation of :class:`argparse.ArgumentParser`

        Returns
        -------
        :class:`argparse.ArgumentParser`
        """
        if groupname is None:
            groupname = self.groupname

        if parser is None:
            if groupname is None:
                parser = argparse.ArgumentParser(description=description,add_help=False,**kwargs)
            else:
                parser = argparse.ArgumentParser(add_help=False,**kwargs)

        addto = parser
        if groupname is not None:
            addto = parser.add_argument_group(title=title,description=description)

        arglist = self.arguments if arglist is None else arglist
        for arg_name, arg_opts in filter(lambda x: x[0] not in self.disabled,arglist):
            addto.add_argument("--%s%s" % (self.prefix,arg_name),**arg_opts)

        return parser



#===============================================================================
# INDEX: Annotation file parser
#===============================================================================

class AnnotationParser(Parser):
    """Parser for annotation files, and for the feature types and attributes
    that define features within them

    Parameters
    ----------
    groupname : str, optional
        Name of argument group

    prefix : str, optional
        string prefix to add to default argument options (Default: "")

    disabled : list, optional
        list of parameter names that should be disabled from parser,
        without preceding dashes

    input_choices : list, optional
        list of permitted annotation file formats
    """

    def __init__(self,
                 prefix="",
                 disabled=None,
                 groupname="annotation_options",
                 input_choices=("GTF2","GFF3")
                ):
        Parser.__init__(self,groupname=groupname,prefix=prefix,disabled=disabled)
        self.input_choices = input_choices
        self.arguments = [
                ("annotation_file"     , dict(metavar="infile.[%s]" % " | ".join(input_choices),
                                              type=str,required=True,
                                              help="Annotation file describing feature structure")),
                ("annotation_format"   , dict(choices=input_choices,
                                              default="GTF2",
                                              help="Format of %sannotation_file (Default: %%(default)s)" % prefix)),
                ("tabix"               , dict(default=False,
                                              action="store_true",
                                              help="%sannotation_file is tabix-compressed (Default: False)" % prefix)),
                ("feature_type"        , dict(type=str,
                                              default=DEFAULT_FEATURE_TYPE,
                                              help="Feature type (column 3) whose records contribute to feature length (Default: %(default)s)")),
                ("id_attribute"        , dict(type=str,
                                              default=DEFAULT_ID_ATTRIBUTE,
                                              help="Attribute whose value identifies the feature a record belongs to (Default: %(default)s)")),
                ("skip_invalid"        , dict(default=False,
                                              action="store_true",
                                              help="If supplied, features containing a record whose end precedes its start are skipped with a warning. Otherwise, such records are fatal.")),
            ]

    def get_parser(self,
                   title=_DEFAULT_ANNOTATION_PARSER_TITLE,
                   description=_DEFAULT_ANNOTATION_PARSER_DESCRIPTION,
                   **kwargs):
        """Return an :class:`~argparse.ArgumentParser` that opens annotation files.

        Parameters
        ----------
        title : str, optional
            title for option group (used in command-line help screen)

        description : str, optional
            description of parser (used in command-line help screen)

        kwargs : keyword arguments
            Additional arguments to pass to :meth:`Parser.get_parser`

        Returns
        -------
        :class:`argparse.ArgumentParser`
        """
        return Parser.get_parser(self,title=title,description=description,**kwargs)

    def get_records_from_args(self,args,printer=None):
        """Open an annotation file as specified by arguments parsed by :meth:`get_parser`

        Parameters
        ----------
        args : :py:class:`argparse.Namespace`
            Namespace object from :py:meth:`argparse.ArgumentParser.parse_args`

        printer : file-like, optional
            A stream to which stderr-like info can be written (Default: |NullWriter|)

        Returns
        -------
        |GTF2_Reader| or |GFF3_Reader|
            Iterator over |AnnotationRecords| in the file
        """
        printer = NullWriter() if printer is None else printer
        args = PrefixNamespaceWrapper(args,self.prefix)

        reader_class = ANNOTATION_READERS[args.annotation_format]
        printer.write("Opening %s file '%s' ..." % (args.annotation_format,args.annotation_file))
        return reader_class(args.annotation_file,tabix=args.tabix)

    def get_features_from_args(self,args,printer=None):
        """Collect per-feature sub-intervals as specified by arguments parsed by :meth:`get_parser`

        Parameters
        ----------
        args : :py:class:`argparse.Namespace`
            Namespace object from :py:meth:`argparse.ArgumentParser.parse_args`

        printer : file-like, optional
            A stream to which stderr-like info can be written (Default: |NullWriter|)

        Returns
        -------
        dict
            Dictionary mapping feature identifiers to lists of |Intervals|,
            as from :func:`~fpkmtools.genomics.features.aggregate`
        """
        printer = NullWriter() if printer is None else printer
        reader = self.get_records_from_args(args,printer=printer)

        args = PrefixNamespaceWrapper(args,self.prefix)
        features = aggregate(reader,
                             feature_type=args.feature_type,
                             id_attribute=args.id_attribute)
        printer.write("Found %s features with '%s' records and a '%s' attribute in %s lines." % (len(features),
                                                                                               args.feature_type,
                                                                                               args.id_attribute,
                                                                                               reader.counter))
        return features



#===============================================================================
# INDEX: Basic options
#===============================================================================

class BaseParser(Parser):
    """Parser for basic options, such as verbosity of warnings

    Parameters
    ----------
    groupname : str, optional
        Name of argument group

    prefix : str, optional
        string prefix to add to default argument options (Default: "")

    disabled : list, optional
        list of parameter names that should be disabled from parser,
        without preceding dashes
    """

    def __init__(self,groupname="base_options",prefix="",disabled=None):
        Parser.__init__(self,groupname=groupname,prefix=prefix,disabled=disabled)

    def get_parser(self,title=_DEFAULT_BASE_PARSER_TITLE,description=None):
        """Return an :py:class:`~argparse.ArgumentParser`

        Parameters
        ----------
        title : str, optional
            title for option group (used in command-line help screen)

        description : str, optional
            description of parser (used in command-line help screen)

        Returns
        -------
        :class:`argparse.ArgumentParser`
        """
        p = Parser.get_parser(self)
        g = p.add_argument_group(title=title,description=description)

        g.add_argument("-q","--quiet",dest="warnlevel",action="store_const",const=-1,
                       help="Suppress all warning messages. Cannot use with '-v'.")
        g.add_argument("-v","--verbose",dest="warnlevel",action="count",
                       help="Increase verbosity. With '-v', show every warning. With '-vv', turn warnings into exceptions. Cannot use with '-q'. (Default: show each type of warning once)")
        p.set_defaults(warnlevel=0)

        return p

    def get_base_ops_from_args(self,args):
        """Configure warnings filters as specified by arguments parsed by :meth:`get_parser`

        Parameters
        ----------
        args : :py:class:`argparse.Namespace`
            Namespace object from :py:meth:`argparse.ArgumentParser.parse_args`

        Returns
        -------
        str
            Name of the action applied to warnings filters
        """
        args = PrefixNamespaceWrapper(args,self.prefix)
        actions = ["ignore",
                   "onceperfamily",
                   "always",
                   "error"]

        warnlevel = min(args.warnlevel,len(actions) - 2)
        action = actions[warnlevel+1]

        for type_, msg in FPKM_WARNINGS:
            filterwarnings(action,message=msg,category=type_)

        return action



#===============================================================================
# INDEX: Helper classes
#===============================================================================

class PrefixNamespaceWrapper(object):
    """Wrapper class to facilitate processing of :py:class:`argparse.Namespace`
    objects created by parsers whose argument names carry a prefix

    Attributes of the wrapped namespace are fetched with the prefix
    prepended, if an attribute of that name exists. Otherwise, the
    unprefixed attribute is returned.
    """

    def __init__(self,namespace,prefix):
        """
        Parameters
        ----------
        namespace : :py:class:`argparse.Namespace`
            Namespace to wrap

        prefix : str
            Prefix to prepend to attribute names
        """
        self.namespace = namespace
        self.prefix = prefix

    def __getattr__(self,attr):
        try:
            return getattr(self.namespace,"%s%s" % (self.prefix,attr))
        except AttributeError:
            return getattr(self.namespace,attr)
