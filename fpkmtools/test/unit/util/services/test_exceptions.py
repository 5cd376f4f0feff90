#!/usr/bin/env python
"""Test suite for :py:mod:`fpkmtools.util.services.exceptions`"""
import warnings
import pytest

from fpkmtools.genomics.features import Interval
from fpkmtools.util.services.exceptions import MalformedFileError, MalformedCountLineError, \
                                               InvalidIntervalError, DataWarning, \
                                               FileFormatWarning, UndefinedFpkmWarning, \
                                               filterwarnings, warn, formatwarning, \
                                               fpkm_filters, fpkm_once_registry, reset_filters


@pytest.mark.unit
def test_malformed_file_error_str():
    assert str(MalformedFileError("a.gtf","bad")) == "Error reading file 'a.gtf': bad"
    assert str(MalformedFileError("a.gtf","bad",line_num=5)) == "Error reading file 'a.gtf' at line 5: bad"

@pytest.mark.unit
def test_malformed_count_line_error_str():
    err = MalformedCountLineError("c.txt","bad",line_num=2,line="g1\tx\n")
    assert str(err) == "Error reading file 'c.txt' at line 2: bad\n    'g1\\tx'"
    assert isinstance(err,MalformedFileError)

@pytest.mark.unit
def test_invalid_interval_error_str():
    err = InvalidIntervalError("geneB",Interval(500,400))
    assert str(err) == "Feature 'geneB' has an interval that ends before it starts: 500-400"
    assert isinstance(err,ValueError)


@pytest.mark.unit
def test_onceperfamily_shows_first_of_family():
    filterwarnings("onceperfamily",message="Skipping feature",category=DataWarning)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        warn("Skipping feature 'a': reason",DataWarning)
        warn("Skipping feature 'b': other reason",DataWarning)
        warn("Found duplicate attribute key 'tag'",FileFormatWarning)
        warn("Found duplicate attribute key 'tag'",FileFormatWarning)

    messages = [str(X.message) for X in caught]
    assert messages == ["Skipping feature 'a': reason",
                        "Found duplicate attribute key 'tag'",
                        "Found duplicate attribute key 'tag'"]

@pytest.mark.unit
def test_onceperfamily_filter_not_duplicated():
    filterwarnings("onceperfamily",message="abc",category=DataWarning)
    filterwarnings("onceperfamily",message="abc",category=DataWarning)
    assert len(fpkm_filters) == 1

@pytest.mark.unit
def test_onceperfamily_respects_subclasses():
    filterwarnings("onceperfamily",message="Total count",category=DataWarning)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        warn("Total count over all features is zero",UndefinedFpkmWarning)
        warn("Total count over all features is zero",UndefinedFpkmWarning)

    assert len(caught) == 1

@pytest.mark.unit
def test_error_action_raises():
    with warnings.catch_warnings():
        filterwarnings("error",message="Skipping",category=DataWarning)
        with pytest.raises(DataWarning):
            warn("Skipping feature 'a'",DataWarning)

@pytest.mark.unit
def test_warn_attributes_caller():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        warn("from the test",DataWarning)

    assert caught[0].filename.endswith("test_exceptions.py")
    assert caught[0].category is DataWarning

@pytest.mark.unit
def test_formatwarning():
    found = formatwarning("Something odd",DataWarning,__file__,1)
    assert "DataWarning" in found
    assert "Something odd" in found
    assert "line 1" in found

@pytest.mark.unit
def test_formatwarning_with_source_line():
    found = formatwarning("Something odd",DataWarning,"nofile.py",7,line="x = compute()")
    assert "in nofile.py, line 7:" in found
    assert "x = compute()" in found

@pytest.mark.unit
def test_reset_filters_forgets_families():
    filterwarnings("onceperfamily",message="Skipping feature",category=DataWarning)
    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        warn("Skipping feature 'a'",DataWarning)

    assert len(fpkm_once_registry) == 1
    reset_filters()
    assert len(fpkm_filters) == 0
    assert len(fpkm_once_registry) == 0

@pytest.mark.unit
def test_other_actions_handed_to_warnings_module():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        filterwarnings("ignore",message="Found duplicate",category=FileFormatWarning)
        assert len(fpkm_filters) == 0
        warn("Found duplicate attribute key 'tag'",FileFormatWarning)
        warn("Skipping feature 'a'",DataWarning)

    assert [X.category for X in caught] == [DataWarning]
