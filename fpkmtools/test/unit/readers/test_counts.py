#!/usr/bin/env python
"""Test suite for :py:mod:`fpkmtools.readers.counts`"""
import bz2
import io
import os
import shutil
import tempfile
import unittest
import pytest

from fpkmtools.readers.counts import CountReader, read_counts, SUMMARY_PREFIX
from fpkmtools.util.services.exceptions import MalformedCountLineError, MalformedFileError
from fpkmtools.test.ref_files import REF_FILES, MINI_COUNTS


@pytest.mark.unit
class TestReadCounts(unittest.TestCase):

    def test_mini_file(self):
        found = read_counts(REF_FILES["mini_counts"])
        self.assertEqual(dict(found),MINI_COUNTS)
        self.assertEqual(list(found.keys()),["geneA","geneB","geneC","geneE"])

    def test_summary_lines_end_reading(self):
        text = "g1\t5\n__no_feature\t10\ng2\t7\n"
        self.assertEqual(dict(read_counts(io.StringIO(text))),{ "g1" : 5 })
        self.assertTrue(SUMMARY_PREFIX.startswith("__"))

    def test_malformed_summary_lines_not_parsed(self):
        text = "g1\t5\n__no_feature\tmany\nbad line\n"
        self.assertEqual(dict(read_counts(io.StringIO(text))),{ "g1" : 5 })

    def test_single_underscore_is_a_feature(self):
        text = "_g1\t5\n"
        self.assertEqual(dict(read_counts(io.StringIO(text))),{ "_g1" : 5 })

    def test_blank_lines_skipped(self):
        text = "\ng1\t5\n\n   \ng2\t0\n"
        self.assertEqual(dict(read_counts(io.StringIO(text))),{ "g1" : 5, "g2" : 0 })

    def test_empty(self):
        self.assertEqual(len(read_counts(io.StringIO(""))),0)

    def test_crlf(self):
        text = "g1\t5\r\ng2\t6\r\n"
        found = read_counts(io.StringIO(text,newline=""))
        self.assertEqual(dict(found),{ "g1" : 5, "g2" : 6 })

    def test_bzipped_file(self):
        tmpdir = tempfile.mkdtemp()
        try:
            fn = os.path.join(tmpdir,"counts.txt.bz2")
            with bz2.open(fn,"wt") as fout:
                fout.write("g1\t5\ng2\t6\n")

            self.assertEqual(dict(read_counts(fn)),{ "g1" : 5, "g2" : 6 })
        finally:
            shutil.rmtree(tmpdir)

    def test_missing_file(self):
        self.assertRaises(IOError,read_counts,"/nonexistent/path/counts.txt")


@pytest.mark.unit
class TestMalformedCounts(unittest.TestCase):

    def check_raises(self,text,line_num,msg):
        with self.assertRaises(MalformedCountLineError) as ctx:
            read_counts(io.StringIO(text))

        self.assertEqual(ctx.exception.line_num,line_num)
        self.assertIn(msg,str(ctx.exception))
        return ctx.exception

    def test_is_malformed_file_error(self):
        self.assertTrue(issubclass(MalformedCountLineError,MalformedFileError))

    def test_one_column(self):
        err = self.check_raises("g1\t5\ng2\n",2,"Expected 2 tab-delimited columns, found 1")
        self.assertEqual(err.line,"g2\n")

    def test_three_columns(self):
        self.check_raises("g1\t5\t3\n",1,"found 3")

    def test_space_delimited(self):
        self.check_raises("g1 5\n",1,"found 1")

    def test_non_integer(self):
        for bad in ("5.0","five","1e3","1_000"," 5",""):
            self.check_raises("g1\t%s\n" % bad,1,"is not an integer")

    def test_negative(self):
        self.check_raises("g1\t3\ng2\t-1\n",2,"is negative")

    def test_empty_identifier(self):
        self.check_raises("\t5\n",1,"identifier is empty")

    def test_duplicate_identifier(self):
        self.check_raises("g1\t5\ng2\t6\ng1\t7\n",3,"Duplicate feature identifier 'g1'")

    def test_line_number_counts_blank_lines(self):
        self.check_raises("g1\t5\n\n\ng2\tx\n",4,"is not an integer")

    def test_offending_line_in_message(self):
        err = self.check_raises("g1\tfive\n",1,"'g1\\tfive'")
        self.assertEqual(err.filename,"<stream>")


@pytest.mark.unit
def test_count_reader_iterates_pairs():
    reader = CountReader(io.StringIO("g1\t5\ng1\t6\n__ambiguous\t3\n"))
    assert list(reader) == [("g1",5),("g1",6)]
    assert reader.counter == 3

@pytest.mark.unit
def test_count_reader_large_counts():
    reader = CountReader(io.StringIO("g1\t123456789012345678901234567890\n"))
    assert list(reader) == [("g1",123456789012345678901234567890)]

@pytest.mark.unit
def test_count_reader_binary_stream():
    reader = CountReader(io.BytesIO(b"g1\t5\r\ng\xc3\xa9ne\t6\n"))
    assert list(reader) == [("g1",5),("géne",6)]

@pytest.mark.unit
def test_invalid_utf8_raises_malformed_count_line():
    with pytest.raises(MalformedCountLineError) as ctx:
        read_counts(io.BytesIO(b"geneA\t10\ngene\xff\t3\n"))

    assert ctx.value.line_num == 2
    assert "not valid utf-8 text" in str(ctx.value)

@pytest.mark.unit
def test_invalid_utf8_file_raises_malformed_count_line():
    tmpdir = tempfile.mkdtemp()
    try:
        fn = os.path.join(tmpdir,"counts.txt")
        with open(fn,"wb") as fout:
            fout.write(b"geneA\t10\ngeneB\t4\ngene\xff\t3\n")

        with pytest.raises(MalformedCountLineError) as ctx:
            read_counts(fn)

        assert ctx.value.line_num == 3
        assert ctx.value.filename == fn
    finally:
        shutil.rmtree(tmpdir)
