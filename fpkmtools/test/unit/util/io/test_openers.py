#!/usr/bin/env python
"""Test suite for :py:mod:`fpkmtools.util.io.openers`"""
import bz2
import gzip
import io
import os
import shutil
import tempfile
import numpy
import pytest

from fpkmtools.util.io.openers import get_short_name, multiopen, opener, \
                                      read_fpkm_table, NullWriter
from fpkmtools.test.ref_files import REF_FILES, MINI_FPKM


@pytest.mark.unit
@pytest.mark.parametrize("inp,expected,kwargs",
                         [("test","test",{}),
                          ("test.py","test",dict(terminator=".py")),
                          ("/home/jdoe/test.py","test",dict(terminator=".py")),
                          ("/home/jdoe/test.py.py","test.py",dict(terminator=".py")),
                          ("/home/jdoe/test.py.2","test.py.2",{}),
                          ("/home/jdoe/test.py.2","test.py.2",dict(terminator=".py")),
                          ("fpkmtools.bin.fpkm","fpkm",dict(separator=r"\.",terminator="")),
                         ])
def test_get_short_name(inp,expected,kwargs):
    assert get_short_name(inp,**kwargs) == expected


@pytest.mark.unit
def test_multiopen_single_string():
    assert list(multiopen("a",fn=str.upper)) == ["A"]

@pytest.mark.unit
def test_multiopen_list():
    fh = io.StringIO("x")
    found = list(multiopen(["a",fh,"b"],fn=str.upper))
    assert found == ["A",fh,"B"]

@pytest.mark.unit
def test_multiopen_filehandle_passes_through():
    fh = io.StringIO("x")
    assert list(multiopen(fh,fn=str.upper)) == [fh]

@pytest.mark.unit
def test_multiopen_args_kwargs():
    fn = lambda x, y, z=None: (x,y,z)
    assert list(multiopen("a",fn=fn,args=(1,),kwargs=dict(z=2))) == [("a",1,2)]


@pytest.mark.unit
class TestOpener(object):

    def setup_method(self,method):
        self.tmpdir = tempfile.mkdtemp()

    def teardown_method(self,method):
        shutil.rmtree(self.tmpdir)

    def test_plain(self):
        fn = os.path.join(self.tmpdir,"plain.txt")
        with open(fn,"w") as fout:
            fout.write("a\tb\n")

        with opener(fn) as fh:
            assert fh.read() == "a\tb\n"

    def test_gzip_text_mode(self):
        fn = os.path.join(self.tmpdir,"file.txt.gz")
        with gzip.open(fn,"wt") as fout:
            fout.write("a\tb\n")

        with opener(fn) as fh:
            assert fh.read() == "a\tb\n"

    def test_bzip_text_mode(self):
        fn = os.path.join(self.tmpdir,"file.txt.bz2")
        with opener(fn,"w") as fout:
            fout.write("a\tb\n")

        with bz2.open(fn,"rt") as fh:
            assert fh.read() == "a\tb\n"

    def test_binary_mode_kept(self):
        fn = os.path.join(self.tmpdir,"file.txt.gz")
        with gzip.open(fn,"wb") as fout:
            fout.write(b"abc")

        with opener(fn,"rb") as fh:
            assert fh.read() == b"abc"


@pytest.mark.unit
def test_read_fpkm_table():
    df = read_fpkm_table(REF_FILES["mini_fpkm"])
    assert list(df.columns) == ["feature_id","fpkm"]
    assert list(df["feature_id"]) == sorted(MINI_FPKM)
    assert numpy.allclose(df["fpkm"],[MINI_FPKM[X] for X in df["feature_id"]])

@pytest.mark.unit
def test_read_fpkm_table_nan_and_string_ids():
    df = read_fpkm_table(io.StringIO("NA\tnan\n0001\t0.0\n"))
    assert list(df["feature_id"]) == ["NA","0001"]
    assert numpy.isnan(df["fpkm"][0])
    assert df["fpkm"][1] == 0.0

@pytest.mark.unit
def test_null_writer():
    writer = NullWriter()
    assert writer.stream is None
    writer.write("discarded")
    writer.close()
    assert repr(writer) == "NullWriter()"

@pytest.mark.unit
def test_null_writer_opens_no_file(monkeypatch):
    def fail_open(*args,**kwargs):
        raise AssertionError("NullWriter opened a file")

    monkeypatch.setattr("builtins.open",fail_open)
    writer = NullWriter()
    writer.write("discarded")
    writer.flush()
    writer.close()
