#!/usr/bin/env python
"""Test suite for :py:mod:`fpkmtools.util.io.filters`"""
import io
import re
import pytest

from fpkmtools.util.io.filters import AbstractReader, ColorWriter, NameDateWriter, colored


class UpperReader(AbstractReader):
    def filter(self,line):
        return line.upper()


@pytest.mark.unit
def test_abstract_reader_applies_filter():
    reader = UpperReader(io.StringIO("ab\ncd\n"))
    assert list(reader) == ["AB\n","CD\n"]

@pytest.mark.unit
def test_abstract_reader_readlines_and_close():
    stream = io.StringIO("ab\ncd\n")
    reader = UpperReader(stream)
    assert reader.readlines() == ["AB\n","CD\n"]
    reader.close()
    assert stream.closed
    assert reader.readable() and not reader.writable()

@pytest.mark.unit
def test_color_writer_passes_text_through():
    buf = io.StringIO()
    writer = ColorWriter(buf)
    writer.write("plain")
    assert buf.getvalue() == "plain"
    assert writer.color("text",color="red") == "text"

@pytest.mark.unit
def test_name_date_writer():
    buf = io.StringIO()
    printer = NameDateWriter("fpkm",stream=buf)
    printer.write("Reading counts ...")
    printer("Done.")
    lines = buf.getvalue().split("\n")
    assert lines[-1] == ""
    pat = re.compile(r"^fpkm \[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\]: (.*)$")
    assert pat.match(lines[0]).group(1) == "Reading counts ..."
    assert pat.match(lines[1]).group(1) == "Done."

@pytest.mark.unit
def test_name_date_writer_strips_delimiter():
    buf = io.StringIO()
    printer = NameDateWriter("fpkm",stream=buf)
    printer.write("message\n")
    assert buf.getvalue().count("\n") == 1

@pytest.mark.unit
def test_colored_returns_str():
    assert "text" in colored("text",color="red")
