"""Unit tests for stream input and output."""

import io

import pytest

from bigint import BigInt, InvalidFormatError, read, read_all, write


class TestRead:
    def test_reads_one_token(self):
        stream = io.StringIO("  -12345678901234567890  42")
        assert read(stream) == BigInt("-12345678901234567890")
        assert read(stream) == 42

    def test_reads_across_newlines(self):
        stream = io.StringIO("\n\t+7\n")
        assert read(stream) == 7

    def test_end_of_stream(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            read(io.StringIO("   "))
        assert "end of stream" in str(exc_info.value)

    def test_malformed_token(self):
        with pytest.raises(InvalidFormatError):
            read(io.StringIO("12abc 5"))

    def test_read_all(self):
        values = list(read_all(io.StringIO("1 -2\n30000000000 0")))
        assert values == [1, -2, 30000000000, 0]

    def test_read_all_empty(self):
        assert list(read_all(io.StringIO(""))) == []


class TestWrite:
    def test_writes_canonical_form(self):
        stream = io.StringIO()
        write(stream, BigInt("-0000100000000"))
        assert stream.getvalue() == "-100000000"

    def test_writes_zero(self):
        stream = io.StringIO()
        write(stream, BigInt(0))
        assert stream.getvalue() == "0"

    def test_write_then_read(self):
        stream = io.StringIO()
        for value in (BigInt(10**20), BigInt(-3)):
            write(stream, value)
            stream.write(" ")
        stream.seek(0)
        assert list(read_all(stream)) == [10**20, -3]
