"""Tests for materializer.pipeline flows and artifact writing."""

import pytest

from materializer.codec.binary_text import decode, encode
from materializer.errors import EmptyInputError, FormatError, InvalidStyle
from materializer.generator.template import generate
from materializer.pipeline import (
    decode_document,
    generate_binary,
    materialize,
    write_file_bytes,
)


@pytest.fixture
def good_binary() -> bytes:
    return encode(generate("Launch page", "aurora").encode("utf-8")).encode("ascii")


# ============================================================================
# write_file_bytes() tests
# ============================================================================


class TestWriteFileBytes:

    def test_write_creates_parent_dirs(self, tmp_path):
        target = tmp_path / "nested" / "dir" / "out.bin"
        write_file_bytes(target, b"\x00\x01")
        assert target.read_bytes() == b"\x00\x01"

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "out.bin"
        target.write_bytes(b"old contents")
        write_file_bytes(target, b"new")
        assert target.read_bytes() == b"new"


# ============================================================================
# materialize() tests
# ============================================================================


class TestMaterialize:

    def test_empty_decode_is_an_error(self):
        with pytest.raises(EmptyInputError):
            decode_document(" \n\t")

    def test_writes_both_artifacts_on_pass(self, tmp_path, good_binary):
        binary_out = tmp_path / "run.binary.txt"
        html_out = tmp_path / "run.html"

        result = materialize(good_binary, binary_out, html_out)

        assert result.verdict.ok
        assert result.written
        assert binary_out.read_bytes() == good_binary
        assert html_out.read_bytes() == decode(good_binary)
        assert result.binary_bytes == len(good_binary)
        assert result.html_bytes == len(decode(good_binary))

    def test_accepts_str_input(self, tmp_path, good_binary):
        result = materialize(good_binary.decode("ascii"), tmp_path / "b.txt", tmp_path / "h.html")
        assert result.written

    def test_rejection_writes_nothing(self, tmp_path):
        binary_out = tmp_path / "run.binary.txt"
        html_out = tmp_path / "run.html"

        result = materialize(encode(b"<html>tiny</html>"), binary_out, html_out)

        assert not result.verdict.ok
        assert result.verdict.rule == "min_size"
        assert not result.written
        assert not binary_out.exists()
        assert not html_out.exists()

    def test_basic_ruleset(self, tmp_path):
        doc = b"<html><style>a { transition: color 1s; }</style></html>"
        result = materialize(encode(doc), tmp_path / "b.txt", tmp_path / "h.html", ruleset="basic")
        assert result.written
        assert (tmp_path / "h.html").read_bytes() == doc

    def test_empty_input(self, tmp_path):
        with pytest.raises(EmptyInputError):
            materialize("", tmp_path / "b.txt", tmp_path / "h.html")

    def test_malformed_input(self, tmp_path):
        with pytest.raises(FormatError):
            materialize("0101", tmp_path / "b.txt", tmp_path / "h.html")
        assert not (tmp_path / "b.txt").exists()


# ============================================================================
# generate_binary() tests
# ============================================================================


class TestGenerateBinary:

    def test_returns_html_and_encoding(self):
        result = generate_binary("Launch page", "ember")
        assert decode(result.binary_text) == result.html.encode("utf-8")
        assert result.binary_out is None
        assert result.html_out is None

    def test_optional_artifacts(self, tmp_path):
        result = generate_binary(
            "Launch page",
            "lagoon",
            binary_out=tmp_path / "page.binary.txt",
            html_out=tmp_path / "page.html",
        )
        assert (tmp_path / "page.binary.txt").read_text() == result.binary_text
        assert (tmp_path / "page.html").read_text(encoding="utf-8") == result.html

    def test_invalid_style(self, tmp_path):
        with pytest.raises(InvalidStyle):
            generate_binary("Launch page", "plaid", html_out=tmp_path / "x.html")
        assert not (tmp_path / "x.html").exists()
