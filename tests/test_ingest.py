"""Tests for the ingest module."""

import pytest
import tempfile
from pathlib import Path

from hanconv.ingest import INGESTORS, get_ingestor, ingestor_for_file, register_ingestor
from hanconv.ingest.base import Ingestor, IngestResult
from hanconv.ingest.text import TextIngestor, ingest
from hanconv.schema import Lexicon


class TestIngestResult:
    """Tests for IngestResult dataclass."""

    def test_repr(self):
        """Test IngestResult string representation."""
        result = IngestResult(
            lexicon=Lexicon(),
            source_path="/test.txt",
            dict_name="test",
            total_lines=100,
            total_entries=80,
            total_no_value=3,
        )
        repr_str = repr(result)
        assert "test" in repr_str
        assert "80/100" in repr_str
        assert "3 without values" in repr_str


class TestTextIngestor:
    """Tests for TextIngestor."""

    def test_file_extensions(self):
        assert ".txt" in TextIngestor.file_extensions
        assert ".ocd" in TextIngestor.file_extensions

    def test_ingest(self):
        """Test loading a small lexicon file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "STPhrases.txt")
            filepath.write_text(
                "# header\n"
                "简体\t簡體\n"
                "\n"
                "发\t髪 發\n"
                "malformed\n"
                "汉字\t漢字\n",
                encoding="utf-8",
            )
            result = ingest(filepath)

        assert result.dict_name == "STPhrases"
        assert result.total_lines == 6
        assert result.total_entries == 4
        assert result.total_no_value == 1
        assert result.lexicon.is_sorted()
        assert result.lexicon[0].key == "malformed"

    def test_ingest_unsorted(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "dict.txt")
            filepath.write_text("c\tC\na\tA\n", encoding="utf-8")
            result = TextIngestor(sort=False).ingest(filepath)

        assert [e.key for e in result.lexicon] == ["c", "a"]

    def test_crlf_line_endings(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "dict.txt")
            filepath.write_bytes("a\tA\r\nb\tB1 B2\r\n".encode("utf-8"))
            lexicon = ingest(filepath).lexicon

        assert lexicon[0].values == ("A",)
        assert lexicon[1].values == ("B1", "B2")

    def test_custom_comment_char(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "dict.txt")
            filepath.write_text("; note\n#a\tA\n", encoding="utf-8")
            result = ingest(filepath, comment_char=";")

        assert len(result.lexicon) == 1
        assert result.lexicon[0].key == "#a"

    def test_undecodable_bytes_kept(self):
        """Test invalid UTF-8 in a lexicon survives as escape code points."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "dict.txt")
            filepath.write_bytes(b"\xff\tX\n")
            lexicon = ingest(filepath).lexicon

        assert lexicon[0].key.encode("utf-8", errors="surrogateescape") == b"\xff"
        assert lexicon[0].default == "X"

    def test_carriage_return_inside_line(self):
        """Test a CR before the end of a line stays part of the entry."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "dict.txt")
            filepath.write_bytes(b"a\rb\tX\nc\tY\r\n")
            result = ingest(filepath)

        assert result.total_lines == 2
        assert [e.key for e in result.lexicon] == ["a\rb", "c"]
        assert result.lexicon[0].values == ("X",)
        assert result.lexicon[1].values == ("Y",)

    def test_counts_trailing_comment_lines(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "dict.txt")
            filepath.write_text("a\tA\n# one\n# two\n", encoding="utf-8")
            result = ingest(filepath)

        assert result.total_lines == 3
        assert result.total_entries == 1

    def test_nested_ingest_keeps_counts(self):
        """Test ingesting another file mid-parse leaves the outer count intact."""
        with tempfile.TemporaryDirectory() as tmpdir:
            outer = Path(tmpdir, "outer.txt")
            inner = Path(tmpdir, "inner.txt")
            outer.write_text("a\tA\nb\tB\nc\tC\n", encoding="utf-8")
            inner.write_text("x\tX\n", encoding="utf-8")

            nested = []

            class NestingIngestor(TextIngestor):
                def parse(self, filepath):
                    for entry, line_num in super().parse(filepath):
                        yield entry, line_num
                        if filepath == outer and line_num == 3:
                            nested.append(self.ingest(inner))

            result = NestingIngestor().ingest(outer)

        assert result.total_lines == 3
        assert result.total_entries == 3
        assert nested[0].total_lines == 1

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(FileNotFoundError):
                ingest(Path(tmpdir, "missing.txt"))

    def test_empty_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "empty.txt")
            filepath.write_text("", encoding="utf-8")
            result = ingest(filepath)

        assert len(result.lexicon) == 0
        assert result.total_lines == 0


class TestRegistry:
    """Tests for the ingestor registry."""

    def test_get_ingestor(self):
        assert get_ingestor("text") is TextIngestor

    def test_unknown_ingestor(self):
        with pytest.raises(ValueError, match="Unknown ingestor"):
            get_ingestor("nope")

    def test_register_ingestor(self):
        class StubIngestor(Ingestor):
            file_extensions = [".stub"]

            def parse(self, filepath):
                return iter(())

        register_ingestor("stub", StubIngestor)
        try:
            assert get_ingestor("stub") is StubIngestor
        finally:
            del INGESTORS["stub"]

    def test_ingestor_for_file(self):
        assert ingestor_for_file("STPhrases.txt") is TextIngestor
        assert ingestor_for_file("STPhrases.OCD") is TextIngestor

    def test_unclaimed_suffix_uses_text(self):
        assert ingestor_for_file("STCharacters.ocd2") is TextIngestor
        assert ingestor_for_file("README") is TextIngestor

    def test_registered_suffix_selected(self):
        class StubIngestor(Ingestor):
            file_extensions = [".stub"]

            def parse(self, filepath):
                return iter(())

        register_ingestor("stub", StubIngestor)
        try:
            assert ingestor_for_file("words.stub") is StubIngestor
            assert ingestor_for_file("words.txt") is TextIngestor
        finally:
            del INGESTORS["stub"]
