"""
Tests for deliverable file resolution.
"""
from gradeassist.models import (
    Document,
    Patch,
    Picture,
    Program,
    SuffixCommand,
    ToolTable,
)
from gradeassist.resolver import candidate_files, resolve_deliverable


class TestCandidateFiles:
    """Tests for candidate_files ordering."""

    def test_document_order(self, tmp_path):
        """Test upper-case before lower-case, and pairs in declaration order."""
        names = [p.name for p, _ in candidate_files("1", tmp_path, Document(), ToolTable())]

        assert names == ["1.TXT", "1.txt", "1.PDF", "1.pdf"]

    def test_commands_follow_suffixes(self, tmp_path):
        """Test that each candidate carries its paired command."""
        commands = [c for _, c in candidate_files("1", tmp_path, Document(), ToolTable())]

        assert commands == ["kate", "kate", "evince", "evince"]

    def test_program_uses_toolchain(self, tmp_path):
        """Test that C programs are searched with the C toolchain table."""
        candidates = list(candidate_files("3", tmp_path, Program(), ToolTable()))

        assert [(p.name, c) for p, c in candidates] == [("3.C", "cc"), ("3.c", "cc")]

    def test_patch_has_no_command(self, tmp_path):
        """Test the fixed patch extension."""
        candidates = list(candidate_files("4", tmp_path, Patch(), ToolTable()))

        assert [(p.name, c) for p, c in candidates] == [("4.PATCH", ""), ("4.patch", "")]

    def test_caseless_suffix_probed_once(self, tmp_path):
        """Test that a suffix without letters is not probed twice."""
        tools = ToolTable(picture=[SuffixCommand(suffix="001", command="viewer")])

        names = [p.name for p, _ in candidate_files("1", tmp_path, Picture(), tools)]

        assert names == ["1.001"]


class TestResolveDeliverable:
    """Tests for resolve_deliverable."""

    def test_lower_case_found_when_upper_absent(self, tmp_path):
        """Test that a.txt resolves when a.TXT is absent."""
        (tmp_path / "a.txt").write_text("answer")

        result = resolve_deliverable("a", tmp_path, Document(), ToolTable())

        assert result is not None
        assert result.path == tmp_path / "a.txt"
        assert result.command == "kate"

    def test_upper_case_preferred(self, tmp_path):
        """Test that the upper-case extension wins when both exist."""
        (tmp_path / "1.PNG").write_bytes(b"png")
        (tmp_path / "1.png").write_bytes(b"png")

        result = resolve_deliverable("1", tmp_path, Picture(), ToolTable())

        assert result.path.name == "1.PNG"

    def test_earlier_pair_preferred(self, tmp_path):
        """Test that txt is chosen over pdf."""
        (tmp_path / "2.pdf").write_bytes(b"%PDF")
        (tmp_path / "2.txt").write_text("answer")

        result = resolve_deliverable("2", tmp_path, Document(), ToolTable())

        assert result.path.name == "2.txt"

    def test_later_pair_used_when_first_absent(self, tmp_path):
        """Test that the pdf viewer is paired with a pdf deliverable."""
        (tmp_path / "2.PDF").write_bytes(b"%PDF")

        result = resolve_deliverable("2", tmp_path, Document(), ToolTable())

        assert result.path.name == "2.PDF"
        assert result.command == "evince"

    def test_not_found(self, tmp_path):
        """Test that None is returned when no variant exists."""
        (tmp_path / "1.gif").write_bytes(b"gif")

        assert resolve_deliverable("1", tmp_path, Picture(), ToolTable()) is None

    def test_directory_is_not_a_deliverable(self, tmp_path):
        """Test that a folder named like the deliverable is ignored."""
        (tmp_path / "1.txt").mkdir()

        assert resolve_deliverable("1", tmp_path, Document(), ToolTable()) is None

    def test_every_probe_announced(self, tmp_path, capsys):
        """Test that each tried file name is printed until one is found."""
        (tmp_path / "2.pdf").write_bytes(b"%PDF")

        resolve_deliverable("2", tmp_path, Document(), ToolTable())

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "  Searching 2.TXT",
            "  Searching 2.txt",
            "  Searching 2.PDF",
            "  Searching 2.pdf",
        ]
