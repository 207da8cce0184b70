from pathlib import Path
from unittest.mock import patch
import pytest

from wordsearch.session import SessionConfig, WordSearchSession


GRID_TEXT = "C,A,T\nX,X,X\nX,X,X"


@pytest.fixture
def session():
    s = WordSearchSession()
    assert s.load_text(GRID_TEXT)
    return s


class TestLoading:
    """Test cases for loading grids into a session."""

    def test_initial_state(self):
        """A new session has no grid and search is disabled."""
        s = WordSearchSession()
        assert s.grid is None
        assert s.search_enabled is False
        assert s.message == ""

    def test_load_text(self, session):
        """Loading reports the grid dimensions."""
        assert session.search_enabled is True
        assert session.message == "Loaded 3x3 grid."

    def test_empty_text_fails(self):
        s = WordSearchSession()
        assert s.load_text("  \n ") is False
        assert s.message == "Error: Empty CSV content"
        assert s.grid is None

    def test_failed_load_drops_previous_grid(self, session):
        """A rejected source disables search until a new load."""
        assert session.load_text("") is False
        assert session.grid is None
        assert session.search_enabled is False

    def test_reload_replaces_grid(self, session):
        assert session.load_text("D,O,G,S")
        assert session.message == "Loaded 1x4 grid."
        assert session.grid.cols == 4

    def test_load_file(self, session, tmp_path):
        path = tmp_path / "grid.csv"
        path.write_text("a,b\r\nc,d\r\n", encoding="utf-8")
        assert session.load_file(path) is True
        assert session.grid.to_rows() == [['A', 'B'], ['C', 'D']]

    def test_load_missing_file(self, session, tmp_path):
        assert session.load_file(tmp_path / "missing.csv") is False
        assert session.message.startswith("Error: ")
        assert session.grid is None

    def test_load_undecodable_file(self, tmp_path):
        path = tmp_path / "grid.csv"
        path.write_bytes(b"\xff\xfe,\xff")
        s = WordSearchSession()
        assert s.load_file(path) is False
        assert s.message.startswith("Error: ")

    def test_load_file_with_bom(self, tmp_path):
        """Files saved with a UTF-8 BOM keep their shape."""
        path = tmp_path / "grid.csv"
        path.write_bytes(b"\xef\xbb\xbf" + GRID_TEXT.encode("utf-8"))
        s = WordSearchSession()
        assert s.load_file(path) is True
        assert (s.grid.rows, s.grid.cols) == (3, 3)
        assert s.search("cat").results[0].locations == "E: (1,1)->(1,3)"

    def test_load_unreadable_file(self, tmp_path):
        """Read errors become a status message."""
        s = WordSearchSession()
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            assert s.load_file(tmp_path / "grid.csv") is False
        assert s.message == "Error: denied"

    def test_clear(self, session):
        session.clear()
        assert session.grid is None
        assert session.message == ""

    def test_preview_uses_configured_blank(self):
        s = WordSearchSession(config=SessionConfig(blank_display="_"))
        s.load_text("A,")
        assert s.preview().splitlines()[1] == " 1  A  _"


class TestSearch:
    """Test cases for searching a word list."""

    def test_found_and_not_found(self, session):
        report = session.search("cat, dog")
        assert [r.word for r in report.results] == ["CAT", "DOG"]
        assert report.results[0].locations == "E: (1,1)->(1,3)"
        assert report.results[0].found is True
        assert report.results[1].locations == "not found"
        assert report.results[1].found is False
        assert session.message == "2 word(s) processed."
        assert report.message == session.message

    def test_report_table(self, session):
        report = session.search("CAT,DOG")
        assert report.as_table() == ["CAT\tE: (1,1)->(1,3)", "DOG\tnot found"]
        assert report.words_processed == 2
        assert (report.rows, report.cols) == (3, 3)

    def test_search_without_grid(self):
        s = WordSearchSession()
        assert s.search("cat") is None
        assert s.message == "Please upload a CSV grid first."

    def test_search_without_words(self, session):
        assert session.search("   ") is None
        assert session.message == "Please enter words, comma-separated."

    def test_only_delimiters(self, session):
        """A list of empty entries processes zero words."""
        report = session.search(", ,")
        assert report.results == []
        assert session.message == "0 word(s) processed."

    def test_repeated_searches_are_independent(self, session):
        first = session.search("cat")
        second = session.search("cat")
        assert first == second

    def test_single_letter_duplicates_by_default(self):
        s = WordSearchSession()
        s.load_text("A,X")
        report = s.search("a")
        assert len(report.results[0].matches) == 8

    def test_collapse_duplicate_spans(self):
        s = WordSearchSession(config=SessionConfig(collapse_duplicate_spans=True))
        s.load_text("A,X")
        report = s.search("a")
        assert report.results[0].locations == "E: (1,1)->(1,1)"

    def test_custom_markers(self):
        config = SessionConfig(not_found_marker="-", separator=" | ")
        s = WordSearchSession(config=config)
        s.load_text("A,B,A")
        report = s.search("aba,zzz")
        assert report.results[0].locations == "E: (1,1)->(1,3) | W: (1,3)->(1,1)"
        assert report.results[1].locations == "-"
