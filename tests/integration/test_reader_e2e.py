"""
End-to-end tests for TableReader against HTML fixture files.

The network tests only run when TABLE_READER_NETWORK_TESTS is set.
"""

import os

import pytest

from html_table_reader import (
    NotLoadedError,
    SelectorNotFoundError,
    SourceDescriptor,
    TableLoadError,
    TableReader,
)

STATES_URL = "http://en.wikipedia.org/wiki/List_of_states_and_territories_of_the_United_States"

network = pytest.mark.skipif(
    not os.getenv("TABLE_READER_NETWORK_TESTS"),
    reason="set TABLE_READER_NETWORK_TESTS=1 to run tests that need network access",
)


@pytest.fixture
def fixture_source(fixtures_dir):
    def _source(name):
        return SourceDescriptor.file(name, base_dir=fixtures_dir)

    return _source


class TestStaticFiles:
    """Read the static fixture tables."""

    def test_headings(self, fixture_source):
        """Test headings of a table with <thead> and <tbody>."""
        reader = TableReader(fixture_source("tableOK.html"))
        reader.refresh()

        headings = reader.headings()

        assert headings == ["H0", "H1", "H2"]
        assert headings[1] == "H1"

    def test_data(self, fixture_source):
        """Test data rows of a table with <thead> and <tbody>."""
        reader = TableReader(fixture_source("tableOK.html"))
        reader.refresh()

        rows = iter(reader.rows())
        row = next(rows)
        assert row[2] == "R0C2"
        row = next(rows)
        assert row[0] == "R1C0"

    def test_iterator(self, fixture_source):
        """Test iterating to the last row."""
        reader = TableReader(fixture_source("tableOK.html"))
        reader.refresh()

        row = None
        for row in reader:
            pass

        assert row is not None
        assert row[1] == "R2C1"
        assert len(reader.rows()) == 3

    def test_headings_without_thead_tbody(self, fixture_source):
        """Test a table without wrappers whose first row is all <th>."""
        reader = TableReader(fixture_source("tableNoTheadTbody.html"))
        reader.refresh()

        assert reader.headings()[1] == "H1"

    def test_data_without_thead_tbody(self, fixture_source):
        """Test the <th> row is not returned as data."""
        reader = TableReader(fixture_source("tableNoTheadTbody.html"))
        reader.refresh()

        rows = list(reader.rows())
        assert len(rows) == 3
        assert rows[0][2] == "R0C2"
        assert rows[1][0] == "R1C0"

    def test_data_without_th(self, fixture_source):
        """Test a table without header cells: empty headings, first row is data."""
        reader = TableReader(fixture_source("tableNoTH.html"))
        reader.refresh()

        assert reader.headings() == []
        rows = list(reader.rows())
        assert len(rows) == 3
        assert rows[0][2] == "R0C2"

    def test_file_url(self, fixtures_dir):
        """Test a file: URL source."""
        reader = TableReader(fixtures_dir.joinpath("tableOK.html").as_uri())
        reader.refresh()

        assert reader.headings() == ["H0", "H1", "H2"]

    def test_bad_selector(self, fixture_source):
        """Test a jsoup :eq() selector past the only table."""
        reader = TableReader(fixture_source("tableOK.html"), "table:eq(1)")

        with pytest.raises(SelectorNotFoundError):
            reader.refresh()

    def test_missing_file(self, fixture_source):
        """Test a missing file raises TableLoadError."""
        reader = TableReader(fixture_source("noSuchTable.html"))

        with pytest.raises(TableLoadError):
            reader.refresh()
        with pytest.raises(NotLoadedError):
            reader.rows()


class TestSelectors:
    """Select among several tables in one document."""

    @pytest.fixture
    def multi(self, fixture_source):
        return fixture_source("tableMulti.html")

    def test_class_selector(self, multi):
        """Test selecting a table by class."""
        reader = TableReader(multi, "table.data")
        reader.refresh()

        assert reader.headings() == ["Name", "Qty"]
        assert list(reader.rows()) == [("apple", "3"), ("pear", "5")]

    def test_index_in_document_order(self, multi):
        """Test indexes count nested tables in document order."""
        reader = TableReader(multi, "table", 2)
        reader.refresh()

        assert reader.headings() == ["Name", "Qty"]

    def test_outer_table_skips_nested_rows(self, multi):
        """Test the outer table's rows exclude rows of its nested table."""
        reader = TableReader(multi, "table.summary")
        reader.refresh()

        rows = list(reader.rows())
        assert reader.headings() == ["Key", "Value"]
        assert rows == [("count", "xy"), ("total", "42")]

    def test_nested_table(self, multi):
        """Test selecting the nested table itself."""
        reader = TableReader(multi, "table.inner")
        reader.refresh()

        assert reader.headings() == []
        assert list(reader.rows()) == [("x",), ("y",)]

    def test_index_out_of_range(self, multi):
        """Test an index past the matches."""
        reader = TableReader(multi, "table", 3)

        with pytest.raises(SelectorNotFoundError) as exc_info:
            reader.refresh()

        assert exc_info.value.match_count == 3

    def test_non_table_element(self, multi):
        """Test a selector resolving to a <div>."""
        reader = TableReader(multi, "div.data")

        with pytest.raises(SelectorNotFoundError, match="expected <table>"):
            reader.refresh()


@network
class TestRemote:
    """Read tables over HTTP."""

    def test_url_no_selector(self):
        """Test loading the first table of a page."""
        TableReader(STATES_URL).refresh()

    def test_url_fetch(self):
        """Test iterating a selected Wikipedia table."""
        reader = TableReader(STATES_URL, "#mw-content-text table.wikitable.sortable", 0)
        reader.refresh()

        assert len(list(reader.rows())) > 0

    def test_bad_host(self):
        """Test an unresolvable host raises TableLoadError."""
        reader = TableReader(
            "http://ex.wikipedia.org/wiki/List_of_United_States_cities_by_population",
            "table:eq(4)",
        )

        with pytest.raises(TableLoadError):
            reader.refresh()
