"""Tests for Rich console formatting helpers."""

from bblgc.utils.formatting import create_cleanup_table


class TestCreateCleanupTable:
    """Tests for create_cleanup_table."""

    def test_rows(self) -> None:
        """One row per removed and preserved path."""
        table = create_cleanup_table(["a", "b"], ["vars/c"])

        assert table.row_count == 3
        assert table.title == "Cleanup"

    def test_dry_run_title(self) -> None:
        """Dry-run tables are labelled as such."""
        table = create_cleanup_table([], [], dry_run=True)

        assert table.title == "Cleanup (Dry Run)"
        assert table.row_count == 0

    def test_markup_in_paths_is_escaped(self) -> None:
        """Paths containing brackets are not treated as markup."""
        table = create_cleanup_table([], ["vars/[bold]x"])

        cells = list(table.columns[1].cells)
        assert cells == ["vars/\\[bold]x"]
