"""Tests for read_village_metadata and excel_serial_to_iso."""

import pytest

from compliance_parser.config import LayoutConfig
from compliance_parser.excel_parser.read_village_metadata import excel_serial_to_iso, read_village_metadata

COLUMN = 3


@pytest.fixture
def metadata_grid(layout):
    def factory(stage=None, published=None, days=None, **personnel):
        rows = max(
            layout.stage_row,
            layout.published_date_row,
            layout.days_passed_row,
            layout.head_surveyor_row,
            layout.government_surveyor_row,
            layout.assistant_director_row,
            layout.superintendent_row,
        )
        grid = [[None] * (COLUMN + 1) for _ in range(rows + 1)]
        grid[layout.stage_row][COLUMN] = stage
        grid[layout.published_date_row][COLUMN] = published
        grid[layout.days_passed_row][COLUMN] = days
        for field_name, value in personnel.items():
            grid[getattr(layout, f"{field_name}_row")][COLUMN] = value
        return grid

    return factory


class TestExcelSerialToIso:
    @pytest.mark.parametrize(
        "serial, expected",
        [
            (0, "1899-12-30"),
            (1, "1899-12-31"),
            (45000, "2023-03-15"),
            (45000.75, "2023-03-15"),
            (-1, "1899-12-29"),
        ],
    )
    def test_conversion(self, serial, expected):
        assert excel_serial_to_iso(serial) == expected

    def test_out_of_range(self):
        assert excel_serial_to_iso(10 ** 9) is None


class TestStageGate:
    def test_published_stage_reads_date_and_days(self, metadata_grid, layout):
        grid = metadata_grid(stage=" 9(2) Published ", published=45000, days=95)

        metadata = read_village_metadata(grid, COLUMN, layout=layout, critical_days=90)

        assert metadata.stage == "9(2) Published"
        assert metadata.published_date == "2023-03-15"
        assert metadata.days_passed_after_92 == 95
        assert metadata.is_critical is True

    def test_other_stage_ignores_stale_values(self, metadata_grid, layout):
        """
        BEHAVIOUR: date and day counter are only meaningful in the 9(2)
        published stage; stale values are ignored elsewhere.
        """
        grid = metadata_grid(stage="13 Published", published=45000, days=400)

        metadata = read_village_metadata(grid, COLUMN, layout=layout, critical_days=90)

        assert metadata.published_date is None
        assert metadata.days_passed_after_92 is None
        assert metadata.is_critical is False

    def test_non_numeric_cells_give_none(self, metadata_grid, layout):
        grid = metadata_grid(stage="9(2) published", published="15/03/2023", days="95 days")

        metadata = read_village_metadata(grid, COLUMN, layout=layout, critical_days=90)

        assert metadata.published_date is None
        assert metadata.days_passed_after_92 is None
        assert metadata.is_critical is False

    @pytest.mark.parametrize("days, critical", [(89, False), (90, True), (120.5, True)])
    def test_critical_threshold(self, metadata_grid, layout, days, critical):
        grid = metadata_grid(stage="9(2) Published", days=days)

        metadata = read_village_metadata(grid, COLUMN, layout=layout, critical_days=90)

        assert metadata.days_passed_after_92 == days
        assert metadata.is_critical is critical


class TestDefaults:
    def test_blank_stage_is_unknown(self, metadata_grid, layout):
        metadata = read_village_metadata(metadata_grid(stage="   "), COLUMN, layout=layout)

        assert metadata.stage == "Unknown"

    def test_personnel_fields(self, metadata_grid, layout):
        grid = metadata_grid(
            stage="Above 90%",
            head_surveyor="  R. Nair ",
            government_surveyor=1234,
            assistant_director="",
            superintendent="S. Pillai",
        )

        metadata = read_village_metadata(grid, COLUMN, layout=layout)

        assert metadata.head_surveyor == "R. Nair"
        assert metadata.government_surveyor == "Not Assigned"
        assert metadata.assistant_director == "Not Assigned"
        assert metadata.superintendent == "S. Pillai"

    def test_empty_grid(self):
        metadata = read_village_metadata([], COLUMN, layout=LayoutConfig(), critical_days=90)

        assert metadata.stage == "Unknown"
        assert metadata.head_surveyor == "Not Assigned"
        assert metadata.published_date is None
        assert metadata.is_critical is False
