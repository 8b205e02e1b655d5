"""Tests for the dashboard figures."""

import pytest

from compliance_parser.config import ThresholdConfig
from compliance_parser.constants import SECTION_13, SECTION_92
from compliance_parser.excel_parser.build_district import build_district
from compliance_parser.summary import (
    build_dashboard_summary,
    compliance_band,
    format_item_value,
    list_critical_villages,
)


@pytest.fixture
def districts(village_grid, parser_config):
    kollam = build_district(
        village_grid(
            {"name": "Anchal", "sec92": [1] * 13, "stage": "9(2) Published", "days": 120},
            {"name": "Punalur", "sec92": [0.5] * 13, "stage": "13 Published"},
        ),
        "Kollam",
        parser_config,
    )
    thrissur = build_district(
        village_grid(
            {"name": "Chalakudy", "sec92": [0] * 13, "stage": "9(2) published", "days": 95},
            {"name": "Mala", "sec92": [0] * 13, "stage": "9(2) published", "days": 120},
            {"name": "Kodakara", "sec92": [0] * 13, "stage": "9(2) published", "days": 30},
        ),
        "Thrissur",
        parser_config,
    )
    return [kollam, thrissur]


class TestDashboardSummary:
    def test_all_districts(self, districts):
        summary = build_dashboard_summary(districts, SECTION_92)

        assert summary.total_districts == 2
        assert summary.total_villages == 5
        # Average over villages, not over district averages
        assert summary.avg_percent == pytest.approx(1.5 / 5)
        assert summary.completed_villages == 1
        assert summary.pending_villages == 4
        assert summary.critical_villages == 3

    def test_single_district(self, districts):
        summary = build_dashboard_summary(districts, SECTION_13, district_name="Kollam")

        assert summary.total_districts == 1
        assert summary.total_villages == 2
        assert summary.avg_percent == 0.0
        assert summary.completed_villages == 1

    def test_no_data(self):
        summary = build_dashboard_summary([], SECTION_92)

        assert summary.total_villages == 0
        assert summary.avg_percent == 0.0
        assert summary.to_dict()["section"] == "9(2)"

    def test_unknown_section(self, districts):
        with pytest.raises(ValueError):
            build_dashboard_summary(districts, "14")


def test_critical_villages_longest_overdue_first(districts):
    critical = list_critical_villages(districts)

    # Ties keep sheet order
    assert [(village.name, village.days_passed_after_92) for village in critical] == [
        ("Anchal", 120),
        ("Mala", 120),
        ("Chalakudy", 95),
    ]


@pytest.mark.parametrize(
    "percent, band",
    [(1.0, "completed"), (0.99, "high"), (0.75, "high"), (0.5, "medium"), (0.49, "low"), (0.0, "low")],
)
def test_compliance_band(percent, band):
    assert compliance_band(percent, ThresholdConfig(completed=0.9, critical_days=90)) == band


@pytest.mark.parametrize(
    "value, raw, expected",
    [
        (0.5, None, "50%"),
        (0.0, "", "0%"),
        (0.19, 0.19, "19%"),
        (1.0, 1.7, "1.7"),
        (1.0, "Ready", "Ready"),
        (0.0, "#REF!", "#REF!"),
        (0.125, None, "13%"),
    ],
)
def test_format_item_value(value, raw, expected):
    assert format_item_value(value, raw) == expected
