import pytest

from compliance_parser.excel_parser.stage_patterns import (
    is_13_published_stage,
    is_92_published_stage,
    is_above_90_stage,
)


@pytest.mark.parametrize(
    "stage, expected",
    [
        ("9(2) Published", True),
        ("Published under 9(2)", True),
        ("9(2) PUBLISHED - awaiting 13", True),
        ("9(2) Draft", False),
        ("Published", False),
        ("", False),
        (None, False),
    ],
)
def test_is_92_published_stage(stage, expected):
    assert is_92_published_stage(stage) is expected


@pytest.mark.parametrize(
    "stage, expected",
    [
        ("13 Published", True),
        ("Section 13 published", True),
        ("9(2) Published", False),
        ("13 draft", False),
        (None, False),
    ],
)
def test_is_13_published_stage(stage, expected):
    assert is_13_published_stage(stage) is expected


@pytest.mark.parametrize("stage", ["Above 90%", " above90 ", ">90%", "> 90"])
def test_is_above_90_stage(stage):
    assert is_above_90_stage(stage)


def test_is_above_90_stage_rejects_other_stages():
    assert not is_above_90_stage("Field survey 60%")
    assert not is_above_90_stage(None)
