"""Tests for report formatting and ReportConfig."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarywalk import (
    NodeStore,
    ReportConfig,
    TraversalStrategy,
    format_line,
    format_report,
)
from binarywalk.config import parse_strategy


EXPECTED_REPORT = [
    "pre-order: 1 2 4 7 5 8 9 3 6",
    "in-order: 7 4 2 8 5 9 1 6 3",
    "post-order: 7 4 8 9 5 2 6 3 1",
    "level-order: 1 2 3 4 5 6 7 8 9",
]


@pytest.fixture
def classic_root():
    store = NodeStore()
    root = store.build()
    # Yield keeps the owning store alive for the duration of the test
    yield root
    del store


def test_default_report(classic_root):
    assert format_report(classic_root) == EXPECTED_REPORT


def test_report_of_absent_root():
    assert format_report(None) == [
        "pre-order: ",
        "in-order: ",
        "post-order: ",
        "level-order: ",
    ]


def test_custom_order_and_separator(classic_root):
    config = ReportConfig(
        strategies=(TraversalStrategy.LEVEL_ORDER, TraversalStrategy.IN_ORDER),
        separator=",",
    )
    assert format_report(classic_root, config) == [
        "level-order: 1,2,3,4,5,6,7,8,9",
        "in-order: 7,4,2,8,5,9,1,6,3",
    ]


def test_invalid_config_rejected(classic_root):
    config = ReportConfig(strategies=(), separator="")
    with pytest.raises(ValueError) as exc_info:
        format_report(classic_root, config)
    assert "at least one strategy" in str(exc_info.value)
    assert "separator cannot be empty" in str(exc_info.value)


def test_config_validation_messages():
    assert ReportConfig().validate() == []

    duplicated = ReportConfig(strategies=(
        TraversalStrategy.PRE_ORDER,
        TraversalStrategy.PRE_ORDER,
    ))
    assert duplicated.validate() == ["pre-order is listed more than once"]

    wrong_type = ReportConfig(strategies=("pre",))
    assert wrong_type.validate() == ["'pre' is not a TraversalStrategy"]


def test_format_line_accepts_aliases():
    assert format_line("bfs", [1, 2, 3]) == "level-order: 1 2 3"
    assert format_line(TraversalStrategy.POST_ORDER, []) == "post-order: "


@pytest.mark.parametrize("name,expected", [
    ("pre", TraversalStrategy.PRE_ORDER),
    ("IN-ORDER", TraversalStrategy.IN_ORDER),
    ("post_order", TraversalStrategy.POST_ORDER),
    ("levelorder", TraversalStrategy.LEVEL_ORDER),
    (TraversalStrategy.LEVEL_ORDER, TraversalStrategy.LEVEL_ORDER),
])
def test_parse_strategy(name, expected):
    assert parse_strategy(name) is expected


def test_parse_strategy_unknown():
    with pytest.raises(ValueError):
        parse_strategy("diagonal")


def test_labels():
    assert [s.label for s in TraversalStrategy] == [
        "pre-order", "in-order", "post-order", "level-order",
    ]
