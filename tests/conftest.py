"""Pytest fixtures for wheel tests."""

import json
import logging
from pathlib import Path

import pytest

from radial_wheel.data import InteriorNode, LeafGroup, WheelData, parse_data


def _hierarchy(mapping: dict) -> InteriorNode:
    return InteriorNode(
        tuple(
            (category, InteriorNode(tuple((sub, LeafGroup(tuple(items))) for sub, items in subs.items())))
            for category, subs in mapping.items()
        )
    )


@pytest.fixture
def two_categories() -> WheelData:
    """A has 3 leaves, B has 1: inner sectors of 270 and 90 degrees."""
    labels = _hierarchy(
        {
            "A": {"A1": ["a", "b"], "A2": ["c"]},
            "B": {"B1": ["d"]},
        }
    )
    return WheelData(labels=labels, colors={"A": "#ff0000", "B": "#0000ff"})


@pytest.fixture
def feelings_payload() -> dict:
    """Realistic dataset document with uneven branches."""
    return {
        "colors": {
            "Joy": "#f7d547",
            "Sadness": "#5b8bd9",
            "Anger": "#e4572e",
        },
        "labels": {
            "Joy": {
                "Content": ["Free", "Joyful", "Curious"],
                "Proud": ["Successful", "Confident"],
                "Optimistic": ["Hopeful", "Inspired", "Eager", "Open"],
            },
            "Sadness": {
                "Lonely": ["Isolated", "Abandoned"],
                "Hurt": ["Disappointed"],
            },
            "Anger": {
                "Frustrated": ["Annoyed", "Infuriated"],
                "Bitter": ["Indignant", "Violated", "Resentful"],
            },
            "Fear": {
                "Scared": ["Helpless", "Frightened"],
            },
        },
    }


@pytest.fixture
def feelings(feelings_payload) -> WheelData:
    return parse_data(feelings_payload)


@pytest.fixture
def empty_group() -> WheelData:
    """Subcategory X2 has no items and gets a zero-width sector."""
    labels = _hierarchy(
        {
            "X": {"X1": ["p", "q"], "X2": []},
            "Y": {"Y1": ["r", "s"]},
        }
    )
    return WheelData(labels=labels, colors={})


@pytest.fixture
def data_file(tmp_path: Path, feelings_payload) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(feelings_payload))
    return path


@pytest.fixture
def make_hierarchy():
    """Build a category -> subcategory -> items hierarchy from plain dicts."""
    return _hierarchy


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging so they do not outlive captured output."""
    yield
    logger = logging.getLogger("radial_wheel")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
