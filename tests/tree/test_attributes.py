"""Unit tests for metadata attribute projection."""

import os
import stat

import pytest

from directory_tree.tree.attributes import ATTRIBUTE_FIELDS, project_attributes, read_attribute


@pytest.fixture
def sample_stats(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("hello")
    return os.stat(path)


@pytest.mark.parametrize("name,field", sorted(ATTRIBUTE_FIELDS.items()))
def test_friendly_names_read_stat_fields(sample_stats, name, field):
    assert read_attribute(sample_stats, name) == getattr(sample_stats, field, None)


def test_raw_names_are_accepted(sample_stats):
    assert read_attribute(sample_stats, "st_size") == 5
    assert read_attribute(sample_stats, "st_mtime") == sample_stats.st_mtime


def test_unknown_names_are_not_present(sample_stats):
    assert read_attribute(sample_stats, "colour") is None
    assert read_attribute(sample_stats, "st_colour") is None
    # Methods and dunder attributes of stat_result are not exposed
    assert read_attribute(sample_stats, "count") is None
    assert read_attribute(sample_stats, "__class__") is None


def test_unavailable_platform_fields_are_not_present():
    minimal = os.stat_result((stat.S_IFREG | 0o644, 1, 1, 1, 0, 0, 10, 0, 0, 0))
    assert read_attribute(minimal, "size") == 10
    assert read_attribute(minimal, "birthtime") is None


def test_project_attributes_keeps_requested_names(sample_stats):
    projected = project_attributes(sample_stats, ["mtime", "size", "colour"])
    assert projected == {"mtime": sample_stats.st_mtime, "size": 5, "colour": None}


def test_project_no_attributes(sample_stats):
    assert project_attributes(sample_stats, ()) == {}
