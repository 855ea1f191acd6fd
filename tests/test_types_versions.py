"""Tests for dtheader.utilities.types_versions."""

from dtheader.core import versions
from dtheader.utilities.types_versions import make_types_versions_for_package_json


class TestMakeTypesVersions:
    """Tests for make_types_versions_for_package_json."""

    def test_empty_is_none(self):
        assert make_types_versions_for_package_json([]) is None

    def test_entries(self):
        assert make_types_versions_for_package_json(["3.1", "3.5"]) == {
            ">=3.1.0-0": {"*": ["ts3.1/*"]},
            ">=3.5.0-0": {"*": ["ts3.5/*"]},
        }

    def test_keeps_input_order(self):
        result = make_types_versions_for_package_json(versions.version_range("3.7"))
        assert list(result) == [">=3.7.0-0", ">=3.8.0-0", ">=3.9.0-0"]
