#!/usr/bin/env python3
"""String helper tests."""

import pytest

from src.utils.strings import split_tag_names, str2bool, strip_whitespace


class TestSplitTagNames:

    @pytest.mark.parametrize("species, expected", [
        ("skin care, massage,  facial", ["skincare", "massage", "facial"]),
        ("nails,nails", ["nails", "nails"]),
        ("nails", ["nails"]),
        ("\tnails ,\nhair", ["nails", "hair"]),
    ])
    def test_split(self, species, expected):
        assert split_tag_names(species) == expected

    def test_consecutive_and_trailing_commas_keep_empty_names(self):
        assert split_tag_names("nails,,hair,") == ["nails", "", "hair", ""]

    def test_skip_empty(self):
        assert split_tag_names("nails,,hair,", skip_empty=True) == ["nails", "hair"]

    def test_empty_string_is_one_empty_name(self):
        assert split_tag_names("") == [""]

    def test_none(self):
        assert split_tag_names(None) == []


def test_strip_whitespace():
    assert strip_whitespace(" a b\tc\n") == "abc"


@pytest.mark.parametrize("value, expected", [
    ("true", True), ("Yes", True), ("1", True), ("false", False), ("0", False), ("", False),
])
def test_str2bool(value, expected):
    assert str2bool(value) is expected
