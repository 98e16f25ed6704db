"""Tests for KEY=VALUE variable mapping."""

from dnsctl.core.variables import string_slice_to_map


def test_splits_at_first_equals():
    assert string_slice_to_map(["TOKEN=a=b=c"]) == {"TOKEN": "a=b=c"}


def test_entries_without_equals_are_dropped():
    assert string_slice_to_map(["NOEQUALS", "IP=192.0.2.1", ""]) == {"IP": "192.0.2.1"}


def test_later_duplicate_overwrites_earlier():
    assert string_slice_to_map(["ENV=dev", "ENV=prod"]) == {"ENV": "prod"}


def test_empty_key_and_value_are_kept():
    assert string_slice_to_map(["=x", "EMPTY="]) == {"": "x", "EMPTY": ""}


def test_empty_input():
    assert string_slice_to_map([]) == {}
