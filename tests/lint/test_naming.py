# topmark:header:start
#
#   project      : Doculint
#   file         : test_naming.py
#   file_relpath : tests/lint/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the package naming validator."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from doculint.lint.naming import validate_package_name
from tests.conftest import parametrize
from tests.strategies_doculint import (
    s_conventional_package_name,
    s_mixed_case_name,
    s_name_with_separator,
)


@parametrize(
    "name,expected",
    [
        ("mypkg", None),
        ("http2", None),
        ("my_pkg", 'package "my_pkg" should not contain - or _ in name'),
        ("my-pkg", 'package "my-pkg" should not contain - or _ in name'),
        ("MyPkg", 'package "MyPkg" should be all lowercase'),
        # The separator rule wins when both are violated.
        ("My_Pkg", 'package "My_Pkg" should not contain - or _ in name'),
    ],
)
def test_validate_package_name_examples(name: str, expected: str | None) -> None:
    assert validate_package_name(name) == expected


@given(s_conventional_package_name())
def test_conventional_names_pass(name: str) -> None:
    assert validate_package_name(name) is None


@given(s_name_with_separator())
def test_separator_names_report_separator_rule(name: str) -> None:
    assert validate_package_name(name) == f'package "{name}" should not contain - or _ in name'


@given(s_mixed_case_name())
def test_mixed_case_names_report_lowercase_rule(name: str) -> None:
    assert validate_package_name(name) == f'package "{name}" should be all lowercase'


@pytest.mark.hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(st.text(min_size=1, max_size=40))
def test_any_identifier_reports_at_most_one_rule(name: str) -> None:
    message = validate_package_name(name)
    has_separator = "-" in name or "_" in name
    if has_separator:
        assert message is not None and "should not contain" in message
    elif name != name.lower():
        assert message is not None and "all lowercase" in message
    else:
        assert message is None
