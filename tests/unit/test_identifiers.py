"""Unit tests for identifier helpers."""

import pytest

from mailc.utils.identifiers import lower_first, make_exported_name, to_field_name, upper_first


@pytest.mark.unit
@pytest.mark.parametrize(
    "stem, expected",
    [
        ("simple", "Simple"),
        ("welcome-personalized", "WelcomePersonalized"),
        ("welcome_personalized", "WelcomePersonalized"),
        ("order.v2", "OrderV2"),
        ("password reset", "PasswordReset"),
        ("alreadyCamel", "AlreadyCamel"),
    ],
)
def test_make_exported_name(stem, expected):
    """Test splitting on non-alphanumerics and title-casing each chunk."""
    assert make_exported_name(stem) == expected


@pytest.mark.unit
def test_make_exported_name_empty_string():
    """Test that empty input yields the bare prefix."""
    assert make_exported_name("") == "X"


@pytest.mark.unit
@pytest.mark.parametrize("stem", ["---", "_", ". -"])
def test_make_exported_name_all_punctuation(stem):
    """Test that input without any alphanumerics yields the bare prefix."""
    assert make_exported_name(stem) == "X"


@pytest.mark.unit
@pytest.mark.parametrize(
    "stem, expected",
    [
        ("2fa-code", "X2faCode"),
        ("123", "X123"),
        ("-1-day", "X1Day"),
    ],
)
def test_make_exported_name_leading_digit(stem, expected):
    """Test that results starting with a digit are prefixed with X."""
    assert make_exported_name(stem) == expected


@pytest.mark.unit
def test_make_exported_name_unicode_letters():
    """Test that non-ASCII letters count as alphanumeric."""
    assert make_exported_name("héllo-wörld") == "HélloWörld"


@pytest.mark.unit
def test_upper_and_lower_first():
    """Test first-character case helpers, including empty strings."""
    assert upper_first("firstName") == "FirstName"
    assert upper_first("") == ""
    assert lower_first("WelcomePersonalized") == "welcomePersonalized"
    assert lower_first("") == ""


@pytest.mark.unit
def test_to_field_name():
    """Test field names are upper-first and never Python keywords."""
    assert to_field_name("inviteLink") == "InviteLink"
    assert to_field_name("ID") == "ID"
    assert to_field_name("class") == "Class"
    assert to_field_name("none") == "None_"
    assert to_field_name("true") == "True_"
