"""Unit tests for the per-line directive classifier."""

import pytest

from mailc.contexts.parsing.directives import (
    BodyLine,
    SubjectDirective,
    TypeDirective,
    classify_line,
)


@pytest.mark.unit
def test_subject_directive():
    """Test subject text is captured and trimmed."""
    assert classify_line("<!-- $Subject: Welcome {{username}} -->") == SubjectDirective(
        text="Welcome {{username}}"
    )
    assert classify_line("   <!--$Subject:   Hi there   -->  ") == SubjectDirective(
        text="Hi there"
    )


@pytest.mark.unit
def test_subject_takes_priority_over_type():
    """Test a line matching the subject grammar is never a type directive."""
    assert classify_line("<!-- $Subject: @type x int -->") == SubjectDirective(text="@type x int")


@pytest.mark.unit
def test_type_directive_bare_with_type():
    """Test a bare name with a type."""
    directive = classify_line("<!-- @type inviteLink string -->")

    assert directive == TypeDirective(name="inviteLink", type="string")
    assert not directive.is_dotted
    assert directive.child is None


@pytest.mark.unit
def test_type_directive_bare_without_type():
    """Test a bare name without a type (struct declaration)."""
    assert classify_line("<!-- @type Order -->") == TypeDirective(name="Order", type="")


@pytest.mark.unit
def test_type_directive_dotted():
    """Test a dotted Parent.Child name."""
    directive = classify_line("<!-- @type Order.ID int -->")

    assert directive.is_dotted
    assert directive.parent == "Order"
    assert directive.child == "ID"
    assert directive.type == "int"


@pytest.mark.unit
def test_type_directive_slice_and_qualified_types():
    """Test []T slice types and dotted type names."""
    assert classify_line("<!-- @type items []Item -->") == TypeDirective(name="items", type="[]Item")
    assert classify_line("<!-- @type sentAt time.Time -->") == TypeDirective(
        name="sentAt", type="time.Time"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "<p><!-- $Subject: not alone --></p>",
        "<!-- @type A.B.C int -->",
        "<!-- @type 1abc -->",
        "<!-- @type -->",
        "<!-- @type name string extra -->",
        "<p>Hello {{name}}</p>",
        "",
    ],
)
def test_non_directives_are_body_lines(line):
    """Test malformed or embedded directives fall back to body text."""
    assert classify_line(line) == BodyLine(text=line)
