"""Unit tests for placeholder normalization."""

import pytest

from mailc.contexts.generation.normalizer import normalize_placeholders


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hi {{firstName}}", "Hi {{ data.FirstName }}"),
        ("{{   firstName   }}", "{{ data.FirstName }}"),
        ("{{Order.ID}}", "{{ data.Order.ID }}"),
        ("{{user.name}}", "{{ data.User.Name }}"),
        ("{{none}}", "{{ data.None_ }}"),
    ],
)
def test_normalize_references(text, expected):
    """Test bare and dotted placeholders are re-cased onto the data object."""
    assert normalize_placeholders(text) == expected


@pytest.mark.unit
def test_normalize_preserves_trim_markers():
    """Test leading and trailing trim markers survive normalization."""
    assert normalize_placeholders("a {{- name -}} b") == "a {{- data.Name -}} b"
    assert normalize_placeholders("{{-name}}") == "{{- data.Name }}"
    assert normalize_placeholders("{{ name -}}") == "{{ data.Name -}}"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "{{ name | upper }}",
        "{{ fn() }}",
        "{{ .Name }}",
        "{% if x %}y{% endif %}",
        "plain text with { braces }",
    ],
)
def test_normalize_leaves_other_syntax_alone(text):
    """Test expressions that are not identifier paths are not rewritten."""
    assert normalize_placeholders(text) == text


@pytest.mark.unit
def test_normalize_custom_root():
    """Test the data root name can be changed."""
    assert normalize_placeholders("{{x}}", root="ctx") == "{{ ctx.X }}"


@pytest.mark.unit
def test_normalize_multiline_body():
    """Test every placeholder in a multi-line body is rewritten."""
    body = "<p>{{a}}</p>\n<p>{{B.c}}</p>\n"

    assert normalize_placeholders(body) == "<p>{{ data.A }}</p>\n<p>{{ data.B.C }}</p>\n"
