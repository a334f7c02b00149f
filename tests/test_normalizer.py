import pytest

from cvtext.normalizer import (
    RULES,
    collapse_blank_lines,
    collapse_spaces,
    normalize,
    rewrite_bullets,
    rewrite_lettered,
    rewrite_numbered,
    tag_headings,
)


def test_rules_run_in_documented_order():
    assert [r.name for r in RULES] == [
        "line_endings", "bullets", "numbered", "lettered",
        "headings", "spaces", "blank_lines", "trim",
    ]


def test_dash_bullet():
    assert normalize("- Led team of 5") == "• Led team of 5"


@pytest.mark.parametrize("raw", ["● Python", "○ Python", "▪ Python", "► Python", "·Python", "– Python", "—  Python"])
def test_glyph_bullets(raw):
    assert normalize(raw) == "• Python"


def test_hyphenated_number_is_not_a_bullet():
    assert rewrite_bullets("-5 degrees") == "-5 degrees"


def test_numbered_markers():
    assert normalize("1) First\n2)   Second\n10. Tenth") == "1. First\n2. Second\n10. Tenth"


def test_decimal_is_not_a_list_marker():
    assert rewrite_numbered("1.5 years of Python") == "1.5 years of Python"


def test_lettered_markers_are_indented():
    assert rewrite_lettered("a) sub item\nB. other") == "   a. sub item\n   B. other"
    assert normalize("1. Main\na) sub item") == "1. Main\n   a. sub item"


def test_abbreviation_is_not_a_lettered_marker():
    assert rewrite_lettered("e.g. Django") == "e.g. Django"


def test_heading_detection():
    out = normalize("WORK EXPERIENCE\nBuilt payment systems")
    assert out == "## WORK EXPERIENCE\n\nBuilt payment systems"


def test_heading_between_content():
    out = normalize("Jane Doe\nSKILLS & TOOLS\nPython")
    assert out == "Jane Doe\n\n## SKILLS & TOOLS\n\nPython"


def test_mixed_case_line_is_not_a_heading():
    assert tag_headings("Work Experience") == "Work Experience"


def test_whitespace_collapsing():
    assert collapse_spaces("a  \t b") == "a b"
    assert collapse_blank_lines("x\n\n\n\ny") == "x\n\ny"
    assert collapse_blank_lines("x\n \n\t\ny") == "x\n\ny"


def test_line_endings_and_trimming():
    assert normalize("  hello  \r\n  world \rend") == "hello\nworld\nend"


def test_empty_input():
    assert normalize("") == ""
    assert normalize("  \n\n  ") == ""


@pytest.mark.parametrize("raw", [
    "- Led team of 5",
    "WORK\tEXPERIENCE\n- a) x\n••y\n1.\n  b. item\n\n\n\nR&D",
    "–\n",
    "A. Smith",
    "Experienced engineer.\n\nSkills:\n● Python  ● SQL",
    "  1)  First \r\n\r\n\r\n\r\nSUMMARY\n  text  ",
    "a. lead\n\n\n   b.   follow",
    "\xa0- Led team of 5",
    "\xa0\xa01) First",
    "\xa0SKILLS",
    "\x0c •a.",
    "\u2003a)\xa0item\n\x0b\n\x0b\n\x0bEND",
    "WORK\xa0EXPERIENCE\u2028x",
    "",
])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_unicode_indented_markers_rewritten_in_one_pass():
    assert normalize("\xa0- Led team of 5") == "• Led team of 5"
    assert normalize("\xa0\xa01) First") == "1. First"
    assert normalize("\xa0SKILLS") == "## SKILLS"
    assert normalize("\x0c •a.") == "• a."
    assert normalize("\u2003b)\xa0item") == "   b. item"


def test_non_ascii_capital_headings():
    assert normalize("ÉDUCATION\nUniversité de Lyon") == "## ÉDUCATION\n\nUniversité de Lyon"
    assert normalize("EXPÉRIENCE PROFESSIONNELLE") == "## EXPÉRIENCE PROFESSIONNELLE"


def test_single_capital_is_not_a_heading():
    assert tag_headings("I") == "I"
