import pytest

from coursedesc.sections import (
    SectionBoundary,
    extract_section,
    find_section_boundary,
    heading_matcher,
    new_placeholder,
    normalize_document,
)

START = "## prerequisites"
END = "## course outline"


def test_extracts_section_and_leaves_placeholder():
    document = "Intro\n## Prerequisites\nNeeds X\n## Course Outline\nDay 1"

    result = extract_section(document, START, END, placeholder="{{PLACEHOLDER}}")

    assert result.found is True
    assert result.extracted == "## Prerequisites\nNeeds X"
    assert result.residual_text == "Intro\n{{PLACEHOLDER}}\n## Course Outline\nDay 1"
    assert result.boundary == SectionBoundary(1, 3)


def test_placeholder_appears_once_at_section_position():
    lines = ["# Title", "", "## Prerequisites", "- A", "- B", "", "## Course Outline", "Day 1"]

    result = extract_section(lines, START, END)

    assert result.residual.count(result.placeholder) == 1
    assert result.residual.index(result.placeholder) == 2
    assert result.residual[3] == "## Course Outline"


def test_markers_match_trimmed_lines_in_any_case():
    document = "  ## PREREQUISITES  \nNeeds X\n##   course outline\n## Course OUTLINE\t"

    result = extract_section(document, START, END)

    assert result.found is True
    # "##   course outline" has inner spacing, so only the last line matches
    assert result.extracted == "  ## PREREQUISITES  \nNeeds X\n##   course outline"
    assert result.boundary == SectionBoundary(0, 3)


def test_markers_are_not_substring_matches():
    document = "## Prerequisites and setup\nText\n## Course Outline"

    result = extract_section(document, START, END)

    assert result.found is False


def test_missing_start_marker_is_not_found():
    document = "Intro\n## Course Outline\nDay 1"

    result = extract_section(document, START, END)

    assert result.found is False
    assert result.extracted == ""
    assert result.placeholder is None
    assert result.residual_text == document


def test_start_without_end_marker_is_not_extracted_to_end_of_document():
    document = "Intro\n## Prerequisites\nNeeds X\n## Agenda\nDay 1"

    result = extract_section(document, START, END)

    assert result.found is False
    assert result.extracted == ""
    assert result.residual_text == document


def test_end_marker_before_start_marker_is_ignored():
    document = "## Course Outline\nIntro\n## Prerequisites\nNeeds X"

    assert find_section_boundary(normalize_document(document), START, END) is None


def test_first_start_marker_wins():
    lines = ["## Prerequisites", "one", "## Prerequisites", "two", "## Course Outline"]

    assert find_section_boundary(lines, START, END) == SectionBoundary(0, 4)


def test_extraction_from_residual_is_not_found():
    document = "Intro\n## Prerequisites\nNeeds X\n## Course Outline\nDay 1"
    first = extract_section(document, START, END)

    second = extract_section(first.residual, START, END)

    assert second.found is False
    assert second.residual == first.residual


def test_input_lines_are_not_mutated():
    lines = ["Intro", "## Prerequisites", "Needs X", "## Course Outline"]
    original = list(lines)

    extract_section(lines, START, END)

    assert lines == original


def test_crlf_line_endings_are_normalized():
    result = extract_section("Intro\r\n## Prerequisites\r\nNeeds X\r\n## Course Outline\r\n", START, END)

    assert result.extracted == "## Prerequisites\nNeeds X"
    assert all("\r" not in line for line in result.residual)


def test_predicate_markers():
    lines = ["a", "START", "b", "STOP"]

    boundary = find_section_boundary(lines, lambda l: l == "START", lambda l: l == "STOP")

    assert boundary == SectionBoundary(1, 3)


def test_heading_matcher():
    matches = heading_matcher("## Course Outline")

    assert matches("## course outline  ")
    assert not matches("## Course Outline details")


def test_placeholders_are_unique():
    first = new_placeholder("PREREQUISITES")
    second = new_placeholder("PREREQUISITES")

    assert first != second
    assert first.startswith("{{PREREQUISITES-") and first.endswith("}}")


def test_boundary_requires_start_before_end():
    with pytest.raises(ValueError):
        SectionBoundary(3, 3)
