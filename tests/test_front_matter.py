import pytest
from pydantic import ValidationError

from coursedesc.front_matter import (
    CourseMetadata,
    MetadataError,
    MissingFieldError,
    parse_front_matter,
    slugify,
    split_front_matter,
)


def test_split_front_matter_with_block_list():
    text = (
        "---\r\n"
        "course_id: 1234\r\n"
        "course_title: Intro to Search\r\n"
        "audience:\r\n"
        "    - Search users\r\n"
        "    - Knowledge managers\r\n"
        "---\r\n"
        "## Course Description\r\n"
        "Body"
    )

    data, body = split_front_matter(text)

    assert data == {
        "course_id": 1234,
        "course_title": "Intro to Search",
        "audience": ["Search users", "Knowledge managers"],
    }
    assert body == "## Course Description\nBody"


def test_split_without_front_matter_returns_text():
    data, body = split_front_matter("# Title\n\nText")

    assert data == {}
    assert body == "# Title\n\nText"


def test_unclosed_front_matter_raises():
    with pytest.raises(MetadataError):
        split_front_matter("---\nformat: Virtual\n# Title")


def test_empty_front_matter_block():
    data, body = split_front_matter("---\n---\n# Title")

    assert data == {}
    assert body == "# Title"


def test_parse_flow_list_quotes_and_comments():
    data = parse_front_matter(
        "# comment\n"
        'course_title: "Search: Advanced"\n'
        "audience: [Admins, 'Power users']\n"
        "format: 'Virtual'\n"
    )

    assert data["course_title"] == "Search: Advanced"
    assert data["audience"] == ["Admins", "Power users"]
    assert data["format"] == "Virtual"


def test_folded_block_scalar():
    data, body = split_front_matter(
        "---\ncourse_title: >\n  Intro to Search\nformat: Virtual\n---\nBody"
    )

    assert data["course_title"] == "Intro to Search\n"
    assert data["format"] == "Virtual"
    assert body == "Body"


def test_inline_comment_is_not_part_of_value():
    data = parse_front_matter("format: Virtual  # instructor-led\n")

    assert data == {"format": "Virtual"}


def test_null_values_are_dropped():
    data = parse_front_matter("duration: ~\nformat: null\naudience:\ncourse_id: 7")

    assert data == {"course_id": 7}


def test_null_values_read_as_absent():
    data, _ = split_front_matter("---\nduration: ~\nformat: null\n---\n")
    metadata = CourseMetadata.from_mapping(data)

    assert not metadata.has_field("duration")
    assert metadata.get_format() is None
    with pytest.raises(MissingFieldError):
        metadata.get_duration(required=True)


def test_list_without_key_raises():
    with pytest.raises(MetadataError):
        parse_front_matter("- orphan")


def test_scalar_front_matter_raises():
    with pytest.raises(MetadataError):
        parse_front_matter("format Virtual")


def test_invalid_yaml_raises_metadata_error():
    with pytest.raises(MetadataError):
        parse_front_matter("audience: [Admins, Users\nformat: Virtual")


def test_getters_return_none_for_absent_fields():
    metadata = CourseMetadata.from_mapping({"format": "Virtual"})

    assert metadata.get_format() == "Virtual"
    assert metadata.get_duration() is None
    assert metadata.get_audience() is None


def test_required_getter_raises_missing_field_error():
    metadata = CourseMetadata.from_mapping({})

    with pytest.raises(MissingFieldError) as excinfo:
        metadata.get_format(required=True)

    assert excinfo.value.field == "format"
    assert "format" in str(excinfo.value)


def test_empty_string_counts_as_present():
    metadata = CourseMetadata.from_mapping({"duration": ""})

    assert metadata.has_field("duration")
    assert metadata.get_duration(required=True) == ""


def test_none_value_counts_as_absent():
    metadata = CourseMetadata.from_mapping({"duration": None})

    assert not metadata.has_field("duration")


def test_scalars_are_coerced_to_strings():
    data = parse_front_matter("course_id: 1234\nproduct_version: 9.2\nduration: 2024-03-01")
    metadata = CourseMetadata.from_mapping(data)

    assert metadata.get_course_id() == "1234"
    assert metadata.get_product_version() == "9.2"
    assert metadata.get_duration() == "2024-03-01"


def test_single_audience_value_becomes_list():
    metadata = CourseMetadata.from_mapping({"audience": "Admins"})

    assert metadata.get_audience() == ["Admins"]


def test_invalid_field_type_raises_metadata_error():
    with pytest.raises(MetadataError):
        CourseMetadata.from_mapping({"format": ["a", "b"]})


def test_extra_fields_are_kept():
    metadata = CourseMetadata.from_mapping({"level": "Beginner"})

    assert metadata.has_field("level")
    assert not metadata.has_field("format")


def test_metadata_is_immutable():
    metadata = CourseMetadata.from_mapping({"format": "Virtual"})

    with pytest.raises(ValidationError):
        metadata.format = "Onsite"


def test_get_audience_returns_a_copy():
    metadata = CourseMetadata.from_mapping({"audience": ["A", "B"]})

    metadata.get_audience().append("C")

    assert metadata.get_audience() == ["A", "B"]


def test_slugify():
    assert slugify("Intro to Search & Reporting!") == "intro-to-search-reporting"
    assert slugify("  Splunk 9.2  ") == "splunk-9-2"
