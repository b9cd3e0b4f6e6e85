"""
Front matter parser and metadata accessor for course descriptions.

Course description files open with a YAML front matter block:

---
course_id: 1234
course_title: Intro to Search
product_version: 9.2
format: Instructor-led
duration: 2 days
audience:
    - Search users
    - Knowledge managers
---
# Course Description
...
"""

from __future__ import annotations

import datetime
import re
from typing import Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class MetadataError(ValueError):
    """Exception raised when front matter is invalid."""
    pass


class MissingFieldError(MetadataError):
    """Exception raised when a mandatory metadata field is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


FRONT_MATTER_DELIMITER = "---"
SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def split_front_matter(text: str) -> Tuple[Dict, str]:
    """Split a document into its front matter mapping and Markdown body.

    Args:
        text: Full file content

    Returns:
        Tuple of (front matter dict, body). The dict is empty when the
        document has no front matter.

    Raises:
        MetadataError: If a front matter block is opened but never closed

    Example:
        >>> data, body = split_front_matter('---\\nformat: Virtual\\n---\\n# Title')
        >>> data['format']
        'Virtual'
        >>> body
        '# Title'
    """
    normalized = text.replace("\r\n", "\n")
    lines = normalized.split("\n")

    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, normalized

    for index in range(1, len(lines)):
        if lines[index].strip() == FRONT_MATTER_DELIMITER:
            front_matter = parse_front_matter("\n".join(lines[1:index]))
            body = "\n".join(lines[index + 1:])
            return front_matter, body

    raise MetadataError("Front matter block is not closed with '---'")


def parse_front_matter(text: str) -> Dict:
    """Parse front matter text (without the --- delimiters) as YAML.

    Keys whose value is ``null`` (or ``~``, or nothing at all) are dropped,
    so they read as absent rather than as empty.

    Args:
        text: Front matter text content

    Returns:
        Dictionary with parsed fields

    Raises:
        MetadataError: If the text is not valid YAML or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MetadataError(f"Invalid front matter: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MetadataError(
            f"Front matter must be a mapping, got: {type(data).__name__}"
        )

    return {str(key): value for key, value in data.items() if value is not None}


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse non-alphanumeric runs into ``-``."""
    return SLUG_PATTERN.sub("-", str(text).lower()).strip("-")


class CourseMetadata(BaseModel):
    """Read-only view over a course's front matter.

    Field presence is tracked by key: a getter returns ``None`` for an absent
    key and raises :class:`MissingFieldError` instead when called with
    ``required=True``. A key present with an empty string is still present.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    course_id: Optional[str] = None
    course_title: Optional[str] = None
    product_version: Optional[str] = None
    format: Optional[str] = None
    duration: Optional[str] = None
    audience: Optional[List[str]] = None

    @field_validator(
        "course_id", "course_title", "product_version", "format", "duration",
        mode="before",
    )
    @classmethod
    def coerce_scalar(cls, value):
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float, datetime.date)):
            return str(value)
        raise ValueError(f"expected a scalar value, got: {type(value).__name__}")

    @field_validator("audience", mode="before")
    @classmethod
    def coerce_audience(cls, value):
        if value is None:
            return value
        if isinstance(value, (str, int, float, datetime.date)):
            # Single value becomes a one-item list
            return [str(value)]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        raise ValueError(f"'audience' must be a list, got: {type(value).__name__}")

    @classmethod
    def from_mapping(cls, mapping: Optional[Dict]) -> "CourseMetadata":
        """Build metadata from a parsed front matter mapping.

        ``None`` values are treated as absent keys.

        Raises:
            MetadataError: If a field has an unusable type
        """
        fields = {key: value for key, value in (mapping or {}).items() if value is not None}
        try:
            return cls.model_validate(fields)
        except ValueError as exc:
            raise MetadataError(f"Invalid metadata: {exc}") from exc

    def has_field(self, name: str) -> bool:
        if name in self.model_fields_set:
            return True
        return name in (self.model_extra or {})

    def _get(self, name: str, required: bool):
        if not self.has_field(name):
            if required:
                raise MissingFieldError(name)
            return None
        return getattr(self, name)

    def get_format(self, required: bool = False) -> Optional[str]:
        return self._get("format", required)

    def get_duration(self, required: bool = False) -> Optional[str]:
        return self._get("duration", required)

    def get_audience(self, required: bool = False) -> Optional[List[str]]:
        audience = self._get("audience", required)
        return list(audience) if audience is not None else None

    def get_course_id(self, required: bool = False) -> Optional[str]:
        return self._get("course_id", required)

    def get_course_title(self, required: bool = False) -> Optional[str]:
        return self._get("course_title", required)

    def get_product_version(self, required: bool = False) -> Optional[str]:
        return self._get("product_version", required)
