"""
Configuration for the course description converter.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(env_path)

PACKAGE_DIR = Path(__file__).resolve().parent

ASSETS_DIR = Path(os.environ.get("COURSEDESC_ASSETS_DIR", PACKAGE_DIR / "images"))
STYLESHEET_PATH = Path(
    os.environ.get("COURSEDESC_STYLESHEET", PACKAGE_DIR / "styles" / "style.css")
)

COURSE_FILE_SUFFIX = os.environ.get("COURSEDESC_FILE_SUFFIX", "course-description.md")
PDF_DIR_NAME = os.environ.get("COURSEDESC_PDF_DIR", "pdfs")

# Metadata fields that must be present for the panel, e.g. "format,duration"
REQUIRED_FIELDS = tuple(
    field.strip()
    for field in os.environ.get("COURSEDESC_REQUIRED_FIELDS", "").split(",")
    if field.strip()
)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
