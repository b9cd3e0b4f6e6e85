"""
Static assets (icons, logos, stylesheet) shared by every conversion.

Files are read once on first use and cached for the life of the process.
The cache is never mutated after a load, so concurrent conversions can
share it.
"""

from __future__ import annotations

import base64
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from . import config

logger = logging.getLogger(__name__)

ICON_FORMAT = "icon-format.png"
ICON_DURATION = "icon-duration.png"
ICON_AUDIENCE = "icon-audience.png"
HEADER_LOGO = "logo-header.png"
FOOTER_LOGO = "logo-footer.png"

REQUIRED_ASSETS = (ICON_FORMAT, ICON_DURATION, ICON_AUDIENCE, HEADER_LOGO, FOOTER_LOGO)


class AssetNotFoundError(FileNotFoundError):
    """Exception raised when a required static asset is missing."""
    pass


@lru_cache(maxsize=None)
def _read_bytes(path: Path) -> bytes:
    if not path.is_file():
        raise AssetNotFoundError(f"Asset not found at path: {path}")
    logger.debug(f"Loaded asset {path}")
    return path.read_bytes()


def load_asset_bytes(name: str, assets_dir: Optional[Path] = None) -> bytes:
    """Return the bytes of asset ``name``.

    Args:
        name: File name inside the assets directory
        assets_dir: Override for the configured assets directory

    Raises:
        AssetNotFoundError: If the file does not exist
    """
    directory = Path(assets_dir) if assets_dir else config.ASSETS_DIR
    return _read_bytes((directory / name).resolve())


def data_uri(name: str, assets_dir: Optional[Path] = None) -> str:
    """Return asset ``name`` as an inline ``data:image/png;base64`` URI."""
    encoded = base64.b64encode(load_asset_bytes(name, assets_dir)).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def load_stylesheet(path: Optional[Path] = None) -> str:
    """Return the stylesheet text to inline into the document."""
    stylesheet = Path(path) if path else config.STYLESHEET_PATH
    return _read_bytes(stylesheet.resolve()).decode("utf-8")


def preload_assets(assets_dir: Optional[Path] = None, stylesheet: Optional[Path] = None) -> None:
    """Load every required asset, failing on the first one missing.

    Raises:
        AssetNotFoundError: If an icon, logo or the stylesheet is missing
    """
    for name in REQUIRED_ASSETS:
        load_asset_bytes(name, assets_dir)
    load_stylesheet(stylesheet)
