"""
Uploads SDK for spaces-admin.

Logo and favicon uploads (multipart). Files are checked locally before
anything is sent.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path

from admin_core.core.exceptions import ClientValidationError

from .client import get_client

MAX_LOGO_BYTES = 2 * 1024 * 1024
MAX_FAVICON_BYTES = 1 * 1024 * 1024


def _read(source: str | Path | bytes, filename: str | None, content_type: str | None) -> tuple[str, bytes, str]:
    if isinstance(source, bytes):
        content = source
        filename = filename or "upload"
    else:
        path = Path(source)
        content = path.read_bytes()
        filename = filename or path.name
    content_type = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return filename, content, content_type


def check_image(field: str, content: bytes, content_type: str, max_bytes: int, label: str) -> None:
    """
    Validate an image upload.

    Raises:
        ClientValidationError: not an image, or larger than ``max_bytes``
    """
    if not content_type.startswith("image/"):
        raise ClientValidationError(field, "Please upload an image file")
    if len(content) > max_bytes:
        raise ClientValidationError(
            field, f"{label} size must be less than {max_bytes // (1024 * 1024)}MB"
        )


async def _upload(field: str, path: str, content: bytes, filename: str, content_type: str) -> str:
    data = await get_client().post(path, files={field: (filename, content, content_type)})
    return (data or {}).get("url", "")


class uploads:
    """
    Branding asset uploads.

    Example:
        >>> from spaces_admin import uploads
        >>> url = await uploads.logo("assets/logo.png")
    """

    @staticmethod
    async def logo(
        source: str | Path | bytes, filename: str | None = None, content_type: str | None = None
    ) -> str:
        """
        Upload an application logo (image, at most 2MB).

        Returns:
            str: Public URL of the stored file
        """
        filename, content, content_type = _read(source, filename, content_type)
        check_image("logo", content, content_type, MAX_LOGO_BYTES, "File")
        return await _upload("logo", "/api/upload/logo", content, filename, content_type)

    @staticmethod
    async def favicon(
        source: str | Path | bytes, filename: str | None = None, content_type: str | None = None
    ) -> str:
        """Upload a favicon (image, at most 1MB) and return its URL."""
        filename, content, content_type = _read(source, filename, content_type)
        check_image("favicon", content, content_type, MAX_FAVICON_BYTES, "Favicon")
        return await _upload("favicon", "/api/upload/favicon", content, filename, content_type)
