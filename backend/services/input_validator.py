"""
Input Validator - Reject unusable documents before they reach the differ

Uploads are read fully, size-checked, scanned for binary content and
decoded with the configured encoding.
"""

from __future__ import annotations

import logging

from fastapi import UploadFile

logger = logging.getLogger(__name__)


class InputValidationError(ValueError):
    """A document could not be accepted for comparison"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def validate_text(text: str, field_name: str, max_bytes: int, encoding: str = "utf-8") -> str:
    """Apply the upload size and binary checks to an already-decoded text"""
    size = len(text.encode(encoding, errors="replace"))
    if size > max_bytes:
        raise InputValidationError(
            f"{field_name} is {size} bytes, limit is {max_bytes}",
            status_code=413,
        )

    if "\x00" in text:
        raise InputValidationError(
            f"{field_name} looks like binary content",
            status_code=415,
        )
    return text


def decode_document(data: bytes, field_name: str, max_bytes: int, encoding: str) -> str:
    """Validate raw document bytes and decode them to text"""
    if len(data) > max_bytes:
        raise InputValidationError(
            f"{field_name} exceeds the {max_bytes} byte limit",
            status_code=413,
        )

    if b"\x00" in data:
        raise InputValidationError(
            f"{field_name} looks like a binary file",
            status_code=415,
        )

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise InputValidationError(
            f"{field_name} is not valid {encoding} text: {e.reason}",
            status_code=415,
        )

    # A leading BOM is an encoding artifact, not part of the first line
    return text.removeprefix("\ufeff")


async def read_upload(upload: UploadFile | None, field_name: str, max_bytes: int, encoding: str) -> str:
    """Read an uploaded file and return its decoded text"""
    if upload is None or not upload.filename:
        raise InputValidationError(f"{field_name} is required")

    # One byte past the limit is enough to detect an oversize file
    data = await upload.read(max_bytes + 1)
    logger.info("Read %s (%s, %d bytes)", field_name, upload.filename, len(data))

    return decode_document(data, field_name, max_bytes, encoding)
