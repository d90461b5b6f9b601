"""Receipt OCR helpers.

The extraction engine works on plain text; this module turns an uploaded
receipt photo into that text. Recognition runs on a local Tesseract install
through ``pytesseract``. Additional engines can be introduced by extending
``perform_ocr``.
"""
from __future__ import annotations

import logging
import re
from io import BytesIO

import pytesseract
from PIL import Image, UnidentifiedImageError

LOGGER = logging.getLogger(__name__)


class OCRServiceError(RuntimeError):
    """Raised when the OCR engine fails."""


class OCRDecodeError(RuntimeError):
    """Raised when the uploaded file cannot be interpreted as an image."""


def perform_ocr(binary: bytes, *, engine: str = "local", language: str = "eng") -> str:
    """Return the text recognised in ``binary`` image data."""

    if engine == "local":
        return normalise_ocr_text(_ocr_local(binary, language))
    raise OCRServiceError(f"unknown_ocr_engine:{engine}")


def normalise_ocr_text(text: str) -> str:
    """Unify line endings and drop trailing blanks; line structure is kept."""

    lines = (line.rstrip() for line in re.split(r"\r\n|\r|\n", text or ""))
    return "\n".join(lines).strip("\n")


def _ocr_local(binary: bytes, language: str) -> str:
    image = _image_from_bytes(binary)
    try:
        return pytesseract.image_to_string(image, lang=language)
    except pytesseract.TesseractNotFoundError as exc:
        raise OCRServiceError("tesseract_not_found") from exc
    except pytesseract.TesseractError as exc:
        raise OCRServiceError(f"tesseract_error:{exc}") from exc


def _image_from_bytes(binary: bytes) -> Image.Image:
    try:
        image = Image.open(BytesIO(binary))
        image.load()
    except UnidentifiedImageError as exc:
        raise OCRDecodeError("unsupported_image_format") from exc
    except OSError as exc:
        LOGGER.warning("Failed to decode receipt image: %s", exc)
        raise OCRDecodeError("image_open_failed") from exc
    return image.convert("RGB")


__all__ = ["OCRDecodeError", "OCRServiceError", "normalise_ocr_text", "perform_ocr"]
