from __future__ import annotations

import shutil
from io import BytesIO

import pytest

Image = pytest.importorskip("PIL.Image")
ImageDraw = pytest.importorskip("PIL.ImageDraw")

from receipt_fields import extract_fields  # noqa: E402
from receipt_fields.ocr_extract import perform_ocr  # noqa: E402

pytestmark = pytest.mark.skipif(
    shutil.which("tesseract") is None,
    reason="tesseract binary not available",
)


def _receipt_png(lines: list[str]) -> bytes:
    image = Image.new("L", (360, 40 + 30 * len(lines)), color=255)
    draw = ImageDraw.Draw(image)
    for index, line in enumerate(lines):
        draw.text((20, 20 + 30 * index), line, fill=0)
    buffer = BytesIO()
    image.resize((image.width * 3, image.height * 3)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_perform_ocr_smoke() -> None:
    """Ensure the local engine can call the native binary when available."""

    text = perform_ocr(_receipt_png(["TOTAL 12.50"]), language="eng")

    assert "total" in text.lower()


def test_ocr_text_feeds_extraction() -> None:
    text = perform_ocr(_receipt_png(["CORNER MARKET", "TOTAL 12.50"]), language="eng")

    result = extract_fields(text)

    assert result.has_text is True
