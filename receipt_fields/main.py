"""FastAPI router definitions for the receipt extraction service."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from .extraction import ExtractionResult, extract_fields
from .ocr_extract import OCRDecodeError, OCRServiceError, perform_ocr
from .settings import Settings, get_settings
from .transactions import draft_from_extraction

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Receipt Field Extraction Service")

EMPTY_TEXT_MESSAGE = (
    "Could not extract text from the image. Please ensure the image is clear and readable."
)
OCR_FAILED_MESSAGE = "Failed to process receipt. Please ensure the image is clear and try again."


class ParsedReceipt(BaseModel):
    amount: Optional[float] = None
    total: Optional[float] = None
    date: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    type: str = "expense"


class ReceiptUploadResponse(BaseModel):
    message: str = "Receipt processed successfully"
    extracted_text: str = Field(alias="extractedText")
    parsed_data: ParsedReceipt = Field(alias="parsedData")

    model_config = {"populate_by_name": True}


class ParseTextRequest(BaseModel):
    text: str


def _parsed_receipt(result: ExtractionResult) -> ParsedReceipt:
    fields = result.to_dict()
    return ParsedReceipt(total=fields["amount"], **fields)


async def _read_upload(file: Optional[UploadFile], settings: Settings) -> bytes:
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded.")
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only image files are allowed.")
    data = await file.read()
    if not data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty.")
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is too large.")
    return data


def _log_extraction(result: ExtractionResult) -> None:
    if result.is_empty:
        LOGGER.info("No receipt fields recognised")
        return
    missing = draft_from_extraction(result).missing_fields
    if missing:
        LOGGER.info("Partial receipt extraction; missing fields: %s", ", ".join(missing))
    else:
        LOGGER.info(
            "Receipt processed: amount=%s date=%s category=%s",
            result.amount,
            result.date,
            result.category,
        )


def _ocr_failure_detail(exc: Exception, settings: Settings) -> Union[str, Dict[str, Any]]:
    if settings.debug:
        return {"message": OCR_FAILED_MESSAGE, "error": str(exc)}
    return OCR_FAILED_MESSAGE


@app.post("/api/upload/receipt", response_model=ReceiptUploadResponse)
async def upload_receipt(
    receipt_image: Optional[UploadFile] = File(None, alias="receiptImage"),
    settings: Settings = Depends(get_settings),
) -> ReceiptUploadResponse:
    data = await _read_upload(receipt_image, settings)

    try:
        text = await run_in_threadpool(
            perform_ocr, data, engine=settings.ocr_engine, language=settings.ocr_language
        )
    except OCRDecodeError as exc:
        LOGGER.warning("Receipt image could not be decoded: %s", exc)
        raise HTTPException(
            status_code=422, detail=_ocr_failure_detail(exc, settings)
        ) from exc
    except OCRServiceError as exc:
        LOGGER.exception("OCR service error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_ocr_failure_detail(exc, settings)
        ) from exc
    finally:
        await receipt_image.close()

    result = extract_fields(text, date_order=settings.date_order)
    if not result.has_text:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_TEXT_MESSAGE)

    _log_extraction(result)
    return ReceiptUploadResponse(extracted_text=text, parsed_data=_parsed_receipt(result))


@app.post("/api/receipts/parse-text", response_model=ParsedReceipt)
async def parse_receipt_text(
    payload: ParseTextRequest,
    settings: Settings = Depends(get_settings),
) -> ParsedReceipt:
    result = extract_fields(payload.text, date_order=settings.date_order)
    if not result.has_text:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Receipt text is empty.")
    _log_extraction(result)
    return _parsed_receipt(result)


__all__ = ["app"]
