"""Diff API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from models.diff import DiffRequest, DiffResult
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.input_validator import InputValidationError, read_upload, validate_text
from services.log_context import new_comparison_id

logger = logging.getLogger(__name__)

router = APIRouter()
diff_generator = DiffGenerator()


def upload_settings() -> tuple[int, str]:
    """Current (max_bytes, encoding) for incoming documents"""
    upload = ConfigManager.get_instance().get_config().get("upload", {})
    return int(upload.get("maxBytes", 5 * 1024 * 1024)), upload.get("encoding", "utf-8")


def compare_texts(text_a: str, text_b: str) -> DiffResult:
    """Run a comparison and log its outcome"""
    result = diff_generator.generate_diff(text_a, text_b)
    logger.info(
        "Compared documents: +%d -%d =%d",
        result.stats.added,
        result.stats.removed,
        result.stats.unchanged,
    )
    return result


async def run_comparison(text_a: str, text_b: str) -> DiffResult:
    """Compare on a worker thread, off the event loop"""
    return await run_in_threadpool(compare_texts, text_a, text_b)


async def read_documents(file_a: UploadFile, file_b: UploadFile) -> tuple[str, str]:
    """Validate and decode both uploads, translating failures to HTTP errors"""
    max_bytes, encoding = upload_settings()
    try:
        text_a = await read_upload(file_a, "fileA", max_bytes, encoding)
        text_b = await read_upload(file_b, "fileB", max_bytes, encoding)
    except InputValidationError as e:
        logger.warning("Rejected upload: %s", e)
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return text_a, text_b


@router.post("", response_model=DiffResult)
async def diff_texts(request: DiffRequest) -> DiffResult:
    """Compare two texts sent as JSON"""
    new_comparison_id()
    max_bytes, encoding = upload_settings()

    try:
        validate_text(request.text_a, "text_a", max_bytes, encoding)
        validate_text(request.text_b, "text_b", max_bytes, encoding)
    except InputValidationError as e:
        logger.warning("Rejected text input: %s", e)
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return await run_comparison(request.text_a, request.text_b)


@router.post("/files", response_model=DiffResult)
async def diff_files(
    file_a: UploadFile = File(..., alias="fileA"),
    file_b: UploadFile = File(..., alias="fileB"),
) -> DiffResult:
    """Compare two uploaded files and return rows as JSON"""
    new_comparison_id()
    text_a, text_b = await read_documents(file_a, file_b)
    return await run_comparison(text_a, text_b)
