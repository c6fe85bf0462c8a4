"""HTML pages: upload form and side-by-side result"""

from __future__ import annotations

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import HTMLResponse

from services.html_renderer import render_diff_page, render_upload_form
from services.log_context import new_comparison_id

from .diff import read_documents, run_comparison

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def upload_form() -> str:
    """Serve the upload form"""
    return render_upload_form()


@router.post("/diff", response_class=HTMLResponse)
async def diff_page(
    file_a: UploadFile = File(..., alias="fileA"),
    file_b: UploadFile = File(..., alias="fileB"),
) -> str:
    """Compare two uploaded files and render the side-by-side table"""
    new_comparison_id()
    text_a, text_b = await read_documents(file_a, file_b)
    result = await run_comparison(text_a, text_b)
    return render_diff_page(result.rows)
