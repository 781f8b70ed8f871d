from fastapi import APIRouter, Depends, UploadFile
from starlette.concurrency import run_in_threadpool

from frame_promptly.infrastructure.documents import PdfDocumentExtractor
from frame_promptly.infrastructure.entrypoints.api.dependencies import get_document_extractor

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/process")
async def process_document(
    file: UploadFile,
    extractor: PdfDocumentExtractor = Depends(get_document_extractor),
) -> dict[str, str]:
    content = await file.read()
    # pypdf parsing is CPU-bound; keep it off the event loop
    text = await run_in_threadpool(
        extractor.extract_text,
        file.filename or "upload",
        content,
        file.content_type or "application/pdf",
    )
    return {"documentContent": text}
