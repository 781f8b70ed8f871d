from __future__ import annotations

import io

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from frame_promptly.core.exceptions import DocumentProcessingError
from frame_promptly.infrastructure.observability import get_logger

logger = get_logger("documents")

PAGE_SEPARATOR = "\n\n"
TEXT_SUFFIXES = (".txt", ".md", ".markdown", ".csv")


class PdfDocumentExtractor:
    """Turns an uploaded document into plain text: PDF page by page, text files as-is."""

    def extract_text(self, filename: str, content: bytes, content_type: str = "application/pdf") -> str:
        if not content:
            raise DocumentProcessingError("No file provided")

        if content_type.startswith("text/") or filename.lower().endswith(TEXT_SUFFIXES):
            return self._decode_text(filename, content)
        return self._extract_pdf(filename, content)

    @staticmethod
    def _extract_pdf(filename: str, content: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(content))
            texts = [page.extract_text() or "" for page in reader.pages]
        except (PdfReadError, ValueError) as e:
            logger.warning(
                "PDF extraction failed",
                filename=filename,
                error_type=type(e).__name__,
                error_details=str(e),
            )
            raise DocumentProcessingError(f"Could not read PDF '{filename}': {e}") from e

        logger.info("PDF extracted", filename=filename, pages=len(texts))
        return PAGE_SEPARATOR.join(texts)

    @staticmethod
    def _decode_text(filename: str, content: bytes) -> str:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentProcessingError(f"'{filename}' is not valid UTF-8 text") from e
