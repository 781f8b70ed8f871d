from .pdf_document_extractor import PdfDocumentExtractor

__all__ = ["PdfDocumentExtractor"]
