"""
Document extraction modules.

- BaseExtractor: Interface for turning one document image into a record
- OpenAIDocumentExtractor: OpenAI-compatible vision chat endpoint
- detect_document_type: File name based document type detection
"""

from .base_extractor import BaseExtractor, ExtractionError, detect_document_type
from .openai_extractor import OpenAIDocumentExtractor

__all__ = [
    'BaseExtractor',
    'ExtractionError',
    'detect_document_type',
    'OpenAIDocumentExtractor'
]
