"""
Extractor backed by an OpenAI-compatible vision chat endpoint.
"""

import os
import base64
import logging

from openai import OpenAI, OpenAIError

from config import (
    OCR_API_KEY_ENV, OCR_BASE_URL_ENV, OCR_MODEL_ENV,
    DEFAULT_OCR_BASE_URL, DEFAULT_OCR_MODEL,
    DOCUMENT_TYPE_PASSPORT, DOCUMENT_TYPE_VISA,
    DOCUMENT_TYPE_FLIGHT, DOCUMENT_TYPE_UNKNOWN
)
from .base_extractor import BaseExtractor, ExtractionError, detect_document_type
from .prompts import get_prompt

logger = logging.getLogger(__name__)


def _get_required_env(name):
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def image_to_data_url(content, mime_type=None):
    """Encode image bytes as a base64 data: URL."""
    b64 = base64.b64encode(content).decode("utf-8")
    return f"data:{mime_type or 'image/jpeg'};base64,{b64}"


class OpenAIDocumentExtractor(BaseExtractor):
    """
    Sends each document image with a type-specific prompt and parses the
    JSON reply into an ExtractedRecord.
    """

    def __init__(self, client=None, model=None):
        """
        Args:
            client: OpenAI client (built from environment variables if None)
            model: Model name (OCR_MODEL or the configured default if None)
        """
        if client is None:
            client = OpenAI(
                api_key=_get_required_env(OCR_API_KEY_ENV),
                base_url=os.getenv(OCR_BASE_URL_ENV, DEFAULT_OCR_BASE_URL),
            )
        self.client = client
        self.model = model or os.getenv(OCR_MODEL_ENV, DEFAULT_OCR_MODEL)

    def get_document_types(self):
        return [
            DOCUMENT_TYPE_PASSPORT,
            DOCUMENT_TYPE_VISA,
            DOCUMENT_TYPE_FLIGHT,
            DOCUMENT_TYPE_UNKNOWN
        ]

    def extract_record(self, document):
        if not document.content:
            raise ExtractionError("No image data provided", document.file_name)

        document_type = document.document_type or detect_document_type(document.file_name)
        if document_type not in self.get_document_types():
            logger.warning(f"Unsupported document type '{document_type}' for {document.file_name}, "
                           f"using {DOCUMENT_TYPE_UNKNOWN}")
            document_type = DOCUMENT_TYPE_UNKNOWN
        prompt = get_prompt(document_type)

        logger.info(f"Extracting {document_type} data from {document.file_name}")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {
                                "type": "image_url",
                                "image_url": {"url": image_to_data_url(document.content, document.mime_type)},
                            },
                        ],
                    }
                ],
            )
        except OpenAIError as e:
            logger.error(f"AI gateway error for {document.file_name}: {e}")
            raise ExtractionError(f"AI gateway error: {e}", document.file_name) from e

        content = None
        if response.choices:
            content = response.choices[0].message.content

        return self.parse_response(content, document_type, document.file_name)
