"""
Base extractor class defining the interface for all document extractors.
"""

import re
import json
import logging
from abc import ABC, abstractmethod

from config import DOCUMENT_TYPE_KEYWORDS, DOCUMENT_TYPE_UNKNOWN, FIELD_KEYS
from records import ExtractedRecord

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """A single document could not be turned into a record."""

    def __init__(self, message, file_name=None):
        super().__init__(message)
        self.file_name = file_name


def detect_document_type(file_name):
    """
    Guess the document type from a file name hint.

    Example:
        "passport-scan01.jpg" -> "Passport"
        "flight-BA117.png" -> "Flight Ticket"
        "IMG_0042.jpg" -> "Unknown"
    """
    lower_name = (file_name or "").lower()
    for keyword, document_type in DOCUMENT_TYPE_KEYWORDS:
        if keyword in lower_name:
            return document_type
    return DOCUMENT_TYPE_UNKNOWN


class BaseExtractor(ABC):
    """
    Abstract base class for all document extractors.

    Each extractor must implement:
    - extract_record: Turn one document image into an ExtractedRecord
    - get_document_types: Return list of document types this extractor handles
    """

    @abstractmethod
    def extract_record(self, document):
        """
        Extract structured fields from one document.

        Args:
            document: SourceDocument (file name hint, bytes, MIME type)

        Returns:
            ExtractedRecord with documentType set

        Raises:
            ExtractionError: If the service call fails or its reply is unusable
        """
        pass

    @abstractmethod
    def get_document_types(self):
        """
        Get list of document types this extractor handles.

        Returns:
            list: List of document type strings
        """
        pass

    def parse_response(self, content, document_type, file_name=None):
        """
        Parse the JSON object returned by the service.

        - Strips markdown code fences (```json ... ```)
        - Fills every known field, missing ones as ""
        - Sets documentType from the detected type

        Args:
            content: Raw reply text
            document_type: Type detected from the file name
            file_name: For error messages

        Returns:
            ExtractedRecord

        Raises:
            ExtractionError: If the reply is empty or not a JSON object
        """
        if not content or not content.strip():
            raise ExtractionError("No response from AI", file_name)

        json_str = re.sub(r'```json\n?', '', content)
        json_str = re.sub(r'```\n?', '', json_str).strip()

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError:
            logger.error(f"Failed to parse AI response for {file_name}: {content}")
            raise ExtractionError("Failed to parse extracted data", file_name)

        if not isinstance(data, dict):
            logger.error(f"AI response for {file_name} is not a JSON object: {content}")
            raise ExtractionError("Failed to parse extracted data", file_name)

        data[FIELD_KEYS['document_type']] = document_type or DOCUMENT_TYPE_UNKNOWN
        return ExtractedRecord.from_dict(data)
