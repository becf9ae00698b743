"""
Main document processing pipeline.

Runs in two phases:
1. Gather - send every document to the extractor, one at a time, in order
2. Consolidate - merge all gathered records into passengers in one pass

A document that fails extraction is reported on its own; the others still
contribute.
"""

import logging
from dataclasses import dataclass, field

from consolidator import PassengerConsolidator
from extractors.base_extractor import ExtractionError

logger = logging.getLogger(__name__)


@dataclass
class DocumentFailure:
    """A document whose extraction failed."""
    file_name: str
    message: str


@dataclass
class ProcessingResult:
    """Outcome of one processing run."""
    records: list = field(default_factory=list)
    passengers: list = field(default_factory=list)
    failures: list = field(default_factory=list)

    @property
    def has_failures(self):
        return bool(self.failures)


class DocumentProcessor:
    """
    Orchestrates extraction and consolidation.
    """

    def __init__(self, extractor, consolidator=None):
        """
        Initialize processor.

        Args:
            extractor: BaseExtractor used for the gather phase
            consolidator: PassengerConsolidator (default policy if None)
        """
        self.extractor = extractor
        self.consolidator = consolidator or PassengerConsolidator()

    def gather(self, documents):
        """
        Extract one record per document.

        Args:
            documents: Ordered iterable of SourceDocument

        Returns:
            tuple: (records: list, failures: list of DocumentFailure)
        """
        records = []
        failures = []

        for index, document in enumerate(documents, 1):
            try:
                record = self.extractor.extract_record(document)
            except ExtractionError as e:
                logger.error(f"Document {index} ({document.file_name}) failed: {e}")
                failures.append(DocumentFailure(document.file_name, str(e)))
                continue

            if record.is_empty():
                logger.warning(f"No fields extracted from {document.file_name}")
            records.append(record)

        logger.info(f"Gathered {len(records)} record(s), {len(failures)} failure(s)")
        return records, failures

    def process(self, documents, existing_records=None):
        """
        Execute the complete extraction process.

        Args:
            documents: Ordered iterable of SourceDocument
            existing_records: Previously extracted records, consolidated
                              ahead of the new ones

        Returns:
            ProcessingResult
        """
        logger.info("Starting document extraction...")

        records, failures = self.gather(documents)
        all_records = list(existing_records or []) + records

        passengers = self.consolidator.consolidate(all_records)

        return ProcessingResult(records=all_records, passengers=passengers, failures=failures)
