"""
Passenger consolidation.

Folds per-document records into one record per traveler:
1. Match on passport number (exact, trimmed)
2. Otherwise match on name, unless both sides carry different passport numbers
3. Merge matched records field by field
4. Start a new passenger when nothing matches

Passengers keep the order in which their first document was seen.
"""

import logging
from collections.abc import Mapping

from config import IDENTITY_FIELDS, ITINERARY_FIELDS
from records import ExtractedRecord, PassengerRecord
from validators.name_matcher import NameMatcher

logger = logging.getLogger(__name__)


class PassengerConsolidator:
    """
    Consolidates extracted document records into passengers.

    Each call to consolidate() works on a fresh passenger list; nothing is kept
    between runs.
    """

    def __init__(self, matcher=None):
        """
        Args:
            matcher: NameMatcher used for the name fallback (default policy if None)
        """
        self.matcher = matcher or NameMatcher()

    def consolidate(self, records):
        """
        Merge records into a deduplicated passenger list.

        Args:
            records: Ordered iterable of ExtractedRecord (plain mappings with
                     the OCR field names are accepted too)

        Returns:
            list: PassengerRecord objects in first-seen order

        Example:
            [{passportNumber: "P1", name: "John Smith"},
             {passportNumber: "P1", flightNumber: "AA100"}]
            -> [PassengerRecord(name="John Smith", passport_number="P1",
                                flight_number="AA100")]
        """
        passengers = []
        total = 0

        for record in records or []:
            item = self._as_record(record)
            total += 1

            match = self._find_by_passport(passengers, item)
            if match is None:
                match = self._find_by_name(passengers, item)

            if match is not None:
                self._merge(match, item)
            else:
                passengers.append(PassengerRecord.from_record(item))
                logger.debug(f"New passenger #{len(passengers)}: '{item.get('name')}'")

        logger.info(f"Consolidated {total} document record(s) into {len(passengers)} passenger(s)")
        return passengers

    def _as_record(self, record):
        if isinstance(record, ExtractedRecord):
            return record
        if isinstance(record, Mapping):
            return ExtractedRecord.from_dict(record)
        logger.warning(f"Unexpected record type {type(record).__name__} - treating as empty")
        return ExtractedRecord()

    def _find_by_passport(self, passengers, item):
        passport = item.get('passport_number')
        if not passport:
            return None

        for passenger in passengers:
            if passenger.get('passport_number') == passport:
                logger.debug(f"Matched passport number {passport}")
                return passenger
        return None

    def _find_by_name(self, passengers, item):
        name = item.get('name')
        if not name:
            return None

        passport = item.get('passport_number')
        for passenger in passengers:
            existing_passport = passenger.get('passport_number')
            # Different passport numbers are always different people
            if passport and existing_passport and passport != existing_passport:
                continue
            if self.matcher.names_match(passenger.get('name'), name):
                return passenger
        return None

    def _merge(self, passenger, item):
        """Update passenger in place with the values from item."""
        passenger.name = self._merged_name(passenger, item)

        for attr in IDENTITY_FIELDS:
            setattr(passenger, attr, passenger.get(attr) or item.get(attr))

        for attr in ITINERARY_FIELDS:
            setattr(passenger, attr, item.get(attr) or passenger.get(attr))

        passenger.document_type = passenger.get('document_type') or item.get('document_type')

        logger.debug(f"Merged document into passenger '{passenger.name}'")

    def _merged_name(self, passenger, item):
        # Passport names are cleaner than ticket names
        existing_name = passenger.get('name')
        item_name = item.get('name')

        if passenger.get('passport_number'):
            preferred, other = existing_name, item_name
        elif item.get('passport_number'):
            preferred, other = item_name, existing_name
        else:
            preferred, other = existing_name, item_name

        return preferred or other


_default_consolidator = PassengerConsolidator()


def consolidate(records):
    """Consolidate records with the default matching policy."""
    return _default_consolidator.consolidate(records)
