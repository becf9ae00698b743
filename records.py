"""
Record types shared by the extraction pipeline.

ExtractedRecord holds what the OCR service read from a single document.
PassengerRecord has the same fields and holds the merged view of one traveler.
Every field is a plain string; an empty string means the value is absent.
"""

import logging
from dataclasses import dataclass, fields

import pandas as pd

from config import FIELD_KEYS

logger = logging.getLogger(__name__)

# JSON key -> attribute name
_ATTRIBUTES_BY_KEY = {key: attr for attr, key in FIELD_KEYS.items()}


def clean_value(value):
    """
    Coerce a raw field value to a trimmed string.

    None, NaN and empty values become "". Anything else is converted with str().

    Example:
        "  P1234567 " -> "P1234567"
        None -> ""
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        # Lists and other containers
        pass
    return str(value).strip()


@dataclass
class ExtractedRecord:
    """One OCR result for a single uploaded document."""

    name: str = ""
    passport_number: str = ""
    date_of_birth: str = ""
    nationality: str = ""
    passport_issue_date: str = ""
    expiry_date: str = ""
    visa_type: str = ""
    flight_number: str = ""
    booking_reference: str = ""
    ticket_number: str = ""
    departure: str = ""
    arrival: str = ""
    transit_stop: str = ""
    seat_number: str = ""
    inflight_meal: str = ""
    document_type: str = ""

    @classmethod
    def from_dict(cls, data):
        """
        Build a record from a mapping.

        Accepts the camelCase keys used by the OCR service ("passportNumber")
        as well as attribute names ("passport_number"). Unknown keys are ignored.

        Args:
            data: Mapping of field names to raw values

        Returns:
            ExtractedRecord (or subclass) with cleaned string values
        """
        values = {}
        if not data:
            return cls()

        for key, raw in data.items():
            attr = _ATTRIBUTES_BY_KEY.get(key)
            if attr is None and key in FIELD_KEYS:
                attr = key
            if attr is None:
                logger.debug(f"Ignoring unknown record field: {key}")
                continue
            values[attr] = clean_value(raw)

        return cls(**values)

    @classmethod
    def from_record(cls, record):
        """Shallow copy of another record, as this class."""
        return cls(**{f.name: clean_value(getattr(record, f.name, "")) for f in fields(cls)})

    def get(self, attr):
        """Trimmed value of a field; "" when absent or malformed."""
        return clean_value(getattr(self, attr, ""))

    def to_dict(self):
        """Return the record as a camelCase mapping with every key present."""
        return {FIELD_KEYS[f.name]: self.get(f.name) for f in fields(self)}

    def is_empty(self):
        return not any(self.get(f.name) for f in fields(self) if f.name != 'document_type')


@dataclass
class PassengerRecord(ExtractedRecord):
    """Consolidated record for one traveler, merged from one or more documents."""
