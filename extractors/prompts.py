"""
Prompts sent to the OCR service, one per document type.

Every prompt asks for a bare JSON object keyed with the record field names.
"""

from config import (
    DOCUMENT_TYPE_PASSPORT, DOCUMENT_TYPE_VISA,
    DOCUMENT_TYPE_FLIGHT, DOCUMENT_TYPE_UNKNOWN
)

PASSPORT_PROMPT = """Extract the following information from this passport document:
- Full name (as shown on passport)
- Passport number
- Date of birth (format: YYYY-MM-DD)
- Nationality
- Passport issue date (format: YYYY-MM-DD)
- Expiry date (format: YYYY-MM-DD)

Return ONLY a JSON object with these exact keys: name, passportNumber, dateOfBirth, nationality, passportIssueDate, expiryDate. No additional text."""

VISA_PROMPT = """Extract the following information from this visa document:
- Full name
- Passport number (if visible)
- Date of birth (format: YYYY-MM-DD)
- Nationality
- Visa expiry date (format: YYYY-MM-DD)
- Visa type

Return ONLY a JSON object with these exact keys: name, passportNumber, dateOfBirth, nationality, expiryDate, visaType. No additional text."""

FLIGHT_PROMPT = """Extract the following information from this flight ticket:
- Passenger name
- Flight number
- Booking reference (PNR)
- Ticket number
- Departure city/airport
- Arrival city/airport
- Transit stop (if any)
- Seat number
- Inflight meal

Return ONLY a JSON object with these exact keys: name, flightNumber, bookingReference, ticketNumber, departure, arrival, transitStop, seatNumber, inflightMeal. No additional text."""

GENERIC_PROMPT = """Identify what type of document this is (passport, visa, or flight ticket) and extract all relevant information.
Return ONLY a JSON object with available data using keys: name, passportNumber, dateOfBirth, nationality, passportIssueDate, expiryDate, visaType, flightNumber, bookingReference, ticketNumber, departure, arrival, transitStop, seatNumber, inflightMeal. No additional text."""

PROMPTS = {
    DOCUMENT_TYPE_PASSPORT: PASSPORT_PROMPT,
    DOCUMENT_TYPE_VISA: VISA_PROMPT,
    DOCUMENT_TYPE_FLIGHT: FLIGHT_PROMPT,
    DOCUMENT_TYPE_UNKNOWN: GENERIC_PROMPT,
}


def get_prompt(document_type):
    return PROMPTS.get(document_type, GENERIC_PROMPT)
