"""
Configuration constants for the travel document extraction system.

This module contains all static configuration data including:
- Record field definitions and their wire (JSON) names
- Name normalization settings (honorifics, overlap threshold)
- Date formatting constants
- Document type detection keywords
- CSV export layout
- OCR service defaults
"""

# =======================
# RECORD FIELDS
# =======================

# Python attribute name -> JSON key used by the OCR service and saved records
FIELD_KEYS = {
    'name': 'name',
    'passport_number': 'passportNumber',
    'date_of_birth': 'dateOfBirth',
    'nationality': 'nationality',
    'passport_issue_date': 'passportIssueDate',
    'expiry_date': 'expiryDate',
    'visa_type': 'visaType',
    'flight_number': 'flightNumber',
    'booking_reference': 'bookingReference',
    'ticket_number': 'ticketNumber',
    'departure': 'departure',
    'arrival': 'arrival',
    'transit_stop': 'transitStop',
    'seat_number': 'seatNumber',
    'inflight_meal': 'inflightMeal',
    'document_type': 'documentType',
}

# Identity / biographic fields: the first non-empty value seen is kept
IDENTITY_FIELDS = [
    'passport_number',
    'date_of_birth',
    'nationality',
    'passport_issue_date',
    'expiry_date',
]

# Itinerary fields: later documents overwrite earlier ones
ITINERARY_FIELDS = [
    'visa_type',
    'flight_number',
    'booking_reference',
    'ticket_number',
    'departure',
    'arrival',
    'transit_stop',
    'seat_number',
    'inflight_meal',
]


# =======================
# NAME NORMALIZATION
# =======================

# Titles dropped wherever they appear as a standalone word
HONORIFICS = ['mr', 'mrs', 'ms', 'miss', 'dr', 'prof', 'sir', 'madam']

# Separator between two names printed on one passport line
NAME_SEGMENT_SEPARATOR = '/'

# Some OCR output puts a machine code before the readable name, split by '?'
NAME_ALTERNATE_SEPARATOR = '?'

# Words two multi-word names must share to count as the same person
MIN_COMMON_NAME_WORDS = 2


# =======================
# DATE FORMATTING
# =======================

MONTH_ABBREVIATIONS = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec'
]

# Explicit formats tried before the permissive parser (day-first)
DATE_INPUT_FORMATS = [
    '%Y-%m-%d',     # YYYY-MM-DD (what the OCR prompts ask for)
    '%d/%m/%Y',     # DD/MM/YYYY
    '%d-%m-%Y',     # DD-MM-YYYY
    '%d.%m.%Y',     # DD.MM.YYYY
    '%d %b %Y',     # 15 Mar 1990
    '%d %B %Y',     # 15 March 1990
    '%d%b%Y',       # 15MAR1990 (passport print)
    '%d-%b-%Y',     # 15-Mar-1990
    '%Y/%m/%d',     # YYYY/MM/DD
]


# =======================
# DOCUMENT TYPES
# =======================

DOCUMENT_TYPE_PASSPORT = 'Passport'
DOCUMENT_TYPE_VISA = 'Visa'
DOCUMENT_TYPE_FLIGHT = 'Flight Ticket'
DOCUMENT_TYPE_UNKNOWN = 'Unknown'

# File name keyword -> document type (checked in order)
DOCUMENT_TYPE_KEYWORDS = [
    ('passport', DOCUMENT_TYPE_PASSPORT),
    ('visa', DOCUMENT_TYPE_VISA),
    ('flight', DOCUMENT_TYPE_FLIGHT),
    ('ticket', DOCUMENT_TYPE_FLIGHT),
]

# Upload groups offered on the command line, processed in this order
UPLOAD_GROUPS = ['passport', 'visa', 'flight']

# Only images are sent to the OCR service
ACCEPTED_MIME_PREFIX = 'image/'


# =======================
# CSV EXPORT
# =======================

# Column header -> record attribute, in output order
EXPORT_COLUMNS = [
    ('Name', 'name'),
    ('Passport Number', 'passport_number'),
    ('Date of Birth', 'date_of_birth'),
    ('Nationality', 'nationality'),
    ('Passport Issue Date', 'passport_issue_date'),
    ('Passport Expiry Date', 'expiry_date'),
    ('Visa Type', 'visa_type'),
    ('Flight Number', 'flight_number'),
    ('Booking Reference', 'booking_reference'),
    ('Ticket Number', 'ticket_number'),
    ('Departure', 'departure'),
    ('Arrival', 'arrival'),
    ('Transit Stop', 'transit_stop'),
    ('Seat Number', 'seat_number'),
    ('Inflight Meal', 'inflight_meal'),
]

# Columns written as ="..." so spreadsheets keep them as text
DATE_COLUMNS = {'date_of_birth', 'passport_issue_date', 'expiry_date'}

CSV_BOM = '\ufeff'
CSV_LINE_SEPARATOR = '\n'
CSV_SPECIAL_CHARACTERS = [',', '"', '\n']

DEFAULT_OUTPUT_PREFIX = 'extracted-data'


# =======================
# OCR SERVICE
# =======================

OCR_API_KEY_ENV = 'OCR_API_KEY'
OCR_BASE_URL_ENV = 'OCR_BASE_URL'
OCR_MODEL_ENV = 'OCR_MODEL'

DEFAULT_OCR_BASE_URL = 'https://ai.gateway.lovable.dev/v1'
DEFAULT_OCR_MODEL = 'google/gemini-2.5-flash'


# =======================
# LOGGING
# =======================

LOG_FILE = 'docuscan.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
