from types import SimpleNamespace

import pytest
from openai import OpenAIError

from data_loader import SourceDocument
from extractors import OpenAIDocumentExtractor, ExtractionError, detect_document_type
from extractors.prompts import PASSPORT_PROMPT, FLIGHT_PROMPT, GENERIC_PROMPT


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_extractor(content=None, error=None):
    completions = FakeCompletions(content, error)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIDocumentExtractor(client=client, model="test-model"), completions


def make_document(file_name="passport-scan.jpg", content=b"\xff\xd8image"):
    return SourceDocument(file_name, content, "image/jpeg", detect_document_type(file_name))


def test_detect_document_type():
    assert detect_document_type("passport-IMG_1.jpg") == "Passport"
    assert detect_document_type("Visa_front.png") == "Visa"
    assert detect_document_type("flight-eticket.jpg") == "Flight Ticket"
    assert detect_document_type("e-ticket.png") == "Flight Ticket"
    assert detect_document_type("IMG_0042.jpg") == "Unknown"
    assert detect_document_type(None) == "Unknown"


def test_extracts_record_and_sets_document_type():
    extractor, completions = make_extractor(
        '```json\n{"name": "John Smith", "passportNumber": "AB123", "dateOfBirth": "1990-03-15"}\n```'
    )

    record = extractor.extract_record(make_document())

    assert record.name == "John Smith"
    assert record.passport_number == "AB123"
    assert record.document_type == "Passport"
    assert record.flight_number == ""

    call = completions.calls[0]
    assert call["model"] == "test-model"
    content = call["messages"][0]["content"]
    assert content[0]["text"] == PASSPORT_PROMPT
    assert content[1]["image_url"]["url"].startswith("data:image/jpeg;base64,")


def test_prompt_follows_document_type():
    extractor, completions = make_extractor('{"name": "A B"}')

    extractor.extract_record(make_document("flight-1.jpg"))
    extractor.extract_record(make_document("scan.jpg"))

    assert completions.calls[0]["messages"][0]["content"][0]["text"] == FLIGHT_PROMPT
    assert completions.calls[1]["messages"][0]["content"][0]["text"] == GENERIC_PROMPT


def test_unparsable_reply_raises():
    extractor, _ = make_extractor("Sorry, I cannot read this document.")

    with pytest.raises(ExtractionError, match="Failed to parse extracted data"):
        extractor.extract_record(make_document())


def test_non_object_reply_raises():
    extractor, _ = make_extractor('["John Smith"]')

    with pytest.raises(ExtractionError):
        extractor.extract_record(make_document())


def test_empty_reply_raises():
    extractor, _ = make_extractor("")

    with pytest.raises(ExtractionError, match="No response from AI"):
        extractor.extract_record(make_document())


def test_gateway_error_raises_extraction_error():
    extractor, _ = make_extractor(error=OpenAIError("status 429"))

    with pytest.raises(ExtractionError) as excinfo:
        extractor.extract_record(make_document())

    assert excinfo.value.file_name == "passport-scan.jpg"


def test_missing_image_data_raises():
    extractor, completions = make_extractor('{}')

    with pytest.raises(ExtractionError, match="No image data provided"):
        extractor.extract_record(make_document(content=b""))

    assert completions.calls == []


def test_unsupported_document_type_uses_generic_prompt():
    extractor, completions = make_extractor('{"name": "A B"}')
    document = SourceDocument("boarding.jpg", b"\xff\xd8image", "image/jpeg", "Boarding Pass")

    record = extractor.extract_record(document)

    assert completions.calls[0]["messages"][0]["content"][0]["text"] == GENERIC_PROMPT
    assert record.document_type == "Unknown"
