from records import ExtractedRecord, PassengerRecord, clean_value


def test_from_dict_accepts_wire_and_attribute_names():
    record = ExtractedRecord.from_dict({
        "passportNumber": " AB123 ",
        "date_of_birth": "1990-03-15",
        "somethingElse": "ignored",
    })

    assert record.passport_number == "AB123"
    assert record.date_of_birth == "1990-03-15"
    assert record.name == ""


def test_missing_and_null_values_are_empty():
    record = ExtractedRecord.from_dict({"name": None, "seatNumber": float("nan")})

    assert record.name == ""
    assert record.seat_number == ""
    assert record.is_empty()
    assert ExtractedRecord.from_dict(None).is_empty()


def test_to_dict_has_every_wire_key():
    data = ExtractedRecord(name="Ann Lee", flight_number="QR1").to_dict()

    assert data["name"] == "Ann Lee"
    assert data["flightNumber"] == "QR1"
    assert data["inflightMeal"] == ""
    assert len(data) == 16


def test_passenger_from_record_is_a_copy():
    record = ExtractedRecord(name="Ann Lee")
    passenger = PassengerRecord.from_record(record)
    passenger.name = "Changed"

    assert record.name == "Ann Lee"
    assert isinstance(passenger, ExtractedRecord)


def test_clean_value():
    assert clean_value(12345) == "12345"
    assert clean_value("  x ") == "x"
    assert clean_value(None) == ""
