import pytest

from conftest import ILO2_METADATA, ILO4_METADATA
from device import NOT_AVAILABLE
from errors import MetadataParseError
from metadata import extract_revision, parse_metadata, read_fields


def test_parse_metadata_ilo4():
    record = parse_metadata("10.0.0.2", ILO4_METADATA)

    assert record.address == "10.0.0.2"
    assert record.hardware_revision == "iLO 4"
    assert record.model == "ProLiant DL380p Gen8"
    assert record.firmware_version == "2.55"
    assert record.serial_number == "CZJ3100ABC"
    assert record.server_name == ""
    assert record.device_name == ""


def test_parse_metadata_accepts_text():
    record = parse_metadata("10.0.0.3", ILO2_METADATA.decode("utf-8"))
    assert record.hardware_revision == "iLO 2"
    assert record.model == "ProLiant DL360 G5"


def test_read_fields_reports_raw_hardware_revision():
    assert read_fields(ILO4_METADATA)["hardware"] == "ASIC: 16"


@pytest.mark.parametrize("product_revision, expected", [
    ("iLO 4 (iLO 4)", "iLO 4"),
    ("Integrated Lights-Out 5 (iLO 5)", "iLO 5"),
    ("Integrated Lights-Out 3 ( iLO 3 )", "iLO 3"),
    ("", NOT_AVAILABLE),
    ("Integrated Lights-Out", NOT_AVAILABLE),
    ("Lights-Out ()", NOT_AVAILABLE),
])
def test_extract_revision(product_revision, expected):
    assert extract_revision(product_revision) == expected


def test_missing_fields_fall_back_to_not_available():
    record = parse_metadata("10.0.0.9", b"<RIMP><HSI/><MP><PN></PN></MP></RIMP>")

    assert record.hardware_revision == NOT_AVAILABLE
    assert record.model == NOT_AVAILABLE
    assert record.firmware_version == NOT_AVAILABLE
    assert record.serial_number == ""


def test_blank_fields_are_trimmed_to_not_available():
    document = b"<RIMP><HSI><SPN>   </SPN></HSI><MP><FWRI>\n</FWRI></MP></RIMP>"
    record = parse_metadata("10.0.0.9", document)
    assert record.model == NOT_AVAILABLE
    assert record.firmware_version == NOT_AVAILABLE


@pytest.mark.parametrize("document", [
    b"",
    b"not xml at all",
    b"<RIMP><HSI></RIMP>",
    b'<?xml version="1.0" encoding="bogus"?><RIMP/>',
])
def test_malformed_document(document):
    with pytest.raises(MetadataParseError):
        parse_metadata("10.0.0.9", document)


def test_unexpected_root_element():
    with pytest.raises(MetadataParseError, match="unexpected root"):
        parse_metadata("10.0.0.9", b"<html><body>Not Found</body></html>")
