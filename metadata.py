# metadata.py
import logging
import re
import xml.etree.ElementTree as ET
from typing import Dict, Union

from device import NOT_AVAILABLE, DeviceRecord
from errors import MetadataParseError

logger = logging.getLogger(__name__)

ROOT_TAG = "RIMP"

# Element paths below the RIMP root.
FIELDS = {
    "serial": "HSI/SBSN",
    "product_name": "HSI/SPN",
    "product_revision": "MP/PN",
    "firmware": "MP/FWRI",
    "hardware": "MP/HWRI",
}

REVISION_PATTERN = re.compile(r"\((.*)\)")

def _or_not_available(value: str) -> str:
    value = value.strip()
    return value if value else NOT_AVAILABLE

def extract_revision(product_revision: str) -> str:
    """Returns the parenthesized part of a product revision.

    "Integrated Lights-Out 4 (iLO 4)" gives "iLO 4". Empty input or input without
    parentheses gives NOT_AVAILABLE.
    """
    if not product_revision:
        return NOT_AVAILABLE
    match = REVISION_PATTERN.search(product_revision)
    if not match:
        return NOT_AVAILABLE
    return _or_not_available(match.group(1))

def read_fields(document: Union[str, bytes]) -> Dict[str, str]:
    """Parses a RIMP document and returns the raw text of each known field.

    Fields missing from the document come back as empty strings.

    Raises:
        MetadataParseError: If the document is not XML or its root is not RIMP.
    """
    try:
        root = ET.fromstring(document)
    except (ET.ParseError, LookupError, ValueError) as err:
        raise MetadataParseError(f"malformed metadata document: {err}") from err
    if root.tag != ROOT_TAG:
        raise MetadataParseError(f"unexpected root element <{root.tag}>, expected <{ROOT_TAG}>")

    return {name: root.findtext(path, default="") or "" for name, path in FIELDS.items()}

def parse_metadata(address: str, document: Union[str, bytes]) -> DeviceRecord:
    """Builds the DeviceRecord for address out of its RIMP metadata document."""
    fields = read_fields(document)
    record = DeviceRecord(
        address=address,
        hardware_revision=extract_revision(fields["product_revision"]),
        model=_or_not_available(fields["product_name"]),
        firmware_version=_or_not_available(fields["firmware"]),
        serial_number=fields["serial"].strip(),
    )
    logger.debug(f"Parsed metadata for {address}: {record.hardware_revision} {record.model}")
    return record
