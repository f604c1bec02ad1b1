# device.py
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List

NOT_AVAILABLE = "N/A"
DEFAULT_GENERATION = 1

@dataclass
class DeviceRecord:
    address: str
    hardware_revision: str = NOT_AVAILABLE  # e.g. "iLO 4"
    model: str = NOT_AVAILABLE
    firmware_version: str = NOT_AVAILABLE
    serial_number: str = ""
    # Filled in after the metadata fetch, by one of the name protocols.
    server_name: str = ""
    device_name: str = ""

def generation_number(record: DeviceRecord) -> int:
    """Returns the numeric generation from the hardware revision ("iLO 4" -> 4).

    Missing or non-numeric tokens count as generation 1.
    """
    tokens = record.hardware_revision.split()
    if len(tokens) < 2:
        return DEFAULT_GENERATION
    try:
        return int(tokens[1])
    except ValueError:
        return DEFAULT_GENERATION

def compare_by_generation(first: DeviceRecord, second: DeviceRecord) -> int:
    """Orders two records by generation number, ascending."""
    a, b = generation_number(first), generation_number(second)
    return (a > b) - (a < b)

def sort_by_generation(records: Iterable[DeviceRecord]) -> List[DeviceRecord]:
    """Sorts records by generation; equal generations keep their input order."""
    return sorted(records, key=cmp_to_key(compare_by_generation))
