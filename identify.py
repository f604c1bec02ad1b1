# identify.py
import logging
from typing import Any, Optional

import requests

from device import DeviceRecord
from errors import MetadataFetchError, NameResolutionError, ScanError
from metadata import parse_metadata
from protocols import LOGIN_SESSION_PATH, get_name_protocol

logger = logging.getLogger(__name__)

METADATA_PATH = "/xmldata?item=all"
HTTP_TIMEOUT = 5.0

class DeviceIdentifier:
    """Identifies the management controller behind an open iLO port.

    Identification runs in two steps: the RIMP metadata document gives the
    hardware, firmware and serial fields, then the generation found there picks
    the protocol used to read the server and device names.
    """

    def __init__(self, http: Any = requests, timeout: float = HTTP_TIMEOUT,
                 metadata_path: str = METADATA_PATH,
                 login_session_path: str = LOGIN_SESSION_PATH):
        self.http = http
        self.timeout = timeout
        self.metadata_path = metadata_path
        self.login_session_path = login_session_path

    def fetch_metadata(self, host: str) -> DeviceRecord:
        """Fetches and parses the metadata document of host.

        Raises:
            MetadataFetchError: If the request fails or returns an error status.
            MetadataParseError: If the response is not a RIMP document.
        """
        url = f"http://{host}{self.metadata_path}"
        try:
            response = self.http.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as err:
            raise MetadataFetchError(f"GET {url} failed: {err}") from err
        return parse_metadata(host, response.content)

    def resolve_names(self, record: DeviceRecord) -> None:
        """Fills in the name fields of record. Failures leave them blank."""
        protocol = get_name_protocol(record.hardware_revision, self.http, self.timeout,
                                     login_session_path=self.login_session_path)
        try:
            record.server_name, record.device_name = protocol.resolve(record.address)
        except NameResolutionError as err:
            logger.debug(f"Could not resolve names for {record.address}: {err}")

    def identify(self, host: str) -> Optional[DeviceRecord]:
        """Returns the DeviceRecord for host, or None if its metadata is unusable."""
        try:
            record = self.fetch_metadata(host)
        except ScanError as err:
            logger.debug(f"Dropping {host}: {err}")
            return None
        self.resolve_names(record)
        return record
