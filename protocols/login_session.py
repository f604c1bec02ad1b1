# protocols/login_session.py
import logging
from typing import Tuple

import urllib3

from errors import NameResolutionError
from .base import NameProtocol

logger = logging.getLogger(__name__)

LOGIN_SESSION_PATH = "/json/login_session?null"

# Every login-session request skips certificate verification.
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

class LoginSessionProtocol(NameProtocol):
    """Reads names from the JSON login-session endpoint of iLO 3/4/5.

    The controllers ship self-signed certificates, so verification is disabled.
    """

    def __init__(self, *args, path: str = LOGIN_SESSION_PATH, **kwargs):
        super().__init__(*args, **kwargs)
        self.path = path

    def resolve(self, host: str) -> Tuple[str, str]:
        url = f"https://{host}{self.path}"
        response = self._get(url, verify=False, headers={"Content-Type": "application/json"})

        try:
            session = response.json()
        except ValueError as err:
            raise NameResolutionError(f"{url} did not return JSON: {err}") from err
        if not isinstance(session, dict):
            raise NameResolutionError(f"{url} returned {type(session).__name__}, expected an object")

        server_name = session.get("server_name") or ""
        device_name = session.get("cn") or ""
        logger.debug(f"Login session names for {host}: {server_name!r}, {device_name!r}")
        return str(server_name), str(device_name)
