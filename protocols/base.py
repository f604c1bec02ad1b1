# protocols/base.py
from abc import ABC, abstractmethod
from typing import Any, Tuple

import requests

from errors import NameResolutionError

class NameProtocol(ABC):
    """Abstract base class for reading the names a controller was given."""

    def __init__(self, http: Any = requests, timeout: float = 5.0):
        self.http = http
        self.timeout = timeout

    @abstractmethod
    def resolve(self, host: str) -> Tuple[str, str]:
        """Fetches the names configured on the controller at host.

        Returns:
            A (server_name, device_name) tuple; either may be empty.

        Raises:
            NameResolutionError: If the controller could not be queried.
        """
        pass

    def _get(self, url: str, **kwargs) -> requests.Response:
        try:
            response = self.http.get(url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.RequestException as err:
            raise NameResolutionError(f"GET {url} failed: {err}") from err
        return response
