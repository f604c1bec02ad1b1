# protocols/home_page.py
import logging
import re
from typing import Optional, Tuple

from .base import NameProtocol

logger = logging.getLogger(__name__)

class HomePageProtocol(NameProtocol):
    """Scrapes names from the start page served by iLO 2 and older controllers.

    These pages embed the names as JavaScript attributes. Only the two
    attributes below are looked for; this is a fallback for controllers that
    have no JSON endpoint, not an HTML parser.
    """

    # Group 1 of each pattern is the value.
    SERVER_NAME_PATTERN = re.compile(r'serverName="([\w-]+)"')
    NIC_NAME_PATTERN = re.compile(r'nicName="([\w-]+)"')

    def resolve(self, host: str) -> Tuple[str, str]:
        response = self._get(f"http://{host}/")
        page = response.text
        server_name = self._extract(self.SERVER_NAME_PATTERN, page) or ""
        device_name = self._extract(self.NIC_NAME_PATTERN, page) or ""
        logger.debug(f"Home page names for {host}: {server_name!r}, {device_name!r}")
        return server_name, device_name

    @staticmethod
    def _extract(pattern: re.Pattern, page: str) -> Optional[str]:
        match = pattern.search(page)
        return match.group(1) if match else None
