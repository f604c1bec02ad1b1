import json
import threading
from typing import Dict, List, Union

import pytest
import requests

from report import Reporter

ILO4_METADATA = b"""<?xml version="1.0"?>
<RIMP>
<HSI><SBSN>CZJ3100ABC   </SBSN><SPN>ProLiant DL380p Gen8</SPN><UUID>653200CZJ3100ABC</UUID></HSI>
<MP><ST>1</ST><PN>Integrated Lights-Out 4 (iLO 4)</PN><FWRI>2.55</FWRI><BBLK>03/05/2013</BBLK><HWRI>ASIC: 16</HWRI></MP>
</RIMP>
"""

ILO2_METADATA = b"""<?xml version="1.0"?>
<RIMP>
<HSI><SBSN>GB8849BNPQ</SBSN><SPN>ProLiant DL360 G5</SPN></HSI>
<MP><ST>1</ST><PN>Integrated Lights-Out 2 (iLO 2)</PN><FWRI>2.29</FWRI><HWRI>ASIC:  7</HWRI></MP>
</RIMP>
"""

ILO2_HOME_PAGE = """<html><head><script>
var serverName="db-legacy-01";
var nicName="ilo-db-legacy-01";
</script></head><body></body></html>
"""


class FakeResponse:
    def __init__(self, body: Union[str, bytes, dict, list] = "", status_code: int = 200):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.content = body
        self.status_code = status_code

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeHttp:
    """Stands in for the requests module; unknown URLs fail like a dead host."""

    def __init__(self, routes: Dict[str, Union[FakeResponse, Exception]] = None):
        self.routes = dict(routes or {})
        self.calls: List[tuple] = []
        self._lock = threading.Lock()

    def get(self, url: str, **kwargs):
        with self._lock:
            self.calls.append((url, kwargs))
        outcome = self.routes.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"connection refused: {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


class RecordingReporter(Reporter):
    def __init__(self):
        self.total = None
        self.advances = 0
        self.finished = False
        self.rendered = None

    def start(self, total: int) -> None:
        self.total = total

    def advance(self) -> None:
        self.advances += 1

    def finish(self) -> None:
        self.finished = True

    def render(self, records) -> None:
        self.rendered = list(records)


def ilo4_routes(host: str) -> Dict[str, FakeResponse]:
    return {
        f"http://{host}/xmldata?item=all": FakeResponse(ILO4_METADATA),
        f"https://{host}/json/login_session?null": FakeResponse({"server_name": "web-01", "cn": "ilo-web-01"}),
    }


def ilo2_routes(host: str) -> Dict[str, FakeResponse]:
    return {
        f"http://{host}/xmldata?item=all": FakeResponse(ILO2_METADATA),
        f"http://{host}/": FakeResponse(ILO2_HOME_PAGE),
    }


@pytest.fixture
def reporter():
    return RecordingReporter()
