# findilo.py
import argparse
import logging
import sys
from typing import List, Optional

from dynaconf import Dynaconf

from device import DeviceRecord
from errors import InvalidRangeError
from identify import HTTP_TIMEOUT, METADATA_PATH, DeviceIdentifier
from protocols import LOGIN_SESSION_PATH
from report import ConsoleReporter, Reporter
from scanner import Scanner
from utils import DEFAULT_WORKERS, ILO_PORT, PROBE_TIMEOUT, expand_ranges

# Load settings
config = Dynaconf(
    settings_files=['config/settings.toml'],
    envvar_prefix="FINDILO",
)

logger = logging.getLogger(__name__)

USAGE = "Usage: findilo <networks>, Format 10.0.0.0/24"

def build_scanner(addresses: List[str], reporter: Reporter, settings: Dynaconf = config) -> Scanner:
    """Wires the identifier and scanner from the [scan] and [http] settings."""
    identifier = DeviceIdentifier(
        timeout=float(settings.get("http.timeout", HTTP_TIMEOUT)),
        metadata_path=settings.get("http.metadata_path", METADATA_PATH),
        login_session_path=settings.get("http.login_session_path", LOGIN_SESSION_PATH),
    )
    return Scanner(
        addresses,
        identifier,
        reporter,
        port=int(settings.get("scan.port", ILO_PORT)),
        probe_timeout=float(settings.get("scan.probe_timeout", PROBE_TIMEOUT)),
        workers=int(settings.get("scan.workers", DEFAULT_WORKERS)),
    )

def run_scan(networks: List[str], reporter: Optional[Reporter] = None) -> List[DeviceRecord]:
    """Scans the given CIDR blocks and renders the devices found.

    Raises:
        InvalidRangeError: If any network is malformed; nothing is scanned then.
    """
    addresses = expand_ranges(networks)
    reporter = reporter or ConsoleReporter()
    records = build_scanner(addresses, reporter).run()
    reporter.render(records)
    return records

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="findilo", description="Find HP iLO controllers in IPv4 networks")
    parser.add_argument("networks", nargs="*", metavar="network", help="CIDR block to scan, e.g. 10.0.0.0/24")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=str(config.get("logging.level", "INFO")).upper(),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if not args.networks:
        print(USAGE)
        return 1

    try:
        run_scan(args.networks)
    except InvalidRangeError as err:
        logger.error(err)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
