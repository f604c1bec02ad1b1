# utils.py
import ipaddress
import logging
import socket
from typing import Iterable, List

from errors import InvalidRangeError, ProbeError, ProbeRefused, ProbeTimeout

logger = logging.getLogger(__name__)

ILO_PORT = 17988
PROBE_TIMEOUT = 0.25
DEFAULT_WORKERS = 100

def expand_range(cidr: str) -> List[str]:
    """Expands an IPv4 CIDR block into every address it contains.

    Host bits are masked off, so "10.0.0.7/30" covers 10.0.0.4 - 10.0.0.7.
    The network and broadcast addresses are included.

    Args:
        cidr: Block in "a.b.c.d/prefix" notation.

    Returns:
        List[str]: The addresses in ascending order.

    Raises:
        InvalidRangeError: If cidr is not a valid IPv4 CIDR block.
    """
    if "/" not in cidr:
        raise InvalidRangeError(f"invalid CIDR address: {cidr}")
    try:
        network = ipaddress.IPv4Network(cidr.strip(), strict=False)
    except ValueError as err:
        raise InvalidRangeError(f"invalid CIDR address: {cidr}") from err
    return [str(address) for address in network]

def expand_ranges(cidrs: Iterable[str]) -> List[str]:
    """Concatenates the expansion of every block, in argument order, without dedup."""
    addresses: List[str] = []
    for cidr in cidrs:
        addresses.extend(expand_range(cidr))
    return addresses

def make_jobs(addresses: List[str], count: int = DEFAULT_WORKERS) -> List[List[str]]:
    """Splits addresses into at most `count` contiguous, non-empty jobs.

    Every job but the last holds len(addresses) // count addresses (at least one);
    the last one absorbs whatever is left.
    """
    if count < 1:
        raise ValueError(f"job count must be positive, got {count}")
    if not addresses:
        return []

    chunk = max(len(addresses) // count, 1)
    jobs: List[List[str]] = []
    start = 0
    while len(jobs) < count - 1 and start + chunk < len(addresses):
        jobs.append(addresses[start:start + chunk])
        start += chunk
    jobs.append(addresses[start:])
    return jobs

def check_port(host: str, port: int, timeout: float) -> None:
    """Connects to host:port once and closes the connection straight away.

    Raises:
        ProbeTimeout: If the connection did not complete within timeout.
        ProbeRefused: On refusal, unreachable networks or resolution errors.
    """
    try:
        with socket.create_connection((host, port), timeout=timeout):
            pass
    except socket.timeout as err:
        raise ProbeTimeout(f"{host}:{port} timed out") from err
    except OSError as err:
        raise ProbeRefused(f"{host}:{port} unreachable: {err}") from err

def is_port_open(host: str, port: int = ILO_PORT, timeout: float = PROBE_TIMEOUT) -> bool:
    """Checks whether a TCP port accepts connections. Errors count as closed."""
    try:
        check_port(host, port, timeout)
    except ProbeError as err:
        logger.debug("Port closed: %s", err)
        return False
    return True
