# scanner.py
import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, List

from device import DeviceRecord, sort_by_generation
from identify import DeviceIdentifier
from report import Reporter
from utils import DEFAULT_WORKERS, ILO_PORT, PROBE_TIMEOUT, is_port_open, make_jobs

logger = logging.getLogger(__name__)

# Enqueued once all workers are done; nothing follows it.
END_OF_SCAN = object()

ProbeFunc = Callable[[str, int, float], bool]

class ProgressCounter:
    """Counts probed hosts across workers and forwards each one to the reporter."""

    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self.count = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self.count += 1
            self.reporter.advance()

def drain(results: "queue.Queue") -> List[DeviceRecord]:
    """Collects records from results, in queue order, up to END_OF_SCAN."""
    records: List[DeviceRecord] = []
    while True:
        item = results.get()
        if item is END_OF_SCAN:
            return records
        records.append(item)

class Scanner:
    """Scans a fixed list of addresses for iLO controllers.

    The addresses are split into jobs and every job gets its own worker thread.
    Workers probe their hosts one after the other, identify the open ones and
    push the resulting records onto a shared queue.
    """

    def __init__(self, addresses: List[str], identifier: DeviceIdentifier, reporter: Reporter,
                 port: int = ILO_PORT, probe_timeout: float = PROBE_TIMEOUT,
                 workers: int = DEFAULT_WORKERS, probe: ProbeFunc = is_port_open):
        self.addresses = list(addresses)
        self.identifier = identifier
        self.reporter = reporter
        self.port = port
        self.probe_timeout = probe_timeout
        self.workers = workers
        self.probe = probe

    def _scan_job(self, job: List[str], results: "queue.Queue", progress: ProgressCounter) -> None:
        for host in job:
            try:
                if self.probe(host, self.port, self.probe_timeout):
                    record = self.identifier.identify(host)
                    if record is not None:
                        logger.debug(f"Found {record.hardware_revision} at {host}")
                        results.put(record)
            finally:
                progress.increment()

    def run(self) -> List[DeviceRecord]:
        """Scans every address and returns the found devices sorted by generation."""
        jobs = make_jobs(self.addresses, self.workers)
        results: "queue.Queue" = queue.Queue()
        progress = ProgressCounter(self.reporter)

        logger.info(f"Scanning {len(self.addresses)} hosts on port {self.port} with {len(jobs)} workers")
        self.reporter.start(len(self.addresses))
        try:
            if jobs:
                with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="scan") as pool:
                    futures = [pool.submit(self._scan_job, job, results, progress) for job in jobs]
                    wait(futures)
                for future in futures:
                    future.result()
            results.put(END_OF_SCAN)
        finally:
            self.reporter.finish()

        records = sort_by_generation(drain(results))
        logger.info(f"Scan finished: {progress.count} hosts probed, {len(records)} devices found")
        return records
