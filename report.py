# report.py
from abc import ABC, abstractmethod
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn
from rich.table import Table

from device import DeviceRecord

COLUMNS = ["IP", "HW", "FW", "S/N", "Model", "ServerName", "Name"]

class Reporter(ABC):
    """Receives scan progress and the final, sorted results."""

    @abstractmethod
    def start(self, total: int) -> None:
        """Called once before scanning with the number of hosts to probe."""
        pass

    @abstractmethod
    def advance(self) -> None:
        """Called once per probed host. Calls are serialized by the scanner."""
        pass

    @abstractmethod
    def finish(self) -> None:
        pass

    @abstractmethod
    def render(self, records: List[DeviceRecord]) -> None:
        pass

class ConsoleReporter(Reporter):
    """Progress bar while scanning, a table of controllers afterwards."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.progress: Optional[Progress] = None
        self.task: Optional[TaskID] = None

    def start(self, total: int) -> None:
        self.progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=self.console,
        )
        self.task = self.progress.add_task("Scan net", total=total)
        self.progress.start()

    def advance(self) -> None:
        if self.progress is not None:
            self.progress.advance(self.task)

    def finish(self) -> None:
        if self.progress is not None:
            self.progress.stop()
            self.progress = None

    def render(self, records: List[DeviceRecord]) -> None:
        table = Table(box=box.SIMPLE_HEAD, show_edge=False)
        for column in COLUMNS:
            table.add_column(column)
        for record in records:
            table.add_row(
                record.address,
                record.hardware_revision,
                record.firmware_version,
                record.serial_number,
                record.model,
                record.server_name,
                record.device_name,
            )
        self.console.print()
        self.console.print(table)
