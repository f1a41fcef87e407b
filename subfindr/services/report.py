"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import csv
import io
from typing import Iterable, List

from subfindr.schemas import (
    CompleteEvent,
    ProgressEvent,
    ResultEvent,
    ScanEvent,
    ScanProgress,
    ScanResult,
)

CSV_HEADER = ("Subdomain", "IP Address", "Method")
MISSING_ADDRESS = "N/A"


def results_to_csv(results: Iterable[ScanResult]) -> str:
    """
    Serialize active results as CSV text.

    Args:
        results: Results in the order they should appear

    Returns:
        str: Header row followed by one subdomain,address,method row per
        active result. A missing address is written as N/A.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for result in results:
        if result.status != "active":
            continue
        writer.writerow((result.subdomain, result.ip or MISSING_ADDRESS, result.method.value))
    return buffer.getvalue()


class ScanReport:
    """Accumulates a scan's event stream the way a client renders it"""

    def __init__(self):
        self.results: List[ScanResult] = []
        self.progress = ScanProgress(current=0, total=0)
        self.complete = False

    def apply(self, event: ScanEvent) -> None:
        if isinstance(event, ResultEvent):
            self.results.append(event.result)
        elif isinstance(event, ProgressEvent):
            self.progress = event.progress
        elif isinstance(event, CompleteEvent):
            self.complete = True

    @property
    def percent(self) -> float:
        if not self.progress.total:
            return 0.0
        return self.progress.current / self.progress.total * 100

    def to_csv(self) -> str:
        return results_to_csv(self.results)
