from collections.abc import Iterable, Sequence
from pathlib import Path

from pythcheck.models import FileReport, RunReport, Violation


def aggregate(path: Path, violations: Iterable[Violation], functions_checked: int = 0) -> FileReport:
    return FileReport(path=path, violations=tuple(violations), functions_checked=functions_checked)


def merge(reports: Sequence[FileReport]) -> RunReport:
    return RunReport(files=tuple(reports))


class ReportCollector:
    """Collect per-file reports from concurrent producers.

    Every file owns the slot at its discovery index. A slot is written once,
    so completion order never affects the merged RunReport.
    """

    def __init__(self, size: int) -> None:
        self._slots: list[FileReport | None] = [None] * size

    def __len__(self) -> int:
        return len(self._slots)

    def add(self, index: int, report: FileReport) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"Report index {index} out of range for {len(self._slots)} files")
        if self._slots[index] is not None:
            raise ValueError(f"Report for index {index} already collected")
        self._slots[index] = report

    @property
    def pending(self) -> int:
        return sum(1 for slot in self._slots if slot is None)

    def merge(self) -> RunReport:
        missing = [index for index, slot in enumerate(self._slots) if slot is None]
        if missing:
            raise ValueError(f"Missing reports for indexes {missing}")
        return merge([slot for slot in self._slots if slot is not None])
