from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, computed_field


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class SourceFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    text: str


class Policy(BaseModel):
    """User-selected toggles for one run."""

    model_config = ConfigDict(frozen=True)

    ignore_return: bool = False
    ignore_hidden: bool = False
    ignore_tests: bool = False
    test_dir_names: tuple[str, ...] = ("tests",)
    test_file_patterns: tuple[str, ...] = ("test_*.py", "*_test.py")


class ViolationKind(StrEnum):
    MISSING_PARAMETER_HINT = "missing-parameter-hint"
    MISSING_RETURN_HINT = "missing-return-hint"


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    function: str
    function_position: Position
    position: Position
    kind: ViolationKind
    parameter: str | None = None

    def describe(self) -> str:
        if self.kind is ViolationKind.MISSING_PARAMETER_HINT:
            return f"missing type hint for parameter '{self.parameter}' in '{self.function}'"
        return f"missing return type hint in '{self.function}'"


class FileErrorKind(StrEnum):
    IO = "io"
    ENCODING = "encoding"
    PARSE = "parse"
    INTERNAL = "internal"


class FileError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FileErrorKind
    message: str
    position: Position | None = None


class FileReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    violations: tuple[Violation, ...] = ()
    functions_checked: int = 0
    error: FileError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.violations


class RunReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: tuple[FileReport, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def files_checked(self) -> int:
        return len(self.files)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def functions_checked(self) -> int:
        return sum(report.functions_checked for report in self.files)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def violation_count(self) -> int:
        return sum(len(report.violations) for report in self.files)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_count(self) -> int:
        return sum(1 for report in self.files if report.error is not None)

    @property
    def is_clean(self) -> bool:
        return self.violation_count == 0 and self.error_count == 0

    def violations(self) -> list[Violation]:
        return [violation for report in self.files for violation in report.violations]
