import logging
from collections.abc import Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from pathlib import Path

from pythcheck.config import resolve_jobs
from pythcheck.core.aggregate import ReportCollector, aggregate
from pythcheck.core.classify import classify
from pythcheck.core.discovery import discover
from pythcheck.core.extract import extract
from pythcheck.core.parser import parse
from pythcheck.errors import ParseError, SourceEncodingError, SourceReadError
from pythcheck.models import FileError, FileErrorKind, FileReport, Policy, RunReport, SourceFile

logger = logging.getLogger(__name__)


def read_source(path: Path) -> SourceFile:
    try:
        source_bytes = path.read_bytes()
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc
    try:
        text = source_bytes.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SourceEncodingError(path, str(exc)) from exc
    return SourceFile(path=path, text=text)


def check_source(source: SourceFile, policy: Policy) -> FileReport:
    try:
        tree = parse(source)
    except ParseError as exc:
        logger.debug("Skipping %s: %s", source.path, exc)
        return FileReport(
            path=source.path,
            error=FileError(kind=FileErrorKind.PARSE, message=f"parse error: {exc.detail}", position=exc.position),
        )

    functions = extract(tree)
    violations = [violation for function in functions for violation in classify(function, policy)]
    return aggregate(source.path, violations, functions_checked=len(functions))


def check_file(path: Path, policy: Policy) -> FileReport:
    """Run the full pipeline for one file. Per-file failures end up in the report."""
    try:
        source = read_source(path)
    except SourceReadError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return FileReport(path=path, error=FileError(kind=FileErrorKind.IO, message=exc.reason))
    except SourceEncodingError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return FileReport(path=path, error=FileError(kind=FileErrorKind.ENCODING, message=exc.reason))

    return check_source(source, policy)


def _internal_error(path: Path, exc: BaseException) -> FileReport:
    return FileReport(
        path=path,
        error=FileError(kind=FileErrorKind.INTERNAL, message=f"{type(exc).__name__}: {exc}"),
    )


def run_check(paths: Sequence[Path], policy: Policy, jobs: int | None = None) -> RunReport:
    """Check every path and merge the reports in the order given."""
    workers = min(resolve_jobs(jobs), len(paths)) or 1
    collector = ReportCollector(len(paths))

    if workers == 1:
        for index, path in enumerate(paths):
            try:
                report = check_file(path, policy)
            except Exception as exc:
                logger.exception("Unexpected failure while checking %s", path)
                report = _internal_error(path, exc)
            collector.add(index, report)
        return collector.merge()

    logger.info("Checking %d file(s) with %d workers", len(paths), workers)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures: dict[Future[FileReport], int] = {
            executor.submit(check_file, path, policy): index for index, path in enumerate(paths)
        }
        for future in as_completed(futures):
            index = futures[future]
            try:
                report = future.result()
            except Exception as exc:
                logger.exception("Unexpected failure while checking %s", paths[index])
                report = _internal_error(paths[index], exc)
            collector.add(index, report)

    return collector.merge()


def check_path(root: Path, policy: Policy, jobs: int | None = None) -> RunReport:
    workers = resolve_jobs(jobs)
    return run_check(discover(root, policy), policy, workers)
