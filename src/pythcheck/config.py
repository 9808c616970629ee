import os

from pythcheck.errors import ConfigError

JOBS_ENV_VAR = "PYTHCHECK_JOBS"


def validate_jobs(jobs: int) -> int:
    if jobs < 1:
        raise ConfigError(f"Worker count must be a positive integer, got {jobs}")
    return jobs


def get_default_jobs() -> int:
    raw = os.getenv(JOBS_ENV_VAR)
    if raw is None or not raw.strip():
        return os.cpu_count() or 1
    try:
        jobs = int(raw)
    except ValueError:
        raise ConfigError(f"{JOBS_ENV_VAR} must be a positive integer, got {raw!r}") from None
    return validate_jobs(jobs)


def resolve_jobs(jobs: int | None) -> int:
    return validate_jobs(jobs) if jobs is not None else get_default_jobs()
