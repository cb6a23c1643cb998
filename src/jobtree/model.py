# model.py
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Protocol, Sequence, Tuple, runtime_checkable

from .settings import RUN_HEADER, STOP_HEADER


class JobStatus(str, Enum):
    """
    Lifecycle state of a job node.

    FAILED and COMPLETED are reserved: no transition defined here produces them.
    """
    PENDING = "pending"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"
    COMPLETED = "completed"


@runtime_checkable
class JobImpl(Protocol):
    """Capability shared by every job implementation (leaf or composite)."""

    def run(self) -> str:
        ...

    def stop(self) -> str:
        ...

    def status(self) -> JobStatus:
        ...


# ---------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------

class SingleJob:
    """A leaf job identified by an integer id."""

    def __init__(self, id: int):
        self.id = id
        self._status = JobStatus.PENDING

    def run(self) -> str:
        self._status = JobStatus.RUNNING
        return f"Running single job {self.id}"

    def stop(self) -> str:
        self._status = JobStatus.STOPPED
        return f"Stopping single job {self.id}"

    def status(self) -> JobStatus:
        return self._status

    def __repr__(self) -> str:
        return f"SingleJob(id={self.id}, status={self._status.value})"


class MultipleJob:
    """
    A composite job owning an ordered list of child implementations.

    run()/stop() set this node's own status first, then delegate to every
    child in insertion order and join the child outputs under a header.

    status() returns this node's own field. It is NOT derived from the
    children: a child stopped directly after the composite ran still leaves
    the composite reporting RUNNING.
    """

    def __init__(self, jobs: Sequence[JobImpl] = ()):
        self._jobs: List[JobImpl] = list(jobs)
        self._status = JobStatus.PENDING

    @property
    def jobs(self) -> Tuple[JobImpl, ...]:
        return tuple(self._jobs)

    def run(self) -> str:
        self._status = JobStatus.RUNNING
        results = [job.run() for job in self._jobs]
        return RUN_HEADER + "\n" + "\n".join(results)

    def stop(self) -> str:
        self._status = JobStatus.STOPPED
        results = [job.stop() for job in self._jobs]
        return STOP_HEADER + "\n" + "\n".join(results)

    def status(self) -> JobStatus:
        return self._status

    def __len__(self) -> int:
        return len(self._jobs)

    def __repr__(self) -> str:
        return f"MultipleJob(jobs={len(self._jobs)}, status={self._status.value})"


# ---------------------------------------------------------------------
# Abstraction
# ---------------------------------------------------------------------

class Job:
    """
    Public handle over exactly one job implementation.

    Callers drive a SingleJob and an arbitrarily nested MultipleJob the same
    way; every call is forwarded unchanged.
    """

    def __init__(self, implementation: JobImpl):
        self._implementation = implementation

    def run(self) -> str:
        return self._implementation.run()

    def stop(self) -> str:
        return self._implementation.stop()

    def status(self) -> JobStatus:
        return self._implementation.status()


def walk_jobs(impl: JobImpl, depth: int = 0) -> Iterator[Tuple[int, JobImpl]]:
    """Yield (depth, node) pairs depth-first, children in insertion order."""
    yield depth, impl
    for child in getattr(impl, "jobs", ()):
        yield from walk_jobs(child, depth + 1)
