# dsl.py
from __future__ import annotations

from typing import List, Union

from .fs import Directory, File, FileSystemComponent
from .model import Job, JobImpl, MultipleJob, SingleJob


# ---------------------------------------------------------------------
# Job helpers
# ---------------------------------------------------------------------

def single(id: int) -> SingleJob:
    return SingleJob(id)


def multiple(*jobs: Union[JobImpl, int]) -> MultipleJob:
    """
    Composite from implementations or bare ids.

    Example:
        multiple(multiple(100, 101), 200)
    """
    return MultipleJob([SingleJob(j) if isinstance(j, int) else j for j in jobs])


def job(implementation: Union[JobImpl, int]) -> Job:
    if isinstance(implementation, int):
        implementation = SingleJob(implementation)
    return Job(implementation)


# ---------------------------------------------------------------------
# Builder API
# ---------------------------------------------------------------------

class JobTreeBuilder:
    """
    Accumulates leaf ids and nested groups, then builds a MultipleJob.

    Example:
        tree = (
            JobTreeBuilder()
            .group(JobTreeBuilder().add(100, 101))
            .add(200)
            .build()
        )

    Ids and nested builders become fresh nodes on every build(). An
    implementation passed to group() is placed as-is, so build such a
    builder only once.
    """

    def __init__(self):
        self._entries: List[Union[int, "JobTreeBuilder", JobImpl]] = []

    def add(self, *ids: int):
        self._entries.extend(ids)
        return self

    def group(self, child: Union["JobTreeBuilder", JobImpl]):
        self._entries.append(child)
        return self

    def build(self) -> MultipleJob:
        jobs: List[JobImpl] = []
        for entry in self._entries:
            if isinstance(entry, int):
                jobs.append(SingleJob(entry))
            elif isinstance(entry, JobTreeBuilder):
                jobs.append(entry.build())
            else:
                jobs.append(entry)
        return MultipleJob(jobs)

    def wrap(self) -> Job:
        return Job(self.build())


# ---------------------------------------------------------------------
# Filesystem helpers
# ---------------------------------------------------------------------

def file(name: str, size: int) -> File:
    if size < 0:
        raise ValueError(f"file({name!r}) size must be non-negative, got {size}")
    return File(name, size)


def directory(name: str, *children: FileSystemComponent) -> Directory:
    d = Directory(name)
    for child in children:
        d.add_child(child)
    return d
