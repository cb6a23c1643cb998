from .model import JobStatus, JobImpl, SingleJob, MultipleJob, Job, walk_jobs
from .fs import FileSystemComponent, File, Directory, iter_leaves
from .dsl import single, multiple, job, file, directory, JobTreeBuilder
from .registry import Registry, RegistryError, UnknownEntry, default_registry
from .adapter import BlockList, BlockListAdapter
from .payload import build_entry, build_job, PayloadError

__all__ = [
    "JobStatus", "JobImpl", "SingleJob", "MultipleJob", "Job", "walk_jobs",
    "FileSystemComponent", "File", "Directory", "iter_leaves",
    "single", "multiple", "job", "file", "directory", "JobTreeBuilder",
    "Registry", "RegistryError", "UnknownEntry", "default_registry",
    "BlockList", "BlockListAdapter",
    "build_entry", "build_job", "PayloadError",
]
