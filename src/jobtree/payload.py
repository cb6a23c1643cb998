# payload.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, StrictInt, ValidationError, model_validator

from .fs import FileSystemComponent
from .model import JobImpl, MultipleJob, SingleJob
from .registry import Registry, default_registry


@dataclass
class PayloadError(Exception):
    """
    Raised when a payload cannot be turned into a tree.

    kind is "validation" (shape/type problems reported by pydantic) or
    "structure" (a well-formed payload that describes an impossible tree).
    """
    kind: str
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


# -------------------- Schemas --------------------

class EntryPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str = "file"
    name: str
    size: NonNegativeInt = 0
    blocks: list[NonNegativeInt] = Field(default_factory=list)
    children: list[EntryPayload] = Field(default_factory=list)


class JobPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: Optional[StrictInt] = None
    jobs: Optional[list[JobPayload]] = None

    @model_validator(mode="after")
    def _id_or_jobs(self) -> JobPayload:
        if (self.id is None) == (self.jobs is None):
            raise ValueError("a job needs exactly one of 'id' or 'jobs'")
        return self


EntryPayload.model_rebuild()
JobPayload.model_rebuild()


# -------------------- Conversion --------------------

def _parse(model: type[BaseModel], data: Union[str, Dict[str, Any]]) -> Any:
    try:
        if isinstance(data, str):
            return model.model_validate_json(data)
        return model.model_validate(data)
    except ValidationError as e:
        raise PayloadError(
            kind="validation",
            message=f"Invalid {model.__name__}",
            details={"errors": "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )},
        ) from e


def _entry(p: EntryPayload, registry: Registry) -> FileSystemComponent:
    kind = p.kind.lower()
    if p.size and kind != "file":
        raise PayloadError(
            kind="structure",
            message=f"Entry {p.name!r} of kind {p.kind!r} cannot carry a size",
            details={"size": p.size},
        )
    if p.blocks and kind != "blocks":
        raise PayloadError(
            kind="structure",
            message=f"Entry {p.name!r} of kind {p.kind!r} cannot carry blocks",
            details={"blocks": len(p.blocks)},
        )
    component =registry.create(p.kind, p.name, size=p.size, blocks=p.blocks)
    if p.children:
        if not hasattr(component, "add_child"):
            raise PayloadError(
                kind="structure",
                message=f"Entry {p.name!r} of kind {p.kind!r} cannot hold children",
                details={"children": len(p.children)},
            )
        for child in p.children:
            component.add_child(_entry(child, registry))
    return component


def _job(p: JobPayload) -> JobImpl:
    if p.jobs is not None:
        return MultipleJob([_job(child) for child in p.jobs])
    return SingleJob(p.id)


def build_entry(
    data: Union[str, Dict[str, Any]],
    registry: Optional[Registry] = None,
) -> FileSystemComponent:
    """
    Build a filesystem tree from a dict or JSON string.

    Example:
        build_entry({"kind": "directory", "name": "root", "children": [
            {"name": "a.txt", "size": 10},
        ]})
    """
    payload = _parse(EntryPayload, data)
    return _entry(payload, registry or default_registry())


def build_job(data: Union[str, Dict[str, Any]]) -> JobImpl:
    """Build a job implementation from {"id": 1} or {"jobs": [...]} (nestable)."""
    return _job(_parse(JobPayload, data))
