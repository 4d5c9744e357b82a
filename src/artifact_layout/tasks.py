"""Indexing task values handed to the repository task queue.

The queue itself lives outside this package. It keeps at most one pending task
per (repository, resource, action) by comparing tasks by value, which is why
`IndexingTask` is frozen and hashable.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from artifact_layout.models import ScanResult


class IndexingAction(str, Enum):
    ADD = "add"
    DELETE = "delete"
    FINISH = "finish"


class IndexingTask(BaseModel):
    """A request to index (or unindex) one resource of a managed repository."""

    model_config = ConfigDict(frozen=True)

    repository_id: str = Field(..., min_length=1)
    resource_path: str | None = None
    action: IndexingAction

    def __str__(self) -> str:
        return (
            f"IndexingTask[action={self.action.value}, repository_id={self.repository_id}, "
            f"resource_path={self.resource_path}]"
        )


def build_indexing_tasks(
    repository_id: str,
    scan: ScanResult,
    action: IndexingAction = IndexingAction.ADD,
) -> list[IndexingTask]:
    """Build one task per parsed artifact followed by a single FINISH task.

    Args:
        repository_id: Managed repository the paths belong to.
        scan: Result of `scan_repository`.
        action: ADD or DELETE for the per-artifact tasks.

    Raises:
        ValueError: If `action` is FINISH.

    Returns:
        Tasks ordered by resource path, without duplicates.
    """
    if action is IndexingAction.FINISH:
        raise ValueError("FINISH is appended automatically; use ADD or DELETE")

    paths = sorted({a.path for a in scan.artifacts})
    tasks = [IndexingTask(repository_id=repository_id, resource_path=p, action=action) for p in paths]
    tasks.append(IndexingTask(repository_id=repository_id, action=IndexingAction.FINISH))
    return tasks
