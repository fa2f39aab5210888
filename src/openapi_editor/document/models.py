"""Data models reported by the editor and the CLI."""

from pydantic import BaseModel


class OperationInfo(BaseModel):
    """One operation of the document, as shown in listings."""

    operation_id: str
    method: str  # GET / POST / PUT / DELETE / PATCH / ...
    path: str  # /pets/{petId}
    summary: str = ""
    tags: list[str] = []


class DeletionSummary(BaseModel):
    """Outcome of deleting a batch of operations."""

    deleted: list[str] = []
    missing: list[str] = []  # ids that matched no operation
    removed_components: dict[str, list[str]] = {}  # {pool kind: [names]}
    removed_tags: list[str] = []

    @property
    def removed_count(self) -> int:
        return sum(len(names) for names in self.removed_components.values())
