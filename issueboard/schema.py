"""
Issue schema and status catalogue.

Board columns:
  To do → Doing → Done → Closed

Statuses are a convention, not a constraint: an issue may carry any string,
and unknown values are rendered with a fallback label.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Dict, Any


ISSUE_FIELDS = ("title", "description", "status")


class IssueStatus(Enum):
    """Known issue statuses, in board column order."""
    TODO = "todo"        # Not started
    DOING = "doing"      # In progress
    DONE = "done"        # Finished
    CLOSED = "closed"    # Abandoned

    @classmethod
    def from_str(cls, value: str) -> Optional["IssueStatus"]:
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    IssueStatus.TODO: "📝 To do",
    IssueStatus.DOING: "🚧 Doing",
    IssueStatus.DONE: "✅ Done",
    IssueStatus.CLOSED: "📦 Closed",
}

UNKNOWN_STATUS_LABEL = "? Unknown status"


def is_known_status(value: Any) -> bool:
    return isinstance(value, str) and IssueStatus.from_str(value) is not None


@dataclass(frozen=True)
class Issue:
    """A single card on the board. Immutable; changes go through the store."""

    id: str            # Assigned by the store, never reused
    title: str
    description: str
    status: str        # Usually an IssueStatus value

    @property
    def known_status(self) -> Optional[IssueStatus]:
        return IssueStatus.from_str(self.status)

    def fields(self) -> Dict[str, Any]:
        """Everything except the id."""
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.fields()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title", ""),
            description=data.get("description", ""),
            status=data.get("status", IssueStatus.TODO.value),
        )
