"""
Issue storage backend (process memory).

Provides CRUD operations over the board's issues. Nothing survives a restart:
a new process starts from the seed dataset again.
"""
import logging
import threading
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .schema import ISSUE_FIELDS, Issue
from .seed import SEED_ISSUES

logger = logging.getLogger(__name__)


class IssueNotFound(Exception):
    """Raised by callers when a store lookup comes back empty."""

    def __init__(self, issue_id: str):
        super().__init__(f"Issue {issue_id} not found")
        self.issue_id = issue_id


class IssueStore:
    """In-memory store for issues.

    The store never raises for a missing id; lookups and mutations return
    ``None``/``False`` and the caller decides what that means. Every method
    holds the instance lock, so ids stay unique and increasing when Flask
    serves requests from several threads.
    """

    def __init__(self, issues: Iterable[Issue] = (), next_id: int = 1):
        self._issues: List[Issue] = [replace(i) for i in issues]
        self._next_id = next_id
        self._lock = threading.Lock()
        # Never hand out an id that is already taken
        for issue in self._issues:
            if issue.id.isdecimal() and int(issue.id) >= self._next_id:
                self._next_id = int(issue.id) + 1

    @classmethod
    def seeded(cls, issues: Iterable[Mapping[str, Any]] = SEED_ISSUES) -> "IssueStore":
        """Build a store holding the example dataset (ids "1".."8", next id 9)."""
        return cls(Issue.from_dict(data) for data in issues)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._issues)

    def _index_of(self, issue_id: str) -> int:
        for index, issue in enumerate(self._issues):
            if issue.id == issue_id:
                return index
        return -1

    def get_all(self) -> List[Issue]:
        """All issues in insertion order. Returns copies."""
        with self._lock:
            return [replace(i) for i in self._issues]

    def get_by_id(self, issue_id: str) -> Optional[Issue]:
        with self._lock:
            index = self._index_of(issue_id)
            return replace(self._issues[index]) if index != -1 else None

    def create(self, fields: Mapping[str, Any]) -> Issue:
        """Append a new issue. The id is assigned here; any id in ``fields`` is ignored."""
        with self._lock:
            data = {k: fields[k] for k in ISSUE_FIELDS if k in fields}
            issue = Issue.from_dict({**data, "id": str(self._next_id)})
            self._issues.append(issue)
            self._next_id += 1
            logger.debug("created issue %s", issue.id)
            return replace(issue)

    def update(self, issue_id: str, fields: Mapping[str, Any]) -> Optional[Issue]:
        """Replace every field of an issue, keeping its id."""
        with self._lock:
            index = self._index_of(issue_id)
            if index == -1:
                return None
            data = {k: fields[k] for k in ISSUE_FIELDS if k in fields}
            issue = Issue.from_dict({**data, "id": issue_id})
            self._issues[index] = issue
            logger.debug("replaced issue %s", issue_id)
            return replace(issue)

    def patch(self, issue_id: str, partial: Mapping[str, Any]) -> Optional[Issue]:
        """Merge the given fields onto an issue. An ``id`` key in ``partial`` is ignored."""
        with self._lock:
            index = self._index_of(issue_id)
            if index == -1:
                return None
            changes: Dict[str, Any] = {k: partial[k] for k in ISSUE_FIELDS if k in partial}
            issue = replace(self._issues[index], **changes)
            self._issues[index] = issue
            logger.debug("patched issue %s: %s", issue_id, sorted(changes))
            return replace(issue)

    def delete(self, issue_id: str) -> bool:
        """Remove an issue. Its id is never handed out again."""
        with self._lock:
            index = self._index_of(issue_id)
            if index == -1:
                return False
            del self._issues[index]
            logger.debug("deleted issue %s", issue_id)
            return True

    def exists(self, issue_id: str) -> bool:
        with self._lock:
            return self._index_of(issue_id) != -1
