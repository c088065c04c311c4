"""
Client-side mirror of the whole issue collection.

Every list-oriented view (the four board columns) reads from one IssueCache.
Mutations go to the server and are followed by a full re-fetch; the cache is
never patched locally from a mutation response, so it cannot drift from the
server.

Busy gate:
    idle → in-flight → idle
    - refresh() while in flight is skipped (no request is sent)
    - create/patch/delete while in flight raise CacheBusy immediately
"""
import logging
import threading
from typing import Any, Iterable, List, Mapping, Optional

from .client import IssueClient
from .detail import IssueDetail
from .schema import Issue

logger = logging.getLogger(__name__)


class CacheBusy(Exception):
    """Raised when a mutation is issued while another operation is in flight."""

    def __init__(self):
        super().__init__("Another operation is in progress")


class IssueCache:
    """Global state cache over an IssueClient."""

    def __init__(self, client: IssueClient, initial: Iterable[Issue] = ()):
        self.client = client
        self._issues: List[Issue] = list(initial)
        self._busy = threading.Lock()

    # ── Reads ────────────────────────────────────────────────────────────

    @property
    def issues(self) -> List[Issue]:
        """A copy of the cached collection."""
        return list(self._issues)

    @property
    def is_loading(self) -> bool:
        return self._busy.locked()

    def find(self, issue_id: str) -> Optional[Issue]:
        for issue in self._issues:
            if issue.id == issue_id:
                return issue
        return None

    def column(self, status: str) -> List[Issue]:
        return [i for i in self._issues if i.status == status]

    def detail(self, issue_id: str) -> Optional[IssueDetail]:
        """Scoped view for one issue, or None if it is not in the cache."""
        if self.find(issue_id) is None:
            return None
        return IssueDetail(self, issue_id)

    # ── Sync ─────────────────────────────────────────────────────────────

    def set_issues(self, issues: Iterable[Issue]):
        """Seed the cache from a preloaded source. No network call."""
        self._issues = list(issues)

    def _reload(self):
        self._issues = self.client.list_issues()

    def refresh(self):
        """Re-fetch the full list from the server. Skipped if already busy."""
        if not self._busy.acquire(blocking=False):
            logger.debug("refresh skipped: operation in flight")
            return
        try:
            self._reload()
        except Exception as e:
            logger.error(f"Loading issues failed: {e}")
            raise
        finally:
            self._busy.release()

    # ── Mutations ────────────────────────────────────────────────────────

    def _acquire_for_mutation(self):
        if not self._busy.acquire(blocking=False):
            raise CacheBusy()

    def create_issue(self, fields: Mapping[str, Any]) -> Issue:
        """Create an issue on the server, then reload. Returns the new issue."""
        self._acquire_for_mutation()
        try:
            created = self.client.create_issue(fields)
            self._reload()
            return created
        except Exception as e:
            logger.error(f"Creating issue failed: {e}")
            raise
        finally:
            self._busy.release()

    def patch_issue(self, issue_id: str, partial: Mapping[str, Any]):
        """Update some fields of an issue on the server, then reload."""
        self._acquire_for_mutation()
        try:
            self.client.patch_issue(issue_id, partial)
            self._reload()
        except Exception as e:
            logger.error(f"Updating issue {issue_id} failed: {e}")
            raise
        finally:
            self._busy.release()

    def delete_issue(self, issue_id: str):
        """Delete an issue on the server, then reload."""
        self._acquire_for_mutation()
        try:
            self.client.delete_issue(issue_id)
            self._reload()
        except Exception as e:
            logger.error(f"Deleting issue {issue_id} failed: {e}")
            raise
        finally:
            self._busy.release()

    def move_issue(self, issue_id: str, status: str):
        """Drop an issue into another column."""
        self.patch_issue(issue_id, {"status": status})
