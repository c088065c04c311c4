"""
Scoped view of one issue.

Binds an issue id to the global IssueCache so a detail page can patch or
delete "this issue" without passing the id around. Holds no state of its
own: reads go to the cache, writes go through the cache.
"""
from typing import Any, Mapping, Optional

from .schema import Issue


class IssueDetail:
    """The cache's per-issue operations with the id already filled in.

    Build it through ``IssueCache.detail(id)``, which returns None when the
    issue is not in the cache.
    """

    def __init__(self, cache, issue_id: str):
        self.cache = cache
        self.issue_id = issue_id

    @property
    def issue(self) -> Optional[Issue]:
        """Current record from the cache; None once it has been deleted."""
        return self.cache.find(self.issue_id)

    def patch_issue(self, partial: Mapping[str, Any]):
        self.cache.patch_issue(self.issue_id, partial)

    def delete_issue(self):
        self.cache.delete_issue(self.issue_id)

    def move_to(self, status: str):
        self.cache.move_issue(self.issue_id, status)
