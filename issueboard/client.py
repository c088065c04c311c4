# Issue board: HTTP client
#
# Talks to the board server's /api/issues endpoints. Every call either
# returns decoded data or raises; nothing is retried.

import requests
from typing import Any, Dict, List, Mapping, Optional

from .schema import Issue


class IssueApiError(Exception):
    """A non-success response from the issues API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class IssueClient:
    """HTTP client for the issues API."""

    def __init__(self, base_url: str = "http://127.0.0.1:3000",
                 session: Optional[requests.Session] = None,
                 timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _call(self, method: str, path: str, action: str,
              body: Optional[Mapping[str, Any]] = None) -> Any:
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if body is not None:
            kwargs["json"] = dict(body)
        r = self.session.request(method, f"{self.base_url}{path}", **kwargs)
        if not r.ok:
            try:
                message = r.json().get("error")
            except (ValueError, AttributeError):
                message = None
            raise IssueApiError(
                message or f"{action} failed (HTTP {r.status_code})",
                status_code=r.status_code,
            )
        return r.json()

    def list_issues(self) -> List[Issue]:
        data = self._call("GET", "/api/issues", "Loading issues")
        return [Issue.from_dict(d) for d in data]

    def create_issue(self, fields: Mapping[str, Any]) -> Issue:
        data = self._call("POST", "/api/issues", "Creating issue", fields)
        return Issue.from_dict(data)

    def replace_issue(self, issue_id: str, fields: Mapping[str, Any]) -> Issue:
        data = self._call("PUT", f"/api/issues/{issue_id}", "Replacing issue", fields)
        return Issue.from_dict(data)

    def patch_issue(self, issue_id: str, partial: Mapping[str, Any]) -> Issue:
        data = self._call("PATCH", f"/api/issues/{issue_id}", "Updating issue", partial)
        return Issue.from_dict(data)

    def delete_issue(self, issue_id: str) -> bool:
        data = self._call("DELETE", f"/api/issues/{issue_id}", "Deleting issue")
        return bool(data.get("success"))

    def health(self) -> bool:
        """Check if the board server is reachable."""
        try:
            r = self.session.get(f"{self.base_url}/health", timeout=2)
            return r.ok
        except requests.RequestException:
            return False
