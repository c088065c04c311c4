"""
Board projection: splits a flat issue list into the four status columns.
"""
from typing import Any, Dict, Iterable, List

from .schema import STATUS_LABELS, UNKNOWN_STATUS_LABEL, Issue, IssueStatus


def status_label(status: str) -> str:
    """Display label for a status, with a fallback for values outside the catalogue."""
    known = IssueStatus.from_str(status)
    return STATUS_LABELS[known] if known else UNKNOWN_STATUS_LABEL


def build_columns(issues: Iterable[Issue]) -> List[Dict[str, Any]]:
    """One column per known status, in board order.

    Issues with an unknown status have no column to live in and are left out.
    """
    issues = list(issues)
    columns = []
    for status in IssueStatus:
        members = [i for i in issues if i.status == status.value]
        columns.append({
            "status": status.value,
            "title": status.label,
            "count": len(members),
            "issues": [i.to_dict() for i in members],
        })
    return columns


def board_stats(issues: Iterable[Issue]) -> Dict[str, Any]:
    by_status: Dict[str, int] = {s.value: 0 for s in IssueStatus}
    total = 0
    for issue in issues:
        by_status[issue.status] = by_status.get(issue.status, 0) + 1
        total += 1
    return {"total": total, "by_status": by_status}
