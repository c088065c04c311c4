#!/usr/bin/env python3
"""
Quick verification that a running board server works end-to-end,
driven through the same IssueCache a UI would use.

Usage:
    python verify_board.py [--url http://127.0.0.1:3000]
"""
import sys

from issueboard.cache import IssueCache
from issueboard.client import IssueClient
from issueboard.config import Config


def main(base_url=None, session=None) -> bool:
    base_url = base_url or Config.load().api_url
    print("=" * 60)
    print("Issue Board Verification")
    print("=" * 60)

    client = IssueClient(base_url, session=session)
    cache = IssueCache(client)

    print(f"\n[1/5] Loading board from {base_url}...")
    cache.refresh()
    before = len(cache.issues)
    print(f"✅ {before} issues loaded")

    print("\n[2/5] Creating an issue...")
    created = cache.create_issue({
        "title": "Verify board",
        "description": "Created by verify_board.py",
        "status": "todo",
    })
    if len(cache.issues) != before + 1:
        print("❌ Cache was not refreshed after create")
        return False
    print(f"✅ Issue created: {created.id}")

    print("\n[3/5] Moving it through the columns...")
    detail = cache.detail(created.id)
    for status in ("doing", "done"):
        detail.move_to(status)
        print(f"   → Status: {detail.issue.status}")

    print("\n[4/5] Editing it...")
    detail.patch_issue({"title": "Verify board (edited)"})
    if detail.issue.title != "Verify board (edited)":
        print("❌ Edit not visible in cache")
        return False
    print(f"✅ Title: {detail.issue.title}")

    print("\n[5/5] Deleting it...")
    detail.delete_issue()
    if detail.issue is not None or len(cache.issues) != before:
        print("❌ Issue still present after delete")
        return False
    print("✅ Issue deleted")

    print("\n" + "=" * 60)
    print("✅ ALL CHECKS PASSED")
    print("=" * 60)
    return True


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Issue board smoke test")
    parser.add_argument("--url", help="Board server base URL")
    args = parser.parse_args()
    sys.exit(0 if main(args.url) else 1)
