#!/usr/bin/env python3
"""
Issue Board Server
------------------
JSON API over an in-memory issue store. The kanban UI (or IssueCache in
Python) reads and writes issues through these endpoints.

Usage:
    python board_server.py
    python board_server.py --host 0.0.0.0 --port 8080 --config issueboard.yaml

API:
    GET    /api/issues        → JSON array of issues
    POST   /api/issues        → body { title, description, status }, returns the new issue
    PUT    /api/issues/<id>   → body { title, description, status }, returns the issue
    PATCH  /api/issues/<id>   → body with any of title/description/status
    DELETE /api/issues/<id>   → { success: true }
    GET    /api/board         → { columns, stats }
    GET    /health            → { status, issues, next_id }

Errors come back as { error: "<message>" }. Malformed bodies and unknown
ids are both 400 unless not_found_status is configured otherwise.
"""

import logging
import sys
from functools import wraps
from typing import Optional

from flask import Flask, current_app, jsonify, request

from issueboard.board import board_stats, build_columns
from issueboard.config import Config
from issueboard.store import IssueNotFound, IssueStore
from issueboard.validation import (
    ValidationError,
    validate_issue,
    validate_json_request,
    validate_patch,
)

logger = logging.getLogger("board_server")

UNKNOWN_ERROR = "Unknown error"
NOT_FOUND = "Issue not found"


# ── Error mapping ────────────────────────────────────────────────────────────

def api_errors(f):
    """Decorator: turn service exceptions into { error } responses."""
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except IssueNotFound as e:
            logger.info(f"issue {e.issue_id} not found ({request.method} {request.path})")
            return jsonify({"error": NOT_FOUND}), current_app.config["NOT_FOUND_STATUS"]
        except Exception:
            logger.exception(f"{request.method} {request.path} failed")
            return jsonify({"error": UNKNOWN_ERROR}), 500
    return decorated


# ── App ──────────────────────────────────────────────────────────────────────

def create_app(store: Optional[IssueStore] = None, cfg: Optional[Config] = None) -> Flask:
    """Build the Flask app around an explicitly owned store."""
    cfg = cfg or Config()
    if store is None:
        store = IssueStore.seeded() if cfg.seed else IssueStore()

    app = Flask(__name__)
    app.config["NOT_FOUND_STATUS"] = cfg.not_found_status
    app.extensions["issue_store"] = store

    @app.route("/api/issues", methods=["GET"])
    def api_list_issues():
        return jsonify([i.to_dict() for i in store.get_all()])

    @app.route("/api/issues", methods=["POST"])
    @api_errors
    def api_create_issue():
        body = validate_json_request(request)
        fields = validate_issue(body, strict_status=cfg.strict_status)
        issue = store.create(fields)
        logger.info(f"created issue {issue.id} ({issue.status})")
        return jsonify(issue.to_dict())

    @app.route("/api/issues/<issue_id>", methods=["PUT"])
    @api_errors
    def api_replace_issue(issue_id):
        body = validate_json_request(request)
        fields = validate_issue(body, strict_status=cfg.strict_status)
        issue = store.update(issue_id, fields)
        if issue is None:
            raise IssueNotFound(issue_id)
        logger.info(f"replaced issue {issue_id}")
        return jsonify(issue.to_dict())

    @app.route("/api/issues/<issue_id>", methods=["PATCH"])
    @api_errors
    def api_patch_issue(issue_id):
        body = validate_json_request(request)
        partial = validate_patch(body, strict_status=cfg.strict_status)
        issue = store.patch(issue_id, partial)
        if issue is None:
            raise IssueNotFound(issue_id)
        logger.info(f"patched issue {issue_id}: {', '.join(sorted(partial)) or 'no fields'}")
        return jsonify(issue.to_dict())

    @app.route("/api/issues/<issue_id>", methods=["DELETE"])
    @api_errors
    def api_delete_issue(issue_id):
        if not store.delete(issue_id):
            raise IssueNotFound(issue_id)
        logger.info(f"deleted issue {issue_id}")
        return jsonify({"success": True})

    @app.route("/api/board")
    def api_board():
        issues = store.get_all()
        return jsonify({
            "columns": build_columns(issues),
            "stats": board_stats(issues),
        })

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "issues": len(store), "next_id": store.next_id})

    return app


# ── Main ─────────────────────────────────────────────────────────────────────

def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Issue Board Server")
    parser.add_argument("--host", help="Bind address (use 0.0.0.0 to expose on network)")
    parser.add_argument("--port", type=int)
    parser.add_argument("--config", help="Path to issueboard.yaml (overrides ISSUEBOARD_CONFIG)")
    parser.add_argument("--no-seed", action="store_true", help="Start with an empty board")
    args = parser.parse_args(argv)

    cfg = Config.load(args.config)
    if args.host:
        cfg.host = args.host
    if args.port:
        cfg.port = args.port
    if args.no_seed:
        cfg.seed = False

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s [board] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = create_app(cfg=cfg)
    store = app.extensions["issue_store"]

    print(f"""
╔═══════════════════════════════════════╗
║  Issue Board Server                   ║
╠═══════════════════════════════════════╣
║  URL:    http://{cfg.host}:{cfg.port:<18}║
║  Issues: {len(store):<29}║
╚═══════════════════════════════════════╝
""")

    # threaded=True is safe: IssueStore serializes every mutation
    app.run(host=cfg.host, port=cfg.port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
