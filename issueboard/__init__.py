# Issue board: in-memory issue tracking with a JSON API and a client-side mirror.
#
# Components:
#   schema.py     - Data model (Issue, IssueStatus, status labels)
#   store.py      - In-memory record store
#   seed.py       - Example dataset loaded at startup
#   validation.py - Request and body shape checks
#   board.py      - Four-column board projection
#   client.py     - HTTP client for the issues API
#   cache.py      - Global client cache (full-collection mirror)
#   detail.py     - Scoped view bound to one issue
#   config.py     - YAML configuration
