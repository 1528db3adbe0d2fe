"""Readiness assessment and display utilities.

Responsibilities:
  - Provide the completeness assessor and the readiness display aggregator.
  - Must not query the backend directly; consumes provider snapshots.
"""
