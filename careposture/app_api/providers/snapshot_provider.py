"""Snapshot-backed providers for care context and readiness.

Responsibilities:
  - Serve CareContext and ReadinessReport values from a parsed JSON snapshot.
  - Build the readiness report from raw verification facts when the snapshot
    carries facts instead of a finished report.
Must not:
  - Classify contexts or decide what to display.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from careposture.app_api.dto import context_from_dict, facts_from_dict, report_from_dict
from careposture.app_api.ports import CareContextProvider, ReadinessProvider
from careposture.core.domain.models import CareContext, ReadinessReport
from careposture.core.readiness.completeness import assess_completeness
from careposture.core.scenario.presets import preset_context


class SnapshotContextProvider(CareContextProvider):
    """Contexts keyed by resident id, with an optional default for any resident."""

    def __init__(self, snapshot: Mapping[str, Any]) -> None:
        self._snapshot = snapshot

    def get_context(self, resident_id: str) -> CareContext:
        residents = self._snapshot.get("residents") or {}
        if resident_id in residents:
            return context_from_dict(residents[resident_id])
        if "context" in self._snapshot:
            return context_from_dict(self._snapshot["context"])
        if "scenario_id" in self._snapshot:
            return preset_context(str(self._snapshot["scenario_id"]))
        raise LookupError(f"no care context for resident {resident_id}")


class SnapshotReadinessProvider(ReadinessProvider):
    def __init__(self, snapshot: Mapping[str, Any]) -> None:
        self._snapshot = snapshot

    def get_report(self) -> tuple[Optional[ReadinessReport], bool]:
        loading = self._snapshot.get("loading") is True
        if "report" in self._snapshot:
            raw = self._snapshot["report"]
            report = None if raw is None else report_from_dict(raw)
            return report, loading
        if "facts" in self._snapshot:
            return assess_completeness(facts_from_dict(self._snapshot["facts"])), loading
        return None, loading
