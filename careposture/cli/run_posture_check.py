"""Operational posture check over a JSON snapshot.

Purpose:
  - Classify a resident's care context and decide the readiness banner
    from a snapshot file, without a running dashboard.
Inputs:
  - --snapshot JSON file with "context" | "residents" | "scenario_id" and
    "report" | "facts", plus an optional "loading" flag.
Outputs:
  - Printed scenario, governance, and readiness decision (text or JSON).
Example:
  - PYTHONPATH=. python3 careposture/cli/run_posture_check.py --snapshot snap.json --debug
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from careposture.app_api.dto import decision_to_dict, scenario_to_dict
from careposture.app_api.facade import OperationalPostureService
from careposture.app_api.providers.snapshot_provider import (
    SnapshotContextProvider,
    SnapshotReadinessProvider,
)
from careposture.core.diagnostics import set_posture_debug
from careposture.core.domain.enums import DISPLAY_METADATA, SUPPRESS_METADATA


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify care context and decide readiness display")
    parser.add_argument("--snapshot", required=True, help="Path to snapshot JSON file")
    parser.add_argument("--resident-id", default="default", help="Resident id to classify")
    parser.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    parser.add_argument("--debug", action="store_true", help="Print diagnostic lines")
    args = parser.parse_args(argv)

    path = Path(args.snapshot)
    if not path.exists():
        parser.error(f"snapshot file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read snapshot: {exc}")
    try:
        snapshot = json.loads(text)
    except json.JSONDecodeError as exc:
        parser.error(f"snapshot is not valid JSON: {exc}")
    if not isinstance(snapshot, dict):
        parser.error("snapshot must be a JSON object")
    args.snapshot_data = snapshot
    return args


def _dbg(msg: str) -> None:
    print(f"[debug] {msg}")


def _dbg_stderr(msg: str) -> None:
    # Keeps stdout parseable when --json is set.
    print(f"[debug] {msg}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.debug:
        set_posture_debug(_dbg_stderr if args.json else _dbg)
    else:
        set_posture_debug(None)
    try:
        service = OperationalPostureService(
            SnapshotContextProvider(args.snapshot_data),
            SnapshotReadinessProvider(args.snapshot_data),
        )
        snap = service.snapshot(args.resident_id)
    finally:
        set_posture_debug(None)

    if args.json:
        payload = {
            "resident_id": snap.resident_id,
            "scenario": scenario_to_dict(snap.scenario),
            "readiness": decision_to_dict(snap.readiness),
        }
        print(json.dumps(payload, ensure_ascii=False))
        return 0

    print(f"Resident: {snap.resident_id}")
    if snap.scenario is None:
        print("Scenario: (suppressed)")
    else:
        print(f"Scenario: {snap.scenario.scenario_label}")
        print(f"Governance: {snap.scenario.governance_text}")

    decision = snap.readiness
    if decision.suppressed:
        print(f"Readiness: SUPPRESSED ({SUPPRESS_METADATA[decision.reason]})")
    else:
        meta = DISPLAY_METADATA[decision.kind]
        print(f"Readiness: {meta['headline']}")
        print(f"  {meta['message']}")
        for issue in decision.issues:
            print(f"  - {issue}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
