"""Readiness display decision for a single render cycle.

Responsibilities:
  - Apply the readiness guards in strict order and return one DisplayDecision.
  - Run the advisory READY self-check and report failures via the debug hook.

Inputs/Outputs:
  - Inputs: ReadinessReport snapshot (or None) and the provider's loading flag.
  - Outputs: DisplayDecision (suppressed, ready banner, or not-ready banner).

Invariants:
  - Guards short-circuit: loading/absent > pending auth > ready > not ready.
  - Unrecognized status values are suppressed, never shown as healthy.
  - The self-check never raises and never alters the decision.
  - The input report is never mutated.
"""

from __future__ import annotations

from typing import Optional

from careposture.core.diagnostics import emit_debug
from careposture.core.domain.enums import (
    DisplayKind,
    ReadinessStatus,
    SuppressReason,
    parse_enum,
)
from careposture.core.domain.models import DisplayDecision, ReadinessReport


def suppressed(reason: SuppressReason) -> DisplayDecision:
    return DisplayDecision(kind=DisplayKind.SUPPRESSED, issues=(), reason=reason)


def _check_ready_invariant(report: ReadinessReport) -> None:
    if report.issues:
        emit_debug(
            "READINESS_SELF_CHECK_FAILED "
            f"status=READY issues={len(report.issues)} first={report.issues[0]!r}"
        )


def present_readiness(
    report: Optional[ReadinessReport], report_loading: bool
) -> DisplayDecision:
    if report_loading:
        return suppressed(SuppressReason.LOADING)
    if report is None:
        return suppressed(SuppressReason.NO_REPORT)

    status = parse_enum(ReadinessStatus, report.readiness_status)

    if status is ReadinessStatus.PENDING_AUTH:
        return suppressed(SuppressReason.PENDING_AUTH)

    if status is ReadinessStatus.READY:
        _check_ready_invariant(report)
        return DisplayDecision(kind=DisplayKind.READY_BANNER)

    if status is ReadinessStatus.NOT_READY:
        return DisplayDecision(
            kind=DisplayKind.NOT_READY_BANNER,
            issues=tuple(report.issues),
        )

    emit_debug(f"READINESS_STATUS_UNRECOGNIZED status={report.readiness_status!r}")
    return suppressed(SuppressReason.UNRECOGNIZED_STATUS)
