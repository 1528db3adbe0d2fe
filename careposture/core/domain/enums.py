"""Domain enums for care-context classification and readiness display.

Responsibilities:
  - Define care-context attribute values as stored by the backend.
  - Define readiness verdicts and display decision kinds.
  - Provide stable suppression reasons and banner metadata.

Invariants:
  - Enum values must match the backend's stored strings.
  - Metadata tables must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class ManagementMode(Enum):
    SELF = "SELF"
    FAMILY_MANAGED = "FAMILY_MANAGED"
    AGENCY_MANAGED = "AGENCY_MANAGED"


class CareSetting(Enum):
    IN_HOME = "IN_HOME"
    FACILITY = "FACILITY"
    NONE = "NONE"


class ServiceModel(Enum):
    NONE = "NONE"
    DIRECT_HIRE = "DIRECT_HIRE"
    AGENCY_PROVIDED = "AGENCY_PROVIDED"
    # Agency contexts are stored with the setting-specific service model.
    AGENCY_HOME_CARE = "AGENCY_HOME_CARE"
    AGENCY_FACILITY = "AGENCY_FACILITY"


class ReadinessStatus(Enum):
    PENDING_AUTH = "PENDING_AUTH"
    READY = "READY"
    NOT_READY = "NOT_READY"


class DisplayKind(Enum):
    SUPPRESSED = "SUPPRESSED"
    READY_BANNER = "READY_BANNER"
    NOT_READY_BANNER = "NOT_READY_BANNER"


# Which guard suppressed the readiness banner.
class SuppressReason(Enum):
    LOADING = "LOADING"
    NO_REPORT = "NO_REPORT"
    PENDING_AUTH = "PENDING_AUTH"
    UNRECOGNIZED_STATUS = "UNRECOGNIZED_STATUS"
    PROVIDER_ERROR = "PROVIDER_ERROR"


# UI metadata keyed by banner kind.
DISPLAY_METADATA: dict[DisplayKind, dict[str, str]] = {
    DisplayKind.READY_BANNER: {
        "headline": "System Status: READY",
        "message": "All invariants verified. System is production-ready.",
    },
    DisplayKind.NOT_READY_BANNER: {
        "headline": "System Status: NOT_READY",
        "message": "System verification incomplete. Issues detected.",
    },
}

SUPPRESS_METADATA: dict[SuppressReason, str] = {
    SuppressReason.LOADING: "Readiness report is still loading.",
    SuppressReason.NO_REPORT: "No readiness report is available.",
    SuppressReason.PENDING_AUTH: "System activation requires authentication.",
    SuppressReason.UNRECOGNIZED_STATUS: "Readiness status is not recognized; nothing is shown.",
    SuppressReason.PROVIDER_ERROR: "Readiness provider failed; nothing is shown.",
}


def parse_enum(enum_cls, raw: object):
    """Map a stored string to an enum member, or None when unrecognized."""
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return enum_cls(raw.strip())
    except ValueError:
        return None


_missing_banners = [
    k for k in DisplayKind if k is not DisplayKind.SUPPRESSED and k not in DISPLAY_METADATA
]
if _missing_banners:
    raise RuntimeError(f"Missing DISPLAY_METADATA for: {[m.value for m in _missing_banners]}")

_missing_suppress = [r for r in SuppressReason if r not in SUPPRESS_METADATA]
if _missing_suppress:
    raise RuntimeError(f"Missing SUPPRESS_METADATA for: {[m.value for m in _missing_suppress]}")
