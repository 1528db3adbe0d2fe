"""Domain models for scenario classification and readiness display.

Responsibilities:
  - Define immutable data carriers for care contexts, readiness reports,
    and the decisions computed from them.

Inputs/Outputs:
  - CareContext and ReadinessReport are supplied by external providers.
  - ScenarioResult and DisplayDecision are consumed by the presentation layer.

Invariants:
  - Models must be deterministic containers with no behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .enums import (
    CareSetting,
    DisplayKind,
    ManagementMode,
    ReadinessStatus,
    ServiceModel,
    SuppressReason,
)


@dataclass(frozen=True)
class CareContext:
    # None marks a value the backend stored but this core does not recognize.
    management_mode: Optional[ManagementMode]
    care_setting: Optional[CareSetting]
    service_model: Optional[ServiceModel]
    supervision_enabled: bool = False
    agency_id: Optional[str] = None


@dataclass(frozen=True)
class ScenarioResult:
    scenario_label: str
    governance_text: str


@dataclass(frozen=True)
class CompletenessDetails:
    role_count: int = 0
    permission_count: int = 0
    audit_entries: int = 0
    brain_state_exists: bool = False
    history_entries: int = 0
    user_profiles: int = 0
    residents: int = 0
    assignments: int = 0
    family_links: int = 0
    senior_links: int = 0
    emergency_supremacy_verified: bool = False
    version_checking_verified: bool = False
    rls_enforced: bool = False
    audit_complete: bool = False


@dataclass(frozen=True)
class ReadinessReport:
    # A raw string is kept when the status value is not recognized.
    readiness_status: Union[ReadinessStatus, str]
    issues: tuple[str, ...] = ()
    phases_completed: int = 0
    roles_verified: tuple[str, ...] = ()
    workflows_verified: tuple[str, ...] = ()
    invariants_verified: bool = False
    details: Optional[CompletenessDetails] = None


@dataclass(frozen=True)
class DisplayDecision:
    kind: DisplayKind
    issues: tuple[str, ...] = ()
    reason: Optional[SuppressReason] = None

    @property
    def suppressed(self) -> bool:
        return self.kind is DisplayKind.SUPPRESSED


@dataclass(frozen=True)
class BrainStateCheck:
    exists: bool = False
    has_row: bool = False
    emergency_valid: bool = False
    version_valid: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class VerificationFacts:
    """Raw observations gathered by the completeness provider."""
    authenticated: bool
    role_names: tuple[str, ...] = ()
    permission_count: int = 0
    brain_state: BrainStateCheck = field(default_factory=BrainStateCheck)
    tables_exist: bool = False
    table_check_failed: bool = False
