"""DTO parsing for provider snapshots.

Responsibilities:
  - Convert JSON-like dicts (backend rows, snapshot files) into domain models.
  - Serialize decisions back to plain dicts for CLI output.
Must not:
  - Implement business logic; unrecognized values are passed through for
    the decision units to resolve via their fallbacks.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Mapping, Optional

from careposture.core.domain.enums import (
    CareSetting,
    ManagementMode,
    ReadinessStatus,
    ServiceModel,
    parse_enum,
)
from careposture.core.domain.models import (
    BrainStateCheck,
    CareContext,
    CompletenessDetails,
    DisplayDecision,
    ReadinessReport,
    ScenarioResult,
    VerificationFacts,
)


def _require_mapping(payload: object, name: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"{name} must be an object")
    return payload


def _str_tuple(values: object, name: str) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise ValueError(f"{name} must be a list of strings")
    return tuple(str(v) for v in values)


def context_from_dict(payload: object) -> CareContext:
    data = _require_mapping(payload, "context")
    agency_id = data.get("agency_id")
    return CareContext(
        management_mode=parse_enum(ManagementMode, data.get("management_mode")),
        care_setting=parse_enum(CareSetting, data.get("care_setting")),
        service_model=parse_enum(ServiceModel, data.get("service_model")),
        supervision_enabled=data.get("supervision_enabled") is True,
        agency_id=str(agency_id) if agency_id else None,
    )


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def details_from_dict(payload: object) -> Optional[CompletenessDetails]:
    if payload is None:
        return None
    data = _require_mapping(payload, "details")
    values: dict[str, Any] = {}
    for f in fields(CompletenessDetails):
        raw = data.get(_camel(f.name), data.get(f.name))
        if raw is None:
            continue
        if isinstance(f.default, bool):
            values[f.name] = raw is True
        else:
            values[f.name] = int(raw)
    return CompletenessDetails(**values)


def report_from_dict(payload: object) -> ReadinessReport:
    data = _require_mapping(payload, "report")
    raw_status = data.get("readinessStatus", data.get("readiness_status"))
    status = parse_enum(ReadinessStatus, raw_status)
    return ReadinessReport(
        readiness_status=status if status is not None else str(raw_status),
        issues=_str_tuple(data.get("issues"), "issues"),
        phases_completed=int(data.get("phasesCompleted", data.get("phases_completed", 0)) or 0),
        roles_verified=_str_tuple(
            data.get("rolesVerified", data.get("roles_verified")), "rolesVerified"
        ),
        workflows_verified=_str_tuple(
            data.get("workflowsVerified", data.get("workflows_verified")), "workflowsVerified"
        ),
        invariants_verified=bool(
            data.get("invariantsVerified", data.get("invariants_verified", False))
        ),
        details=details_from_dict(data.get("details")),
    )


def facts_from_dict(payload: object) -> VerificationFacts:
    data = _require_mapping(payload, "facts")
    brain: Optional[Mapping[str, Any]] = data.get("brain_state")
    if brain is None:
        brain = {}
    brain = _require_mapping(brain, "brain_state")
    return VerificationFacts(
        authenticated=bool(data.get("authenticated", False)),
        role_names=_str_tuple(data.get("role_names"), "role_names"),
        permission_count=int(data.get("permission_count", 0) or 0),
        brain_state=BrainStateCheck(
            exists=brain.get("exists") is True,
            has_row=brain.get("has_row") is True,
            emergency_valid=brain.get("emergency_valid") is True,
            version_valid=brain.get("version_valid") is True,
            error=brain.get("error") or None,
        ),
        tables_exist=bool(data.get("tables_exist", False)),
        table_check_failed=bool(data.get("table_check_failed", False)),
    )


def scenario_to_dict(result: Optional[ScenarioResult]) -> Optional[dict[str, str]]:
    if result is None:
        return None
    return {
        "scenarioLabel": result.scenario_label,
        "governanceText": result.governance_text,
    }


def decision_to_dict(decision: DisplayDecision) -> dict[str, Any]:
    return {
        "kind": decision.kind.value,
        "issues": list(decision.issues),
        "reason": decision.reason.value if decision.reason is not None else None,
    }
