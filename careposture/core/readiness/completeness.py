"""System completeness assessment producing a ReadinessReport.

Responsibilities:
  - Reduce already-fetched verification facts into issues, verified roles,
    verified workflows, and a readiness verdict.
Must not:
  - Query the backend; facts are gathered by the completeness provider.
Key definitions:
  - REQUIRED_ROLES, REQUIRED_WORKFLOWS, assess_completeness.
"""

from __future__ import annotations

from careposture.core.diagnostics import emit_debug
from careposture.core.domain.enums import ReadinessStatus
from careposture.core.domain.models import (
    CompletenessDetails,
    ReadinessReport,
    VerificationFacts,
)

PHASES_COMPLETED = 17

REQUIRED_ROLES = (
    "SUPER_ADMIN",
    "AGENCY_ADMIN",
    "SUPERVISOR",
    "CAREGIVER",
    "FAMILY_VIEWER",
    "SENIOR",
)

WF_AGENCY_SETUP = "Agency setup & management"
WF_USER_INVITATION = "User invitation & role assignment"
WF_RESIDENT_REGISTRATION = "Resident registration"
WF_CAREGIVER_ASSIGNMENT = "Caregiver assignment"
WF_CARE_ONLINE = "Care execution (online)"
WF_CARE_OFFLINE = "Care execution (offline + replay)"
WF_EMERGENCY_DECLARATION = "Emergency declaration & resolution"
WF_EMERGENCY_BLOCKING = "Emergency blocking of care"
WF_AUDIT_LOGGING = "Audit logging"
WF_AI_INPUT = "AI input submission & acknowledgment"
WF_FAMILY_VISIBILITY = "Family trust visibility"
WF_SENIOR_VISIBILITY = "Senior read-only visibility"
WF_COMPLIANCE_REVIEW = "Compliance & audit review"
WF_HEALTH_DIAGNOSTICS = "System health diagnostics"

REQUIRED_WORKFLOWS = (
    WF_AGENCY_SETUP,
    WF_USER_INVITATION,
    WF_RESIDENT_REGISTRATION,
    WF_CAREGIVER_ASSIGNMENT,
    WF_CARE_ONLINE,
    WF_CARE_OFFLINE,
    WF_EMERGENCY_DECLARATION,
    WF_EMERGENCY_BLOCKING,
    WF_AUDIT_LOGGING,
    WF_AI_INPUT,
    WF_FAMILY_VISIBILITY,
    WF_SENIOR_VISIBILITY,
    WF_COMPLIANCE_REVIEW,
    WF_HEALTH_DIAGNOSTICS,
)


def pending_auth_report() -> ReadinessReport:
    return ReadinessReport(
        readiness_status=ReadinessStatus.PENDING_AUTH,
        issues=(),
        phases_completed=0,
        details=CompletenessDetails(),
    )


def _verified_workflows(
    all_roles: bool,
    super_admin: bool,
    permission_count: int,
    brain_state_exists: bool,
    emergency_valid: bool,
    version_valid: bool,
    tables_exist: bool,
) -> list[str]:
    verified: list[str] = []
    if all_roles and tables_exist:
        verified += [
            WF_AGENCY_SETUP,
            WF_USER_INVITATION,
            WF_RESIDENT_REGISTRATION,
            WF_CAREGIVER_ASSIGNMENT,
        ]
    if brain_state_exists and version_valid and tables_exist:
        verified += [WF_CARE_ONLINE, WF_CARE_OFFLINE]
    if emergency_valid and brain_state_exists:
        verified += [WF_EMERGENCY_DECLARATION, WF_EMERGENCY_BLOCKING]
    if tables_exist and brain_state_exists:
        verified += [
            WF_AUDIT_LOGGING,
            WF_AI_INPUT,
            WF_FAMILY_VISIBILITY,
            WF_SENIOR_VISIBILITY,
            WF_COMPLIANCE_REVIEW,
        ]
    if permission_count > 0 and super_admin and brain_state_exists:
        verified.append(WF_HEALTH_DIAGNOSTICS)
    return verified


def assess_completeness(facts: VerificationFacts) -> ReadinessReport:
    if not facts.authenticated:
        return pending_auth_report()

    issues: list[str] = []
    roles_verified: list[str] = []

    for role in REQUIRED_ROLES:
        if role in facts.role_names:
            roles_verified.append(role)
        else:
            issues.append(f"Missing required role: {role}")

    if facts.permission_count == 0:
        issues.append("No permissions defined in system")

    brain = facts.brain_state
    brain_state_exists = brain.exists and brain.has_row
    if not brain_state_exists:
        if brain.error:
            issues.append(f"Brain state: {brain.error}")
        else:
            issues.append("Brain state singleton does not exist")

    if facts.table_check_failed:
        issues.append("Failed to verify table existence")
    if not facts.tables_exist:
        issues.append("Required tables missing or inaccessible")

    all_roles = len(roles_verified) == len(REQUIRED_ROLES)
    workflows_verified = _verified_workflows(
        all_roles=all_roles,
        super_admin="SUPER_ADMIN" in roles_verified,
        permission_count=facts.permission_count,
        brain_state_exists=brain_state_exists,
        emergency_valid=brain.emergency_valid,
        version_valid=brain.version_valid,
        tables_exist=facts.tables_exist,
    )

    rls_enforced = facts.tables_exist
    audit_complete = facts.tables_exist
    invariants_verified = (
        brain_state_exists
        and brain.emergency_valid
        and brain.version_valid
        and rls_enforced
        and audit_complete
        and all_roles
    )

    all_workflows = len(workflows_verified) == len(REQUIRED_WORKFLOWS)
    if invariants_verified and all_workflows and not issues:
        status = ReadinessStatus.READY
    else:
        status = ReadinessStatus.NOT_READY

    if invariants_verified and not all_workflows:
        missing = [w for w in REQUIRED_WORKFLOWS if w not in workflows_verified]
        issues.append(f"Missing workflows: {', '.join(missing)}")

    emit_debug(
        f"SYSTEM READINESS CHECK: {status.value} "
        f"invariants_verified={invariants_verified} "
        f"workflows_verified={len(workflows_verified)} issues={len(issues)}"
    )

    return ReadinessReport(
        readiness_status=status,
        issues=tuple(issues),
        phases_completed=PHASES_COMPLETED,
        roles_verified=tuple(roles_verified),
        workflows_verified=tuple(workflows_verified),
        invariants_verified=invariants_verified,
        details=CompletenessDetails(
            role_count=len(facts.role_names),
            permission_count=facts.permission_count,
            brain_state_exists=brain_state_exists,
            emergency_supremacy_verified=brain.emergency_valid,
            version_checking_verified=brain.version_valid,
            rls_enforced=rls_enforced,
            audit_complete=audit_complete,
        ),
    )
