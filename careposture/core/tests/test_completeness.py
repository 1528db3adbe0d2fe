"""Tests for completeness assessment into a readiness report."""

from __future__ import annotations

from careposture.core.diagnostics import set_posture_debug
from careposture.core.domain.enums import ReadinessStatus
from careposture.core.domain.models import BrainStateCheck, VerificationFacts
from careposture.core.readiness.completeness import (
    PHASES_COMPLETED,
    REQUIRED_ROLES,
    REQUIRED_WORKFLOWS,
    WF_HEALTH_DIAGNOSTICS,
    assess_completeness,
)

HEALTHY_BRAIN = BrainStateCheck(exists=True, has_row=True, emergency_valid=True, version_valid=True)


def mk_facts(**overrides) -> VerificationFacts:
    values = dict(
        authenticated=True,
        role_names=REQUIRED_ROLES,
        permission_count=12,
        brain_state=HEALTHY_BRAIN,
        tables_exist=True,
        table_check_failed=False,
    )
    values.update(overrides)
    return VerificationFacts(**values)


def test_unauthenticated_is_pending_auth():
    report = assess_completeness(mk_facts(authenticated=False))
    assert report.readiness_status == ReadinessStatus.PENDING_AUTH
    assert report.issues == ()
    assert report.phases_completed == 0
    assert report.details is not None
    assert report.details.role_count == 0


def test_all_facts_healthy_is_ready():
    report = assess_completeness(mk_facts())
    assert report.readiness_status == ReadinessStatus.READY
    assert report.issues == ()
    assert report.invariants_verified is True
    assert report.roles_verified == REQUIRED_ROLES
    assert set(report.workflows_verified) == set(REQUIRED_WORKFLOWS)
    assert report.phases_completed == PHASES_COMPLETED
    assert report.details.rls_enforced is True


def test_missing_role_is_not_ready():
    roles = tuple(r for r in REQUIRED_ROLES if r != "SENIOR")
    report = assess_completeness(mk_facts(role_names=roles))
    assert report.readiness_status == ReadinessStatus.NOT_READY
    assert report.issues == ("Missing required role: SENIOR",)
    assert report.invariants_verified is False


def test_no_permissions_reports_missing_diagnostics_workflow():
    report = assess_completeness(mk_facts(permission_count=0))
    assert report.readiness_status == ReadinessStatus.NOT_READY
    assert report.issues == (
        "No permissions defined in system",
        f"Missing workflows: {WF_HEALTH_DIAGNOSTICS}",
    )


def test_brain_state_error_text_is_used():
    brain = BrainStateCheck(exists=False, error="relation missing")
    report = assess_completeness(mk_facts(brain_state=brain))
    assert "Brain state: relation missing" in report.issues
    assert report.details.brain_state_exists is False


def test_brain_state_without_row():
    brain = BrainStateCheck(exists=True, has_row=False, emergency_valid=True, version_valid=True)
    report = assess_completeness(mk_facts(brain_state=brain))
    assert "Brain state singleton does not exist" in report.issues
    assert report.readiness_status == ReadinessStatus.NOT_READY


def test_table_check_failure_adds_both_issues():
    report = assess_completeness(mk_facts(tables_exist=False, table_check_failed=True))
    assert report.issues[-2:] == (
        "Failed to verify table existence",
        "Required tables missing or inaccessible",
    )
    assert report.workflows_verified == (
        "Emergency declaration & resolution",
        "Emergency blocking of care",
        WF_HEALTH_DIAGNOSTICS,
    )


def test_issue_order_follows_checks():
    report = assess_completeness(
        mk_facts(role_names=(), permission_count=0, brain_state=BrainStateCheck(), tables_exist=False)
    )
    assert report.issues[: len(REQUIRED_ROLES)] == tuple(
        f"Missing required role: {r}" for r in REQUIRED_ROLES
    )
    assert report.issues[len(REQUIRED_ROLES) :] == (
        "No permissions defined in system",
        "Brain state singleton does not exist",
        "Required tables missing or inaccessible",
    )
    assert report.workflows_verified == ()


def test_emits_summary_line():
    lines: list[str] = []
    set_posture_debug(lines.append)
    try:
        assess_completeness(mk_facts())
    finally:
        set_posture_debug(None)
    assert lines == [
        "SYSTEM READINESS CHECK: READY invariants_verified=True workflows_verified=14 issues=0"
    ]
