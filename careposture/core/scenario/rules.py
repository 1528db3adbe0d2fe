"""Ordered rule tables for scenario labels and governance text.

Responsibilities:
  - Define the scenario rules (A..E) and governance rules as plain functions.
  - Provide first_match over an ordered rule list.
Must not:
  - Combine the two tables; they answer different questions and are
    evaluated independently.
Key definitions:
  - SCENARIO_RULES, GOVERNANCE_RULES, first_match.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from careposture.core.domain.enums import CareSetting, ManagementMode, ServiceModel
from careposture.core.domain.models import CareContext

Rule = Callable[[CareContext], Optional[str]]

SCENARIO_SELF = "A) SELF - Senior Independent"
SCENARIO_FAMILY_MANAGED = "B) FAMILY_MANAGED - Family Oversight"
SCENARIO_DIRECT_HIRE = "C) DIRECT_HIRE - Family Hires Caregiver"
SCENARIO_AGENCY_HOME_CARE = "D) AGENCY_HOME_CARE - Agency In-Home"
SCENARIO_AGENCY_FACILITY = "E) AGENCY_FACILITY - Agency Facility"
SCENARIO_UNKNOWN = "Unknown Scenario"

GOVERNANCE_SELF = "Work: Senior | Supervision: Family"
GOVERNANCE_FAMILY = "Work: Senior/Caregiver | Supervision: Family"
GOVERNANCE_AGENCY = "Work: Caregivers | Supervision: Agency Supervisors"
GOVERNANCE_MIXED = "Mixed governance"

SCENARIO_LABELS = frozenset(
    {
        SCENARIO_SELF,
        SCENARIO_FAMILY_MANAGED,
        SCENARIO_DIRECT_HIRE,
        SCENARIO_AGENCY_HOME_CARE,
        SCENARIO_AGENCY_FACILITY,
        SCENARIO_UNKNOWN,
    }
)
GOVERNANCE_TEXTS = frozenset(
    {GOVERNANCE_SELF, GOVERNANCE_FAMILY, GOVERNANCE_AGENCY, GOVERNANCE_MIXED}
)


def rule_self_independent(ctx: CareContext) -> Optional[str]:
    if ctx.management_mode is ManagementMode.SELF and ctx.service_model is ServiceModel.NONE:
        return SCENARIO_SELF
    return None


def rule_family_oversight(ctx: CareContext) -> Optional[str]:
    if (
        ctx.management_mode is ManagementMode.FAMILY_MANAGED
        and ctx.service_model is ServiceModel.NONE
    ):
        return SCENARIO_FAMILY_MANAGED
    return None


def rule_direct_hire(ctx: CareContext) -> Optional[str]:
    if (
        ctx.management_mode is ManagementMode.FAMILY_MANAGED
        and ctx.service_model is ServiceModel.DIRECT_HIRE
    ):
        return SCENARIO_DIRECT_HIRE
    return None


def rule_agency_home_care(ctx: CareContext) -> Optional[str]:
    if (
        ctx.management_mode is ManagementMode.AGENCY_MANAGED
        and ctx.care_setting is CareSetting.IN_HOME
    ):
        return SCENARIO_AGENCY_HOME_CARE
    return None


def rule_agency_facility(ctx: CareContext) -> Optional[str]:
    if (
        ctx.management_mode is ManagementMode.AGENCY_MANAGED
        and ctx.care_setting is CareSetting.FACILITY
    ):
        return SCENARIO_AGENCY_FACILITY
    return None


def governance_self(ctx: CareContext) -> Optional[str]:
    if ctx.management_mode is ManagementMode.SELF:
        return GOVERNANCE_SELF
    return None


def governance_family(ctx: CareContext) -> Optional[str]:
    if ctx.management_mode is ManagementMode.FAMILY_MANAGED and not ctx.agency_id:
        return GOVERNANCE_FAMILY
    return None


def governance_agency(ctx: CareContext) -> Optional[str]:
    if ctx.management_mode is ManagementMode.AGENCY_MANAGED and ctx.supervision_enabled:
        return GOVERNANCE_AGENCY
    return None


# Order is precedence: first match wins.
SCENARIO_RULES: list[Rule] = [
    rule_self_independent,
    rule_family_oversight,
    rule_direct_hire,
    rule_agency_home_care,
    rule_agency_facility,
]

GOVERNANCE_RULES: list[Rule] = [
    governance_self,
    governance_family,
    governance_agency,
]


def first_match(rules: Iterable[Rule], ctx: CareContext) -> Optional[str]:
    for rule in rules:
        matched = rule(ctx)
        if matched is not None:
            return matched
    return None
