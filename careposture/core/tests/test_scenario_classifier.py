"""Tests for scenario and governance rule tables."""

from __future__ import annotations

import itertools
from typing import Optional

import pytest

from careposture.core.domain.enums import CareSetting, ManagementMode, ServiceModel
from careposture.core.domain.models import CareContext, ScenarioResult
from careposture.core.scenario.classifier import ScenarioClassifier, ScenarioRuleSet, classify
from careposture.core.scenario.rules import (
    GOVERNANCE_AGENCY,
    GOVERNANCE_FAMILY,
    GOVERNANCE_MIXED,
    GOVERNANCE_RULES,
    GOVERNANCE_SELF,
    GOVERNANCE_TEXTS,
    SCENARIO_AGENCY_FACILITY,
    SCENARIO_AGENCY_HOME_CARE,
    SCENARIO_DIRECT_HIRE,
    SCENARIO_FAMILY_MANAGED,
    SCENARIO_LABELS,
    SCENARIO_RULES,
    SCENARIO_SELF,
    SCENARIO_UNKNOWN,
    first_match,
    rule_direct_hire,
)


def mk_context(
    mode: Optional[ManagementMode],
    setting: Optional[CareSetting] = CareSetting.IN_HOME,
    service: Optional[ServiceModel] = ServiceModel.NONE,
    supervision: bool = False,
    agency_id: Optional[str] = None,
) -> CareContext:
    return CareContext(
        management_mode=mode,
        care_setting=setting,
        service_model=service,
        supervision_enabled=supervision,
        agency_id=agency_id,
    )


@pytest.mark.parametrize(
    "mode,setting,service,expected",
    [
        (ManagementMode.SELF, CareSetting.IN_HOME, ServiceModel.NONE, SCENARIO_SELF),
        (ManagementMode.FAMILY_MANAGED, CareSetting.IN_HOME, ServiceModel.NONE, SCENARIO_FAMILY_MANAGED),
        (ManagementMode.FAMILY_MANAGED, CareSetting.IN_HOME, ServiceModel.DIRECT_HIRE, SCENARIO_DIRECT_HIRE),
        (ManagementMode.AGENCY_MANAGED, CareSetting.IN_HOME, ServiceModel.AGENCY_PROVIDED, SCENARIO_AGENCY_HOME_CARE),
        (ManagementMode.AGENCY_MANAGED, CareSetting.FACILITY, ServiceModel.AGENCY_PROVIDED, SCENARIO_AGENCY_FACILITY),
    ],
)
def test_canonical_scenarios(mode, setting, service, expected):
    assert classify(mk_context(mode, setting, service)).scenario_label == expected


def test_direct_hire_in_facility_still_direct_hire():
    ctx = mk_context(ManagementMode.FAMILY_MANAGED, CareSetting.FACILITY, ServiceModel.DIRECT_HIRE)
    assert classify(ctx).scenario_label == SCENARIO_DIRECT_HIRE


def test_agency_without_setting_is_unknown():
    ctx = mk_context(ManagementMode.AGENCY_MANAGED, CareSetting.NONE, ServiceModel.AGENCY_PROVIDED)
    assert classify(ctx).scenario_label == SCENARIO_UNKNOWN


def test_self_with_direct_hire_is_unknown():
    ctx = mk_context(ManagementMode.SELF, CareSetting.IN_HOME, ServiceModel.DIRECT_HIRE)
    result = classify(ctx)
    assert result.scenario_label == SCENARIO_UNKNOWN
    # Governance is decided independently of the scenario label.
    assert result.governance_text == GOVERNANCE_SELF


def test_agency_service_model_ignored_for_agency_rules():
    ctx = mk_context(ManagementMode.AGENCY_MANAGED, CareSetting.FACILITY, ServiceModel.NONE)
    assert classify(ctx).scenario_label == SCENARIO_AGENCY_FACILITY


def test_unrecognized_values_fall_back():
    result = classify(mk_context(None, None, None))
    assert result == ScenarioResult(SCENARIO_UNKNOWN, GOVERNANCE_MIXED)


def test_governance_self():
    ctx = mk_context(ManagementMode.SELF, agency_id="agency-1")
    assert classify(ctx).governance_text == GOVERNANCE_SELF


def test_governance_family_requires_no_agency():
    assert classify(mk_context(ManagementMode.FAMILY_MANAGED)).governance_text == GOVERNANCE_FAMILY
    with_agency = mk_context(ManagementMode.FAMILY_MANAGED, agency_id="agency-1")
    assert classify(with_agency).governance_text == GOVERNANCE_MIXED


def test_governance_family_empty_agency_id_counts_as_absent():
    ctx = mk_context(ManagementMode.FAMILY_MANAGED, agency_id="")
    assert classify(ctx).governance_text == GOVERNANCE_FAMILY


def test_governance_agency_requires_supervision():
    supervised = mk_context(ManagementMode.AGENCY_MANAGED, supervision=True, agency_id="a")
    assert classify(supervised).governance_text == GOVERNANCE_AGENCY


def test_agency_unsupervised_keeps_label_with_mixed_governance():
    ctx = mk_context(
        ManagementMode.AGENCY_MANAGED,
        CareSetting.IN_HOME,
        ServiceModel.AGENCY_HOME_CARE,
        supervision=False,
        agency_id="a",
    )
    result = classify(ctx)
    assert result.scenario_label == SCENARIO_AGENCY_HOME_CARE
    assert result.governance_text == GOVERNANCE_MIXED


def test_every_combination_yields_closed_set_values():
    modes = list(ManagementMode) + [None]
    settings = list(CareSetting) + [None]
    services = list(ServiceModel) + [None]
    for mode, setting, service, supervision, agency_id in itertools.product(
        modes, settings, services, [True, False], [None, "agency-1"]
    ):
        result = classify(mk_context(mode, setting, service, supervision, agency_id))
        assert result.scenario_label in SCENARIO_LABELS
        assert result.governance_text in GOVERNANCE_TEXTS
        assert result.scenario_label
        assert result.governance_text


def test_classify_is_idempotent():
    ctx = mk_context(ManagementMode.FAMILY_MANAGED, service=ServiceModel.DIRECT_HIRE)
    assert classify(ctx) == classify(ctx)


def test_first_match_respects_order():
    ctx = mk_context(ManagementMode.FAMILY_MANAGED, service=ServiceModel.DIRECT_HIRE)
    always = lambda c: "first"  # noqa: E731
    assert first_match([always, rule_direct_hire], ctx) == "first"
    assert first_match([rule_direct_hire, always], ctx) == SCENARIO_DIRECT_HIRE
    assert first_match([], ctx) is None


def test_classifier_with_injected_ruleset():
    ruleset = ScenarioRuleSet(
        scenario_rules=(),
        governance_rules=(),
        scenario_fallback="custom scenario",
        governance_fallback="custom governance",
    )
    result = ScenarioClassifier(ruleset).classify(mk_context(ManagementMode.SELF))
    assert result == ScenarioResult("custom scenario", "custom governance")


def test_ruleset_is_hashable_and_ordered():
    ruleset = ScenarioRuleSet()
    assert hash(ruleset) == hash(ScenarioRuleSet())
    assert ruleset.scenario_rules == tuple(SCENARIO_RULES)
    assert ruleset.governance_rules == tuple(GOVERNANCE_RULES)
