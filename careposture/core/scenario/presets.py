"""Canonical care contexts for the five showcase scenarios.

Responsibilities:
  - Map a scenario id to the CareContext the showcase seeds for it.
Must not:
  - Classify; presets are inputs to the classifier, not results.
"""

from __future__ import annotations

from careposture.core.domain.enums import CareSetting, ManagementMode, ServiceModel
from careposture.core.domain.models import CareContext

SHOWCASE_AGENCY_ID = "a0000000-0000-0000-0000-000000000010"

SCENARIO_IDS = (
    "self-managed",
    "family-managed",
    "direct-hire",
    "agency-home-care",
    "agency-facility",
)

SCENARIO_PRESETS: dict[str, CareContext] = {
    "self-managed": CareContext(
        management_mode=ManagementMode.SELF,
        care_setting=CareSetting.IN_HOME,
        service_model=ServiceModel.NONE,
    ),
    "family-managed": CareContext(
        management_mode=ManagementMode.FAMILY_MANAGED,
        care_setting=CareSetting.IN_HOME,
        service_model=ServiceModel.NONE,
    ),
    "direct-hire": CareContext(
        management_mode=ManagementMode.FAMILY_MANAGED,
        care_setting=CareSetting.IN_HOME,
        service_model=ServiceModel.DIRECT_HIRE,
    ),
    "agency-home-care": CareContext(
        management_mode=ManagementMode.AGENCY_MANAGED,
        care_setting=CareSetting.IN_HOME,
        service_model=ServiceModel.AGENCY_HOME_CARE,
        supervision_enabled=True,
        agency_id=SHOWCASE_AGENCY_ID,
    ),
    "agency-facility": CareContext(
        management_mode=ManagementMode.AGENCY_MANAGED,
        care_setting=CareSetting.FACILITY,
        service_model=ServiceModel.AGENCY_FACILITY,
        supervision_enabled=True,
        agency_id=SHOWCASE_AGENCY_ID,
    ),
}


def preset_context(scenario_id: str) -> CareContext:
    # Unknown ids get the self-managed preset.
    return SCENARIO_PRESETS.get(scenario_id, SCENARIO_PRESETS["self-managed"])


_missing = [s for s in SCENARIO_IDS if s not in SCENARIO_PRESETS]
if _missing:
    raise RuntimeError(f"Missing SCENARIO_PRESETS for: {_missing}")
