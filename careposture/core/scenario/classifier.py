"""Scenario and governance classification for a single care context.

Responsibilities:
  - Evaluate the scenario table and the governance table independently.
  - Fall back to fixed labels when no rule matches.

Inputs/Outputs:
  - Inputs: CareContext snapshot.
  - Outputs: ScenarioResult with a label and a governance description.

Invariants:
  - Total and deterministic; never raises, never returns an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from careposture.core.domain.models import CareContext, ScenarioResult
from .rules import (
    GOVERNANCE_MIXED,
    GOVERNANCE_RULES,
    SCENARIO_RULES,
    SCENARIO_UNKNOWN,
    Rule,
    first_match,
)


@dataclass(frozen=True)
class ScenarioRuleSet:
    scenario_rules: Tuple[Rule, ...] = tuple(SCENARIO_RULES)
    governance_rules: Tuple[Rule, ...] = tuple(GOVERNANCE_RULES)
    scenario_fallback: str = SCENARIO_UNKNOWN
    governance_fallback: str = GOVERNANCE_MIXED


def build_default_ruleset() -> ScenarioRuleSet:
    return ScenarioRuleSet()


class ScenarioClassifier:
    def __init__(self, ruleset: Optional[ScenarioRuleSet] = None) -> None:
        self._ruleset = ruleset or build_default_ruleset()

    def classify(self, context: CareContext) -> ScenarioResult:
        label = first_match(self._ruleset.scenario_rules, context)
        if not label:
            label = self._ruleset.scenario_fallback
        governance = first_match(self._ruleset.governance_rules, context)
        if not governance:
            governance = self._ruleset.governance_fallback
        return ScenarioResult(scenario_label=label, governance_text=governance)


_DEFAULT_CLASSIFIER = ScenarioClassifier()


def classify(context: CareContext) -> ScenarioResult:
    return _DEFAULT_CLASSIFIER.classify(context)
