from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from careposture.core.diagnostics import emit_debug
from careposture.core.domain.enums import SuppressReason
from careposture.core.domain.models import DisplayDecision, ScenarioResult
from careposture.core.readiness.aggregator import present_readiness, suppressed
from careposture.core.scenario.classifier import ScenarioClassifier
from .ports import CareContextProvider, ReadinessProvider


@dataclass(frozen=True)
class PostureSnapshot:
    resident_id: str
    scenario: Optional[ScenarioResult]
    readiness: DisplayDecision


class OperationalPostureService:
    def __init__(
        self,
        context_provider: CareContextProvider,
        readiness_provider: ReadinessProvider,
        classifier: Optional[ScenarioClassifier] = None,
    ) -> None:
        self._context_provider = context_provider
        self._readiness_provider = readiness_provider
        self._classifier = classifier or ScenarioClassifier()

    def scenario_for(self, resident_id: str) -> Optional[ScenarioResult]:
        try:
            context = self._context_provider.get_context(resident_id)
        except Exception as exc:
            # Provider failure suppresses the banner; the classifier is not run.
            emit_debug(f"CONTEXT_PROVIDER_FAILED resident_id={resident_id} error={exc!r}")
            return None
        return self._classifier.classify(context)

    def readiness_display(self) -> DisplayDecision:
        try:
            report, loading = self._readiness_provider.get_report()
        except Exception as exc:
            emit_debug(f"READINESS_PROVIDER_FAILED error={exc!r}")
            return suppressed(SuppressReason.PROVIDER_ERROR)
        return present_readiness(report, loading)

    def snapshot(self, resident_id: str) -> PostureSnapshot:
        return PostureSnapshot(
            resident_id=resident_id,
            scenario=self.scenario_for(resident_id),
            readiness=self.readiness_display(),
        )
