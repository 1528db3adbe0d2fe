"""Port definitions for app-level dependencies.

Responsibilities:
  - Define interface contracts for the care-context and readiness providers.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Optional, Protocol

from careposture.core.domain.models import CareContext, ReadinessReport


class CareContextProvider(Protocol):
    def get_context(self, resident_id: str) -> CareContext:
        ...


class ReadinessProvider(Protocol):
    def get_report(self) -> tuple[Optional[ReadinessReport], bool]:
        """Return the current report snapshot and the loading flag."""
        ...
