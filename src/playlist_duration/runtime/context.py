"""Per-view context shared by the change monitor and the readiness poller."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from playlist_duration.domain.types import WiringState
from playlist_duration.infra.settings import Settings, settings as default_settings


@dataclass
class ViewContext:
    """One active list view.

    Created once per view and passed by reference. ``wiring`` records whether
    change subscriptions are attached so that attaching twice is a no-op.
    """

    settings: Settings = field(default_factory=lambda: default_settings)
    context_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    wiring: WiringState = WiringState.UNWIRED

    @property
    def is_wired(self) -> bool:
        return self.wiring is WiringState.WIRED

    def mark_wired(self) -> bool:
        """Transition to WIRED. Returns ``False`` when already wired."""
        if self.is_wired:
            return False
        self.wiring = WiringState.WIRED
        return True
