from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..core.constants import ATTENDANCE_UPDATE_EVENT


@dataclass(frozen=True)
class RealtimeEvent:
    """A payload-less signal telling subscribers to refetch."""

    name: str


ATTENDANCE_UPDATED = RealtimeEvent(ATTENDANCE_UPDATE_EVENT)


class EventPublisher(Protocol):
    def publish(self, event: RealtimeEvent) -> None:
        raise NotImplementedError
