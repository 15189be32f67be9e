from __future__ import annotations

from abc import ABC, abstractmethod


class ApprovalPolicy(ABC):
    """Decides whether an absence counts as an approved leave (Strategy Pattern)."""

    @abstractmethod
    def is_approved(self, reason: str) -> bool:
        raise NotImplementedError
