from __future__ import annotations

from ...core.constants import UNKNOWN
from .base import ApprovalPolicy


class ReasonStatedApprovalPolicy(ApprovalPolicy):
    """Any stated reason approves the absence; blank ("Unknown") does not."""

    def is_approved(self, reason: str) -> bool:
        return reason != UNKNOWN
