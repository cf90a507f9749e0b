from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ClaimStatus(str, Enum):
    UNCLAIMED = "unclaimed"
    CLAIMED = "claimed"

    @classmethod
    def of(cls, is_claimed: bool) -> ClaimStatus:
        return cls.CLAIMED if is_claimed else cls.UNCLAIMED


@dataclass(frozen=True, slots=True)
class ClaimFilingPolicy:
    """Defines which claim-status changes are allowed on a policy.

    Semantics (intentionally centralized):
    - The only transition is UNCLAIMED -> CLAIMED.
    - There is no transition out of CLAIMED; filing again is a conflict,
      and an update may not withdraw a filed claim.
    """

    current: ClaimStatus

    def can_file(self) -> bool:
        return self.current is ClaimStatus.UNCLAIMED

    def allows(self, target: ClaimStatus) -> bool:
        # Staying put is always allowed; CLAIMED never goes back.
        return target is self.current or self.current is ClaimStatus.UNCLAIMED
