"""
Reward tiers unlocked by the number of items found.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RewardTier(BaseModel):
    """A discount unlocked once ``threshold`` items are found."""
    model_config = ConfigDict(frozen=True)

    code: str
    description: str
    threshold: int = Field(..., ge=0)

    def __str__(self) -> str:
        return f"{self.code} ({self.description})"


# Highest threshold first; the first tier the count reaches wins
REWARD_TIERS: List[RewardTier] = [
    RewardTier(code="DISCOUNT20+DRAW", description="20% discount + entry to grand draw", threshold=10),
    RewardTier(code="DISCOUNT20", description="20% discount", threshold=7),
    RewardTier(code="DISCOUNT10", description="10% discount", threshold=5),
]


def reward_for_count(found_count: int) -> Optional[RewardTier]:
    """Get the reward earned by ``found_count`` items, or None."""
    for tier in REWARD_TIERS:
        if found_count >= tier.threshold:
            return tier
    return None
