"""
Models package for the Scavenger Hunt tracker.

Contains all data models used throughout the application.
"""

from .item import HuntItem, HuntState
from .reward import REWARD_TIERS, RewardTier, reward_for_count
from .submission import SubmissionPayload, SubmissionResult, SubmittedItem, TransportResult

__all__ = [
    'HuntItem',
    'HuntState',
    'REWARD_TIERS',
    'RewardTier',
    'reward_for_count',
    'SubmissionPayload',
    'SubmissionResult',
    'SubmittedItem',
    'TransportResult'
]
