"""
Scavenger Hunt Tracker.

Tracks a fixed list of clue items, attaches photos as proof, computes
reward tiers and submits completed hunts to a remote endpoint.
"""

__version__ = "1.0.0"
