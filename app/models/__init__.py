"""
Models package initialization
"""

from .user import User
from .tweet import Tweet
from .follower import Follower

__all__ = ["User", "Tweet", "Follower"]
