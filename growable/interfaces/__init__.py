"""
Abstract base classes and protocols for the collection layer.
"""

from growable.interfaces.backing_store import BackingStore
from growable.interfaces.pull_source import PullSource

__all__ = ["BackingStore", "PullSource"]
