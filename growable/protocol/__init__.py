"""
Traversal dispatch and bulk construction entry points.
"""

from growable.protocol.bulk import collect, extend
from growable.protocol.dispatcher import (
    Access,
    TraversalRequest,
    by_mut,
    by_ref,
    by_value,
    traverse,
)

__all__ = [
    "Access",
    "TraversalRequest",
    "by_mut",
    "by_ref",
    "by_value",
    "collect",
    "extend",
    "traverse",
]
