"""Account-style collaborators built on the checked integer helpers."""

from .reactions import Post, Reaction, ReactionBoard, ReactionKind
from .vault import Ledger, Vault, WithdrawEvent

__all__ = [
    "Ledger",
    "Post",
    "Reaction",
    "ReactionBoard",
    "ReactionKind",
    "Vault",
    "WithdrawEvent",
]
