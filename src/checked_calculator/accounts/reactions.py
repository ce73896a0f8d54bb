"""Like/dislike counters attached to posts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from checked_calculator.base import BaseComponent
from checked_calculator.errors import (
    DuplicateReactionError,
    MaxReactionsReachedError,
    PostExistsError,
    UnknownPostError,
)
from checked_calculator.integers import U64_MAX


class ReactionKind(str, Enum):
    """Supported reaction types."""

    LIKE = "like"
    DISLIKE = "dislike"


@dataclass(slots=True)
class Post:
    """A post and its reaction counters."""

    post_id: str
    author: str
    likes: int = 0
    dislikes: int = 0


@dataclass(frozen=True, slots=True)
class Reaction:
    """Record of who reacted to which post, and how."""

    kind: ReactionKind
    author: str
    parent_post: str


class ReactionBoard(BaseComponent):
    """Store posts and the reactions recorded against them."""

    def __init__(self) -> None:
        """Create an empty board."""
        super().__init__()
        self._posts: dict[str, Post] = {}
        self._reactions: dict[tuple[str, str], Reaction] = {}

    def create_post(self, post_id: str, author: str) -> Post:
        """Register a new post with zeroed counters."""
        if post_id in self._posts:
            message = f"Post '{post_id}' already exists"
            raise PostExistsError(message)
        post = Post(post_id=post_id, author=author)
        self._posts[post_id] = post
        return post

    def post(self, post_id: str) -> Post:
        """Return the post registered under ``post_id``."""
        try:
            return self._posts[post_id]
        except KeyError:
            message = f"Unknown post '{post_id}'"
            raise UnknownPostError(message) from None

    def reactions_for(self, post_id: str) -> list[Reaction]:
        """Return the reactions recorded against ``post_id``."""
        return [r for r in self._reactions.values() if r.parent_post == post_id]

    def add_reaction(
        self,
        post_id: str,
        author: str,
        kind: ReactionKind,
    ) -> Reaction:
        """Increment the matching counter and record the reaction.

        Raises:
            UnknownPostError: If the post does not exist.
            DuplicateReactionError: If ``author`` already reacted to the post.
            MaxReactionsReachedError: If the counter is already at its maximum.

        """
        post = self.post(post_id)
        if (author, post_id) in self._reactions:
            message = f"'{author}' already reacted to post '{post_id}'"
            raise DuplicateReactionError(message)

        if kind is ReactionKind.LIKE:
            if post.likes >= U64_MAX:
                message = f"Post '{post_id}' has reached the maximum number of likes"
                raise MaxReactionsReachedError(message)
            post.likes += 1
        else:
            if post.dislikes >= U64_MAX:
                message = (
                    f"Post '{post_id}' has reached the maximum number of dislikes"
                )
                raise MaxReactionsReachedError(message)
            post.dislikes += 1

        reaction = Reaction(kind=kind, author=author, parent_post=post_id)
        self._reactions[(author, post_id)] = reaction
        self.logger.debug(
            "Reaction recorded",
            post_id=post_id,
            author=author,
            kind=kind.value,
        )
        return reaction


__all__ = ["Post", "Reaction", "ReactionBoard", "ReactionKind"]
