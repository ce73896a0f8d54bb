"""Tests for the reaction board."""

import pytest

from checked_calculator.accounts.reactions import Reaction, ReactionBoard, ReactionKind
from checked_calculator.errors import (
    CalculatorError,
    DuplicateReactionError,
    MaxReactionsReachedError,
    PostExistsError,
    UnknownPostError,
)
from checked_calculator.integers import U64_MAX


@pytest.fixture
def board() -> ReactionBoard:
    """Return a board with a single post."""
    board = ReactionBoard()
    board.create_post("post-1", "alice")
    return board


def test_like_and_dislike_increment_counters(board: ReactionBoard) -> None:
    """Each reaction increments its own counter and is recorded."""
    like = board.add_reaction("post-1", "bob", ReactionKind.LIKE)
    dislike = board.add_reaction("post-1", "carol", ReactionKind.DISLIKE)

    post = board.post("post-1")
    assert post.likes == 1
    assert post.dislikes == 1
    assert like == Reaction(kind=ReactionKind.LIKE, author="bob", parent_post="post-1")
    assert board.reactions_for("post-1") == [like, dislike]


def test_duplicate_reaction_rejected(board: ReactionBoard) -> None:
    """An author can react to a post only once."""
    board.add_reaction("post-1", "bob", ReactionKind.LIKE)

    with pytest.raises(DuplicateReactionError):
        board.add_reaction("post-1", "bob", ReactionKind.DISLIKE)

    assert board.post("post-1").dislikes == 0


@pytest.mark.parametrize(
    ("kind", "counter"),
    [(ReactionKind.LIKE, "likes"), (ReactionKind.DISLIKE, "dislikes")],
)
def test_counter_at_maximum(
    board: ReactionBoard,
    kind: ReactionKind,
    counter: str,
) -> None:
    """A counter at its maximum rejects further reactions."""
    setattr(board.post("post-1"), counter, U64_MAX)

    with pytest.raises(MaxReactionsReachedError):
        board.add_reaction("post-1", "bob", kind)

    assert getattr(board.post("post-1"), counter) == U64_MAX
    assert board.reactions_for("post-1") == []


def test_unknown_post(board: ReactionBoard) -> None:
    """Reacting to a missing post fails."""
    with pytest.raises(UnknownPostError, match="missing"):
        board.add_reaction("missing", "bob", ReactionKind.LIKE)


def test_duplicate_post_rejected(board: ReactionBoard) -> None:
    """Post identifiers are unique."""
    with pytest.raises(PostExistsError, match="already exists") as excinfo:
        board.create_post("post-1", "bob")

    assert isinstance(excinfo.value, CalculatorError)
    assert board.post("post-1").author == "alice"
