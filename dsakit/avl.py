"""Player leaderboard stored in an AVL tree keyed by score."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Player:
    """A player identified by id, ranked by score."""

    player_id: int
    score: int


@dataclass(eq=False)
class _Node:
    player: Player
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return 0 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: Optional[_Node]) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], player: Player) -> _Node:
    if node is None:
        return _Node(player)
    score = player.score
    if score < node.player.score:
        node.left = _insert(node.left, player)
    elif score > node.player.score:
        node.right = _insert(node.right, player)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and node.left is not None:
        if score > node.left.player.score:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and node.right is not None:
        if score < node.right.player.score:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], score: int) -> Optional[_Node]:
    if node is None:
        return None
    if score < node.player.score:
        node.left = _delete(node.left, score)
    elif score > node.player.score:
        node.right = _delete(node.right, score)
    else:
        if node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.player = successor.player
        node.right = _delete(node.right, successor.player.score)

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class Leaderboard:
    """Players ordered by score; each score is held by at most one player."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, player_id: int, score: int) -> None:
        """Register a player; a score already taken is left unchanged."""
        self._root = _insert(self._root, Player(player_id, score))

    def delete(self, score: int) -> None:
        """Remove the player holding this score, if any."""
        self._root = _delete(self._root, score)

    def _walk(self) -> Iterator[Player]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.player
            node = node.right

    def entries(self) -> list[Player]:
        """Return the players in ascending order of score."""
        return list(self._walk())

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def render(self) -> str:
        """Return the leaderboard as text, one player per line."""
        return "\n".join(
            f"Player ID: {p.player_id} | Score: {p.score}" for p in self._walk()
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Register players, show the leaderboard, remove one and show it again."""
    argparse.ArgumentParser(description="AVL leaderboard demonstration").parse_args(argv)
    board = Leaderboard()
    for player_id, score in [(101, 50), (102, 70), (103, 30), (104, 90), (105, 60), (106, 91)]:
        board.insert(player_id, score)

    print("\nLeaderboard:")
    print(board.render())
    print("\nRemoving player with score 50...")
    board.delete(50)
    print("\nUpdated Leaderboard:")
    print(board.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())