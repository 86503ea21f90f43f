"""
Game tree of board positions used by the lookahead search.
"""
import logging
from typing import Iterator, List, Optional, Tuple
import numpy as np

from ..game import BoardState, Stone

logger = logging.getLogger(__name__)


class GameTree:
    """
    A node in a tree of board positions.

    Each child holds the position reached from its parent by one legal move,
    or by a pass when the parent had no legal move. Nodes are only created by
    expansion, so every position in the tree is reachable from the root.
    """

    __slots__ = ['state', 'parent', 'children', 'previous_move']

    def __init__(self, root: BoardState):
        """
        Initialize a tree with a single root node.

        Args:
            root: The root position. It is copied, so later changes to the
                caller's board do not affect the tree.
        """
        self.state = root.copy()
        self.parent: Optional['GameTree'] = None
        self.children: List['GameTree'] = []
        # (row, col) that led here; None for the root and for passes
        self.previous_move: Optional[Tuple[int, int]] = None

    @classmethod
    def _new_child(cls, state: BoardState, parent: 'GameTree',
                   move: Optional[Tuple[int, int]]) -> 'GameTree':
        node = cls.__new__(cls)
        node.state = state
        node.parent = parent
        node.children = []
        node.previous_move = move
        return node

    def size(self) -> int:
        """Number of children under this node."""
        return len(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator['GameTree']:
        return iter(self.children)

    def child(self, i: int) -> 'GameTree':
        """Get the child at index i. Raises IndexError if out of range."""
        return self.children[i]

    def is_leaf(self) -> bool:
        return not self.children

    def expand_one_level(self) -> int:
        """
        Add every position reachable in one turn as a child.

        A move whose result equals an existing child is skipped. If the side
        to move has no legal move, a single pass child is added instead; the
        pass child is always added, even if an equal child already exists.

        Returns:
            The number of children added
        """
        moves = self.state.legal_moves()

        if not moves:
            passed = self.state.copy()
            passed.pass_turn()
            self.children.append(GameTree._new_child(passed, self, None))
            return 1

        added = 0
        for move in moves:
            next_state = self.state.copy()
            next_state.apply_move(*move)
            if any(child.state == next_state for child in self.children):
                continue
            self.children.append(GameTree._new_child(next_state, self, move))
            added += 1
        return added

    def expand_all_leaves(self) -> int:
        """
        Expand every leaf below this node by one level.

        Nodes that already have children are not expanded again, so calling
        this d times grows each branch by d plies.

        Returns:
            The total number of children added
        """
        expanded = list(self.leaves())
        added = sum(leaf.expand_one_level() for leaf in expanded)
        logger.debug("Expanded %d leaves, added %d children", len(expanded), added)
        return added

    def leaves(self) -> Iterator['GameTree']:
        """Iterate over the leaf nodes below (or at) this node."""
        if self.is_leaf():
            yield self
            return
        for child in self.children:
            yield from child.leaves()

    def depth(self) -> int:
        """Distance from the root of the tree."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def node_count(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return 1 + sum(child.node_count() for child in self.children)

    def score(self, stone: Stone) -> float:
        """
        Score this node for the given stone.

        A leaf scores the number of squares holding the stone; an internal node
        scores the mean of its children's scores. Every branch is expected to
        reach the same depth for sibling scores to be comparable.
        """
        if self.is_leaf():
            return float(self.state.count(stone))
        return float(np.mean([child.score(stone) for child in self.children]))

    def child_scores(self, stone: Stone) -> List[float]:
        """Scores of the immediate children, in child order."""
        return [child.score(stone) for child in self.children]

    def __repr__(self) -> str:
        return (f"GameTree(move={self.previous_move}, children={len(self.children)}, "
                f"side_to_move={self.state.side_to_move.name})")
