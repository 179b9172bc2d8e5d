"""Registry of folds: how a finished child body merges into its parent body."""

import logging
from typing import Callable, Iterator

from pydantic import BaseModel

from squarekit.core.exceptions import UnregisteredFoldError
from squarekit.core.setters import Append, Assign

logger = logging.getLogger(__name__)

Merge = Callable[[BaseModel, BaseModel], None]


class FoldRegistry:
    """Maps a (child type, parent type) pair to the merge applied on fold."""

    def __init__(self) -> None:
        self._merges: dict[tuple[type, type], Merge] = {}

    def register(self, child_type: type, parent_type: type, merge: Merge) -> None:
        key = (child_type, parent_type)
        if key in self._merges:
            raise ValueError(
                f"Fold {child_type.__name__} -> {parent_type.__name__} already registered"
            )
        self._merges[key] = merge

    def assign(self, child_type: type, parent_type: type, path: str) -> None:
        """Register a fold that stores the child at ``path`` on the parent."""
        spec = Assign(path)
        self.register(child_type, parent_type, lambda parent, child: spec.apply(parent, child))

    def append(self, child_type: type, parent_type: type, path: str) -> None:
        """Register a fold that appends the child to the list at ``path``."""
        spec = Append(path)
        self.register(child_type, parent_type, lambda parent, child: spec.apply(parent, child))

    def lookup(self, child_type: type, parent_type: type) -> Merge | None:
        return self._merges.get((child_type, parent_type))

    def fold(self, parent: BaseModel, child: BaseModel) -> None:
        merge = self.lookup(type(child), type(parent))
        if merge is None:
            raise UnregisteredFoldError(type(child), type(parent))
        merge(parent, child)
        logger.debug("Folded %s into %s", type(child).__name__, type(parent).__name__)

    def __contains__(self, pair: object) -> bool:
        return pair in self._merges

    def __iter__(self) -> Iterator[tuple[type, type]]:
        return iter(list(self._merges))

    def __len__(self) -> int:
        return len(self._merges)


registry = FoldRegistry()
