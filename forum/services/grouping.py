# forum/services/grouping.py

from typing import Dict, Iterator, List, Optional


class GroupedNames:
    """Parent id -> ordered list of unique child names.

    Parents keep the order in which they were first seen; so do the names
    inside each parent. Names are stored trimmed. Blank names (what a LEFT
    JOIN yields when no link row exists) are never stored, and a repeated
    name is ignored.
    """

    def __init__(self):
        # dict keys double as an insertion-ordered set
        self._groups: Dict[int, Dict[str, None]] = {}

    def add_parent(self, parent_id: int) -> bool:
        """Register a parent; True when it had not been seen before"""
        if parent_id in self._groups:
            return False
        self._groups[parent_id] = {}
        return True

    def add(self, parent_id: int, name: Optional[str]) -> None:
        self.add_parent(parent_id)
        if name is None:
            return
        name = name.strip()
        if not name:
            return
        self._groups[parent_id].setdefault(name, None)

    def add_joined(self, parent_id: int, joined: Optional[str], separator: str) -> None:
        """Add names that the store concatenated into one string"""
        self.add_parent(parent_id)
        if not joined:
            return
        for part in joined.split(separator):
            self.add(parent_id, part)

    def names(self, parent_id: int) -> List[str]:
        return list(self._groups.get(parent_id, ()))

    def __contains__(self, parent_id: object) -> bool:
        return parent_id in self._groups

    def __iter__(self) -> Iterator[int]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)
