"""
Tasklist - Task Models
"""
from dataclasses import dataclass
from typing import Optional, Any, Dict


@dataclass
class Task:
    """
    Task entity.

    `id` is None until a store assigns one.
    """
    id: Optional[int] = None
    title: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> Optional["Task"]:
        """Create Task from database row."""
        if row is None:
            return None
        data = dict(row)
        return cls(id=data["id"], title=data["title"])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (id first, then title)."""
        return {
            "id": self.id,
            "title": self.title,
        }
