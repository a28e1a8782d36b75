from __future__ import annotations

"""
Snapshot Comparison Data Models.

Defines the result object produced when two captures of the same
template tree are compared file by file.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class TreeDiff:
    """
    Difference between two snapshots of a template tree, keyed by file id.

    Attributes:
        added: Ids present only in the newer snapshot.
        removed: Ids present only in the older snapshot.
        modified: Ids present in both whose content fingerprint changed.
        unchanged: Ids present in both with identical content.
    """
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "added": list(self.added),
            "removed": list(self.removed),
            "modified": list(self.modified),
            "unchanged": list(self.unchanged),
        }
