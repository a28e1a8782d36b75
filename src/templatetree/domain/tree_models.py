from __future__ import annotations

"""
Template Tree Data Models.

Provides the recursive node types used to describe a playground project:
folders holding an ordered list of files or nested folders. The tree is
built and owned by the caller; nothing in this package mutates it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateFile:
    """
    Represents a leaf entry (file) in the template tree.

    Two files with the same ``filename`` and ``file_extension`` are the same
    file for lookup purposes, whatever their content.

    Attributes:
        filename: Base name of the file without its extension.
        file_extension: Extension without the leading dot (None if absent).
        content: Source text authored in the playground.
    """
    filename: str
    file_extension: Optional[str] = None
    content: str = ""


@dataclass
class TemplateFolder:
    """
    Represents an internal node (folder) in the template tree.

    Attributes:
        folder_name: Name of the folder (ignored for the root folder).
        items: Ordered children. Order decides which duplicate is found first.
    """
    folder_name: str
    items: List[TemplateItem] = field(default_factory=list)


TemplateItem = Union[TemplateFile, TemplateFolder]
