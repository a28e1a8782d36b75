from __future__ import annotations

"""
Playground template tree resolution.

Public entry points for locating files by structural identity and deriving
their canonical identifiers.
"""

from templatetree.core.resolver import find_file_path, generate_file_id
from templatetree.domain.tree_codec import TemplateFormatError, load_template_tree
from templatetree.domain.tree_models import TemplateFile, TemplateFolder, TemplateItem

__version__ = "1.0.0"

__all__ = [
    "TemplateFile",
    "TemplateFolder",
    "TemplateFormatError",
    "TemplateItem",
    "find_file_path",
    "generate_file_id",
    "load_template_tree",
]
