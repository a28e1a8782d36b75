from __future__ import annotations

"""
Template Tree Renderer.

Converts TemplateFolder trees into visual ASCII representations. Items are
rendered in their stored order, which is also the lookup order.
"""

from typing import List, Optional

from templatetree.core.resolver import generate_file_id, path_segment
from templatetree.domain.tree_models import TemplateFolder

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_template_tree(
        folder: TemplateFolder,
        lines: List[str],
        prefix: str = "",
        show_ids: bool = False,
        root: Optional[TemplateFolder] = None,
) -> None:
    """
    Recursively transform the template tree into a list of strings.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested folders.

    Args:
        folder: Current folder to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_ids: Append each file's identifier to its line.
        root: Tree root used to resolve identifiers (defaults to ``folder``).
    """
    tree_root = root if root is not None else folder
    total = len(folder.items)

    for i, item in enumerate(folder.items):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        # Scenario A: Node is a Folder
        if isinstance(item, TemplateFolder):
            lines.append(f"{prefix}{connector}{item.folder_name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_template_tree(
                item,
                lines,
                prefix=new_prefix,
                show_ids=show_ids,
                root=tree_root,
            )
            continue

        # Scenario B: Node is a File
        line = f"{prefix}{connector}{path_segment(item)}"
        if show_ids:
            line += f"  [{generate_file_id(item, tree_root)}]"
        lines.append(line)


def render_tree_lines(root: TemplateFolder, show_ids: bool = False) -> List[str]:
    """Render a whole tree, headed by the root folder name."""
    lines: List[str] = [f"{root.folder_name or '.'}/"]
    render_template_tree(root, lines, show_ids=show_ids)
    return lines
