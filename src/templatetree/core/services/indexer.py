from __future__ import annotations

"""
File Identifier Index.

Builds lookup tables from canonical file identifiers to the files they
address, for callers that key editor buffers or sandbox mounts by id.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from templatetree.core.resolver import iter_file_paths
from templatetree.domain.tree_models import TemplateFile, TemplateFolder

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_file_index(root: TemplateFolder) -> Dict[str, TemplateFile]:
    """
    Map every addressable file in ``root`` to its identifier.

    Structural duplicates (same filename and extension elsewhere in the
    tree) resolve to the first occurrence, so only that one is indexed.

    Args:
        root: Root of the template tree.

    Returns:
        Dict[str, TemplateFile]: Identifier to file, in traversal order.
    """
    index: Dict[str, TemplateFile] = {}
    seen: Set[Tuple[str, Optional[str]]] = set()
    skipped = 0

    for path, file in iter_file_paths(root):
        key = (file.filename, file.file_extension)
        if key in seen:
            logger.debug(f"Skipping unaddressable duplicate at '{path}'")
            skipped += 1
            continue
        seen.add(key)

        # First occurrence: its walk path is the id generate_file_id would return.
        # Missing and empty extensions render the same segment, hence the check.
        if path in index:
            logger.debug(f"Identifier collision on '{path}', keeping first occurrence")
            skipped += 1
            continue
        index[path] = file

    logger.debug(f"File index built: {len(index)} entries, {skipped} duplicates skipped")
    return index


def list_file_ids(root: TemplateFolder) -> List[str]:
    """Return the identifiers of all addressable files in traversal order."""
    return list(build_file_index(root))
