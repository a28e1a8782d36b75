from __future__ import annotations

"""
Snapshot Diff Service.

Compares two captures of a template tree using file identifiers as keys
and content fingerprints to detect edits.
"""

import hashlib
import logging

from templatetree.core.services.indexer import build_file_index
from templatetree.domain.snapshot_models import TreeDiff
from templatetree.domain.tree_models import TemplateFile, TemplateFolder

logger = logging.getLogger(__name__)


def content_fingerprint(file: TemplateFile) -> str:
    """Return the SHA-256 hex digest of the file content."""
    return hashlib.sha256(file.content.encode("utf-8", errors="surrogatepass")).hexdigest()


def diff_trees(old_root: TemplateFolder, new_root: TemplateFolder) -> TreeDiff:
    """
    Compare two snapshots of a template tree.

    Args:
        old_root: Earlier capture of the tree.
        new_root: Later capture of the tree.

    Returns:
        TreeDiff: Sorted id lists for added, removed, modified and unchanged files.
    """
    old_index = build_file_index(old_root)
    new_index = build_file_index(new_root)

    added = sorted(set(new_index) - set(old_index))
    removed = sorted(set(old_index) - set(new_index))

    modified = []
    unchanged = []
    for file_id in sorted(set(old_index) & set(new_index)):
        if content_fingerprint(old_index[file_id]) != content_fingerprint(new_index[file_id]):
            modified.append(file_id)
        else:
            unchanged.append(file_id)

    logger.info(
        f"Snapshot diff: {len(added)} added, {len(removed)} removed, "
        f"{len(modified)} modified, {len(unchanged)} unchanged"
    )
    return TreeDiff(added=added, removed=removed, modified=modified, unchanged=unchanged)
