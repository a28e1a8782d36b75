from __future__ import annotations

"""
Template Tree Resolver.

Locates files inside a template tree by structural identity and derives
the canonical identifier used as a stable key for editor buffers, sandbox
addressing and snapshot diffs. Every function here is pure: the tree is
only read, and results depend on nothing but the arguments.
"""

from typing import Iterator, Optional, Sequence, Tuple

from templatetree.domain.tree_models import TemplateFile, TemplateFolder

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find_file_path(
        target: TemplateFile,
        root: TemplateFolder,
        path_so_far: Optional[Sequence[str]] = None,
) -> Optional[str]:
    """
    Locate ``target`` within ``root`` and return its slash-joined path.

    Traverses depth-first in item order and stops at the first match, so
    when several files share a name and extension only the first one
    visited is reachable.

    Args:
        target: File descriptor matched by filename and extension.
        root: Folder (or subtree) to search.
        path_so_far: Folder names from the global root down to ``root``.

    Returns:
        Optional[str]: Path without a leading slash, or None if not found.
    """
    prefix = list(path_so_far or ())

    for item in root.items:
        if isinstance(item, TemplateFolder):
            found = find_file_path(target, item, prefix + [item.folder_name])
            if found is not None:
                return found
            continue

        if is_same_file(item, target):
            segments = prefix + [path_segment(item)]
            return PATH_SEPARATOR.join(segments).lstrip(PATH_SEPARATOR)

    return None


def generate_file_id(file: TemplateFile, root_folder: TemplateFolder) -> str:
    """
    Derive the canonical identifier of ``file`` within ``root_folder``.

    The identifier is the file's path when it can be located. Files that
    are not attached to the tree yet still get a usable identifier made of
    their rendered name alone, so this never raises.

    Args:
        file: The file to identify.
        root_folder: Root of the whole template tree.

    Returns:
        str: Identifier such as ``src/components/App.tsx``.
    """
    path = (find_file_path(file, root_folder) or "").lstrip(PATH_SEPARATOR)
    if path:
        return path
    return render_file_name(file)


def path_segment(file: TemplateFile) -> str:
    """Return the last path segment of ``file``: the extension is kept as given."""
    if file.file_extension:
        return f"{file.filename}.{file.file_extension}"
    return file.filename


def render_file_name(file: TemplateFile) -> str:
    """Identifier of a detached file: ``filename`` plus ``.ext`` when the trimmed extension is non-empty."""
    extension = (file.file_extension or "").strip()
    suffix = f".{extension}" if extension else ""
    return f"{file.filename}{suffix}"


def is_same_file(candidate: TemplateFile, target: TemplateFile) -> bool:
    """Structural match on filename and extension; content is ignored."""
    return (
        candidate.filename == target.filename
        and candidate.file_extension == target.file_extension
    )


def iter_file_paths(
        root: TemplateFolder,
        path_so_far: Optional[Sequence[str]] = None,
) -> Iterator[Tuple[str, TemplateFile]]:
    """
    Yield ``(path, file)`` for every file under ``root`` in traversal order.

    Uses the same ordering and path rendering as :func:`find_file_path`.
    """
    prefix = list(path_so_far or ())

    for item in root.items:
        if isinstance(item, TemplateFolder):
            yield from iter_file_paths(item, prefix + [item.folder_name])
        else:
            path = PATH_SEPARATOR.join(prefix + [path_segment(item)])
            yield path.lstrip(PATH_SEPARATOR), item
