from __future__ import annotations

"""
Template Tree Codec.

Converts the JSON documents exchanged with the playground editor into
TemplateFolder/TemplateFile trees and back. On the wire a folder is any
object carrying a ``folderName`` key; every other object is a file.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Union

from templatetree.domain.tree_models import TemplateFile, TemplateFolder, TemplateItem

logger = logging.getLogger(__name__)

FOLDER_NAME_KEY = "folderName"
ITEMS_KEY = "items"
FILENAME_KEY = "filename"
EXTENSION_KEY = "fileExtension"
CONTENT_KEY = "content"


class TemplateFormatError(ValueError):
    """Raised when a template document does not describe a valid tree."""

    def __init__(self, location: str, message: str) -> None:
        self.location = location
        super().__init__(f"{location}: {message}")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_template_tree(source: Union[str, bytes, Mapping[str, Any]]) -> TemplateFolder:
    """
    Build the root folder of a template tree from JSON text or a mapping.

    Args:
        source: Raw JSON document or an already decoded mapping.

    Returns:
        TemplateFolder: Root of the decoded tree.

    Raises:
        TemplateFormatError: If the document is not a folder-rooted tree.
    """
    if isinstance(source, (str, bytes)):
        try:
            payload = json.loads(source)
        except json.JSONDecodeError as e:
            raise TemplateFormatError("$", f"invalid JSON ({e.msg})") from e
        except UnicodeDecodeError as e:
            raise TemplateFormatError("$", f"document is not valid UTF-8 ({e.reason})") from e
    else:
        payload = source

    root = template_from_dict(payload)
    if not isinstance(root, TemplateFolder):
        raise TemplateFormatError("$", f"root must be a folder (missing '{FOLDER_NAME_KEY}')")

    logger.debug(f"Template tree loaded: root '{root.folder_name}' with {len(root.items)} items")
    return root


def template_from_dict(payload: Any, location: str = "$") -> TemplateItem:
    """
    Decode a single tree node (and its descendants).

    Args:
        payload: Decoded JSON object describing a folder or a file.
        location: Position of ``payload`` in the document, for error messages.

    Returns:
        TemplateItem: The decoded folder or file.
    """
    if not isinstance(payload, Mapping):
        raise TemplateFormatError(location, f"expected object, received {type(payload).__name__}")

    if FOLDER_NAME_KEY in payload:
        return _folder_from_dict(payload, location)
    return _file_from_dict(payload, location)


def template_to_dict(item: TemplateItem) -> Dict[str, Any]:
    """Encode a folder or file into its wire representation."""
    if isinstance(item, TemplateFolder):
        return {
            FOLDER_NAME_KEY: item.folder_name,
            ITEMS_KEY: [template_to_dict(child) for child in item.items],
        }

    out: Dict[str, Any] = {FILENAME_KEY: item.filename}
    if item.file_extension is not None:
        out[EXTENSION_KEY] = item.file_extension
    out[CONTENT_KEY] = item.content
    return out

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _folder_from_dict(payload: Mapping[str, Any], location: str) -> TemplateFolder:
    """Decode a folder node, recursing into its items in order."""
    name = payload[FOLDER_NAME_KEY]
    if not isinstance(name, str):
        raise TemplateFormatError(location, f"'{FOLDER_NAME_KEY}' must be a string")

    raw_items = payload.get(ITEMS_KEY)
    if not isinstance(raw_items, list):
        raise TemplateFormatError(location, f"'{ITEMS_KEY}' is required and must be a list")

    items: List[TemplateItem] = [
        template_from_dict(child, f"{_child_location(location)}[{i}]")
        for i, child in enumerate(raw_items)
    ]
    return TemplateFolder(folder_name=name, items=items)


def _file_from_dict(payload: Mapping[str, Any], location: str) -> TemplateFile:
    """Decode a file node. Missing extension and null extension both mean none."""
    filename = payload.get(FILENAME_KEY)
    if not isinstance(filename, str) or not filename:
        raise TemplateFormatError(location, f"'{FILENAME_KEY}' must be a non-empty string")

    extension = payload.get(EXTENSION_KEY)
    if extension is not None and not isinstance(extension, str):
        raise TemplateFormatError(location, f"'{EXTENSION_KEY}' must be a string or null")

    content = payload.get(CONTENT_KEY, "")
    if content is None:
        content = ""
    if not isinstance(content, str):
        raise TemplateFormatError(location, f"'{CONTENT_KEY}' must be a string")

    return TemplateFile(filename=filename, file_extension=extension, content=content)


def _child_location(location: str) -> str:
    if location == "$":
        return ITEMS_KEY
    return f"{location}.{ITEMS_KEY}"
