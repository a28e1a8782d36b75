from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared template tree fixtures used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from templatetree.domain.tree_models import TemplateFile, TemplateFolder  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def playground_tree() -> TemplateFolder:
    """
    Return a small React playground tree.

    Structure:
    root/
      src/
        components/
          App.tsx
          index.ts
        index.ts
      public/
        index.html
      README
      package.json
    """
    return TemplateFolder(
        folder_name="root",
        items=[
            TemplateFolder(
                folder_name="src",
                items=[
                    TemplateFolder(
                        folder_name="components",
                        items=[
                            TemplateFile("App", "tsx", "export const App = () => null;"),
                            TemplateFile("index", "ts", "export * from './App';"),
                        ],
                    ),
                    TemplateFile("index", "ts", "import { App } from './components';"),
                ],
            ),
            TemplateFolder(
                folder_name="public",
                items=[TemplateFile("index", "html", "<div id='root'></div>")],
            ),
            TemplateFile("README", None, "# Playground"),
            TemplateFile("package", "json", "{}"),
        ],
    )


@pytest.fixture
def playground_payload() -> Dict[str, Any]:
    """Return the wire (JSON-decoded) form of a small playground tree."""
    return {
        "folderName": "root",
        "items": [
            {
                "folderName": "src",
                "items": [
                    {"filename": "main", "fileExtension": "js", "content": "console.log(1);"},
                ],
            },
            {"filename": "README", "content": "# Docs"},
        ],
    }
