from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the templatetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="templatetree",
        description="Resolve file paths and identifiers inside playground template trees.",
    )

    p.add_argument(
        "tree_path",
        nargs="?",
        default=None,
        help="JSON document describing the template tree (root must be a folder).",
    )

    # --- Lookup Operations ---
    p.add_argument(
        "--find",
        dest="find_name",
        metavar="FILENAME",
        default=None,
        help="Print the path of the first file with this name (exit 1 if absent).",
    )
    p.add_argument(
        "--id",
        dest="id_name",
        metavar="FILENAME",
        default=None,
        help="Print the identifier of the file with this name (always succeeds).",
    )
    p.add_argument(
        "--ext",
        dest="extension",
        default=None,
        help="Extension (without dot) of the file given to --find/--id.",
    )

    # --- Tree Operations ---
    p.add_argument(
        "--list-ids",
        action="store_true",
        help="Print the identifier of every addressable file.",
    )
    p.add_argument(
        "--tree",
        action="store_true",
        help="Render the tree structure (default when no other operation is given).",
    )
    p.add_argument(
        "--show-ids",
        action="store_true",
        default=None,
        help="Annotate rendered files with their identifiers.",
    )
    p.add_argument(
        "--diff",
        dest="diff_path",
        metavar="OTHER_TREE",
        default=None,
        help="Compare the tree against a newer snapshot document.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the next session default.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        action="store_true",
        default=None,
        help="Also write diagnostics to the rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=None,
        help="Emit machine-readable JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags left unset map to None so that persisted values survive the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "show_ids": args.show_ids,
        "json_output": args.json_output,
        "log_to_file": args.log_file,
        "log_level": "DEBUG" if args.debug else None,
    }
    return overrides
