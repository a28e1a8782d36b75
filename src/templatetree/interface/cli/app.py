from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: loading and merging of configuration
sources (defaults, persistent storage and CLI overrides), initialization of
logging, loading of the template document, and dispatch of the requested
tree operation.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from templatetree.core.analysis.tree_renderer import render_tree_lines
from templatetree.core.resolver import find_file_path, generate_file_id
from templatetree.core.services.indexer import list_file_ids
from templatetree.core.services.snapshot import diff_trees
from templatetree.core.validator import validate_config
from templatetree.domain.config import get_default_config, load_config, save_app_state
from templatetree.domain.tree_codec import TemplateFormatError, load_template_tree
from templatetree.domain.tree_models import TemplateFile, TemplateFolder
from templatetree.infra.fs import read_json_document
from templatetree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from templatetree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (Default vs Persistent state + overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    log_file = get_default_log_path() if conf["log_to_file"] else None
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=log_file))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_app_state({"last_session": dict(conf)})
        logger.info("Session configuration saved.")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=conf["indent"]))
        return EXIT_OK

    if not args.tree_path:
        if args.save_config:
            return EXIT_OK
        parser.print_usage(sys.stderr)
        print("ERROR: a template tree document is required.", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 4. Document loading phase
    root = _load_tree(args.tree_path)
    if root is None:
        return EXIT_BAD_INPUT

    # 5. Operation dispatch
    try:
        return _dispatch(args, conf, root)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# OPERATIONS
# -----------------------------------------------------------------------------

def _dispatch(args: Any, conf: Dict[str, Any], root: TemplateFolder) -> int:
    """Run the operation selected on the command line."""
    if args.find_name is not None:
        target = TemplateFile(filename=args.find_name, file_extension=args.extension)
        path = find_file_path(target, root)
        if path is None:
            logger.debug(f"No file named '{args.find_name}' (ext={args.extension!r}) in tree")
            if conf["json_output"]:
                _emit({"found": False, "path": None}, conf)
            else:
                print(f"not found: {args.find_name}", file=sys.stderr)
            return EXIT_FAILURE
        _emit({"found": True, "path": path} if conf["json_output"] else path, conf)
        return EXIT_OK

    if args.id_name is not None:
        target = TemplateFile(filename=args.id_name, file_extension=args.extension)
        file_id = generate_file_id(target, root)
        _emit({"id": file_id} if conf["json_output"] else file_id, conf)
        return EXIT_OK

    if args.list_ids:
        ids = list_file_ids(root)
        _emit(ids if conf["json_output"] else "\n".join(ids), conf)
        return EXIT_OK

    if args.diff_path:
        newer = _load_tree(args.diff_path)
        if newer is None:
            return EXIT_BAD_INPUT
        diff = diff_trees(root, newer)
        if conf["json_output"]:
            _emit(diff.to_dict(), conf)
        else:
            _print_diff(diff.to_dict())
        return EXIT_OK

    lines = render_tree_lines(root, show_ids=conf["show_ids"])
    _emit(lines if conf["json_output"] else "\n".join(lines), conf)
    return EXIT_OK


def _load_tree(path: str) -> Optional[TemplateFolder]:
    """Read a template document, logging and returning None when unusable."""
    try:
        return load_template_tree(read_json_document(path))
    except OSError as e:
        logger.error(f"Cannot read template document '{path}': {e}")
    except json.JSONDecodeError as e:
        logger.error(f"Template document '{path}' is not valid JSON: {e}")
    except UnicodeDecodeError as e:
        logger.error(f"Template document '{path}' is not valid UTF-8: {e}")
    except TemplateFormatError as e:
        logger.error(f"Template document '{path}' is malformed: {e}")
    return None

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _emit(payload: Any, conf: Dict[str, Any]) -> None:
    if conf["json_output"]:
        print(json.dumps(payload, ensure_ascii=False, indent=conf["indent"]))
    else:
        print(payload)


def _print_diff(diff: Dict[str, List[str]]) -> None:
    markers = {"added": "+", "removed": "-", "modified": "~"}
    for key, marker in markers.items():
        for file_id in diff[key]:
            print(f"{marker} {file_id}")
    print(f"{len(diff['unchanged'])} unchanged")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
