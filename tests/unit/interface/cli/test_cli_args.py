from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration overrides.
2. Unset flags map to None so persisted values survive.
"""

from templatetree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_flags_mapping():
    args = parse_args(["tree.json", "--show-ids", "--json", "--debug", "--log-file"])

    overrides = args_to_overrides(args)

    assert overrides == {
        "show_ids": True,
        "json_output": True,
        "log_to_file": True,
        "log_level": "DEBUG",
    }


def test_cli_unset_flags_are_none():
    overrides = args_to_overrides(parse_args(["tree.json"]))

    assert all(v is None for v in overrides.values())


def test_cli_lookup_arguments():
    args = parse_args(["tree.json", "--find", "App", "--ext", "tsx"])

    assert args.tree_path == "tree.json"
    assert args.find_name == "App"
    assert args.extension == "tsx"
    assert args.id_name is None


def test_cli_tree_path_is_optional():
    args = parse_args(["--dump-config"])

    assert args.tree_path is None
    assert args.dump_config is True


def test_cli_save_config_is_not_a_config_override():
    args = parse_args(["--save-config", "--show-ids"])

    assert args.save_config is True
    assert "save_config" not in args_to_overrides(args)
