from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

from templatetree.domain.config import (
    CURRENT_CONFIG_VERSION,
    get_default_config,
    load_app_state,
    load_config,
    save_app_state,
)


def test_load_fresh_state_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"

    with patch("templatetree.domain.config.CONFIG_FILE", str(config_path)):
        state = load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"] == get_default_config()


def test_load_corrupted_file_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("{ incomplete json ", encoding="utf-8")

    with patch("templatetree.domain.config.CONFIG_FILE", str(config_path)):
        state = load_app_state()

    assert state["last_session"] == get_default_config()


def test_load_non_utf8_file_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_bytes(b"\xff\xfe\x00garbage")

    with patch("templatetree.domain.config.CONFIG_FILE", str(config_path)):
        assert load_config() == get_default_config()


def test_load_non_dict_file_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with patch("templatetree.domain.config.CONFIG_FILE", str(config_path)):
        assert load_app_state()["last_session"] == get_default_config()


def test_save_and_load_round_trip(tmp_path):
    config_path = tmp_path / "nested" / "config.json"

    with patch("templatetree.domain.config.CONFIG_FILE", str(config_path)):
        state = load_app_state()
        state["last_session"]["show_ids"] = True
        save_app_state(state)

        on_disk = json.loads(config_path.read_text(encoding="utf-8"))
        assert on_disk["version"] == CURRENT_CONFIG_VERSION

        conf = load_config()

    assert conf["show_ids"] is True
    assert conf["log_level"] == "INFO"
