"""
Tests for the configuration system.
"""
import json
import os

import pytest

from reversi.config import Config, GameConfig, get_default_config

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "configs", "default_config.json")


def test_config_creation(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()
    assert config.project_name == "Reversi"
    assert config.game.board_size == 8
    assert config.game.allowed_sizes == [6, 8]

    test_path = tmp_path / "nested" / "config.json"
    config.save(str(test_path))
    loaded_config = Config.load(str(test_path))

    assert config.to_dict() == loaded_config.to_dict()
    with open(test_path) as f:
        assert json.load(f)["game"]["board_size"] == 8


def test_default_config_file():
    """Test loading the default config file shipped with the project."""
    config = Config.load(DEFAULT_CONFIG_FILE)
    assert config.to_dict() == get_default_config().to_dict()
    config.validate()


def test_from_dict_fills_defaults():
    config = Config.from_dict({"game": {"board_size": 6}})
    assert config.game.board_size == 6
    assert config.game.allowed_sizes == [6, 8]
    assert config.logging.log_level == "INFO"


@pytest.mark.parametrize("size", [6, 8])
def test_validate_accepts_offered_sizes(size):
    Config(game=GameConfig(board_size=size)).validate()


@pytest.mark.parametrize("size", [5, 2, 10])
def test_validate_rejects_bad_size(size):
    with pytest.raises(ValueError):
        Config(game=GameConfig(board_size=size)).validate()


def test_validate_custom_allowed_sizes():
    Config(game=GameConfig(board_size=10, allowed_sizes=[10])).validate()
