"""Test the configuration module functionality."""

import pytest

from setmap.config import SETMAP_CONFIG, SetMapConfig


def test_set_map_config_defaults():
    """Test that the default configuration values are correct."""
    config = SetMapConfig()

    assert config.check_invariants is False
    assert config.log_operations is False


def test_global_config_instance():
    """Test that the global SETMAP_CONFIG instance uses the defaults."""
    assert SETMAP_CONFIG == SetMapConfig()


def test_custom_config():
    """Test creating a configuration with both flags enabled."""
    config = SetMapConfig(check_invariants=True, log_operations=True)

    assert config.check_invariants is True
    assert config.log_operations is True


@pytest.mark.parametrize("field_name", ["check_invariants", "log_operations"])
def test_non_bool_flag_rejected(field_name):
    """Flags must be real booleans, not truthy values."""
    with pytest.raises(TypeError, match=field_name):
        SetMapConfig(**{field_name: 1})
