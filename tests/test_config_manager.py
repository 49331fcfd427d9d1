import pytest
import yaml

from managers import ConfigManager
from models.domain.animation import AnimationTiming
from models.enums import LogLevel
from models.exceptions import InvalidTimingError


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture
def defaults_file(tmp_path):
    return write_yaml(tmp_path / "factory_defaults.yaml", {
        "animation": {"transition_ms": 600, "hold_ms": 2000},
        "input": {"skip_keys": ["ENTER", "SPACE"], "keyboard_enabled": True},
        "logging": {"level": "INFO", "colors": True},
    })


def make_manager(tmp_path, config_name="config.yaml"):
    return ConfigManager(config_path=config_name, defaults_path="factory_defaults.yaml", base_dir=tmp_path)


def test_shipped_config_loads():
    config = ConfigManager()
    config.load()

    assert not config.used_defaults
    assert config.get_animation_timing() == AnimationTiming(transition_ms=600, hold_ms=2000)
    assert config.get_skip_keys() == ["ENTER", "SPACE"]
    assert config.get_log_settings() == (LogLevel.INFO, True)


def test_include_files_are_merged(tmp_path, defaults_file):
    write_yaml(tmp_path / "animation.yaml", {"animation": {"transition_ms": 300, "hold_ms": 1000}})
    write_yaml(tmp_path / "input.yaml", {"input": {"skip_keys": ["enter", "escape"], "keyboard_enabled": False}})
    write_yaml(tmp_path / "config.yaml", {"include": ["animation.yaml", "input.yaml"]})

    config = make_manager(tmp_path)
    config.load()

    assert config.get_animation_timing() == AnimationTiming(transition_ms=300, hold_ms=1000)
    assert config.get_skip_keys() == ["ENTER", "ESCAPE"]
    assert config.is_keyboard_enabled() is False


def test_top_level_keys_override_includes(tmp_path, defaults_file):
    write_yaml(tmp_path / "animation.yaml", {"animation": {"transition_ms": 300, "hold_ms": 1000}})
    write_yaml(tmp_path / "config.yaml", {
        "include": ["animation.yaml"],
        "animation": {"transition_ms": 50, "hold_ms": 100},
    })

    config = make_manager(tmp_path)
    config.load()

    assert config.get_animation_timing().transition_ms == 50


def test_monolithic_config(tmp_path, defaults_file):
    write_yaml(tmp_path / "config.yaml", {"logging": {"level": "debug", "colors": False}})

    config = make_manager(tmp_path)
    config.load()

    assert config.get_log_settings() == (LogLevel.DEBUG, False)
    assert config.get_animation_timing() == AnimationTiming()


def test_missing_include_falls_back_to_defaults(tmp_path, defaults_file):
    write_yaml(tmp_path / "config.yaml", {"include": ["missing.yaml"]})

    config = make_manager(tmp_path)
    data = config.load()

    assert config.used_defaults
    assert data["input"]["skip_keys"] == ["ENTER", "SPACE"]


def test_missing_config_falls_back_to_defaults(tmp_path, defaults_file):
    config = make_manager(tmp_path, config_name="nope.yaml")
    config.load()

    assert config.used_defaults
    assert config.get_animation_timing() == AnimationTiming(transition_ms=600, hold_ms=2000)


@pytest.mark.parametrize("bad", [0, -5, "fast", 1.5, True])
def test_invalid_timing_uses_defaults(tmp_path, defaults_file, bad):
    write_yaml(tmp_path / "config.yaml", {"animation": {"transition_ms": bad, "hold_ms": 2000}})

    config = make_manager(tmp_path)
    config.load()

    assert config.get_animation_timing() == AnimationTiming()


def test_unknown_log_level_uses_info(tmp_path, defaults_file):
    write_yaml(tmp_path / "config.yaml", {"logging": {"level": "LOUD"}})

    config = make_manager(tmp_path)
    config.load()

    assert config.get_log_settings() == (LogLevel.INFO, True)


def test_empty_skip_keys_use_defaults(tmp_path, defaults_file):
    write_yaml(tmp_path / "config.yaml", {"input": {"skip_keys": []}})

    config = make_manager(tmp_path)
    config.load()

    assert config.get_skip_keys() == ["ENTER", "SPACE"]


@pytest.mark.parametrize("kwargs", [{"transition_ms": 0}, {"hold_ms": -1}, {"hold_ms": 2.5}])
def test_timing_validation(kwargs):
    with pytest.raises(InvalidTimingError):
        AnimationTiming(**kwargs)


def test_timing_scaled():
    timing = AnimationTiming(transition_ms=600, hold_ms=2000).scaled(4)
    assert (timing.transition_ms, timing.hold_ms) == (150, 500)
    assert timing.entry_duration_ms == 800

    with pytest.raises(InvalidTimingError):
        AnimationTiming().scaled(0)
