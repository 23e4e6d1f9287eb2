"""
配置模型与加载器测试
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from thuai_agent.navigation.common.exceptions import ConfigurationError
from thuai_agent.navigation.config import AgentConfig, LoggingConfig, PathFindingConfig, load_config


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    cfg = AgentConfig()
    assert cfg.path_finding == PathFindingConfig()
    assert cfg.path_finding.map_size == 100
    assert cfg.path_finding.clearance_radius == 2
    assert cfg.path_finding.reject_blocked_start is False
    assert cfg.logging.level == "INFO"
    assert cfg.logging.log_dir is None


@pytest.mark.parametrize("kwargs", [
    {"map_size": 0},
    {"map_size": -5},
    {"clearance_radius": -1},
    {"stats_log_interval": 0},
])
def test_path_finding_validation(kwargs):
    with pytest.raises(ValidationError):
        PathFindingConfig(**kwargs)


def test_clearance_radius_alias():
    assert PathFindingConfig(inflation_radius=3).clearance_radius == 3


def test_log_level_is_normalised():
    assert LoggingConfig(level="debug").level == "DEBUG"
    with pytest.raises(ValidationError):
        LoggingConfig(level="verbose")


def test_load_config(tmp_path):
    path = write(tmp_path / "agent.yaml", """
path_finding:
  map_size: 50
  clearance_radius: 1
  reverse_path: false
logging:
  level: warning
""")
    cfg = load_config(path)
    assert cfg.path_finding.map_size == 50
    assert cfg.path_finding.clearance_radius == 1
    assert cfg.path_finding.reverse_path is False
    assert cfg.path_finding.stats_log_interval == 10
    assert cfg.logging.level == "WARNING"


def test_partial_config_uses_defaults(tmp_path):
    path = write(tmp_path / "agent.yaml", "logging:\n  level: INFO\n")
    assert load_config(path).path_finding == PathFindingConfig()


def test_relative_log_dir_resolved_against_program_dir(tmp_path):
    path = write(tmp_path / "config" / "config.yaml", "logging:\n  log_dir: Logs\n")
    cfg = load_config(path)
    assert Path(cfg.logging.log_dir) == (tmp_path / "Logs").resolve()


def test_relative_log_dir_resolved_against_base_dir(tmp_path):
    path = write(tmp_path / "agent.yaml", "logging:\n  log_dir: out/logs\n")
    base = tmp_path / "elsewhere"
    cfg = load_config(path, base_dir=base)
    assert Path(cfg.logging.log_dir) == (base / "out" / "logs").resolve()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize("text", [
    "",
    "path_finding: [unclosed",
    "- just\n- a list\n",
    "path_finding:\n  map_size: -1\n",
    "path_finding:\n  clearance_radius: lots\n",
])
def test_invalid_config_raises_configuration_error(tmp_path, text):
    path = write(tmp_path / "agent.yaml", text)
    with pytest.raises(ConfigurationError):
        load_config(path)
