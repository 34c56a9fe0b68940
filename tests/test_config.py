# tests/test_config.py

import json
import logging
import pytest
from fuzzytip.config import Config, ConfigError, load_config, parse_level, setup_logging


def test_defaults_reproduce_tipping_program():
    cfg = Config()
    assert cfg.inputs == {"service": 40.0, "food": 60.0}
    assert cfg.output_marker == "Tip"
    assert cfg.engine.tnorm == "min" and cfg.engine.snorm == "max"
    assert not cfg.engine.strict
    assert cfg.router.route("waiting_time_Long") == "service"

def test_load_yaml_resolves_relative_paths(data_dir):
    cfg = load_config(str(data_dir / "config.yaml"))
    assert cfg.sets == str(data_dir / "variables.txt")
    assert cfg.rules == str(data_dir / "rules.txt")
    assert cfg.inputs == {"service": 40.0, "food": 60.0}
    assert cfg.log_level == logging.INFO

def test_load_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({
        "sets": "/abs/sets.txt",
        "inputs": {"price": 3},
        "routes": {"price": "price"},
        "engine": {"tnorm": "prod", "workers": 2},
        "log_level": "debug",
    }), encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg.sets == "/abs/sets.txt"
    assert cfg.rules is None
    assert cfg.inputs == {"price": 3.0}
    assert cfg.routes == {"price": ("price",)}
    assert cfg.engine.tnorm == "prod" and cfg.engine.workers == 2
    assert cfg.log_level == logging.DEBUG

def test_empty_yaml_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(str(p)) == Config()

@pytest.mark.parametrize("body", [
    "bogus: 1\n",
    "engine: {speed: fast}\n",
    "engine: [1, 2]\n",
    "inputs: {service: abc}\n",
    "engine: {workers: many}\n",
    "log_level: LOUD\n",
    "- a\n- b\n",
    "sets: [unclosed\n",
])
def test_invalid_config_raises(tmp_path, body):
    p = tmp_path / "bad.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(p))

def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.yaml"))

def test_setup_logging_is_idempotent():
    logger = setup_logging(logging.DEBUG)
    setup_logging(logging.WARNING)
    assert logger.name == "fuzzytip"
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING

def test_parse_level():
    assert parse_level("warning") == logging.WARNING
    assert parse_level(10) == 10
