"""Konfiguracja przebiegu (YAML/JSON) i logowanie."""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .fuzzy.core.types import FuzzyError
from .fuzzy.model.fuzzifier import DEFAULT_ROUTES, CrispRouter
from .fuzzy.model.fuzzyset import OUTPUT_MARKER

LOGGER_NAME = "fuzzytip"
DEFAULT_INPUTS: Dict[str, float] = {"service": 40.0, "food": 60.0}


class ConfigError(FuzzyError):
    pass


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def parse_level(level: Any) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ConfigError(f"Nieznany poziom logowania: {level}")
    return value


@dataclass
class EngineParams:
    tnorm: str = "min"
    snorm: str = "max"
    strict: bool = False
    workers: int = 1


@dataclass
class Config:
    sets: Optional[str] = None
    rules: Optional[str] = None
    inputs: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_INPUTS))
    routes: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_ROUTES))
    output_marker: str = OUTPUT_MARKER
    engine: EngineParams = field(default_factory=EngineParams)
    log_level: int = logging.INFO

    @property
    def router(self) -> CrispRouter:
        return CrispRouter.from_mapping(self.routes)

    @classmethod
    def from_dict(cls, d: Dict[str, Any], base_dir: Optional[Path] = None) -> "Config":
        known = {"sets", "rules", "inputs", "routes", "output_marker", "engine", "log_level"}
        unknown = set(d) - known
        if unknown:
            raise ConfigError(f"Nieznane klucze konfiguracji: {', '.join(sorted(unknown))}")

        cfg = cls()
        for key in ("sets", "rules"):
            if d.get(key):
                p = Path(str(d[key]))
                if base_dir is not None and not p.is_absolute():
                    p = base_dir / p
                setattr(cfg, key, str(p))
        try:
            if "inputs" in d:
                cfg.inputs = {str(k): float(v) for k, v in (d["inputs"] or {}).items()}
            if "routes" in d:
                cfg.routes = {str(k): tuple(v) if isinstance(v, (list, tuple)) else (str(v),)
                              for k, v in (d["routes"] or {}).items()}
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Niepoprawna sekcja inputs/routes: {e}") from e
        if d.get("output_marker"):
            cfg.output_marker = str(d["output_marker"])

        eng = d.get("engine") or {}
        if not isinstance(eng, dict):
            raise ConfigError("engine: oczekiwano słownika")
        bad = set(eng) - {"tnorm", "snorm", "strict", "workers"}
        if bad:
            raise ConfigError(f"engine: nieznane klucze {', '.join(sorted(bad))}")
        try:
            cfg.engine = EngineParams(
                tnorm=str(eng.get("tnorm", "min")),
                snorm=str(eng.get("snorm", "max")),
                strict=bool(eng.get("strict", False)),
                workers=int(eng.get("workers", 1)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"engine: {e}") from e
        if "log_level" in d:
            cfg.log_level = parse_level(d["log_level"])
        return cfg


def load_config(path: str) -> Config:
    p = Path(path)
    try:
        with open(p, encoding="utf-8") as f:
            if p.suffix.lower() in (".yml", ".yaml"):
                raw = yaml.safe_load(f)
            else:
                raw = json.load(f)
    except OSError as e:
        raise ConfigError(f"Nie można odczytać konfiguracji {path}: {e}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Niepoprawny plik konfiguracji {path}: {e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Konfiguracja {path}: oczekiwano mapy na najwyższym poziomie")
    return Config.from_dict(raw, base_dir=p.parent)
