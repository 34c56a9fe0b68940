# Składanie konfiguracji z pliku i flag CLI, ładowanie bazy wiedzy

from __future__ import annotations
import argparse
import logging
from typing import Tuple

from ..config import Config, ConfigError, load_config, setup_logging
from ..fuzzy.io.definitions import load_kb
from ..fuzzy.model.engine import RuleFiring
from ..fuzzy.model.knowledge import KnowledgeBase
from .argtypes import parse_keyvals

logger = logging.getLogger("fuzzytip.cli")


def resolve_config(args) -> Config:
    cfg = load_config(args.config) if getattr(args, "config", None) else Config()
    if getattr(args, "config", None) and getattr(args, "log_level", None) is None:
        setup_logging(cfg.log_level)

    for key in ("sets", "rules"):
        val = getattr(args, key, None)
        if val:
            setattr(cfg, key, val)
    try:
        cfg.inputs.update(parse_keyvals(getattr(args, "kv", None)))
    except argparse.ArgumentTypeError as e:
        raise ConfigError(str(e)) from e

    if getattr(args, "marker", None):
        cfg.output_marker = args.marker
    for key in ("tnorm", "snorm", "workers"):
        val = getattr(args, key, None)
        if val is not None:
            setattr(cfg.engine, key, val)
    if getattr(args, "strict", False):
        cfg.engine.strict = True
    return cfg


def open_session(args) -> Tuple[Config, KnowledgeBase]:
    cfg = resolve_config(args)
    if not cfg.sets:
        raise ConfigError("Brak pliku zbiorów (--sets lub 'sets' w konfiguracji)")
    kb = load_kb(cfg.sets, cfg.rules, cfg.output_marker)
    kb.set_engine(tnorm=cfg.engine.tnorm, snorm=cfg.engine.snorm,
                  strict=cfg.engine.strict, workers=cfg.engine.workers)
    return cfg, kb


def log_firing(firing: RuleFiring) -> None:
    logger.debug("R%d: %s -> %s = %.4f (pominięte: %s)", firing.index, firing.rule.text,
                 firing.output or "<brak>", firing.strength, ", ".join(firing.skipped) or "-")
