"""Wydruki konsolowe: zbiory, stopnie przynależności, reguły, wyniki."""

import sys
from typing import Iterable, Mapping, Optional

from ..fuzzy.core.rule import Rule
from ..fuzzy.model.fuzzyset import FuzzySet

_RESET = "\x1b[0m"


def _use_ansi() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _ansi_color(mu: float) -> str:
    """
    Kolor wg przynależności (μ):
      ≥ 0.50 → zielony
      ≥ 0.20 → żółty
      < 0.20 → szary
    """
    if not _use_ansi():
        return ""
    if mu >= 0.50:
        return "\x1b[32m"  # green
    if mu >= 0.20:
        return "\x1b[33m"  # yellow
    return "\x1b[90m"      # grey


def _params(fs: FuzzySet) -> str:
    if fs.shape is None:
        return ""
    return " ".join(f"{p:g}" for p in fs.shape.params)


def print_sets(title: str, sets: Iterable[FuzzySet], at: Optional[Mapping[str, float]] = None) -> None:
    print(f"{title}:")
    shown = 0
    for fs in sets:
        line = f"  {fs.name} [{fs.type_label}] {_params(fs)}".rstrip()
        if at and fs.name in at:
            mu = at[fs.name]
            color = _ansi_color(mu)
            line += f" -> {color}{mu:.4f}{_RESET if color else ''}"
        print(line)
        shown += 1
    if shown == 0:
        print("  (brak)")


def print_degrees(degrees: Mapping[str, float]) -> None:
    print("Stopnie przynależności:")
    for name in sorted(degrees):
        print(f"  {name} -> {degrees[name]:.6g}")


def print_rules(rules: Iterable[Rule]) -> None:
    print("Reguły:")
    for r in rules:
        print(f"  R{r.line}: {r.text}")


def print_outputs(outputs: Mapping[str, float]) -> None:
    for name in sorted(outputs):
        print(f"{name}: {outputs[name]:.6g}")
