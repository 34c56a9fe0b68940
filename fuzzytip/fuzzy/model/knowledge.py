from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

from ..core.rule import Rule, TokenKind
from ..core.types import DegreeMap, Float, OutputDegreeMap
from .engine import MamdaniEngine, RuleFiring
from .fuzzifier import CrispRouter, build_degree_map
from .fuzzyset import FuzzySet, SetKind


@dataclass
class KnowledgeBase:
    # --- zbiory i reguły ---
    inputs: List[FuzzySet] = field(default_factory=list)
    outputs: List[FuzzySet] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)

    # --- ustawienia silnika ---
    tnorm: str = "min"
    snorm: str = "max"
    strict: bool = False
    workers: int = 1

    # ---------- metody pomocnicze (KB) ----------
    def add_set(self, fs: FuzzySet) -> None:
        if fs.kind is SetKind.OUTPUT:
            self.outputs.append(fs)
        else:
            self.inputs.append(fs)

    def add_rule(self, rule: Rule) -> None:
        self.rules.append(rule)

    # ---------- metody pomocnicze (silnik) ----------
    def set_engine(
        self,
        *,
        tnorm: Optional[str] = None,
        snorm: Optional[str] = None,
        strict: Optional[bool] = None,
        workers: Optional[int] = None,
    ) -> None:
        if tnorm is not None:
            self.tnorm = tnorm
        if snorm is not None:
            self.snorm = snorm
        if strict is not None:
            self.strict = strict
        if workers is not None:
            self.workers = workers

    def engine(self, trace: Optional[Callable[[RuleFiring], None]] = None) -> MamdaniEngine:
        return MamdaniEngine(self.rules, tnorm=self.tnorm, snorm=self.snorm,
                             strict=self.strict, workers=self.workers, trace=trace)

    def fuzzify(self, inputs: Mapping[str, Float], router: Optional[CrispRouter] = None) -> DegreeMap:
        return build_degree_map(self.inputs, inputs, router)

    def infer(self, inputs: Mapping[str, Float], router: Optional[CrispRouter] = None,
              trace: Optional[Callable[[RuleFiring], None]] = None) -> OutputDegreeMap:
        """Pełny przebieg: wartości ostre -> stopnie -> wyjścia."""
        return self.engine(trace).infer(self.fuzzify(inputs, router))

    # ---------- raport odwołań ----------
    def unknown_references(self) -> List[str]:
        """Nazwy z reguł, którym nie odpowiada żaden zbiór (tylko raport)."""
        known_in = {fs.name for fs in self.inputs}
        known_out = {fs.name for fs in self.outputs}
        missing: List[str] = []
        for r in self.rules:
            for tok in r.tokens():
                if tok.kind is not TokenKind.NAME:
                    continue
                if tok.text not in known_in and tok.text not in missing:
                    missing.append(tok.text)
            cons = r.consequent
            if cons and cons not in known_out and cons not in missing:
                missing.append(cons)
        return missing
