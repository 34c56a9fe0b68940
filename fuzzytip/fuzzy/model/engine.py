from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple
from ..core import norms
from ..core.rule import Rule, TokenKind
from ..core.types import DegreeMap, Float, OutputDegreeMap, RuleSyntaxError


@dataclass
class RuleFiring:
    index: int
    rule: Rule
    output: str
    strength: Float
    terms: List[Tuple[str, Float]] = field(default_factory=list)  # rozpoznane (nazwa, μ)
    skipped: List[str] = field(default_factory=list)              # nazwy spoza mapy stopni

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule_index": self.index,
            "rule": self.rule.text,
            "terms": [{"set": n, "mu": mu} for n, mu in self.terms],
            "skipped": list(self.skipped),
            "output": self.output,
            "strength": self.strength,
        }


def aggregate(firings: Iterable[RuleFiring]) -> OutputDegreeMap:
    """Agregacja Mamdaniego: max siły odpalenia per nazwa wyjścia."""
    out: OutputDegreeMap = {}
    for f in firings:
        if not f.output:
            continue  # reguła bez konsekwentu
        out[f.output] = max(out.get(f.output, 0.0), f.strength)
    return out


class MamdaniEngine:
    """
    Mamdani: siła reguły = lewostronne złożenie stopni części warunkowej
    (AND -> T-norma, OR -> S-norma, bez priorytetów), agregacja reguł max-em.

    Nieznane nazwy zbiorów są pomijane. Reguła bez THEN daje siłę 0 i pusty
    konsekwent; przy strict=True podnoszony jest RuleSyntaxError.
    """
    def __init__(self, rules: Sequence[Rule], *, tnorm: str = "min", snorm: str = "max",
                 strict: bool = False, workers: int = 1,
                 trace: Optional[Callable[[RuleFiring], None]] = None) -> None:
        self.rules = list(rules)
        self.tnorm_fn: Callable[[Float, Float], Float] = norms.TNORMS.get(tnorm, norms.TNORMS["min"])
        self.snorm_fn: Callable[[Float, Float], Float] = norms.SNORMS.get(snorm, norms.SNORMS["max"])
        self.strict = strict
        self.workers = max(1, int(workers or 1))
        self.trace = trace

    # ---------- helpers ----------

    def _check(self, rule: Rule) -> None:
        if rule.consequent is None:
            raise RuleSyntaxError("Brak THEN w regule", rule.line, rule.text)
        if not rule.consequent:
            raise RuleSyntaxError("Brak nazwy zbioru wyjściowego po THEN", rule.line, rule.text)
        if not any(t.kind is TokenKind.NAME for t in rule.tokens()):
            raise RuleSyntaxError("Pusta część warunkowa", rule.line, rule.text)

    # ---------- API ----------

    def fire(self, rule: Rule, degrees: DegreeMap, index: int = 0) -> RuleFiring:
        if self.strict:
            self._check(rule)

        consequent = rule.consequent
        if consequent is None:
            firing = RuleFiring(index, rule, "", 0.0)
            if self.trace:
                self.trace(firing)
            return firing

        acc: Optional[Float] = None
        pending: Optional[TokenKind] = None
        terms: List[Tuple[str, Float]] = []
        skipped: List[str] = []

        for tok in rule.tokens():
            if tok.kind is TokenKind.IF:
                continue
            if tok.is_connector:
                pending = tok.kind  # dotyczy następnego rozpoznanego zbioru
                continue
            if tok.text not in degrees:
                skipped.append(tok.text)
                continue
            mu = degrees[tok.text]
            terms.append((tok.text, mu))
            if acc is None:
                acc = mu
            elif pending is TokenKind.AND:
                acc = self.tnorm_fn(mu, acc)
            elif pending is TokenKind.OR:
                acc = self.snorm_fn(mu, acc)
            else:
                acc = mu  # dwa zbiory bez spójnika: ostatni zastępuje
            pending = None

        firing = RuleFiring(index, rule, consequent, acc if acc is not None else 0.0, terms, skipped)
        if self.trace:
            self.trace(firing)
        return firing

    def fire_all(self, degrees: DegreeMap) -> List[RuleFiring]:
        if self.workers > 1 and len(self.rules) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                return list(pool.map(lambda ir: self.fire(ir[1], degrees, ir[0]),
                                     enumerate(self.rules, 1)))
        return [self.fire(r, degrees, i) for i, r in enumerate(self.rules, 1)]

    def infer(self, degrees: DegreeMap) -> OutputDegreeMap:
        return aggregate(self.fire_all(degrees))

    def explain(self, degrees: DegreeMap, threshold: Float = 0.0) -> Dict[str, List[Dict[str, Any]]]:
        """Reguły pogrupowane po wyjściu; pomija siły < threshold."""
        res: Dict[str, List[Dict[str, Any]]] = {}
        for f in self.fire_all(degrees):
            if f.strength < threshold:
                continue
            res.setdefault(f.output, []).append(f.to_dict())
        return res
