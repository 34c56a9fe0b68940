from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from ..core.types import DegreeMap, Float
from .fuzzyset import FuzzySet

# wejście ostre -> fragmenty nazw zbiorów, które je otrzymują
DEFAULT_ROUTES: Dict[str, Tuple[str, ...]] = {
    "service": ("Service", "waiting_time"),
    "food": ("Food", "price"),
}


def fuzzify_into(degrees: DegreeMap, fset: FuzzySet, x: Float) -> Float:
    """μ = fset.evaluate(x), zapis pod nazwą zbioru (pierwszy wpis wygrywa)."""
    mu = fset.fuzzify(x)
    degrees.setdefault(fset.name, mu)
    return mu


@dataclass
class CrispRouter:
    """
    Przypisanie wartości ostrych do zbiorów wejściowych po fragmencie nazwy.
    Trasy sprawdzane w kolejności; pierwsza pasująca wygrywa.
    """
    routes: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_ROUTES))

    @classmethod
    def from_mapping(cls, m: Mapping[str, Sequence[str]]) -> "CrispRouter":
        return cls({str(k): tuple(str(s) for s in v) for k, v in m.items()})

    def route(self, set_name: str) -> Optional[str]:
        for input_name, needles in self.routes.items():
            if any(n in set_name for n in needles):
                return input_name
        return None

    def crisp_for(self, set_name: str, inputs: Mapping[str, Float]) -> Optional[Float]:
        key = self.route(set_name)
        if key is None or key not in inputs:
            return None
        return float(inputs[key])


def build_degree_map(sets: Iterable[FuzzySet], inputs: Mapping[str, Float],
                     router: Optional[CrispRouter] = None) -> DegreeMap:
    """
    Fuzyfikacja wszystkich zbiorów wejściowych. Zbiory, do których nie
    trafia żadna wartość ostra, nie pojawiają się w mapie.
    """
    router = router or CrispRouter()
    degrees: DegreeMap = {}
    for fs in sets:
        if not fs.is_input:
            continue
        x = router.crisp_for(fs.name, inputs)
        if x is None:
            continue
        fuzzify_into(degrees, fs, x)
    return degrees


def unrouted(sets: Iterable[FuzzySet], router: CrispRouter) -> List[str]:
    return [fs.name for fs in sets if fs.is_input and router.route(fs.name) is None]
