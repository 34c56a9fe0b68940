from typing import Callable, Dict
from .types import Float

# --- Spójniki dwuargumentowe (składanie akumulatora) ---
# Kolejność argumentów (nowy, akumulator) jak w regułach: min/max zwracają
# pierwszy argument przy remisie i przy porównaniach z nan.

def f_and(a: Float, b: Float) -> Float:
    return min(a, b)

def f_or(a: Float, b: Float) -> Float:
    return max(a, b)

def f_prod(a: Float, b: Float) -> Float:
    return a * b

def f_prob(a: Float, b: Float) -> Float:
    return a + b - a * b  # suma algebraiczna

TNORMS: Dict[str, Callable[[Float, Float], Float]] = {
    "min": f_and,
    "prod": f_prod,
}
SNORMS: Dict[str, Callable[[Float, Float], Float]] = {
    "max": f_or,
    "prob": f_prob,
}
