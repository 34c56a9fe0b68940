from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple
from .types import Float


# --- Funkcje przynależności (czyste, totalne na R) ---

def triangular(left: Float, center: Float, right: Float, x: Float) -> Float:
    if x <= left or x >= right:
        return 0.0
    if x <= center:
        return (x - left) / (center - left)
    return (right - x) / (right - center)


def trapezoidal(low_left: Float, up_left: Float, up_right: Float, low_right: Float, x: Float) -> Float:
    if x <= low_left or x >= low_right:
        return 0.0
    if x <= up_left:
        return (x - low_left) / (up_left - low_left)
    if x <= up_right:
        return 1.0
    return 1.0 - abs((up_right - x) / (low_right - up_right))


def saturation(up: Float, down: Float, x: Float) -> Float:
    """
    Rampa nasycenia. Kierunek wynika ze znaku (up - down):
      up <  down -> 1 na lewo od `up`, 0 na prawo od `down` (opadająca),
      up >= down -> 1 na prawo od `up`, 0 na lewo od `down` (rosnąca).
    """
    if up < down:
        if x <= up:
            return 1.0
        if x >= down:
            return 0.0
        return 1.0 - abs((up - x) / (down - up))
    if x >= up:
        return 1.0
    if x <= down:
        return 0.0
    return (x - down) / (up - down)


def gaussian(center: Float, width: Float, x: Float) -> Float:
    # width == 0 -> nan/inf jak w IEEE 754, bez zabezpieczenia
    denom = math.sqrt(2.0 * width) if width >= 0.0 else math.nan
    d = x - center
    if denom == 0.0:
        z = math.copysign(math.inf, d) if d != 0.0 else math.nan
    else:
        z = d / denom
    return math.exp(-(z * z))


# --- Tag kształtu ---

class MFType(Enum):
    TRIANG = ("Triangular", 3)
    TRAP = ("Trapezoidal", 4)
    SAT = ("Saturation", 2)
    GAUSS = ("Gaussian", 2)

    def __init__(self, label: str, arity: int):
        self.label = label
        self.arity = arity

    @classmethod
    def from_keyword(cls, keyword: str) -> "MFType | None":
        return cls.__members__.get(keyword)


_FUNCS = {
    MFType.TRIANG: triangular,
    MFType.TRAP: trapezoidal,
    MFType.SAT: saturation,
    MFType.GAUSS: gaussian,
}


@dataclass(frozen=True)
class MembershipShape:
    type: MFType
    params: Tuple[Float, ...] = ()

    def mu(self, x: Float) -> Float:
        return evaluate_shape(self.type, self.params, x)


def evaluate_shape(mf_type: MFType, params: Sequence[Float], x: Float) -> Float:
    """μ(x) dla tagu i listy parametrów; zła liczba parametrów -> 0.0."""
    if len(params) != mf_type.arity:
        return 0.0
    return float(_FUNCS[mf_type](*params, float(x)))
