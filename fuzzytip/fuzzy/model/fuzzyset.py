# Zbiory rozmyte: wejściowe (ze stopniem po fuzyfikacji) i wyjściowe

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence
from ..core.mfs import MFType, MembershipShape
from ..core.types import Float

OUTPUT_MARKER = "Tip"


class SetKind(Enum):
    INPUT = "input"
    OUTPUT = "output"


def classify_set_name(name: str, marker: str = OUTPUT_MARKER) -> SetKind:
    """Nazwa zawierająca `marker` (domyślnie "Tip") -> zbiór wyjściowy."""
    return SetKind.OUTPUT if marker in name else SetKind.INPUT


@dataclass
class FuzzySet:
    name: str
    kind: SetKind = SetKind.INPUT
    shape: Optional[MembershipShape] = None
    degree: Optional[Float] = None  # tylko INPUT; ostatnia fuzyfikacja

    def set_shape(self, mf_type: MFType, params: Sequence[Float]) -> None:
        # bez kontroli liczby parametrów - sprawdza ją dopiero evaluate()
        self.shape = MembershipShape(mf_type, tuple(float(p) for p in params))

    @property
    def is_input(self) -> bool:
        return self.kind is SetKind.INPUT

    @property
    def type_label(self) -> str:
        return self.shape.type.label if self.shape is not None else "Unknown"

    def evaluate(self, x: Float) -> Float:
        if self.kind is SetKind.OUTPUT:
            return 0.0  # zbiory wyjściowe nie są tu ewaluowane
        if self.shape is None:
            return 0.0
        return self.shape.mu(x)

    def fuzzify(self, x: Float) -> Float:
        if self.kind is not SetKind.INPUT:
            raise TypeError(f"Zbiór wyjściowy '{self.name}' nie podlega fuzyfikacji")
        self.degree = self.evaluate(x)
        return self.degree


def input_set(name: str, mf_type: Optional[MFType] = None, *params: Float) -> FuzzySet:
    fs = FuzzySet(name, SetKind.INPUT)
    if mf_type is not None:
        fs.set_shape(mf_type, params)
    return fs


def output_set(name: str, mf_type: Optional[MFType] = None, *params: Float) -> FuzzySet:
    fs = FuzzySet(name, SetKind.OUTPUT)
    if mf_type is not None:
        fs.set_shape(mf_type, params)
    return fs
