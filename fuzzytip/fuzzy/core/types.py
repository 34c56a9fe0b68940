from typing import Dict


class FuzzyError(Exception):
    """Domain error for fuzzy framework."""


class RuleSyntaxError(FuzzyError):
    def __init__(self, msg: str, line: int, content: str):
        self.line = line
        self.content = content
        super().__init__(f"[rules:{line}] {msg}\n  >> {content}")


Float = float
DegreeMap = Dict[str, Float]        # nazwa zbioru wejściowego -> stopień
OutputDegreeMap = Dict[str, Float]  # nazwa zbioru wyjściowego -> max(α)
