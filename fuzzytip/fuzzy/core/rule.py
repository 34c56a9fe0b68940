"""
Reguły w postaci tekstowej i ich tokenizacja.

  IF <zbiór> (AND|OR <zbiór>)* THEN <zbiór_wyjściowy>

Słowa kluczowe IF/AND/OR/THEN są case-insensitive; nazwy zbiorów
case-sensitive. Tekst po THEN to nazwa wyjścia (do końca linii).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TokenKind(Enum):
    IF = "if"
    AND = "and"
    OR = "or"
    THEN = "then"
    NAME = "name"


_KEYWORDS = {
    "if": TokenKind.IF,
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "then": TokenKind.THEN,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def is_connector(self) -> bool:
        return self.kind in (TokenKind.AND, TokenKind.OR)


@dataclass(frozen=True)
class Rule:
    text: str
    line: int = 0

    def tokens(self) -> List[Token]:
        return tokenize(self.antecedent_text)

    @property
    def antecedent_text(self) -> str:
        head, _sep, _tail = _split_then(self.text)
        return head

    @property
    def consequent(self) -> Optional[str]:
        """Nazwa zbioru wyjściowego lub None, gdy w regule brak THEN."""
        _head, sep, tail = _split_then(self.text)
        if not sep:
            return None
        return tail.strip()

    def __str__(self) -> str:
        return self.text


def _split_then(text: str):
    words = text.split()
    for i, w in enumerate(words):
        if w.lower() == "then":
            return " ".join(words[:i]), w, _rest_after(text, i)
    return text, "", ""


def _rest_after(text: str, word_index: int) -> str:
    # tekst po słowie nr `word_index` (z zachowaniem wewnętrznych spacji)
    rest = text.lstrip()
    for _ in range(word_index + 1):
        parts = rest.split(None, 1)
        rest = parts[1] if len(parts) > 1 else ""
    return rest


def tokenize(antecedent: str) -> List[Token]:
    """Płaska lista tokenów części warunkowej (bez THEN i konsekwentu)."""
    out: List[Token] = []
    for word in antecedent.split():
        kind = _KEYWORDS.get(word.lower(), TokenKind.NAME)
        out.append(Token(kind, word))
    return out
