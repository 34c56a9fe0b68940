"""
Pliki definicji (jedna definicja na linię):

  zbiory:  <Nazwa> <TRIANG|TRAP|SAT|GAUSS> <p1> [p2] [p3] [p4]
           <Nazwa>                      # sam zbiór wyjściowy, bez kształtu
  reguły:  IF <Zbiór> (AND|OR <Zbiór>)* THEN <ZbiórWyjściowy>

Uwagi:
- Nazwa zawierająca znacznik wyjścia (domyślnie "Tip") -> zbiór wyjściowy.
- Słowa kształtu case-sensitive (jak w plikach źródłowych).
- Brak pliku to nie błąd krytyczny: logujemy i zwracamy puste kolekcje.
- '#' rozpoczyna komentarz, puste linie są pomijane.
"""

from __future__ import annotations
import logging
import shlex
from typing import List, Optional, Tuple

from ..core.mfs import MFType
from ..core.rule import Rule
from ..model.fuzzyset import OUTPUT_MARKER, FuzzySet, classify_set_name
from ..model.knowledge import KnowledgeBase

logger = logging.getLogger(__name__)


def _lex_line(raw: str) -> List[str]:
    """Tokenizuj linię: wspiera komentarze '#' i cudzysłowy."""
    lx = shlex.shlex(raw, posix=True)
    lx.whitespace_split = True
    lx.commenters = "#"
    try:
        return list(lx)
    except ValueError:
        # np. niezamknięty cudzysłów – oddamy puste, wyłapie to logika wyżej
        return []


def _read_text(path: str) -> Optional[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError:
        logger.error("Unable to open file %s", path)
        return None


# ---------- zbiory ----------

def parse_set_line(raw: str, lineno: int = 0, marker: str = OUTPUT_MARKER) -> Optional[FuzzySet]:
    tokens = _lex_line(raw)
    if not tokens:
        return None
    name = tokens[0]
    fs = FuzzySet(name, classify_set_name(name, marker))
    if len(tokens) == 1:
        return fs

    keyword = tokens[1]
    try:
        params = [float(t) for t in tokens[2:]]
    except ValueError:
        logger.warning("[sets:%d] niepoprawny parametr, pomijam: %s", lineno, raw.strip())
        return None

    mf_type = MFType.from_keyword(keyword)
    if mf_type is None:
        logger.warning("[sets:%d] Unknown MF shape '%s' dla '%s'", lineno, keyword, name)
        return fs

    if len(params) < mf_type.arity:
        logger.warning("[sets:%d] %s: oczekiwano %d parametrów, jest %d (μ = 0)",
                       lineno, keyword, mf_type.arity, len(params))
    fs.set_shape(mf_type, params[:mf_type.arity])
    return fs


def parse_sets_string(source: str, marker: str = OUTPUT_MARKER) -> Tuple[List[FuzzySet], List[FuzzySet]]:
    inputs: List[FuzzySet] = []
    outputs: List[FuzzySet] = []
    for lineno, raw in enumerate(source.splitlines(), 1):
        fs = parse_set_line(raw, lineno, marker)
        if fs is None:
            continue
        (inputs if fs.is_input else outputs).append(fs)
    return inputs, outputs


def read_sets(path: str, marker: str = OUTPUT_MARKER) -> Tuple[List[FuzzySet], List[FuzzySet]]:
    src = _read_text(path)
    if src is None:
        return [], []
    inputs, outputs = parse_sets_string(src, marker)
    logger.info("Wczytano %s: %d wejściowych, %d wyjściowych", path, len(inputs), len(outputs))
    return inputs, outputs


# ---------- reguły ----------

def parse_rules_string(source: str) -> List[Rule]:
    # bez walidacji odwołań - reguły trzymane jako tekst
    rules: List[Rule] = []
    for lineno, raw in enumerate(source.splitlines(), 1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue
        rules.append(Rule(text, lineno))
    return rules


def read_rules(path: str) -> List[Rule]:
    src = _read_text(path)
    if src is None:
        return []
    rules = parse_rules_string(src)
    logger.info("Wczytano %s: %d reguł", path, len(rules))
    return rules


def load_kb(sets_path: str, rules_path: Optional[str] = None, marker: str = OUTPUT_MARKER) -> KnowledgeBase:
    kb = KnowledgeBase()
    inputs, outputs = read_sets(sets_path, marker)
    for fs in inputs + outputs:
        kb.add_set(fs)
    for rule in (read_rules(rules_path) if rules_path else []):
        kb.add_rule(rule)
    return kb
