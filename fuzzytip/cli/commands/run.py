import logging

from ...fuzzy.core.types import FuzzyError
from ..report import print_degrees, print_outputs, print_sets
from ..session import log_firing, open_session

logger = logging.getLogger("fuzzytip.cli")


def cmd_run(args):
    cfg, kb = open_session(args)
    logger.info("[run] %s + %s, wejścia: %s", cfg.sets, cfg.rules, cfg.inputs)
    if not cfg.rules:
        raise FuzzyError("Sekcja 'rules' jest wymagana w konfiguracji")

    print_sets("Zbiory wejściowe", kb.inputs)
    print_sets("Zbiory wyjściowe", kb.outputs)
    degrees = kb.fuzzify(cfg.inputs, cfg.router)
    print_degrees(degrees)

    out = kb.engine(trace=log_firing).infer(degrees)
    print("Wyniki:")
    print_outputs(out)
