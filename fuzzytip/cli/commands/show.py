from ..report import print_rules, print_sets
from ..session import open_session


def cmd_show(args) -> None:
    """
    Flagi:
      --sets PATH        : plik definicji zbiorów
      --rules PATH       : plik reguł (opcjonalnie)
      --at k=v ...       : wartości ostre, dla których pokazać μ zbiorów wejściowych
    """
    at = getattr(args, "at", None)
    if at:
        args.kv = at
    cfg, kb = open_session(args)
    degrees = kb.fuzzify(cfg.inputs, cfg.router) if at else None

    print_sets("Inputs", kb.inputs, degrees)
    print_sets("Outputs", kb.outputs)
    if kb.rules:
        print(f"Engine: tnorm={kb.tnorm}, snorm={kb.snorm}, strict={kb.strict}")
        print_rules(kb.rules)
