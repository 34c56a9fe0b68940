import json

from ..report import print_degrees, print_outputs, print_rules, print_sets
from ..session import log_firing, open_session


def cmd_infer(args):
    cfg, kb = open_session(args)
    degrees = kb.fuzzify(cfg.inputs, cfg.router)
    out = kb.engine(trace=log_firing).infer(degrees)

    if getattr(args, "json", False):
        print(json.dumps({"inputs": cfg.inputs, "degrees": degrees, "outputs": out}, indent=2))
        return
    if getattr(args, "report", False):
        print_sets("Zbiory wejściowe", kb.inputs)
        print_sets("Zbiory wyjściowe", kb.outputs)
        print_degrees(degrees)
        print_rules(kb.rules)
        print("Wyniki:")
    print_outputs(out)
