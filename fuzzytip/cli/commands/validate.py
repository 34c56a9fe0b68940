from ...fuzzy.model.fuzzifier import unrouted
from ..session import open_session


def cmd_validate(args):
    cfg, kb = open_session(args)
    print(f"OK: inputs={len(kb.inputs)}, outputs={len(kb.outputs)}, rules={len(kb.rules)}")
    print(f"tnorm={kb.tnorm}, snorm={kb.snorm}, strict={kb.strict}")
    missing = kb.unknown_references()
    if missing:
        print(f"Nieznane odwołania w regułach: {', '.join(missing)}")
    orphans = unrouted(kb.inputs, cfg.router)
    if orphans:
        print(f"Zbiory bez wartości ostrej: {', '.join(orphans)}")
