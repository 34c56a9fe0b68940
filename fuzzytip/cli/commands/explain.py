import json

from ..session import log_firing, open_session


def cmd_explain(args):
    cfg, kb = open_session(args)
    degrees = kb.fuzzify(cfg.inputs, cfg.router)
    res = kb.engine(trace=log_firing).explain(degrees, threshold=getattr(args, "threshold", 0.0))
    if getattr(args, "json", False):
        print(json.dumps(res, indent=2))
        return
    for oname, firings in res.items():
        print(f"Output: {oname or '<brak THEN>'}")
        for f in firings:
            terms = " , ".join(f"{t['set']} (μ={t['mu']:.3f})" for t in f["terms"]) or "-"
            line = f"  R{f['rule_index']}: {f['rule']}  [{terms}]  strength={f['strength']:.4f}"
            if f["skipped"]:
                line += f"  pominięte: {', '.join(f['skipped'])}"
            print(line)
