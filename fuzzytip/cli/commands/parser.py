import argparse
from ..argtypes import (
    positive_int,
    TNORM_CHOICES, SNORM_CHOICES, LOG_LEVEL_CHOICES,
)
# importy komend:
from .infer import cmd_infer
from .explain import cmd_explain
from .show import cmd_show
from .validate import cmd_validate
from .run import cmd_run


def _add_files(sp):
    g_io = sp.add_argument_group("Pliki definicji")
    g_io.add_argument("--sets", help="plik zbiorów rozmytych (np. variables.txt)")
    g_io.add_argument("--rules", help="plik reguł (np. rules.txt)")
    g_io.add_argument("--config", help="plik konfiguracyjny YAML/JSON (flagi nadpisują jego wartości)")


def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="fuzzytip",
        description=("Mamdani fuzzy CLI – wnioskowanie regułowo-rozmyte "
                     "(zbiory + reguły + wartości ostre → stopnie zbiorów wyjściowych)"),
        formatter_class=fmt,
        epilog=(
            "Przykłady:\n"
            "  fuzzytip infer --sets data/variables.txt --rules data/rules.txt service=40 food=60\n"
            "  fuzzytip explain --sets data/variables.txt --rules data/rules.txt service=75 food=20 --json\n"
            "  fuzzytip show --sets data/variables.txt --at service=40 food=60\n"
            "  fuzzytip validate --sets data/variables.txt --rules data/rules.txt\n"
            "  fuzzytip run --config data/config.yaml\n"
        )
    )
    ap.add_argument("--log-level", choices=LOG_LEVEL_CHOICES, default=None,
                    help="poziom logowania (domyślnie INFO lub z konfiguracji)")
    ap.add_argument("--strict", action="store_true", help="błąd zamiast degradacji dla reguł bez THEN/konsekwentu")
    ap.add_argument("--tnorm", choices=TNORM_CHOICES, default=None, help="operator AND (domyślnie min)")
    ap.add_argument("--snorm", choices=SNORM_CHOICES, default=None, help="operator OR (domyślnie max)")
    ap.add_argument("--workers", type=positive_int, default=None, help="liczba wątków ewaluacji reguł")
    ap.add_argument("--marker", default=None, help="fragment nazwy oznaczający zbiór wyjściowy (domyślnie Tip)")

    sub = ap.add_subparsers(dest="cmd", required=True)

    # infer
    sp_i = sub.add_parser("infer", help="Wnioskowanie dla wartości ostrych", formatter_class=fmt)
    _add_files(sp_i)
    sp_i.add_argument("kv", nargs="*", help="wartości ostre key=value (np. service=40 food=60)")
    sp_i.add_argument("--json", action="store_true")
    sp_i.add_argument("--report", action="store_true", help="pełny raport: zbiory, stopnie, reguły")
    sp_i.set_defaults(func=cmd_infer)

    # explain
    sp_e = sub.add_parser("explain", help="Siły odpalenia reguł per wyjście", formatter_class=fmt)
    _add_files(sp_e)
    sp_e.add_argument("kv", nargs="*")
    sp_e.add_argument("--json", action="store_true")
    sp_e.add_argument("--threshold", type=float, default=0.0, help="pomiń reguły o sile < progu")
    sp_e.set_defaults(func=cmd_explain)

    # show
    sp_s = sub.add_parser("show", help="Pokaż zbiory/reguły; opcj. μ w punkcie", formatter_class=fmt)
    _add_files(sp_s)
    sp_s.add_argument("--at", nargs="*")
    sp_s.set_defaults(func=cmd_show)

    # validate
    sp_v = sub.add_parser("validate", help="Podsumowanie i nieznane odwołania w regułach", formatter_class=fmt)
    _add_files(sp_v)
    sp_v.set_defaults(func=cmd_validate)

    # run
    sp_run = sub.add_parser("run", help="Uruchom wnioskowanie z pliku konfiguracyjnego")
    sp_run.add_argument("--config", required=True, help="Ścieżka do pliku config.yaml/json")
    sp_run.set_defaults(func=cmd_run)

    return ap
