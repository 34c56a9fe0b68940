import argparse

from ..fuzzy.core import norms

TNORM_CHOICES = sorted(norms.TNORMS)
SNORM_CHOICES = sorted(norms.SNORMS)
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_keyvals(kvs):
    """['service=40', 'food=60'] lub ['service=40,food=60'] -> {'service': 40.0, ...}."""
    data = {}
    for elem in kvs or []:
        for kv in str(elem).split(","):
            kv = kv.strip()
            if not kv:
                continue
            if "=" not in kv:
                raise argparse.ArgumentTypeError(f"Niepoprawny element: '{kv}' (oczekiwano 'nazwa=wartość').")
            k, v = (t.strip() for t in kv.split("=", 1))
            try:
                data[k] = float(v)
            except ValueError:
                raise argparse.ArgumentTypeError(f"Wartość '{v}' dla '{k}' nie jest liczbą.") from None
    return data


def positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"oczekiwano liczby >= 1 (dostałem {s})")
    return n
