import logging
import sys

from ..config import parse_level, setup_logging
from ..fuzzy.core.types import FuzzyError
from .commands.parser import build_parser

logger = logging.getLogger("fuzzytip.cli")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(parse_level(args.log_level or "INFO"))
    try:
        return args.func(args) or 0
    except FuzzyError as e:
        logger.error("%s", e)
        return 2

if __name__ == "__main__":
    sys.exit(main())
