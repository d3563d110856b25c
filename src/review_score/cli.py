"""
Command Line Interface

Usage:
    score wilson 314 341
    score ordinal 4 6 35 45 25 --conf=.99
    score --help
"""

import argparse
import re
import sys
from typing import List, Optional

from review_score import __version__
from review_score.errors import InvalidArgument
from review_score.scoring import score
from review_score.scoring.dispatcher import CONF_PATTERN
from review_score.utils.config import load_config
from review_score.utils.logging import LOG_LEVELS, get_logger, setup_logging

logger = get_logger(__name__)

CLI_LOG_FORMAT = '%(levelname)s: %(message)s'
NEGATIVE_NUMBER_PATTERN = re.compile(r"^-(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")

DESCRIPTION = """\
Calculate Wilson scores for binomial count data (e.g. proportion of 'upvotes'
to 'downvotes'), or Bayesian Approximation scores for ordinal equivalents
(e.g. 'true' average ratings for products rated on a 5-point scale).

For Wilson scores, only two arguments are required: the number of positive
cases (e.g. total upvotes) and the number of total cases (e.g. total upvotes
+ total downvotes). A decimal first argument is read as a proportion of the
total.

For ordinal scores, any number of arguments (at least two) may be supplied.
Each argument is the number of ratings for a given score value, in ascending
order. For example 'ordinal 4 5 6' means 4 one-star ratings, 5 two-star
ratings and 6 three-star ratings.

  --conf=DECIMAL        confidence level for scoring, between 0 and 1
                        (default .95)
"""

EPILOG = """\
examples:
  score wilson 314 341
  score ordinal 4 6 35 45 25
  score wilson 314 341 --conf=.99
  score ordinal 4 6 35 45 25 --conf=.99
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="score",
        usage="%(prog)s (wilson | ordinal) n1 n2 [n3] ... [--conf=DECIMAL]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        # --conf must not be taken as an abbreviation of --config
        allow_abbrev=False,
    )
    # Scientific-notation counts such as -1e3 are values, not options
    parser._negative_number_matcher = NEGATIVE_NUMBER_PATTERN
    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="ARG",
        help="scorer name (wilson or ordinal) followed by rating counts"
    )
    parser.add_argument(
        "--digits",
        type=int,
        default=None,
        help="significant digits of the printed score (default 7)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="diagnostic output level on stderr (default WARNING)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="also write diagnostics to this file"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with scoring defaults"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # --conf tokens are resolved by the dispatcher together with the counts
    conf_tokens = [token for token in argv if CONF_PATTERN.match(token)]
    cli_args = [token for token in argv if not CONF_PATTERN.match(token)]

    parser = build_parser()
    args = parser.parse_intermixed_args(cli_args)

    setup_logging(
        level=args.log_level or 'WARNING',
        log_file=args.log_file,
        format_string=CLI_LOG_FORMAT
    )

    tokens = args.tokens + conf_tokens
    if not tokens:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
        if args.log_level is None and config.log_level != 'WARNING':
            setup_logging(
                level=config.log_level,
                log_file=args.log_file,
                format_string=CLI_LOG_FORMAT
            )

        digits = args.digits if args.digits is not None else config.digits
        if digits < 1:
            parser.error(f"--digits must be at least 1 (got {digits})")

        result = score(tokens, default_confidence=config.confidence)
    except InvalidArgument as exc:
        logger.error(str(exc))
        return 1

    print(result.format(digits))
    return 0


if __name__ == "__main__":
    sys.exit(main())
