"""Console script for polysecret."""
import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import combine
from . import io
from .decode import decode, DecodeError
from .sss import InvalidPointSet, InexactInterpolation
from .combine import InsufficientShares, InconsistentShares

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

# Catch most likely failure modes
FAILURES = (
    DecodeError,
    InvalidPointSet,
    InexactInterpolation,
    InsufficientShares,
    InconsistentShares,
    io.MalformedShareSet,
)


def _parse(args=None):
    examples = """example:
    polysecret combine testcase1.json
    polysecret decode 213 4"""

    root_parser = argparse.ArgumentParser(
        "polysecret",
        description=(
            "Recover the secret hidden in a set of Shamir secret shares whose values "
            "are written in arbitrary bases."
        ),
        epilog=examples,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = root_parser.add_subparsers(
        dest="cmd",
        title="Commands",
        description="Valid commands",
        help="Use `polysecret combine --help` or `polysecret decode --help` for command specific arguments",
        required=True,
    )
    combine_example = """examples:
    polysecret combine testcase1.json testcase2.json
    polysecret combine shares.json --select random --verify
    cat shares.json | polysecret combine - -k 3 -v"""
    c_parser = subparsers.add_parser(
        "combine",
        aliases=["comb", "c"],
        epilog=combine_example,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    c_parser.add_argument(
        "in_files",
        nargs="+",
        metavar="INPUT_FILES",
        help='Share set JSON files. Supports reading from stdin with "-".',
    )
    c_parser.add_argument(
        "--threshold",
        "-k",
        type=int,
        help="Number of shares to combine, overrides the share set's own k.",
    )
    c_parser.add_argument(
        "--select",
        choices=sorted(combine.SELECTORS),
        default="ascending",
        help="Which k shares to use (default: lowest x first).",
    )
    c_parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the unused shares agree with the recovered polynomial.",
    )
    c_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show the decoded shares on stderr.",
    )

    d_parser = subparsers.add_parser("decode", aliases=["dec", "d"])
    d_parser.add_argument("digits", metavar="DIGITS", help="Digit string to decode.")
    d_parser.add_argument("base", metavar="BASE", type=int, help="Base of DIGITS (2-36).")

    if args is None:
        args = root_parser.parse_args()
    else:
        args = root_parser.parse_args(args)
    return args


def _resolve_files_combine(args):
    args.in_files = [f if f == "-" else Path(f) for f in args.in_files]
    return args


def _load(in_file):
    if in_file == "-":
        return io.load(sys.stdin)
    return io.from_file(in_file)


def _show_points(name, shares, points, chosen):
    used = {p.X for p in chosen}
    table = Table(title=str(name))
    table.add_column("x", justify="right")
    table.add_column("base", justify="right")
    table.add_column("value")
    table.add_column("y", justify="right")
    table.add_column("used")
    for s, p in zip(shares, points):
        table.add_row(
            str(s.x), str(s.base), escape(s.digits), str(p.Y), "*" if p.X in used else ""
        )
    err_console.print(table)


def _combine_one(in_file, args):
    share_set = _load(in_file)
    if share_set.n != len(share_set.shares):
        err_console.print(
            f"Warning: {escape(str(in_file))} declares n={share_set.n} but holds "
            f"{len(share_set.shares)} shares."
        )
    k = args.threshold if args.threshold is not None else share_set.k
    select = args.select
    if args.verbose:
        pts = combine.decode_shares(share_set.shares)
        chosen = combine.select_points(pts, k, select)
        _show_points(in_file, share_set.shares, pts, chosen)
        select = lambda _pts, _k: chosen  # same subset the table shows
    return combine.reconstruct(share_set.shares, k, select, args.verify)


def main(args=None):
    """Console script for polysecret."""
    if args is None:
        args = _parse()
    else:
        args = _parse(args)

    if args.cmd.startswith("c"):
        args = _resolve_files_combine(args)
        status = 0
        for in_file in args.in_files:
            try:
                secret = _combine_one(in_file, args)
            except OSError as e:
                err_console.print(escape(str(e)))
                status = 2
                continue
            except FAILURES as e:
                err_console.print(f"{escape(str(in_file))}: {escape(str(e))}")
                status = 2
                continue
            if len(args.in_files) > 1:
                print(f"{in_file}: {secret}")
            else:
                print(secret)
        return status
    elif args.cmd.startswith("d"):
        try:
            print(decode(args.digits, args.base))
        except DecodeError as e:
            err_console.print(escape(str(e)))
            return 2
        return 0


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
