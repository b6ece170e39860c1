"""Fit the network from the command line.

Usage:
  python -m sinefit
  python -m sinefit --seed 7 --output output.txt
  python -m sinefit --config run.json --window full --plot fit.png
"""

import argparse
import json
import logging
import sys

from .config import InvalidConfig, TrainingConfig, Window
from .train import train
from .utils import plot_fit, report, save_result, write_report

logger = logging.getLogger("sinefit")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for ``python -m sinefit``."""

    defaults = TrainingConfig()
    ap = argparse.ArgumentParser(
        prog="sinefit", description="Fit sin(x) with a single layer of shifted tanh units."
    )
    ap.add_argument("--config", "-c", default=None, help="JSON config file (flags override it)")
    ap.add_argument("--k", type=int, default=None, help=f"Sample count (default: {defaults.k})")
    ap.add_argument("--n", type=int, default=None, help=f"Center count (default: {defaults.n})")
    ap.add_argument(
        "--max-iter", type=int, default=None, help=f"Iteration budget (default: {defaults.max_iter})"
    )
    ap.add_argument(
        "--eta", type=float, default=None, help=f"Initial learning rate (default: {defaults.eta})"
    )
    ap.add_argument(
        "--eps", type=float, default=None, help=f"Early-stop threshold (default: {defaults.eps})"
    )
    ap.add_argument(
        "--decay",
        type=float,
        default=None,
        help=f"Learning-rate divisor on loss increase (default: {defaults.decay})",
    )
    ap.add_argument("--seed", type=int, default=None, help="PRNG seed (default: wall clock)")
    ap.add_argument(
        "--window",
        choices=[w.value for w in Window],
        default=None,
        help="Index window for forward pass and loss (default: legacy)",
    )
    ap.add_argument("--output", "-o", default=None, help="Also write the report to this file")
    ap.add_argument("--save", default=None, help="Save the result to this .npz file")
    ap.add_argument("--plot", default=None, help="Save a fit plot to this image file")
    ap.add_argument("--verbose", "-v", action="store_true", default=False, help="Debug logging")
    return ap


def config_from_args(args: argparse.Namespace) -> TrainingConfig:
    """Merge a config file (if any) with command-line overrides."""

    config = TrainingConfig.load(args.config) if args.config else TrainingConfig()
    overrides = {
        "k": args.k,
        "n": args.n,
        "max_iter": args.max_iter,
        "eta": args.eta,
        "eps": args.eps,
        "decay": args.decay,
        "seed": args.seed,
        "window": args.window,
    }
    merged = config.to_dict()
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return TrainingConfig.from_dict(merged)


def main(argv: list[str] | None = None) -> int:
    """Run main."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except (OSError, json.JSONDecodeError) as e:
        print(f"sinefit: cannot read config file: {e}", file=sys.stderr)
        return 2
    except InvalidConfig as e:
        print(f"sinefit: invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        result = train(config)
    except InvalidConfig as e:
        print(f"sinefit: invalid configuration: {e}", file=sys.stderr)
        return 2

    report(sys.stdout, result.targets, result.outputs)
    print(
        f"\nstatus={result.status.value} iteration={result.iteration} "
        f"loss={result.loss:.6g} lr={result.learning_rate:.6g} seed={result.seed}"
    )

    if args.output:
        write_report(args.output, result.targets, result.outputs)
    if args.save:
        save_result(result, args.save)
    if args.plot:
        plot_fit(result, save_path=args.plot, show=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
