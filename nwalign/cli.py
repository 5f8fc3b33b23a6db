"""Command-line entry point: `nwalign align` and `nwalign serve`."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from nwalign.algorithms import NeedlemanWunschAligner
from nwalign.errors import NWAlignError
from nwalign.runs import run_repeated
from nwalign.service import DEFAULT_HOST, DEFAULT_PORT, serve
from nwalign.types import PenaltyParameters
from nwalign.types.parameters import DEFAULT_GAP_PENALTY, DEFAULT_MISMATCH_PENALTY
from nwalign.utils import load_parameters, read_sequence_pair, write_alignment

logger = logging.getLogger("nwalign")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nwalign",
        description="Global pairwise alignment with linear mismatch and gap penalties.",
    )
    parser.add_argument(
        "--mismatch-penalty",
        type=float,
        default=None,
        help=f"Score added for a mismatched column (default: {DEFAULT_MISMATCH_PENALTY}).",
    )
    parser.add_argument(
        "--gap-penalty",
        type=float,
        default=None,
        help=f"Score added per gap position (default: {DEFAULT_GAP_PENALTY}).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with mismatch_penalty/gap_penalty. Explicit flags override it.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    subparsers = parser.add_subparsers(dest="mode", required=True)

    align_parser = subparsers.add_parser(
        "align", help="Align the two sequences in a FASTA file."
    )
    align_parser.add_argument("fasta", type=Path, help="FASTA file with exactly two records.")
    align_parser.add_argument(
        "--runs",
        "-r",
        type=_positive_int,
        default=1,
        help="Repeat the alignment this many times to measure throughput (default: 1).",
    )
    align_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the alignment as JSON to this path. Not allowed with --runs > 1.",
    )
    align_parser.set_defaults(func=run_align)

    serve_parser = subparsers.add_parser("serve", help="Launch the alignment HTTP service.")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT}).",
    )
    serve_parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST}).",
    )
    serve_parser.set_defaults(func=run_serve)
    return parser


def resolve_parameters(args: argparse.Namespace) -> PenaltyParameters:
    """Defaults, then the YAML config, then explicit flags."""
    params = load_parameters(args.config) if args.config else PenaltyParameters()
    overrides = {
        "mismatch_penalty": args.mismatch_penalty,
        "gap_penalty": args.gap_penalty,
    }
    merged = {
        "mismatch_penalty": params.mismatch_penalty,
        "gap_penalty": params.gap_penalty,
    }
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return PenaltyParameters(**merged)


def run_align(args: argparse.Namespace, parameters: PenaltyParameters) -> None:
    seq_x, seq_y = read_sequence_pair(args.fasta)
    logger.info("Aligning %r with %r", seq_x.identifier, seq_y.identifier)

    aligner = NeedlemanWunschAligner(parameters)
    report = run_repeated(aligner, seq_x, seq_y, runs=args.runs)
    logger.info("%s", report.alignment)

    if args.output is not None:
        write_alignment(report.alignment, args.output)
        logger.info("Wrote alignment to %s", args.output)


def run_serve(args: argparse.Namespace, parameters: PenaltyParameters) -> None:
    serve(parameters, host=args.host, port=args.port)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.mode == "align" and args.output is not None and args.runs > 1:
        parser.error("--output cannot be combined with --runs greater than 1")

    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        parameters = resolve_parameters(args)
        args.func(args, parameters)
    except (NWAlignError, OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
