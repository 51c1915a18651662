from __future__ import annotations

import argparse
import time
from pathlib import Path

import pandas as pd

from connectfour.config import DIFFICULTY_DEPTHS, LOG_LEVEL
from connectfour.log import configure_logging

from ..collect.ladder import run_ladder
from ..collect.positions import sample_positions
from ..collect.search_profile import profile_search
from ..metrics.summarize import depth_profile, first_move_advantage, standings
from ..plots.chart import plot_agreement, plot_nodes_by_depth, plot_standings


def _int_list(raw: str) -> list[int]:
    try:
        return [int(x) for x in raw.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {raw!r}") from None


def _tier_list(raw: str) -> list[str]:
    tiers = [t.strip() for t in raw.split(",") if t.strip()]
    unknown = [t for t in tiers if t not in DIFFICULTY_DEPTHS]
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown tiers {unknown}; choose from {sorted(DIFFICULTY_DEPTHS)}")
    return tiers


def _add_output_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--outdir", type=Path, default=Path("data/results"), help="Where CSVs are written")
    ap.add_argument("--figdir", type=Path, default=Path("data/figures"), help="Where charts are written")
    ap.add_argument("--no-plots", action="store_true", help="Skip charts")
    ap.add_argument("--show", action="store_true", help="Show charts instead of saving them")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour-analysis", description="Measure the connectfour search engine.")
    ap.add_argument("--log-level", default=LOG_LEVEL)
    sub = ap.add_subparsers(dest="command", required=True)

    prof = sub.add_parser("profile", help="Nodes, cutoffs and time per depth over sampled positions")
    prof.add_argument("--positions", type=int, default=30)
    prof.add_argument("--max-plies", type=int, default=20)
    prof.add_argument("--depths", type=_int_list, default=[1, 2, 3, 4, 5, 6])
    prof.add_argument("--seed", type=int, default=0)
    _add_output_args(prof)

    lad = sub.add_parser("ladder", help="Round robin between difficulty tiers")
    lad.add_argument("--tiers", type=_tier_list, default=list(DIFFICULTY_DEPTHS))
    lad.add_argument("--games", type=int, default=2, help="Games per pairing, colours alternate")
    lad.add_argument("--seed", type=int, default=1234)
    lad.add_argument("--opening-plies", type=int, default=2)
    lad.add_argument("--workers", type=int, default=None, help="Process count; 0 plays in-process")
    _add_output_args(lad)

    return ap


def _write(df: pd.DataFrame, outdir: Path, stem: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{stem}_{time.strftime('%Y%m%d_%H%M%S')}.csv"
    df.to_csv(path, index=False)
    print(f"Wrote {path}")
    return path


def _run_profile(args: argparse.Namespace) -> int:
    positions = sample_positions(args.positions, max_plies=args.max_plies, seed=args.seed)
    raw = profile_search(positions, args.depths)
    summary = depth_profile(raw)

    print("\n=== Search cost by depth ===")
    print(summary.to_string(index=False, float_format=lambda v: f"{v:0.2f}"))
    _write(raw, args.outdir, "search_profile")

    if not args.no_plots:
        for p in (plot_nodes_by_depth(summary, args.figdir, show=args.show),
                  plot_agreement(summary, args.figdir, show=args.show)):
            if p is not None:
                print(f"Saved {p}")
    return 0


def _run_ladder(args: argparse.Namespace) -> int:
    games = run_ladder(
        args.tiers,
        games_per_pair=args.games,
        seed=args.seed,
        opening_plies=args.opening_plies,
        max_workers=args.workers,
    )
    table = standings(games)

    print("\n=== Difficulty ladder ===")
    print(table.to_string(index=False, float_format=lambda v: f"{v:0.3f}"))
    adv = first_move_advantage(games)
    print(f"\nFirst player won {adv['first']:.0%}, second {adv['second']:.0%}, drawn {adv['draw']:.0%}")
    _write(games, args.outdir, "ladder_games")

    if not args.no_plots:
        p = plot_standings(table, args.figdir, show=args.show)
        if p is not None:
            print(f"Saved {p}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        if args.command == "profile":
            return _run_profile(args)
        return _run_ladder(args)
    except ValueError as e:
        print(f"error: {e}")
        return 2
