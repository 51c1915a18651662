from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd


def _save_or_show(fig, outdir: Path, filename: str, show: bool) -> Optional[Path]:
    if show:
        plt.show()
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / filename
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_nodes_by_depth(summary: pd.DataFrame, outdir: Path, *, show: bool = False) -> Optional[Path]:
    """Mean and median nodes searched per move, log scale, one point per depth."""
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(summary["depth"], summary["mean_nodes"], marker="o", label="mean")
    ax.plot(summary["depth"], summary["median_nodes"], marker="s", linestyle="--", label="median")
    ax.set_yscale("log")
    ax.set_xticks(list(summary["depth"]))
    ax.set_xlabel("search depth (plies)")
    ax.set_ylabel("nodes per move")
    ax.set_title("Alpha-beta search cost")
    ax.legend()
    return _save_or_show(fig, outdir, "nodes_by_depth.png", show)


def plot_agreement(summary: pd.DataFrame, outdir: Path, *, show: bool = False) -> Optional[Path]:
    """How often each depth picks the deepest depth's column."""
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(summary["depth"].astype(str), summary["agreement"] * 100)
    ax.set_ylim(0, 100)
    ax.set_xlabel("search depth (plies)")
    ax.set_ylabel(f"% same move as depth {int(summary['depth'].max())}")
    ax.set_title("Move agreement")
    return _save_or_show(fig, outdir, "agreement_by_depth.png", show)


def plot_standings(table: pd.DataFrame, outdir: Path, *, show: bool = False) -> Optional[Path]:
    """Stacked wins, draws and losses per tier, in standings order."""
    fig, ax = plt.subplots(figsize=(7, 4))
    names = table["tier"].astype(str)
    ax.bar(names, table["wins"], label="wins", color="tab:green")
    ax.bar(names, table["draws"], bottom=table["wins"], label="draws", color="tab:gray")
    ax.bar(names, table["losses"], bottom=table["wins"] + table["draws"], label="losses", color="tab:red")
    ax.set_ylabel("games")
    ax.set_title("Difficulty ladder")
    ax.legend()
    return _save_or_show(fig, outdir, "ladder_standings.png", show)
