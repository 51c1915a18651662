from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns {missing}; have {list(df.columns)}")


def depth_profile(profile: pd.DataFrame) -> pd.DataFrame:
    """
    Per-depth cost of the search and how often it picks the same column as
    the deepest depth profiled.

    ``growth`` is mean nodes relative to the previous depth (NaN for the
    shallowest). ``agreement`` is 1.0 at the deepest depth by construction.
    """
    _require_cols(profile, ["position", "depth", "move", "nodes", "cutoffs", "time_ms"])
    if profile.empty:
        raise ValueError("Empty search profile.")

    deepest = profile["depth"].max()
    reference = profile.loc[profile["depth"] == deepest].set_index("position")["move"]
    agrees = profile["move"] == profile["position"].map(reference)

    out = (
        profile.assign(agrees=agrees)
        .groupby("depth")
        .agg(
            positions=("position", "nunique"),
            mean_nodes=("nodes", "mean"),
            median_nodes=("nodes", "median"),
            max_nodes=("nodes", "max"),
            mean_cutoffs=("cutoffs", "mean"),
            mean_ms=("time_ms", "mean"),
            agreement=("agrees", "mean"),
        )
        .reset_index()
        .sort_values("depth")
        .reset_index(drop=True)
    )
    out["growth"] = out["mean_nodes"] / out["mean_nodes"].shift(1)
    return out


def _side_view(games: pd.DataFrame, side: str) -> pd.DataFrame:
    other = "second" if side == "first" else "first"
    return pd.DataFrame({
        "tier": games[side],
        "win": games["result"] == side,
        "loss": games["result"] == other,
        "draw": games["result"] == "draw",
        "moves": games[f"{side}_moves"],
        "nodes": games[f"{side}_nodes"],
        "ms": games[f"{side}_ms"],
    })


def standings(games: pd.DataFrame) -> pd.DataFrame:
    """
    One row per tier: W/D/L, score rate (a win is 1, a draw 0.5) and search
    cost per move. Best score first.
    """
    _require_cols(games, ["first", "second", "result"])
    both = pd.concat([_side_view(games, "first"), _side_view(games, "second")], ignore_index=True)

    table = (
        both.groupby("tier")
        .agg(
            games=("win", "size"),
            wins=("win", "sum"),
            draws=("draw", "sum"),
            losses=("loss", "sum"),
            moves=("moves", "sum"),
            nodes=("nodes", "sum"),
            ms=("ms", "sum"),
        )
        .reset_index()
    )
    table["score"] = (table["wins"] + 0.5 * table["draws"]) / table["games"]
    per_move = table["moves"].where(table["moves"] > 0)
    table["nodes_per_move"] = table["nodes"] / per_move
    table["ms_per_move"] = table["ms"] / per_move

    table = table.sort_values(["score", "wins"], ascending=False).reset_index(drop=True)
    table.insert(0, "rk", range(1, len(table) + 1))
    return table


def first_move_advantage(games: pd.DataFrame) -> pd.Series:
    """Share of ladder games won by the side that moved first, lost, and drawn."""
    _require_cols(games, ["result"])
    counts = games["result"].value_counts(normalize=True)
    return counts.reindex(["first", "second", "draw"], fill_value=0.0)
