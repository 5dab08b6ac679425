"""Tabular reports for matched morphs and morph issues."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import pandas as pd

from ..types import MatchPair
from ..validation import MorphIssue, is_intentional_seed

_DebugPrinter = Optional[Callable[[str], None]]

PAIR_COLUMNS = [
    "slice_index",
    "segment_index",
    "current_top",
    "current_bottom",
    "target_top",
    "target_bottom",
    "center_travel",
    "height_change",
    "seeded",
]

ISSUE_COLUMNS = ["slice_index", "segment_index", "kind", "progress", "top", "bottom"]


def summarize_morph_pairs(
    pairs: Sequence[MatchPair],
    debug: bool = False,
    debug_printer: _DebugPrinter = None,
) -> pd.DataFrame:
    """
    One row per matched segment with its endpoints, how far its center moves,
    how much its height changes and whether either side is a seed interval.
    """
    printer = debug_printer if debug_printer is not None else print

    rows = []
    for pair in pairs:
        for j, (cur, tgt) in enumerate(pair.pairs()):
            rows.append(
                {
                    "slice_index": pair.slice_index,
                    "segment_index": j,
                    "current_top": cur.top,
                    "current_bottom": cur.bottom,
                    "target_top": tgt.top,
                    "target_bottom": tgt.bottom,
                    "center_travel": tgt.center - cur.center,
                    "height_change": tgt.height - cur.height,
                    "seeded": is_intentional_seed(cur) or is_intentional_seed(tgt),
                }
            )

    df = pd.DataFrame(rows, columns=PAIR_COLUMNS)
    if debug:
        printer(f"[MORPH SUMMARY] {len(pairs)} columns, {len(df)} matched segments")
        if len(df):
            printer(
                "[MORPH SUMMARY] max |center travel| = {:.3f}, seeded segments = {}".format(
                    float(df["center_travel"].abs().max()),
                    int(df["seeded"].sum()),
                )
            )
    return df


def summarize_issues(issues: Sequence[MorphIssue]) -> pd.DataFrame:
    """Flatten morph issues into a DataFrame, sorted by column and segment."""
    df = pd.DataFrame(
        [
            {
                "slice_index": issue.slice_index,
                "segment_index": issue.segment_index,
                "kind": issue.kind,
                "progress": issue.progress,
                "top": issue.top,
                "bottom": issue.bottom,
            }
            for issue in issues
        ],
        columns=ISSUE_COLUMNS,
    )
    return df.sort_values(["slice_index", "segment_index"]).reset_index(drop=True)
