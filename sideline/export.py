"""
Sideline Saga Career Export

Exports a coach's career history to CSV for external analysis.

Available exports:
    career_history_rows(header)
        - One dict per CareerLog entry, plus parsed wins/losses/win_pct

    export_career_history_csv(history_or_header, filepath)
        - Writes those rows to disk; accepts a SaveHeader, a TurnLog, or a
          turn history (the latest turn's header is used)

Usage:
    from sideline.export import export_career_history_csv
    export_career_history_csv(history, "output/career.csv")
"""

from __future__ import annotations

import csv
import io
import os
from typing import List, Sequence, Union

from sideline.models import SaveHeader, TurnLog, parse_record

FIELDNAMES = ["year", "team", "role", "record", "result", "wins", "losses", "win_pct"]


def _ensure_dir(filepath: str):
    """Create parent directory if it doesn't exist."""
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _resolve_header(source: Union[SaveHeader, TurnLog, Sequence[TurnLog]]) -> SaveHeader:
    if isinstance(source, SaveHeader):
        return source
    if isinstance(source, TurnLog):
        return source.header
    if not source:
        raise ValueError("Cannot export an empty career history")
    return source[-1].header


def career_history_rows(header: SaveHeader) -> List[dict]:
    rows = []
    for entry in header.career_history:
        wins, losses, ties = parse_record(entry.record)
        games = wins + losses + ties
        rows.append({
            "year": entry.year,
            "team": entry.team,
            "role": entry.role,
            "record": entry.record,
            "result": entry.result,
            "wins": wins,
            "losses": losses,
            "win_pct": round((wins + 0.5 * ties) / games, 3) if games else 0.0,
        })
    return rows


def career_history_csv_text(source: Union[SaveHeader, TurnLog, Sequence[TurnLog]]) -> str:
    """Same rows as export_career_history_csv, returned as a string."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=FIELDNAMES)
    writer.writeheader()
    writer.writerows(career_history_rows(_resolve_header(source)))
    return buf.getvalue()


def export_career_history_csv(
    source: Union[SaveHeader, TurnLog, Sequence[TurnLog]],
    filepath: str,
) -> str:
    """
    Export the career history to CSV.

    Columns: year, team, role, record, result, wins, losses, win_pct
    """
    _ensure_dir(filepath)
    rows = career_history_rows(_resolve_header(source))
    with open(filepath, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)
    return filepath
