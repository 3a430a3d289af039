"""Tabular summaries of gradient output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import pandas as pd

from .gradient import WindowGradient

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["start", "end", "width", "window"]


def gradient_frame(g: WindowGradient, render: Optional[Callable[[Any], Any]] = None) -> pd.DataFrame:
    """Drain ``g`` into a DataFrame with one row per window.

    Each window is copied out with ``render`` (``list`` by default) so rows do
    not alias the gradient's buffer.
    """

    render = render or list
    rows = []
    for window in g:
        rows.append(
            {
                "start": g.start(),
                "end": g.end(),
                "width": g.width(),
                "window": render(window),
            }
        )
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def summarize_passes(frame: pd.DataFrame) -> pd.DataFrame:
    """Collapse a window frame to one row per width pass."""

    if frame.empty:
        return pd.DataFrame(columns=["width", "windows", "first_start", "last_start"])
    summary = (
        frame.groupby("width", sort=True)["start"]
        .agg(windows="count", first_start="min", last_start="max")
        .reset_index()
    )
    return summary


def write_frame(frame: pd.DataFrame, output_path: str | Path) -> Path:
    """Write ``frame`` as JSON lines for ``.jsonl``/``.ndjson``/``.json``, CSV otherwise."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() in {".jsonl", ".ndjson", ".json"}:
        frame.to_json(output_path, orient="records", lines=True)
    else:
        frame.to_csv(output_path, index=False)
    logger.info("Wrote %d rows to %s", len(frame), output_path)
    return output_path


def export_windows(
    g: WindowGradient,
    output_path: str | Path,
    render: Optional[Callable[[Any], Any]] = None,
) -> Path:
    """Write the windows of ``g`` in the format chosen by :func:`write_frame`."""

    return write_frame(gradient_frame(g, render=render), output_path)
