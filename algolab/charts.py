"""Charts for a catalyst study: performance, energy barrier, deactivation, Pareto."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from itertools import accumulate
from pathlib import Path

from matplotlib.axes import Axes
from matplotlib.figure import Figure

Point = tuple[float, float]

FIGURE_SIZE = (10.0, 8.0)
DPI = 96
BAR_WIDTH = 0.25

_TITLE_SIZE = 20
_TITLE_PAD = 28.0
_AXIS_LABEL_SIZE = 16
_TICK_SIZE = 14
_LEGEND_SIZE = 14
_LABEL_SIZE = 12
_NOTE_SIZE = 14

CATALYSTS = (
    "AlCl₃·6H₂O\nDBM",
    "AlCl₃·6H₂O\nMBM",
    "ZrO₂-SO₄²⁻\nFresh",
    "ZrO₂-SO₄²⁻\n5 cycles",
)
DBM_YIELDS = (90.2, 0.0, 88.7, 0.0)
MBM_YIELDS = (0.7, 0.0, 0.0, 0.0)
AFTER_5_CYCLES = (0.0, 0.0, 0.0, 70.7)

ACTIVITY = (
    (0.0, 100.0),
    (200.0, 98.0),
    (400.0, 96.0),
    (600.0, 94.0),
    (800.0, 93.0),
    (1000.0, 95.0),
)
REGENERATION_POINT = (1000.0, 95.0)

FACTORS = ("A", "B", "C", "D", "E")
CONTRIBUTIONS = (45.0, 30.0, 25.0, 15.0, 10.0)
REFERENCE_LEVEL = 70.0

_FILE_NAMES = {
    "catalyst": "figure1_catalyst_comparison.png",
    "dft": "figure2_dft_energy_barrier.png",
    "deactivation": "figure3_deactivation_regeneration.png",
    "pareto": "figure4_pareto_chart.png",
}


def find_max_point(points: Iterable[Point]) -> Point:
    """Return the first point with the largest y value."""
    best: Point | None = None
    for point in points:
        if best is None or point[1] > best[1]:
            best = point
    if best is None:
        raise ValueError("no points given")
    return best


def format_float(value: float) -> str:
    """Format ``value`` with exactly one decimal place."""
    return f"{value:.1f}"


def energy_curves() -> tuple[list[Point], list[Point]]:
    """Simulated energy profiles without and with the catalyst, 100 points each."""
    without: list[Point] = []
    with_catalyst: list[Point] = []
    for i in range(100):
        x = i / 10
        without.append((x, 50 + 20 * math.sin(x) + 5 * math.cos(3 * x)))
        with_catalyst.append((x, 40 + 15 * math.sin(x) + 5 * math.cos(3 * x)))
    return without, with_catalyst


def cumulative_contributions(contributions: Sequence[float]) -> list[Point]:
    """Running totals placed half a slot to the right of each bar."""
    if not contributions:
        raise ValueError("no contributions given")
    return [(i + 0.5, total) for i, total in enumerate(accumulate(contributions))]


def _new_axes(title: str, xlabel: str, ylabel: str) -> tuple[Figure, Axes]:
    fig = Figure(figsize=FIGURE_SIZE)
    ax = fig.add_subplot()
    ax.set_title(title, fontsize=_TITLE_SIZE, pad=_TITLE_PAD)
    ax.set_xlabel(xlabel, fontsize=_AXIS_LABEL_SIZE)
    ax.set_ylabel(ylabel, fontsize=_AXIS_LABEL_SIZE)
    ax.tick_params(labelsize=_TICK_SIZE)
    return fig, ax


def _label(ax: Axes, x: float, y: float, text: str, size: int = _LABEL_SIZE, color: str | None = None) -> None:
    ax.text(x, y, text, fontsize=size, color=color, ha="left", va="bottom")


def _save(fig: Figure, path: str | Path) -> Path:
    target = Path(path)
    fig.savefig(target, dpi=DPI, format="png")
    return target


def catalyst_comparison(path: str | Path) -> Path:
    """Grouped bar chart of yields per catalyst system; returns the written path."""
    fig, ax = _new_axes("Catalyst Performance Comparison", "Catalyst System", "Yield (%)")
    positions = range(len(CATALYSTS))
    series = (
        (DBM_YIELDS, -BAR_WIDTH, "C0", "DBM Yield"),
        (MBM_YIELDS, 0.0, "C1", "MBM Yield"),
        (AFTER_5_CYCLES, BAR_WIDTH, "C2", "After 5 cycles"),
    )
    for values, offset, color, name in series:
        ax.bar([p + offset for p in positions], values, BAR_WIDTH, color=color, label=name)
    ax.set_xticks(list(positions), CATALYSTS)
    ax.legend(fontsize=_LEGEND_SIZE)

    for values in (DBM_YIELDS, AFTER_5_CYCLES):
        for i, value in enumerate(values):
            if value > 0:
                _label(ax, i, value + 1, format_float(value))
    return _save(fig, path)


def dft_energy_barrier(path: str | Path) -> Path:
    """Energy profiles with the barrier heights and their difference marked."""
    fig, ax = _new_axes("DFT Calculation of Energy Barrier", "Reaction Coordinate", "Energy (kJ/mol)")
    without, with_catalyst = energy_curves()
    max_without = find_max_point(without)
    max_with = find_max_point(with_catalyst)

    for points, color, name in (
        (without, "C0", "Without Catalyst"),
        (with_catalyst, "C1", "With AlCl₃ Catalyst"),
    ):
        xs, ys = zip(*points)
        ax.plot(xs, ys, color=color, linewidth=2, label=name)
        ax.scatter(xs, ys, color=color, s=9)
    ax.legend(fontsize=_LEGEND_SIZE)

    for x, y in (max_without, max_with):
        _label(ax, x, y + 2, f"Barrier: {format_float(y)} kJ/mol")
    reduction = max_without[1] - max_with[1]
    _label(
        ax,
        (max_without[0] + max_with[0]) / 2,
        (max_without[1] + max_with[1]) / 2,
        f"Barrier Reduction: {format_float(reduction)} kJ/mol",
        size=_NOTE_SIZE,
        color="C2",
    )
    return _save(fig, path)


def deactivation_regeneration(path: str | Path) -> Path:
    """Relative activity over time with the regeneration point highlighted."""
    fig, ax = _new_axes("Catalyst Deactivation and Regeneration", "Time (h)", "Relative Activity (%)")
    xs, ys = zip(*ACTIVITY)
    ax.plot(xs, ys, color="C0", linewidth=3)
    ax.scatter(xs, ys, color="C0", s=64)
    ax.scatter([REGENERATION_POINT[0]], [REGENERATION_POINT[1]], color="C2", s=144, marker="^")

    for x, y in ACTIVITY:
        _label(ax, x, y + 1, format_float(y))
    _label(
        ax,
        1000,
        97,
        "Regeneration:\n5% HCl wash\n200°C calcination",
        size=_NOTE_SIZE,
    )
    ax.set_ylim(90, 102)
    return _save(fig, path)


def pareto_chart(path: str | Path) -> Path:
    """Bars of factor contributions with their cumulative line and a 70% reference."""
    fig, ax = _new_axes("Pareto Chart of Factor Contributions", "Factors", "Contribution (%)")
    positions = list(range(len(FACTORS)))
    ax.bar(positions, CONTRIBUTIONS, BAR_WIDTH, color="C0", label="Contribution")

    cumulative = cumulative_contributions(CONTRIBUTIONS)
    cx, cy = zip(*cumulative)
    ax.plot(cx, cy, color="C1", linewidth=3, label="Cumulative")
    ax.scatter(cx, cy, color="C1", s=64)
    ax.set_xticks(positions, FACTORS)
    ax.legend(fontsize=_LEGEND_SIZE)

    for i, value in enumerate(CONTRIBUTIONS):
        _label(ax, i + 0.5, value + 1, format_float(value))
    for x, y in cumulative:
        _label(ax, x, y + 1, format_float(y), color="C1")

    ax.axhline(REFERENCE_LEVEL, color="C2", linewidth=1, dashes=(5, 5))
    _label(ax, 0, 72, "70% Reference Line", size=_NOTE_SIZE, color="C2")
    _label(ax, 1.5, 85, "A, B, C contribution >70%", size=_NOTE_SIZE)
    return _save(fig, path)


def main(argv: Sequence[str] | None = None) -> int:
    """Write all four figures into the output directory."""
    parser = argparse.ArgumentParser(description="Draw the catalyst study figures.")
    parser.add_argument("--output-dir", default=".", help="directory for the PNG files")
    args = parser.parse_args(argv)

    out = Path(args.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    catalyst_comparison(out / _FILE_NAMES["catalyst"])
    dft_energy_barrier(out / _FILE_NAMES["dft"])
    deactivation_regeneration(out / _FILE_NAMES["deactivation"])
    pareto_chart(out / _FILE_NAMES["pareto"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())