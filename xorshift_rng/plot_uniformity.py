#!/usr/bin/env python3
from __future__ import annotations

"""Plotting utility that visualises the uniformity summary."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Dict, Any

import matplotlib.pyplot as plt

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xorshift_rng.log_setup import LOG_LEVELS, setup_logging


def load_summary(path: Path) -> List[Dict[str, Any]]:
    """Parse the JSON summary emitted by evaluate_uniformity.py."""
    with path.open() as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Summary file must contain a list of seed records")
    return data


def plot_summary(summary: List[Dict[str, Any]], output_path: Path) -> None:
    if not summary:
        raise ValueError("Summary is empty")

    seeds = [entry["seed"] for entry in summary]
    chi = [entry["chiSquare"] for entry in summary]
    dof = summary[0]["degreesOfFreedom"]
    means = [entry["mean"] for entry in summary]
    runtimes = [entry["runtimeMs"] for entry in summary]
    bit_count = len(summary[0]["bitBalance"])
    bit_balance = [
        sum(entry["bitBalance"][bit] for entry in summary) / len(summary)
        for bit in range(bit_count)
    ]

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))

    ax0 = axes[0, 0]
    ax0.scatter(seeds, chi, marker="o", color="#2563eb", label="Observed")
    ax0.axhline(dof, color="#94a3b8", linewidth=0.8, linestyle="--", label=f"Expected ({dof} dof)")
    ax0.set_xlabel("Seed")
    ax0.set_ylabel("Chi-square")
    ax0.set_title("Bucket Chi-square per Seed")
    ax0.legend()

    ax1 = axes[0, 1]
    ax1.scatter(seeds, means, marker="x", color="#a855f7")
    ax1.axhline(0.5, color="#94a3b8", linewidth=0.8, linestyle="--")
    ax1.set_xlabel("Seed")
    ax1.set_ylabel("Mean of next_double()")
    ax1.set_title("Sample Mean per Seed")

    ax2 = axes[1, 0]
    ax2.bar(range(bit_count), bit_balance, color="#2563eb")
    ax2.axhline(0.5, color="#94a3b8", linewidth=0.8, linestyle="--")
    ax2.set_ylim(0.4, 0.6)
    ax2.set_xlabel("Bit position")
    ax2.set_ylabel("Fraction of ones")
    ax2.set_title("Bit Balance (averaged over seeds)")

    ax3 = axes[1, 1]
    ax3.plot(seeds, runtimes, marker="o", color="#a855f7")
    ax3.set_xlabel("Seed")
    ax3.set_ylabel("Runtime (ms)")
    ax3.set_title("Measurement Cost per Seed")

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200)
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot xorshift uniformity metrics.")
    parser.add_argument("--summary", required=True, help="JSON output from evaluate_uniformity.py")
    parser.add_argument("--output", required=True, help="Path to save the figure (PNG/SVG).")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)

    output_path = Path(args.output)
    plot_summary(load_summary(Path(args.summary)), output_path)
    print(f"Saved uniformity plot to {output_path}")


if __name__ == "__main__":
    main()
