from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd

SERIES_STYLE = [
    ("actual", "Actual Price", dict(color="tab:blue", linewidth=2)),
    ("duration_est", "Duration Estimate", dict(color="tab:red", linestyle="--")),
    ("convexity_est", "Convexity Estimate", dict(color="tab:green", linestyle=":")),
]


def plot_price_yield(samples: pd.DataFrame, ax=None):
    """Draw the three sampled series against yield; returns the Axes."""
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    for column, label, style in SERIES_STYLE:
        ax.plot(samples["yield"], samples[column], label=label, **style)

    ax.set_xlabel("Yield (%)")
    ax.set_ylabel("Price")
    ax.set_title("Price vs. Yield: Actual and Taylor Estimates", fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax


class PriceYieldChart:
    """
    Owns a single figure. Each update() discards the previous figure and
    draws a fresh one from the new samples.
    """

    def __init__(self, figsize=(10, 6)):
        self.figsize = figsize
        self.figure: Optional[plt.Figure] = None

    def update(self, samples: pd.DataFrame) -> plt.Figure:
        self.close()
        self.figure, ax = plt.subplots(figsize=self.figsize)
        plot_price_yield(samples, ax=ax)
        self.figure.tight_layout()
        return self.figure

    def save(self, path: str) -> None:
        if self.figure is None:
            raise ValueError("Nothing drawn yet; call update() first.")
        self.figure.savefig(path)

    def close(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)
            self.figure = None
