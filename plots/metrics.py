"""Plots of SGD training progress."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from learners.sgd import EpochRecord


def generate_plots(history: Iterable[EpochRecord], out_dir: str | Path) -> list[Path]:
    records = list(history)
    if not records:
        return []
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    written = []

    epochs = np.array([rec.epoch for rec in records], dtype=float)
    losses = np.array([rec.loss for rec in records], dtype=float)
    updates = np.array([rec.updates for rec in records], dtype=float)

    plt.figure(figsize=(6, 4))
    plt.plot(epochs, losses, marker="o", label="mean loss")
    plt.plot(epochs, _ema(losses, span=max(3, len(records) // 10)), linestyle="--", label="EMA")
    plt.xlabel("epoch")
    plt.ylabel("loss")
    plt.legend()
    plt.tight_layout()
    written.append(out_path / "loss_curve.png")
    plt.savefig(written[-1], dpi=150)
    plt.close()

    plt.figure(figsize=(6, 4))
    plt.bar(epochs, updates)
    plt.xlabel("epoch")
    plt.ylabel("weight updates")
    plt.tight_layout()
    written.append(out_path / "updates.png")
    plt.savefig(written[-1], dpi=150)
    plt.close()

    if len(records) > 1:
        deltas = np.array(
            [np.nan if rec.delta is None else rec.delta for rec in records[1:]], dtype=float
        )
        plt.figure(figsize=(6, 4))
        plt.semilogy(epochs[1:], np.maximum(deltas, 1e-16))
        plt.xlabel("epoch")
        plt.ylabel("|loss change|")
        plt.tight_layout()
        written.append(out_path / "loss_change.png")
        plt.savefig(written[-1], dpi=150)
        plt.close()
    return written


def _ema(values: np.ndarray, span: int) -> np.ndarray:
    alpha = 2.0 / (span + 1.0)
    ema = np.zeros_like(values)
    current = 0.0
    for idx, val in enumerate(values):
        current = val if idx == 0 else alpha * val + (1 - alpha) * current
        ema[idx] = current
    return ema
