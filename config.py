"""Configuration loading for SGD training runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from learners.sgd import (
    DEFAULT_ALPHA,
    DEFAULT_BIAS,
    DEFAULT_GAMMA,
    DEFAULT_LAMBDA,
    DEFAULT_MAX_ITER,
)


@dataclass
class DataConfig:
    path: Path
    positive: str
    negative: str


@dataclass
class LearnerConfig:
    loss: str = "hinge"
    alpha: float = DEFAULT_ALPHA
    gamma: float = DEFAULT_GAMMA
    bias: float = DEFAULT_BIAS
    lam: float = DEFAULT_LAMBDA
    max_iter: int = DEFAULT_MAX_ITER


@dataclass
class RunConfig:
    seed: int = 0
    test_fraction: float = 0.2
    shuffle: bool = True
    logging: bool = True


@dataclass
class Config:
    data: DataConfig
    learner: LearnerConfig
    run: RunConfig
    base_path: Path


def _require(section: dict[str, Any], key: str, name: str) -> Any:
    if key not in section or section[key] is None:
        raise ValueError(f"missing required config key: {name}.{key}")
    return section[key]


def load_config(path: str | Path) -> Config:
    cfg_path = Path(path).expanduser().resolve()
    with cfg_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    base = cfg_path.parent

    data_raw = raw.get("data") or {}
    learner_raw = raw.get("learner") or {}
    run_raw = raw.get("run") or {}

    data = DataConfig(
        path=(base / str(_require(data_raw, "path", "data"))).resolve(),
        positive=str(_require(data_raw, "positive", "data")),
        negative=str(_require(data_raw, "negative", "data")),
    )

    learner = LearnerConfig(
        loss=str(learner_raw.get("loss", "hinge")),
        alpha=float(learner_raw.get("alpha", DEFAULT_ALPHA)),
        gamma=float(learner_raw.get("gamma", DEFAULT_GAMMA)),
        bias=float(learner_raw.get("bias", DEFAULT_BIAS)),
        lam=float(learner_raw.get("lambda", learner_raw.get("lam", DEFAULT_LAMBDA))),
        max_iter=int(learner_raw.get("max_iter", DEFAULT_MAX_ITER)),
    )

    run = RunConfig(
        seed=int(run_raw.get("seed", 0)),
        test_fraction=float(run_raw.get("test_fraction", 0.2)),
        shuffle=bool(run_raw.get("shuffle", True)),
        logging=bool(run_raw.get("logging", True)),
    )
    if not 0.0 <= run.test_fraction < 1.0:
        raise ValueError(f"test_fraction must lie in [0, 1), got {run.test_fraction}")

    return Config(data=data, learner=learner, run=run, base_path=base)
