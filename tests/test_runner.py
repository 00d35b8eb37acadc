import json

import numpy as np
import pytest

from cli import main
from config import Config, DataConfig, LearnerConfig, RunConfig, load_config
from evaluation import ConfusionMatrix
from index import InMemoryForwardIndex
from runner.loop import run_training, split_docs



def _config(tmp_path, **run):
    return Config(
        data=DataConfig(path=tmp_path / "unused.libsvm", positive="pos", negative="neg"),
        learner=LearnerConfig(loss="hinge", alpha=0.1, max_iter=30),
        run=RunConfig(**run),
        base_path=tmp_path,
    )


def test_load_config_defaults_and_aliases(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "data:\n  path: docs.libsvm\n  positive: spam\n  negative: ham\n"
        "learner:\n  loss: logistic\n  lam: 0.01\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.data.path == (tmp_path / "docs.libsvm").resolve()
    assert cfg.learner.loss == "logistic"
    assert cfg.learner.lam == 0.01
    assert cfg.learner.alpha == 0.001
    assert cfg.learner.max_iter == 50
    assert cfg.run.test_fraction == 0.2


def test_load_config_requires_labels(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("data:\n  path: docs.libsvm\n  positive: spam\n", encoding="utf-8")
    with pytest.raises(ValueError, match="data.negative"):
        load_config(path)


def test_split_docs_is_a_partition():
    train, test = split_docs(range(10), 0.3, np.random.default_rng(0))
    assert len(test) == 3
    assert sorted(train + test) == list(range(10))


def test_run_training_separates_topics(tmp_path):
    docs = []
    for i in range(30):
        if i % 2 == 0:
            docs.append(("pos", {0: 1.0, 2 + i % 3: 0.5}))
        else:
            docs.append(("neg", {1: 1.0, 2 + i % 3: 0.5}))
    index = InMemoryForwardIndex(docs)
    report = run_training(_config(tmp_path, seed=3, test_fraction=0.2), index)
    assert len(report.test_ids) == 6
    assert report.confusion.total == 6
    assert report.confusion.accuracy == 1.0
    assert report.history
    summary = report.to_dict()
    assert summary["epochs"] == len(report.history)
    assert summary["confusion"]["accuracy"] == 1.0


def test_confusion_matrix_scores():
    matrix = ConfusionMatrix("pos", "neg")
    for gold, predicted in [("pos", "pos"), ("pos", "neg"), ("other", "pos"), ("neg", "neg")]:
        matrix.add(gold, predicted)
    assert (matrix.tp, matrix.fn, matrix.fp, matrix.tn) == (1, 1, 1, 1)
    assert matrix.accuracy == pytest.approx(0.5)
    assert matrix.f1 == pytest.approx(0.5)


def test_cli_writes_outputs(tmp_path):
    data = tmp_path / "docs.libsvm"
    data.write_text(
        "".join(
            f"{'pos' if i % 2 == 0 else 'neg'} {i % 2}:1 {2 + i % 3}:0.5\n" for i in range(20)
        ),
        encoding="utf-8",
    )
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        "data:\n  path: docs.libsvm\n  positive: pos\n  negative: neg\n"
        "learner:\n  alpha: 0.1\n  max_iter: 10\n"
        "run:\n  logging: false\n",
        encoding="utf-8",
    )
    out = tmp_path / "out"
    main(["--config", str(cfg), "--out", str(out)])

    lines = (out / "history.jsonl").read_text(encoding="utf-8").splitlines()
    assert lines
    assert set(json.loads(lines[0])) == {"epoch", "loss", "delta", "coeff", "updates", "folds"}
    summary = json.loads((out / "summary.json").read_text(encoding="utf-8"))
    assert summary["epochs"] == len(lines)
    assert (out / "plots" / "loss_curve.png").exists()
