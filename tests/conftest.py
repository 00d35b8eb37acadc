from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from index import InMemoryForwardIndex


@pytest.fixture
def separable_index():
    return InMemoryForwardIndex(
        [
            ("pos", {0: 1.0}),
            ("neg", {1: 1.0}),
        ]
    )


@pytest.fixture
def noisy_index():
    docs = []
    for i in range(40):
        label = "pos" if i % 2 == 0 else "neg"
        shared = 2 + (i % 5)
        own = 0 if label == "pos" else 1
        docs.append((label, [(own, 1.0), (shared, 0.5 + 0.1 * (i % 3))]))
    # a few mislabeled documents keep the loss from reaching zero
    docs.append(("neg", [(0, 1.0), (3, 0.7)]))
    docs.append(("pos", [(1, 1.0), (4, 0.6)]))
    return InMemoryForwardIndex(docs)
