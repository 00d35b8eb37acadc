import pytest

from index import DocumentNotFoundError, InMemoryForwardIndex, load_libsvm


def test_in_memory_index_lookup():
    index = InMemoryForwardIndex([("a", {3: 2.0}), ("b", [(0, 1.0), (7, 0.5)])])
    assert len(index) == 2
    assert index.num_features() == 8
    assert index.search_primary(1) == ((0, 1.0), (7, 0.5))
    assert index.label(0) == "a"
    assert list(index.docs()) == [0, 1]


def test_missing_document_carries_id():
    index = InMemoryForwardIndex([("a", {0: 1.0})])
    with pytest.raises(DocumentNotFoundError) as excinfo:
        index.search_primary(5)
    assert excinfo.value.doc_id == 5
    assert isinstance(excinfo.value, KeyError)


def test_duplicate_feature_ids_rejected():
    with pytest.raises(ValueError, match="duplicate feature id"):
        InMemoryForwardIndex([("a", [(1, 1.0), (1, 2.0)])])


def test_load_libsvm(tmp_path):
    path = tmp_path / "docs.libsvm"
    path.write_text(
        "# comment line\n"
        "spam 0:1 4:2.5\n"
        "\n"
        "ham 2:1.0  # trailing comment\n",
        encoding="utf-8",
    )
    index = load_libsvm(path)
    assert len(index) == 2
    assert index.label(0) == "spam"
    assert index.search_primary(0) == ((0, 1.0), (4, 2.5))
    assert index.num_features() == 5


def test_load_libsvm_reports_bad_line(tmp_path):
    path = tmp_path / "bad.libsvm"
    path.write_text("spam 0:1\nham 3\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        load_libsvm(path)
