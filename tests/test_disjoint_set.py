import pytest

from dpgraph.disjoint_set import DisjointSet


def _source_example(union):
    ds = DisjointSet(7)
    for u, v in [(1, 2), (2, 3), (4, 5), (6, 7), (5, 6)]:
        getattr(ds, union)(u, v)
    return ds


@pytest.mark.parametrize("union", ["union_by_size", "union_by_rank"])
def test_source_example(union):
    ds = _source_example(union)
    assert not ds.connected(3, 7)
    getattr(ds, union)(3, 7)
    assert ds.connected(3, 7)


def test_fresh_nodes_are_their_own_sets():
    ds = DisjointSet(5)
    assert [ds.find(i) for i in range(6)] == list(range(6))
    assert all(ds.component_size(i) == 1 for i in range(6))
    assert len(ds) == 6


@pytest.mark.parametrize("union", ["union_by_size", "union_by_rank"])
def test_union_reports_whether_it_merged(union):
    ds = DisjointSet(3)
    assert getattr(ds, union)(0, 1) is True
    assert getattr(ds, union)(1, 0) is False


@pytest.mark.parametrize("union", ["union_by_size", "union_by_rank"])
def test_component_sizes_sum_to_node_count(union):
    ds = _source_example(union)
    roots = {ds.find(i) for i in range(len(ds))}
    assert sum(ds.component_size(r) for r in roots) == len(ds)


@pytest.mark.parametrize("union", ["union_by_size", "union_by_rank"])
def test_sizes_after_full_merge(union):
    ds = _source_example(union)
    getattr(ds, union)(3, 7)
    assert all(ds.component_size(i) == 7 for i in range(1, 8))
    assert ds.component_size(0) == 1


def test_connectivity_is_transitive_on_a_long_chain():
    ds = DisjointSet(3000)
    for i in range(3000):
        ds.union_by_size(i, i + 1)
    assert ds.connected(0, 3000)
    assert ds.component_size(1500) == len(ds)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        DisjointSet(-1)
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(IndexError):
        ds.union_by_rank(0, -1)