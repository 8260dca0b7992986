import pytest

from algolab.consistent import EmptyCircleError, StrMsg, _fnv32a
from algolab.fast_search import (
    FastConsistentStr,
    build_fences,
    lookup,
    lookup_with_idx,
)

LAST_HOST = "lt-henan-xinyang-sn17-172-31-76-203"
LAST_NAMES = {f"{i}{LAST_HOST}" for i in range(20)}


@pytest.fixture(scope="module")
def fences():
    return build_fences()


def _small_ring():
    ring = FastConsistentStr()
    ring.set_number_of_replicas(10)
    for name in ("alpha", "beta", "gamma"):
        ring.add(name, 5)
    ring.finalize()
    return ring


def test_lookup_matches_last_fence(fences):
    assert lookup(fences, "aaa") == fences[-1].get("aaa")


def test_lookup_returns_last_host(fences):
    name, idx = lookup(fences, "aaa")
    assert name in LAST_NAMES
    assert 0 <= idx < len(fences[-1])


def test_lookup_with_idx_returns_last_host(fences):
    name, idx = lookup_with_idx(fences, "aaa")
    assert name in LAST_NAMES
    assert 0 <= idx < len(fences[-1])


def test_lookup_rejects_no_rings():
    with pytest.raises(ValueError):
        lookup([], "aaa")
    with pytest.raises(ValueError):
        lookup_with_idx([], "aaa")


@pytest.mark.parametrize("name", ["aaa", "bbb", "zzz", "probe-42"])
def test_far_index_falls_back_to_full_search(fences, name):
    ring = fences[0]
    expected = ring.get(name)
    far = (expected[1] + len(ring) // 2) % len(ring)
    assert ring.get_with_idx(name, far) == expected


def test_exact_point_returns_given_index():
    ring = _small_ring()
    name = "0alpha"
    following = ring.get(name)[1]
    point_index = (following - 1) % len(ring)
    assert ring.get_with_idx(name, point_index) == ("alpha", point_index)


def test_get_not_need_hash_matches_get():
    ring = _small_ring()
    for probe in ("aaa", "bbb", "ccc"):
        assert ring.get_not_need_hash(_fnv32a(probe.encode())) == ring.get(probe)[0]


def test_get_not_need_hash_just_below_point():
    ring = _small_ring()
    point = _fnv32a(b"0beta")
    assert ring.get_not_need_hash(point - 1) == "beta"


def test_get_with_idx_out_of_range():
    ring = _small_ring()
    with pytest.raises(IndexError):
        ring.get_with_idx("aaa", len(ring))
    with pytest.raises(IndexError):
        ring.get_with_idx("aaa", -1)


def test_single_member_answers_everything():
    ring = FastConsistentStr()
    ring.add("solo", 3)
    ring.finalize()
    assert ring.get("anything") == ("solo", 0)
    assert ring.get_with_idx("anything", 99) == ("solo", 0)
    assert ring.get_not_need_hash(12345) == "solo"


def test_empty_ring_raises():
    ring = FastConsistentStr()
    with pytest.raises(EmptyCircleError):
        ring.get("aaa")
    with pytest.raises(EmptyCircleError):
        ring.get_with_idx("aaa", 0)
    with pytest.raises(EmptyCircleError):
        ring.get_not_need_hash(0)


def test_add_does_nothing_until_finalize():
    ring = FastConsistentStr()
    ring.add("alpha", 2)
    ring.add("beta", 2)
    with pytest.raises(EmptyCircleError):
        ring.get("aaa")
    ring.finalize()
    assert ring.get("aaa")[0] in {"alpha", "beta"}


def test_add_all_matches_add_and_finalize():
    nodes = [StrMsg("alpha", 4), StrMsg("beta", 4), StrMsg("gamma", 4)]
    direct = FastConsistentStr()
    direct.set_number_of_replicas(10)
    direct.add_all(nodes)
    queued = FastConsistentStr()
    queued.set_number_of_replicas(10)
    for msg in nodes:
        queued.add(msg.key, msg.weight)
    queued.finalize()
    probes = [f"user-{n}" for n in range(100)]
    assert [direct.get(p) for p in probes] == [queued.get(p) for p in probes]
    assert len(direct) == len(queued)


def test_set_number_of_replicas_clamps():
    ring = FastConsistentStr()
    ring.set_number_of_replicas(0)
    assert ring.number_of_replicas == 1


def test_crc32_mode_returns_members():
    ring = FastConsistentStr()
    ring.use_fnv = False
    ring.set_number_of_replicas(10)
    ring.add("alpha", 3)
    ring.add("beta", 3)
    ring.finalize()
    assert {ring.get(f"user-{n}")[0] for n in range(100)} <= {"alpha", "beta"}