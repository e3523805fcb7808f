from campaign_api.storage.cache import SnapshotCache


def test_snapshot_expires_after_ttl():
    cache = SnapshotCache(ttl=10)
    doc = {"reports": []}

    assert cache.set(doc, now=100.0, generation=cache.generation)
    assert cache.get(100.0) == doc
    assert cache.get(109.9) == doc
    assert cache.get(110.0) is None
    assert cache.age(104.0) == 4.0


def test_clear_drops_snapshot_and_rejects_stale_set():
    cache = SnapshotCache(ttl=10)
    generation = cache.generation
    cache.set({"reports": [{"id": "old"}]}, now=0.0, generation=generation)

    cache.clear()

    assert not cache.exists
    assert cache.get(1.0) is None
    assert cache.age(1.0) is None
    # a load that started before the clear must not be installed
    assert not cache.set({"reports": [{"id": "old"}]}, now=2.0, generation=generation)
    assert cache.get(2.0) is None
    assert cache.set({"reports": []}, now=3.0, generation=cache.generation)


def test_zero_ttl_never_serves():
    cache = SnapshotCache(ttl=0)
    cache.set({"reports": []}, now=5.0, generation=cache.generation)

    assert cache.exists
    assert cache.get(5.0) is None


def test_snapshot_is_isolated_from_callers():
    cache = SnapshotCache(ttl=10)
    doc = {"reports": [{"id": "a"}]}
    cache.set(doc, now=0.0, generation=cache.generation)

    doc["reports"].append({"id": "after-set"})
    served = cache.get(1.0)
    served["reports"].append({"id": "after-get"})

    assert cache.get(2.0) == {"reports": [{"id": "a"}]}
