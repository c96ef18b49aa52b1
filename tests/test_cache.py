import shoal


class FakeMessage:
    def __init__(self, id: int):
        self.id = id


def test_cache_maxlen():
    cache = shoal.Cache[FakeMessage](10)
    for i in range(11):
        cache[i] = FakeMessage(i)

    assert len(cache) == 10
    assert 0 not in cache


def test_cache_overwrite_does_not_evict():
    cache = shoal.Cache[FakeMessage](2)
    cache[1] = FakeMessage(1)
    cache[2] = FakeMessage(2)
    cache[2] = FakeMessage(2)

    assert list(cache) == [1, 2]

