import suite
from dgen import from_schema
from lazyq import Q, empty, from_range, from_iterable

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

sales_schema = {
    'region': {'_qen_provider': 'choice', 'from': ['north', 'south', 'east']},
    'amount': ('pyint', {'min_value': 10, 'max_value': 500})
}


# --- group_by ---

@test("group_by keeps keys in first-occurrence order")
def test_group_by_order():
    groups = Q([1, 2, 3, 4, 5]).group.group_by(lambda x: 'odd' if x % 2 else 'even')
    assert_equal(list(groups.keys()), ['odd', 'even'])
    assert_equal(groups['odd'], [1, 3, 5])
    assert_equal(groups['even'], [2, 4])


@test("group_by over generated records accounts for every record")
def test_group_by_generated():
    sales = from_schema(sales_schema, seed=7).take(50)
    groups = sales.group.group_by(lambda s: s['region'])
    assert_equal(sum(len(members) for members in groups.values()), 50)
    for region, members in groups.items():
        assert_that(all(m['region'] == region for m in members), f"group {region} has strays")


@test("group_by on empty is an empty dict")
def test_group_by_empty():
    assert_equal(empty().group.group_by(lambda x: x), {})


# --- partition ---

@test("partition splits into matching and non-matching lists")
def test_partition():
    evens, odds = from_range(1, 8).group.partition(lambda x: x % 2 == 0)
    assert_equal(evens, [2, 4, 6])
    assert_equal(odds, [1, 3, 5, 7])


# --- chunked / windowed ---

@test("chunked splits into blocks with a shorter tail")
def test_chunked():
    assert_equal(Q([1, 2, 3, 4, 5]).group.chunked(2).to.list(), [[1, 2], [3, 4], [5]])
    assert_equal(Q([1, 2, 3, 4]).group.chunked(2).to.list(), [[1, 2], [3, 4]])
    assert_equal(empty().group.chunked(3).to.list(), [])


@test("chunked knows its count from a sized source")
def test_chunked_count():
    assert_equal(Q(list(range(10))).group.chunked(3).known_count(), 4)
    assert_equal(Q(list(range(10))).group.chunked(3).to.count(), 4)


@test("chunk and window sizes must be positive")
def test_buffer_size_validation():
    assert_raises(ValueError, lambda: Q([1, 2]).group.chunked(0))
    assert_raises(ValueError, lambda: Q([1, 2]).group.windowed(0))
    assert_raises(ValueError, lambda: Q([1, 2]).group.chunked(-3))


@test("windowed yields overlapping windows once full")
def test_windowed():
    assert_equal(Q([1, 2, 3, 4]).group.windowed(3).to.list(), [[1, 2, 3], [2, 3, 4]])
    assert_equal(Q([1, 2]).group.windowed(3).to.list(), [])
    assert_equal(Q([1, 2]).group.windowed(3).to.count(), 0)


@test("chunked over a generator is lazy")
def test_chunked_lazy():
    pulled = []

    def source():
        for i in range(100):
            pulled.append(i)
            yield i

    first = from_iterable(source()).group.chunked(4).to.first()
    assert_equal(first, [0, 1, 2, 3])
    assert_that(len(pulled) <= 5, "only the first chunk should have been pulled")


if __name__ == "__main__":
    suite.main("lazyq grouping test suite")
