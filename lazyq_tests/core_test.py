import suite
from dgen import from_schema
from lazyq import (
    Q, from_iterable, from_range, empty, of, Query, ArrayQuery, Ordering,
    IndexedValue, KeyValue, compare
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': {'_qen_provider': 'counter', 'start': 1},
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']},
    'active': ('pybool', {})
}

# helper data
numbers = Q(list(range(1, 11)))  # 1 through 10
words = Q(['apple', 'banana', 'cherry', 'date', 'elderberry'])


# --- handle kinds ---

@test("lists become array-backed handles, other iterables generic ones")
def test_handle_kinds():
    assert_that(isinstance(Q([1, 2]), ArrayQuery), "list should give an ArrayQuery")
    assert_that(isinstance(Q((1, 2)), ArrayQuery), "tuple should give an ArrayQuery")
    assert_that(isinstance(Q({1, 2}), Query), "set should give a generic Query")
    assert_that(isinstance(Q(x for x in [1]), Query), "generator should give a generic Query")
    assert_that(Q(numbers) is numbers, "an existing handle is returned as-is")


@test("chain operations return new handles and leave the source untouched")
def test_immutability():
    mapped = numbers.map(lambda x: x * 2)
    assert_that(mapped is not numbers, "map should return a new handle")
    assert_equal(numbers.to.list(), list(range(1, 11)), "source handle must be unchanged")
    assert_that(isinstance(mapped, Query), "lazy chain ops give generic queries")


@test("array handles hold their list by reference")
def test_array_reference():
    data = [1, 2]
    handle = Q(data)
    data.append(3)
    assert_equal(handle.to.list(), [1, 2, 3])
    assert_equal(len(handle), 3)


@test("array handles come with working accessors straight away")
def test_array_handle_accessors():
    assert_equal(Q([1, 2, 3]).to.count(), 3)
    assert_equal(of(4, 5).to.last(), 5)
    assert_that(empty().to.is_empty(), "empty() should be usable at once")
    assert_equal(Q([3, 1, 2]).sort().to.first(), 1, "sort output is a usable array handle")
    assert_equal(Q([1, 2]).reversed().to.element_at(0), 2)
    assert_equal(Q([1, 1]).set.distinct().to.list(), [1])


# --- map / filter / flat_map ---

@test("map transforms elements")
def test_map_basic():
    assert_equal(numbers.map(lambda x: x * x).to.list(), [1, 4, 9, 16, 25, 36, 49, 64, 81, 100])


@test("filter and filter_not split on a predicate")
def test_filter():
    assert_equal(numbers.filter(lambda x: x % 2 == 0).to.list(), [2, 4, 6, 8, 10])
    assert_equal(numbers.filter_not(lambda x: x % 2 == 0).to.list(), [1, 3, 5, 7, 9])
    assert_equal(numbers.filter(lambda x: x > 100).to.list(), [])


@test("flat_map flattens one level")
def test_flat_map():
    nested = Q([[1, 2], [3, 4, 5], [], [6]])
    assert_equal(nested.flat_map(lambda x: x).to.list(), [1, 2, 3, 4, 5, 6])
    assert_equal(words.take(2).flat_map(list).to.count(), 11, "apple and banana have 11 letters")


@test("of_type keeps instances of a type")
def test_of_type():
    mixed = Q([1, 'hello', 2.5, None, 3])
    assert_equal(mixed.of_type(int).to.list(), [1, 3])
    assert_equal(mixed.of_type(str).to.list(), ['hello'])


@test("filter works over generated records")
def test_filter_generated():
    people = from_schema(person_schema, seed=42).take(30)
    engineers = people.filter(lambda p: p['department'] == 'eng' and p['age'] > 40).to.list()
    for person in engineers:
        assert_that(person['department'] == 'eng', "all should be engineers")
        assert_that(person['age'] > 40, "all should be over 40")
    assert_equal(people.map(lambda p: p['id']).to.list(), list(range(1, 31)), "ids should count up")


# --- slicing ---

@test("skip and take slice like list slicing")
def test_skip_take_slicing():
    data = list(range(20))
    source = Q(data)
    for a in (0, 3, 25):
        for b in (0, 4, 30):
            assert_equal(source.skip(a).take(b).to.list(), data[a:a + b], f"skip({a}).take({b})")
            generic = from_range(0, 20)
            assert_equal(generic.skip(a).take(b).to.list(), data[a:a + b], f"generic skip({a}).take({b})")


@test("take and skip reject negative counts at construction")
def test_take_skip_invalid():
    assert_raises(ValueError, lambda: numbers.take(-1))
    assert_raises(ValueError, lambda: numbers.skip(-1))
    assert_raises(ValueError, lambda: numbers.map(str).take(-1))
    assert_raises(ValueError, lambda: numbers.skip_last(-1))
    assert_raises(ValueError, lambda: numbers.take_last(-1))
    assert_raises(ValueError, lambda: numbers.map(str).take_last(-1))


@test("take_while and skip_while")
def test_while_ops():
    assert_equal(numbers.take_while(lambda x: x < 4).to.list(), [1, 2, 3])
    assert_equal(numbers.skip_while(lambda x: x < 8).to.list(), [8, 9, 10])
    assert_equal(numbers.take_while(lambda x: x > 100).to.list(), [])


@test("skip_last and take_last trim the tail")
def test_tail_ops():
    assert_equal(numbers.skip_last(7).to.list(), [1, 2, 3])
    assert_equal(numbers.take_last(3).to.list(), [8, 9, 10])
    assert_equal(numbers.map(lambda x: x).take_last(3).to.list(), [8, 9, 10])
    assert_equal(numbers.take_last(0).to.list(), [])
    assert_equal(Q([1, 2]).take_last(5).to.list(), [1, 2])
    assert_equal(Q([1, 2]).map(str).take_last(5).to.list(), ['1', '2'])
    assert_that(isinstance(numbers.map(str).take_last(2), ArrayQuery), "take_last materializes")


@test("step_by and repeat")
def test_step_repeat():
    assert_equal(numbers.step_by(4).to.list(), [1, 5, 9])
    assert_equal(Q([1, 2]).repeat(2).to.list(), [1, 2, 1, 2])
    assert_equal(Q([1, 2]).repeat(0).to.list(), [])
    assert_raises(ValueError, lambda: numbers.step_by(0))


# --- append / prepend / concat ---

@test("append and prepend on array and generic handles agree")
def test_append_prepend():
    for handle in (Q([1, 2, 3]), from_range(1, 4)):
        assert_equal(handle.append(4).to.list(), [1, 2, 3, 4])
        assert_equal(handle.prepend(0).to.list(), [0, 1, 2, 3])
        assert_equal(handle.prepend(0).append(4).to.count(), 5)


@test("concat accepts handles and plain iterables")
def test_concat():
    assert_equal(Q([1]).concat(Q([2, 3])).to.list(), [1, 2, 3])
    assert_equal(Q([1]).concat(x for x in [2]).to.list(), [1, 2])
    assert_equal(empty().concat([]).to.list(), [])


@test("default_if_empty substitutes only for empty sequences")
def test_default_if_empty():
    assert_equal(empty().default_if_empty([0]).to.list(), [0])
    assert_equal(numbers.take(2).default_if_empty([0]).to.list(), [1, 2])
    assert_equal(numbers.filter(lambda x: x > 50).default_if_empty([-1]).to.list(), [-1])


# --- decoration ---

@test("indexed and keyed pair elements with positions and keys")
def test_indexed_keyed():
    assert_equal(words.take(2).indexed().to.list(), [IndexedValue(0, 'apple'), IndexedValue(1, 'banana')])
    lengths = words.keyed(len).map(lambda kv: kv.key).to.list()
    assert_equal(lengths, [5, 6, 6, 4, 10])
    assert_equal(words.keyed(len).to.first(), KeyValue(5, 'apple'))


# --- reversed ---

@test("reversed materializes in reverse order")
def test_reversed():
    assert_equal(Q([1, 2, 3]).reversed().to.list(), [3, 2, 1])
    assert_equal(from_range(1, 4).reversed().to.list(), [3, 2, 1])
    assert_equal(empty().reversed().to.list(), [])


# --- sort family ---

@test("sort uses natural order or an ordering comparer")
def test_sort():
    data = Q([3, 1, 2])
    assert_equal(data.sort().to.list(), [1, 2, 3])
    assert_equal(data.sort_descending().to.list(), [3, 2, 1])
    by_remainder = lambda x, y: compare(x % 3, y % 3)
    assert_equal(Q([5, 3, 4]).sort(by_remainder).to.list(), [3, 4, 5])
    assert_equal(Q([5, 3, 4]).sort_descending(by_remainder).to.list(), [5, 4, 3])
    assert_that(isinstance(data.sort(), ArrayQuery), "sort materializes into an array handle")


@test("sort_by is stable for equal keys")
def test_sort_by_stable():
    records = [{'key': 2, 'v': 'a'}, {'key': 1, 'v': 'b'}, {'key': 2, 'v': 'c'}]
    result = Q(records).sort_by(lambda r: r['key']).map(lambda r: r['v']).to.list()
    assert_equal(result, ['b', 'a', 'c'])
    descending = Q(records).sort_by_descending(lambda r: r['key']).map(lambda r: r['v']).to.list()
    assert_equal(descending, ['a', 'c', 'b'], "descending keeps equal keys in input order")


@test("sort_by with a comparer over keys")
def test_sort_by_comparer():
    by_length = lambda a, b: Ordering.of(len(a) - len(b))
    result = words.sort_by(lambda w: w[::-1], by_length).to.list()
    assert_equal(result, ['date', 'apple', 'banana', 'cherry', 'elderberry'])
    result_desc = words.sort_by_descending(lambda w: w, by_length).to.list()
    assert_equal(result_desc, ['elderberry', 'banana', 'cherry', 'apple', 'date'])


@test("comparer exceptions propagate unchanged")
def test_comparer_errors_propagate():
    class Boom(Exception):
        pass

    def failing(x, y):
        raise Boom("comparer failed")

    assert_raises(Boom, lambda: Q([2, 1]).sort(failing))
    assert_raises(TypeError, lambda: Q([1, 'a']).sort(), "mixed types have no natural order")


# --- iteration protocol ---

@test("handles are plain python iterables and restart")
def test_iteration():
    chain = from_range(0, 5).map(lambda x: x * 2).filter(lambda x: x > 2)
    assert_equal(list(chain), [4, 6, 8])
    assert_equal(list(chain), [4, 6, 8], "second pass should match the first")
    assert_equal(sum(chain), 18)


@test("handles over generators are single-pass")
def test_single_pass_handle():
    chain = from_iterable(x for x in [1, 2, 3]).map(lambda x: x + 1)
    assert_equal(chain.to.list(), [2, 3, 4])
    assert_equal(chain.to.list(), [], "the generator is already drained")
    assert_that(not chain.restartable, "chain should report it is single-use")
    assert_that(numbers.map(str).restartable, "chain over a list restarts")


if __name__ == "__main__":
    suite.main("lazyq core operations test suite")
