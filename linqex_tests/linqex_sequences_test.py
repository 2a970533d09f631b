import asyncio
from itertools import count

import numpy as np
from faker import Faker

from linqex import (
    nullable_sequence_equal, sequence_hash, throw_if_duplicates, to_dictionary_inverse,
    to_lookup_inverse, shuffle, append_if, append_if_not_null, prepend_if, prepend_if_not_null,
    either, where_not, where_not_null, select_not_null, index_from, take_while_aggregate,
    for_each, is_singleton, not_any, not_all, aggregate_async, select_async, identity,
    DuplicateElementError, KeyCollisionError, configure, reset_options
)
from suite import test, assert_that, assert_raises, run

Faker.seed(11)
fake = Faker()
names = [fake.unique.first_name() for _ in range(30)]


# --- nullable_sequence_equal ---

@test("nullable_sequence_equal compares present sequences element-wise")
def test_sequence_equal_present():
    assert_that(nullable_sequence_equal([1, 2], [1, 2]), "equal lists")
    assert_that(not nullable_sequence_equal([1, 2], [2, 1]), "order matters")
    assert_that(nullable_sequence_equal([], ()), "empty sequences of any kind are equal")
    assert_that(nullable_sequence_equal(iter(names), list(names)), "iterators compare by content")


@test("nullable_sequence_equal treats absent sequences")
def test_sequence_equal_absent():
    assert_that(nullable_sequence_equal(None, None), "both absent are equal")
    assert_that(not nullable_sequence_equal(None, [1]), "absent vs present")
    assert_that(not nullable_sequence_equal([1], None), "present vs absent")
    assert_that(not nullable_sequence_equal(None, []), "absent is not the empty sequence")


@test("nullable_sequence_equal rejects different lengths")
def test_sequence_equal_lengths():
    assert_that(not nullable_sequence_equal([1, 2], [1, 2, 3]), "shorter first")
    assert_that(not nullable_sequence_equal([1, 2, 3], [1, 2]), "shorter second")


@test("nullable_sequence_equal uses the supplied comparer")
def test_sequence_equal_comparer():
    lower = [n.lower() for n in names]
    assert_that(not nullable_sequence_equal(names, lower), "case differs by default")
    assert_that(nullable_sequence_equal(names, lower, lambda a, b: a.lower() == b.lower()),
                "case-insensitive comparer")


@test("sequence_hash agrees with equality")
def test_sequence_hash():
    assert_that(sequence_hash([1, 2, 3]) == sequence_hash(iter([1, 2, 3])), "same content, same hash")
    assert_that(sequence_hash(["a", "B"], str.lower) == sequence_hash(["A", "b"], str.lower),
                "key selector projects before hashing")

    ignore_case = lambda a, b: a.lower() == b.lower()
    left, right = ["Ab", "c"], ["aB", "C"]
    assert_that(nullable_sequence_equal(left, right, ignore_case), "equal under the comparer")
    assert_that(sequence_hash(left, str.lower) == sequence_hash(right, str.lower),
                "matching key selector keeps hash consistent with the comparer")


# --- throw_if_duplicates ---

@test("throw_if_duplicates passes unique sequences through unchanged")
def test_duplicates_unique():
    assert_that(list(throw_if_duplicates([1, 2, 3])) == [1, 2, 3], "unique input")
    assert_that(list(throw_if_duplicates(names)) == names, "unique names")
    assert_that(list(throw_if_duplicates([])) == [], "empty input")


@test("throw_if_duplicates fails at the second occurrence")
def test_duplicates_fail_fast():
    yielded = []

    def consume():
        for item in throw_if_duplicates([1, 2, 2, 3]):
            yielded.append(item)

    error = assert_raises(DuplicateElementError, consume, "duplicate should raise")
    assert_that(yielded == [1, 2], f"elements before the duplicate were yielded, got {yielded}")
    assert_that(error.key == 2 and error.element == 2, "error carries the repeated key")
    assert_that(isinstance(error, ValueError), "duplicate error is a value error")


@test("throw_if_duplicates is lazy and stops pulling at the duplicate")
def test_duplicates_lazy():
    source = iter([1, 1] + list(range(100)))
    checked = throw_if_duplicates(source)
    assert_that(next(checked) == 1, "first element passes")
    assert_raises(DuplicateElementError, lambda: next(checked), "second 1 fails")
    assert_that(next(source) == 0, "nothing after the duplicate was pulled")


@test("throw_if_duplicates with a key selector")
def test_duplicates_by_key():
    words = ["apple", "avocado", "banana"]
    error = assert_raises(DuplicateElementError,
                          lambda: list(throw_if_duplicates(words, lambda w: w[0])),
                          "same first letter should raise")
    assert_that(error.key == "a" and error.element == "avocado", f"got {error.key}, {error.element}")


# --- inverse mappings ---

@test("to_dictionary_inverse builds key to element mapping")
def test_dictionary_inverse():
    result = to_dictionary_inverse(["a", "bb"], lambda s: [len(s)])
    assert_that(result == {1: "a", 2: "bb"}, f"got {result}")


@test("to_dictionary_inverse fails on key collision")
def test_dictionary_inverse_collision():
    error = assert_raises(KeyCollisionError,
                          lambda: to_dictionary_inverse(["a", "b"], lambda s: [len(s)]),
                          "two elements with length 1")
    assert_that(error.key == 1 and error.existing == "a" and error.value == "b", str(error))
    assert_that(isinstance(error, ValueError), "collision error is a value error")


@test("to_dictionary_inverse maps every key an element produces")
def test_dictionary_inverse_many_keys():
    people = [{'name': n, 'aliases': [n.lower(), n.upper()]} for n in names[:5]]
    result = to_dictionary_inverse(people, lambda p: p['aliases'], lambda p: p['name'])
    assert_that(len(result) == 10, f"two aliases per person, got {len(result)}")
    for person in people:
        for alias in person['aliases']:
            assert_that(result[alias] == person['name'], f"alias {alias} should map to {person['name']}")


@test("to_dictionary_inverse skips elements with no keys")
def test_dictionary_inverse_no_keys():
    result = to_dictionary_inverse([1, 2, 3, 4], lambda x: [x] if x % 2 == 0 else [])
    assert_that(result == {2: 2, 4: 4}, f"got {result}")


@test("to_lookup_inverse groups elements sharing a key")
def test_lookup_inverse():
    result = to_lookup_inverse(["a", "b", "cc"], lambda s: [len(s)])
    assert_that(result == {1: ["a", "b"], 2: ["cc"]}, f"got {result}")
    tags = to_lookup_inverse([("x", ["red", "big"]), ("y", ["red"])], lambda t: t[1], lambda t: t[0])
    assert_that(tags == {"red": ["x", "y"], "big": ["x"]}, f"got {tags}")
    assert_that(list(tags) == ["red", "big"], "keys in first appearance order")


# --- shuffle ---

@test("shuffle returns a permutation of the input")
def test_shuffle_permutation():
    result = shuffle(names, 3)
    assert_that(sorted(result) == sorted(names), "same elements")
    assert_that(len(result) == len(names), "same length")


@test("shuffle is repeatable with the same seed")
def test_shuffle_seeded():
    assert_that(shuffle(range(50), 42) == shuffle(range(50), 42), "same seed, same permutation")
    assert_that(shuffle(range(50), 42) != shuffle(range(50), 43), "different seeds differ")


@test("shuffle accepts a numpy generator")
def test_shuffle_generator():
    first = shuffle(range(20), np.random.default_rng(5))
    second = shuffle(range(20), np.random.default_rng(5))
    assert_that(first == second, "same generator state, same permutation")


@test("shuffle falls back to the configured default seed")
def test_shuffle_default_seed():
    configure(default_seed=99)
    try:
        assert_that(shuffle(range(30)) == shuffle(range(30)), "default seed makes shuffle repeatable")
    finally:
        reset_options()


@test("shuffle rejects unsupported random sources")
def test_shuffle_bad_random():
    assert_raises(TypeError, lambda: shuffle([1, 2], "seed"), "string is not a random source")
    assert_that(shuffle([], 1) == [], "empty input")


# --- conditional append / prepend and either ---

@test("append_if and prepend_if honour the predicate")
def test_append_prepend_if():
    positive = lambda x: x > 0
    assert_that(list(append_if([1, 2], 3, positive)) == [1, 2, 3], "appended")
    assert_that(list(append_if([1, 2], -3, positive)) == [1, 2], "not appended")
    assert_that(list(prepend_if([1, 2], 0, positive)) == [1, 2], "not prepended")
    assert_that(list(prepend_if([1, 2], 9, positive)) == [9, 1, 2], "prepended")


@test("append_if_not_null and prepend_if_not_null skip none")
def test_append_prepend_not_null():
    assert_that(list(append_if_not_null(["a"], None)) == ["a"], "none not appended")
    assert_that(list(append_if_not_null(["a"], "")) == ["a", ""], "falsy but present is appended")
    assert_that(list(prepend_if_not_null(["a"], 0)) == [0, "a"], "zero is prepended")


@test("either applies the selector only when flagged")
def test_either():
    assert_that(list(either([1, 2, 3], True).then(reversed)) == [3, 2, 1], "flag set")
    assert_that(list(either([1, 2, 3], False).then(reversed)) == [1, 2, 3], "flag unset")


# --- filtering and projection ---

@test("where_not, where_not_null and select_not_null filter")
def test_filters():
    assert_that(list(where_not(range(6), lambda x: x % 2)) == [0, 2, 4], "where_not")
    assert_that(list(where_not_null([None, 0, None, "x"])) == [0, "x"], "where_not_null")
    lookup = {"a": 1, "c": 3}
    assert_that(list(select_not_null("abc", lookup.get)) == [1, 3], "select_not_null")


@test("index_from numbers elements from an origin")
def test_index_from():
    assert_that(list(index_from("ab", 1)) == [(1, "a"), (2, "b")], "one based")
    assert_that(list(index_from([], 5)) == [], "empty")


@test("take_while_aggregate stops when the running total would overflow")
def test_take_while_aggregate():
    result = list(take_while_aggregate([3, 4, 2, 5, 1], 0, lambda acc, x: acc + x,
                                       lambda acc, x: acc + x <= 10))
    assert_that(result == [3, 4, 2], f"got {result}")
    naturals = list(take_while_aggregate(count(1), 0, lambda acc, x: acc + x, lambda acc, x: acc < 6))
    assert_that(naturals == [1, 2, 3], f"works on infinite sources, got {naturals}")


# --- quantifiers ---

@test("for_each runs the action for every element")
def test_for_each():
    seen = []
    for_each(names[:4], seen.append)
    assert_that(seen == names[:4], "all elements visited in order")


@test("is_singleton checks for exactly one element")
def test_is_singleton():
    assert_that(is_singleton([1]), "one")
    assert_that(not is_singleton([]), "zero")
    assert_that(not is_singleton([1, 2]), "two")
    assert_that(not is_singleton(count()), "stops pulling on infinite sources")


@test("not_any and not_all")
def test_not_any_not_all():
    assert_that(not_any([]), "empty has no elements")
    assert_that(not not_any([None]), "a none element still counts")
    assert_that(not_any([1, 3], lambda x: x % 2 == 0), "no evens")
    assert_that(not_all([2, 3], lambda x: x % 2 == 0), "not all even")
    assert_that(not not_all([], lambda x: False), "vacuous truth")


@test("identity returns its argument")
def test_identity():
    marker = object()
    assert_that(identity(marker) is marker, "same object")


# --- async ---

@test("aggregate_async awaits the accumulator in order")
def test_aggregate_async():
    order = []

    async def add(acc, x):
        await asyncio.sleep(0)
        order.append(x)
        return acc + x

    result = asyncio.run(aggregate_async([1, 2, 3], 0, add, lambda total: total * 10))
    assert_that(result == 60, f"got {result}")
    assert_that(order == [1, 2, 3], "sequential order")


@test("select_async collects awaited projections")
def test_select_async():
    async def shout(name):
        await asyncio.sleep(0)
        return name.upper()

    result = asyncio.run(select_async(names[:5], shout))
    assert_that(result == [n.upper() for n in names[:5]], f"got {result}")


if __name__ == "__main__":
    run(title="linqex sequence functions test suite")
