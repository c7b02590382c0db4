from collections import namedtuple
from dataclasses import dataclass

import suite
from dgen import from_schema
from rhey import Container, R, empty

test = suite.test
assert_that = suite.assert_that

# --- test data & schemas ---
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'name': 'first_name',
    'dept': {'_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'active': {'_provider': 'choice', 'from': [True, False]},
}

staff = lambda: R([
    {'id': 1, 'name': 'ann', 'dept': 'eng', 'age': 41},
    {'id': 2, 'name': 'bo', 'dept': 'sales', 'age': 29},
    {'id': 3, 'name': 'cy', 'dept': 'eng', 'age': 35},
    {'id': 4, 'name': 'di', 'dept': 'hr', 'age': 29},
])


@dataclass
class Item:
    sku: str
    qty: int


Point = namedtuple('Point', ['x', 'y'])


class Plain:
    def __init__(self, kind, size):
        self.kind = kind
        self.size = size


# --- filter / remove ---

@test("filter_by_property keeps exact matches")
def test_filter_by_property():
    people = from_schema(person_schema, seed=11).take(40)
    eng = people.filter_by_property('dept', 'eng')
    assert_that(isinstance(eng, Container), "result should be a container")
    assert_that(eng.every(lambda p: p['dept'] == 'eng'), "every result should be in eng")
    assert_that(len(eng) == people.count_by_property_value('dept', lambda d: d == 'eng'),
                "filter and count should agree")


@test("remove_by_property drops exact matches")
def test_remove_by_property():
    people = from_schema(person_schema, seed=12).take(40)
    kept = people.remove_by_property('active', True)
    assert_that(kept.every(lambda p: p['active'] is False), "no active person should remain")
    assert_that(len(kept) + len(people.filter_by_property('active', True)) == 40,
                "filter and remove should split the container")
    assert_that(len(people) == 40, "the source should be unchanged")


@test("property matching uses equality, not truthiness")
def test_strict_matching():
    c = R([{'v': 0}, {'v': False}, {'v': None}, {'v': ''}, {}])
    assert_that(len(c.filter_by_property('v', None)) == 2, "missing properties read as None")
    assert_that(c.filter_by_property('v', '') == [{'v': ''}], "'' should only match ''")


# --- update ---

@test("update_by_property merges the patch into matching records")
def test_update_by_property():
    people = staff()
    updated = people.update_by_property('dept', 'eng', {'dept': 'platform', 'lead': True})
    assert_that(updated.pluck('dept') == ['platform', 'sales', 'platform', 'hr'], "eng should be renamed")
    assert_that(updated[0]['lead'] is True and 'lead' not in updated[1], "only matches get new keys")
    assert_that(updated[1] is people[1], "non-matching records should pass through by reference")
    assert_that(people[0]['dept'] == 'eng', "the original records should not be modified")


@test("update_by_property works for dataclasses, named tuples and plain objects")
def test_update_objects():
    items = R([Item('a', 1), Item('b', 2)])
    bumped = items.update_by_property('sku', 'a', {'qty': 10})
    assert_that(bumped[0] == Item('a', 10) and items[0].qty == 1, "dataclasses should be replaced")

    points = R([Point(0, 0), Point(1, 1)])
    moved = points.update_by_property('x', 1, {'y': 5})
    assert_that(moved[1] == Point(1, 5), "named tuples should be replaced")

    plain = R([Plain('box', 3)])
    resized = plain.update_by_property('kind', 'box', {'size': 4})
    assert_that(resized[0].size == 4 and plain[0].size == 3, "plain objects should be copied then patched")
    assert_that(resized[0] is not plain[0], "patched objects should be new objects")


# --- lookups ---

@test("find_by_property returns the first match or None")
def test_find_by_property():
    people = staff()
    assert_that(people.find_by_property('age', 29)['name'] == 'bo', "first 29-year-old is bo")
    assert_that(people.find_by_property('age', 99) is None, "no match should be None")
    assert_that(empty().find_by_property('age', 1) is None, "empty should be None")


@test("pluck reads a property from every record")
def test_pluck():
    assert_that(staff().pluck('name') == ['ann', 'bo', 'cy', 'di'], "should pluck the names")
    assert_that(R([Item('x', 1)]).pluck('sku') == ['x'], "attributes should be plucked too")
    assert_that(staff().pluck('missing') == [None] * 4, "missing properties should pluck as None")


@test("unique_by_property keeps the first record per value")
def test_unique_by_property():
    firsts = staff().unique_by_property('dept')
    assert_that(firsts.pluck('name') == ['ann', 'bo', 'di'], "one record per dept, first wins")
    tagged = R([{'t': [1]}, {'t': [1]}, {'t': [2]}])
    assert_that(len(tagged.unique_by_property('t')) == 2, "unhashable values should dedup by equality")


@test("extract_subset keeps only the named properties")
def test_extract_subset():
    subset = staff().extract_subset('name', 'age')
    assert_that(subset[0] == {'name': 'ann', 'age': 41}, "only name and age should remain")
    assert_that(all(set(row) == {'name', 'age'} for row in subset), "every row should have the same keys")
    assert_that(R([Plain('box', 3)]).extract_subset('kind') == [{'kind': 'box'}], "objects should work")


@test("count_by_property_value counts matching property values")
def test_count_by_property_value():
    people = staff()
    assert_that(people.count_by_property_value('age', lambda a: a > 30) == 2, "ann and cy are over 30")
    assert_that(people.count_by_property_value('dept', lambda d: d.startswith('x')) == 0, "none match")


if __name__ == "__main__":
    suite.run(title="rhey property query test suite")
