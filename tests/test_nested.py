"""
Tests for dot notation access to nested mappings.
"""

import pytest

from stdkit.util import nested


class IndexedBag:
    """Minimal container exposing keyed existence and lookup only."""

    def __init__(self, **items):
        self._items = items

    def __contains__(self, key):
        return key in self._items

    def __getitem__(self, key):
        return self._items[key]


@pytest.fixture
def data():
    return {
        'app': {
            'name': 'demo',
            'db': {'host': 'localhost', 'port': 5432},
            'servers': ['alpha', 'beta'],
        },
        'debug': False,
        'nothing': None,
        'a.b': 'literal',
        3: 'three',
    }


@pytest.fixture
def users():
    return [
        {'id': 1, 'name': 'ann', 'role': 'dev', 'team': 'core', 'age': 31},
        {'id': 2, 'name': 'bob', 'role': 'ops', 'team': 'core', 'age': 25},
        {'id': 3, 'name': 'cid', 'role': 'dev', 'team': 'web', 'age': 25},
    ]


class TestGet:
    """Test nested.get"""

    def test_none_path_returns_container(self, data):
        """Test a None path returns the container itself."""
        assert nested.get(data, None) is data

    def test_top_level_key(self, data):
        """Test reading a top-level key."""
        assert nested.get(data, 'debug') is False

    def test_dot_path(self, data):
        """Test reading through nested levels."""
        assert nested.get(data, 'app.db.host') == 'localhost'
        assert nested.get(data, 'app.db') == {'host': 'localhost', 'port': 5432}

    def test_literal_key_wins_over_dot_path(self):
        """Test a literal dotted key is preferred to splitting."""
        container = {'a.b': 'literal', 'a': {'b': 'nested'}}
        assert nested.get(container, 'a.b') == 'literal'

    def test_missing_returns_default(self, data):
        """Test unresolved paths return the default."""
        assert nested.get(data, 'app.db.user') is None
        assert nested.get(data, 'app.db.user', 'root') == 'root'
        assert nested.get(data, 'unknown', 42) == 42

    def test_segment_on_scalar_returns_default(self, data):
        """Test descending into a scalar returns the default."""
        assert nested.get(data, 'app.name.first', 'x') == 'x'
        assert nested.get(data, 'debug.value', 'x') == 'x'

    def test_stored_none_is_returned(self, data):
        """Test a stored None is returned instead of the default."""
        assert nested.get(data, 'nothing', 'default') is None

    def test_integer_key(self, data):
        """Test integer keys are looked up as-is."""
        assert nested.get(data, 3) == 'three'
        assert nested.get(data, 4, 'miss') == 'miss'

    def test_sequence_index_segment(self, data):
        """Test digit segments index into lists."""
        assert nested.get(data, 'app.servers.1') == 'beta'
        assert nested.get(data, 'app.servers.5', 'none') == 'none'

    def test_list_container(self):
        """Test reading from a list container."""
        assert nested.get([1, 4, 5], 1) == 4
        assert nested.get([1, 4, 5], 7, 'miss') == 'miss'

    def test_digit_segment_matches_integer_key(self):
        """Test digit segments fall back to integer keys."""
        container = {'items': {0: 'zero', 1: 'one'}}
        assert nested.get(container, 'items.1') == 'one'

    def test_custom_indexable_container(self):
        """Test containers with only __contains__ and __getitem__."""
        container = {'bag': IndexedBag(color='red')}
        assert nested.get(container, 'bag.color') == 'red'
        assert nested.get(container, 'bag.size', 'M') == 'M'

    def test_non_container_returns_default(self):
        """Test reading from a non container returns the default."""
        assert nested.get(None, 'a.b', 'd') == 'd'
        assert nested.get('string', 'a', 'd') == 'd'


class TestHas:
    """Test nested.has"""

    def test_empty_container(self):
        """Test nothing exists in an empty container."""
        assert nested.has({}, 'a') is False
        assert nested.has({}, '') is False

    def test_existing_paths(self, data):
        """Test existing paths are found."""
        assert nested.has(data, 'app')
        assert nested.has(data, 'app.db.port')
        assert nested.has(data, 'a.b')
        assert nested.has(data, 'nothing')
        assert nested.has(data, 3)

    def test_missing_paths(self, data):
        """Test missing paths are not found."""
        assert not nested.has(data, 'app.db.user')
        assert not nested.has(data, 'app.name.first')
        assert not nested.has(data, 9)

    def test_integer_key_is_not_split(self):
        """Test non string keys are never split on dots."""
        assert not nested.has({'1': {'5': True}}, 1.5)

    def test_none_path_is_never_present(self, data):
        """Test a None path is absent while get returns the container."""
        assert nested.has(data, None) is False
        assert nested.get(data, None) is data

    @pytest.mark.parametrize('path', ['app.db.user', 'missing', 'debug.x', 'app.servers.9'])
    def test_missing_implies_default(self, data, path):
        """Test a missing path always reads back as the default."""
        sentinel = object()
        assert not nested.has(data, path)
        assert nested.get(data, path, sentinel) is sentinel


class TestSet:
    """Test nested.set"""

    def test_none_path_is_noop(self):
        """Test a None path leaves the container unchanged."""
        container = {'a': 1}
        nested.set(container, None, 2)
        assert container == {'a': 1}

    def test_top_level(self):
        """Test writing a top-level key."""
        container = {'a': 1}
        nested.set(container, 'b', 2)
        assert container == {'a': 1, 'b': 2}

    def test_creates_intermediate_levels(self):
        """Test missing levels are created as dicts."""
        container = {}
        nested.set(container, 'a.b.c', 1)
        assert container == {'a': {'b': {'c': 1}}}

    def test_replaces_scalar_intermediate(self):
        """Test a scalar on the way is replaced by a dict."""
        container = {'a': 'scalar'}
        nested.set(container, 'a.b', 1)
        assert container == {'a': {'b': 1}}

    def test_keeps_siblings(self, data):
        """Test writing a path keeps sibling keys."""
        nested.set(data, 'app.db.user', 'root')
        assert data['app']['db'] == {'host': 'localhost', 'port': 5432, 'user': 'root'}

    def test_integer_path_is_kept(self):
        """Test an integer path is written as an integer key."""
        container = {}
        nested.set(container, 3, 'x')
        assert container == {3: 'x'}
        assert nested.get(container, 3) == 'x'

    def test_digit_segment_updates_integer_key(self):
        """Test a digit segment overwrites an existing integer key."""
        container = {'items': {0: 'zero'}}
        nested.set(container, 'items.0', 'ZERO')
        assert container == {'items': {0: 'ZERO'}}

    def test_digit_segment_descends_integer_key(self):
        """Test intermediate digit segments reuse integer keyed levels."""
        container = {0: {'y': 1}}
        nested.set(container, '0.z', 2)
        assert container == {0: {'y': 1, 'z': 2}}

    @pytest.mark.parametrize('path,value', [
        ('x', 1),
        ('app.db.port', 3306),
        ('app.new.deep.key', [1, 2]),
        ('debug.flag', True),
        (3, 'tres'),
    ])
    def test_set_then_get(self, data, path, value):
        """Test a written value reads back from the same path."""
        nested.set(data, path, value)
        assert nested.get(data, path) == value


class TestForget:
    """Test nested.forget"""

    def test_top_level_key(self):
        """Test removing a top-level key."""
        container = {'a': 1, 'b': 2}
        nested.forget(container, 'a')
        assert container == {'b': 2}

    def test_list_index(self):
        """Test removing a list element by index."""
        container = [1, 4, 5]
        nested.forget(container, 1)
        assert container == [1, 5]

    def test_empty_keys(self):
        """Test an empty key list removes nothing."""
        container = {'a': 1}
        nested.forget(container, [])
        assert container == {'a': 1}

    def test_dot_path(self):
        """Test removing a nested key."""
        container = {'a': {'b': 1}, 0: 4, 1: 5}
        nested.forget(container, ['a.b'])
        assert container == {'a': {}, 0: 4, 1: 5}

    def test_dot_path_not_exists(self):
        """Test a path that does not resolve removes nothing."""
        container = {'a': {'b': 1}, 0: 4, 1: 5}
        nested.forget(container, 'a.b.c')
        assert container == {'a': {'b': 1}, 0: 4, 1: 5}

    def test_intermediate_not_a_mapping(self):
        """Test a list on the way stops the removal."""
        container = {'a': [1, 2]}
        nested.forget(container, 'a.0')
        assert container == {'a': [1, 2]}

    def test_integer_keyed_intermediate(self):
        """Test removal descends through integer keyed levels."""
        container = {0: {'y': 2, 'z': 3}, 'items': {1: {'id': 'x'}}}
        nested.forget(container, ['0.y', 'items.1.id'])
        assert container == {0: {'z': 3}, 'items': {1: {}}}

    def test_integer_key(self):
        """Test removing an integer key given as int or digit string."""
        container = {0: 'a', 1: 'b', 2: 'c'}
        nested.forget(container, [0, '2'])
        assert container == {1: 'b'}

    def test_multiple_keys_share_container(self):
        """Test each key sees the removals made before it."""
        container = {'a': {'b': 1, 'c': 2, 'd': 3}, 'e': 4}
        nested.forget(container, ['a.c', 'a.b', 'e'])
        assert container == {'a': {'d': 3}}

    def test_literal_dotted_key(self):
        """Test a literal dotted key is removed before splitting."""
        container = {'a.b': 1, 'a': {'b': 2}}
        nested.forget(container, 'a.b')
        assert container == {'a': {'b': 2}}

    def test_malformed_input_does_not_raise(self):
        """Test unusable keys are skipped silently."""
        container = {'a': 1}
        nested.forget(container, ['a.b.c', None, 12])
        assert container == {'a': 1}


class TestPullAndExcept:
    """Test nested.pull and nested.except_"""

    def test_pull_top_level(self):
        """Test pulling a top-level key."""
        container = {'a': 1, 'b': 2}
        assert nested.pull(container, 'a') == 1
        assert not nested.has(container, 'a')

    def test_pull_list(self):
        """Test pulling a list element."""
        container = [1, 4, 5]
        assert nested.pull(container, 1) == 4
        assert container == [1, 5]

    def test_pull_nested(self, data):
        """Test pulling a nested key."""
        assert nested.pull(data, 'app.db.port') == 5432
        assert data['app']['db'] == {'host': 'localhost'}

    def test_pull_through_integer_key(self):
        """Test pulling below an integer key removes the value."""
        container = {0: {'y': 2}}
        assert nested.pull(container, '0.y') == 2
        assert not nested.has(container, '0.y')
        assert container == {0: {}}

    def test_pull_integer_key(self):
        """Test pulling an integer key."""
        container = {5: 'five', 'x': 1}
        assert nested.pull(container, 5) == 'five'
        assert container == {'x': 1}

    def test_pull_missing_returns_default(self):
        """Test pulling a missing key returns the default."""
        assert nested.pull({'a': 1}, 'b', 'none') == 'none'

    def test_except_returns_copy(self, data):
        """Test except_ leaves the input untouched."""
        result = nested.except_(data, ['app.db.host', 'debug'])
        assert 'debug' not in result
        assert result['app']['db'] == {'port': 5432}
        assert data['app']['db'] == {'host': 'localhost', 'port': 5432}
        assert data['debug'] is False

    def test_except_integer_keys(self):
        """Test except_ drops integer keyed entries."""
        container = {0: {'a': 1, 'b': 2}, 1: 'one'}
        assert nested.except_(container, ['0.a', 1]) == {0: {'b': 2}}


class TestMerge:
    """Test nested.merge"""

    def test_later_wins(self):
        """Test later mappings override earlier ones."""
        assert nested.merge({'a': 1, 'b': 2}, {'b': 3}) == {'a': 1, 'b': 3}

    def test_recursive(self):
        """Test nested mappings merge key by key."""
        defaults = {'db': {'host': 'localhost', 'port': 5432}}
        supplied = {'db': {'host': 'db.internal'}}
        assert nested.merge(defaults, supplied) == {
            'db': {'host': 'db.internal', 'port': 5432}
        }

    def test_lists_are_replaced(self):
        """Test lists replace each other instead of merging."""
        assert nested.merge({'a': [1, 2, 3]}, {'a': [4]}) == {'a': [4]}

    def test_scalar_replaces_mapping(self):
        """Test scalars and mappings replace each other."""
        assert nested.merge({'a': {'b': 1}}, {'a': 5}) == {'a': 5}
        assert nested.merge({'a': 5}, {'a': {'b': 1}}) == {'a': {'b': 1}}

    def test_inputs_untouched(self):
        """Test merging does not modify or share the inputs."""
        defaults = {'db': {'port': 5432}}
        supplied = {'db': {'host': 'x'}}
        result = nested.merge(defaults, supplied)
        result['db']['port'] = 1
        assert defaults == {'db': {'port': 5432}}
        assert supplied == {'db': {'host': 'x'}}
        assert result['db'] is not supplied['db']

    def test_ignores_none(self):
        """Test None arguments are skipped."""
        assert nested.merge(None, {'a': 1}, None) == {'a': 1}


class TestHelpers:
    """Test collection helpers"""

    def test_only(self):
        """Test selecting top-level keys."""
        assert nested.only({'a': 1, 'b': 2, 'c': 3}, ['a', 'c']) == {'a': 1, 'c': 3}

    def test_wrap(self):
        """Test wrapping values in a list."""
        assert nested.wrap(None) == []
        assert nested.wrap(1) == [1]
        assert nested.wrap([1]) == [1]

    def test_flatten(self):
        """Test flattening nested lists with and without depth."""
        assert nested.flatten([1, [2, [3, [4]]]]) == [1, 2, 3, 4]
        assert nested.flatten([1, [2, [3, [4]]]], 1) == [1, 2, [3, [4]]]

    def test_first_and_last(self):
        """Test first and last with predicates and defaults."""
        assert nested.first([]) is None
        assert nested.first([1, 2, 3]) == 1
        assert nested.first([1, 2, 3], lambda x: x > 1) == 2
        assert nested.last([1, 2, 3]) == 3
        assert nested.last([1, 2, 3], lambda x: x < 3) == 2
        assert nested.last([1, 2], lambda x: x > 5, 'none') == 'none'

    def test_pluck_and_column(self):
        """Test plucking nested values with and without keys."""
        users = [
            {'id': 1, 'profile': {'name': 'ann'}},
            {'id': 2, 'profile': {'name': 'bob'}},
        ]
        assert nested.pluck(users, 'profile.name') == ['ann', 'bob']
        assert nested.pluck(users, 'profile.name', 'id') == {1: 'ann', 2: 'bob'}
        assert nested.get_column(users, 'id') == [1, 2]

    def test_dot_and_undot(self):
        """Test flattening to dot paths and expanding back."""
        container = {'a': {'b': 1, 'c': {'d': 2}}, 'e': {}}
        flat = nested.dot(container)
        assert flat == {'a.b': 1, 'a.c.d': 2, 'e': {}}
        assert nested.undot(flat) == container

    def test_is_assoc(self):
        """Test detecting string keyed mappings."""
        assert nested.is_assoc({'a': 1})
        assert not nested.is_assoc({})
        assert not nested.is_assoc({'a': 1, 0: 2})

    def test_is_indexed(self):
        """Test detecting integer indexed containers."""
        assert nested.is_indexed([])
        assert nested.is_indexed({0: 'a', 5: 'b'})
        assert not nested.is_indexed({0: 'a', 5: 'b'}, consecutive=True)
        assert nested.is_indexed({0: 'a', 1: 'b'}, consecutive=True)
        assert not nested.is_indexed({'a': 1})

    def test_is_accessible(self):
        """Test which values count as accessible containers."""
        assert nested.is_accessible({})
        assert nested.is_accessible([])
        assert nested.is_accessible(IndexedBag())
        assert not nested.is_accessible('abc')
        assert not nested.is_accessible(12)


class TestIndexing:
    """Test indexing, grouping and mapping lists of records"""

    def test_index_by_key(self, users):
        """Test indexing records by a key."""
        result = nested.index(users, 'id')
        assert list(result) == [1, 2, 3]
        assert result[2]['name'] == 'bob'

    def test_index_by_callable(self, users):
        """Test indexing records by a computed key."""
        result = nested.index(users, lambda user: user['name'].upper())
        assert list(result) == ['ANN', 'BOB', 'CID']

    def test_index_skips_none_keys(self):
        """Test records whose key is missing are dropped."""
        assert nested.index([{'id': 1}, {'name': 'x'}], 'id') == {1: {'id': 1}}

    def test_index_without_key_or_groups(self, users):
        """Test indexing with neither key nor groups yields nothing."""
        assert nested.index(users) == {}

    def test_index_with_groups_and_key(self, users):
        """Test grouping levels above a keyed index."""
        result = nested.index(users, 'id', ['team', 'role'])
        assert list(result['core']) == ['dev', 'ops']
        assert result['core']['dev'] == {1: users[0]}
        assert result['web']['dev'] == {3: users[2]}

    def test_group(self, users):
        """Test grouping records into lists."""
        assert nested.group(users, 'role') == {
            'dev': [users[0], users[2]],
            'ops': [users[1]],
        }

    def test_map(self, users):
        """Test mapping one field to another."""
        assert nested.map(users, 'id', 'name') == {1: 'ann', 2: 'bob', 3: 'cid'}

    def test_map_grouped(self, users):
        """Test mapping nested under a group field."""
        assert nested.map(users, 'id', 'name', 'team') == {
            'core': {1: 'ann', 2: 'bob'},
            'web': {3: 'cid'},
        }


class TestMultisort:
    """Test sorting lists of records in place"""

    def test_single_key(self, users):
        """Test sorting by one key."""
        nested.multisort(users, 'name', descending=True)
        assert [user['name'] for user in users] == ['cid', 'bob', 'ann']

    def test_multiple_keys(self, users):
        """Test later keys break ties of earlier keys."""
        nested.multisort(users, ['age', 'name'], [False, True])
        assert [user['id'] for user in users] == [3, 2, 1]

    def test_equal_records_keep_order(self, users):
        """Test records equal on every key keep their order."""
        nested.multisort(users, 'age')
        assert [user['id'] for user in users] == [2, 3, 1]

    def test_direction_length_mismatch(self, users):
        """Test one direction per key is required."""
        with pytest.raises(ValueError):
            nested.multisort(users, ['age', 'name'], [True])

    def test_empty_list(self):
        """Test sorting an empty list is a no-op."""
        items = []
        nested.multisort(items, 'id')
        assert items == []


class TestFiltering:
    """Test where, filter and membership helpers"""

    def test_where_mapping(self):
        """Test where keeps mapping entries passing the predicate."""
        container = {'a': 1, 'b': 2, 'c': 3}
        assert nested.where(container, lambda value, key: value > 1 and key != 'c') == {'b': 2}

    def test_where_list(self):
        """Test where on a list receives positions as keys."""
        assert nested.where(['x', 'y', 'z'], lambda value, position: position % 2 == 0) == ['x', 'z']

    def test_filter_selects(self):
        """Test selecting whole keys and sub keys."""
        container = {'A': [1, 2], 'B': {'C': 1, 'D': 2}, 'E': 1, 'F': {}}
        assert nested.filter(container, ['A', 'B.C', 'F', 'G']) == {'A': [1, 2], 'B': {'C': 1}}

    def test_filter_excludes(self):
        """Test negated filters remove entries from the selection."""
        container = {'A': [1, 2], 'B': {'C': 1, 'D': 2}, 'E': 1}
        assert nested.filter(container, ['B', '!B.C']) == {'B': {'D': 2}}
        assert nested.filter(container, ['A', 'E', '!E']) == {'A': [1, 2]}

    def test_filter_result_is_copy(self):
        """Test the selection does not share nested values with the input."""
        container = {'B': {'C': {'x': 1}}}
        result = nested.filter(container, ['B.C'])
        result['B']['C']['x'] = 2
        assert container == {'B': {'C': {'x': 1}}}

    def test_is_in(self):
        """Test loose and strict membership."""
        assert nested.is_in(1, ['1', 1.0])
        assert not nested.is_in(1, [1.0, True], strict=True)
        assert nested.is_in(1, (0, 1), strict=True)
        assert not nested.is_in(5, [])

    def test_is_subset(self):
        """Test every needle must be present."""
        assert nested.is_subset([1, 2], [3, 2, 1])
        assert not nested.is_subset([1, 4], [3, 2, 1])
        assert nested.is_subset([], [1])
        assert not nested.is_subset([1], [1.0], strict=True)


class TestBuilding:
    """Test helpers that build new lists"""

    def test_collapse(self):
        """Test collapsing lists of lists."""
        assert nested.collapse([[1, 2], 'skip', (3,), [4]]) == [1, 2, 3, 4]

    def test_cross_join(self):
        """Test every combination is produced in order."""
        assert nested.cross_join([1, 2], ['a', 'b']) == [[1, 'a'], [1, 'b'], [2, 'a'], [2, 'b']]
        assert nested.cross_join([1], []) == []

    def test_prepend_list(self):
        """Test prepending to a list returns a new list."""
        items = [2, 3]
        assert nested.prepend(items, 1) == [1, 2, 3]
        assert items == [2, 3]

    def test_prepend_mapping(self):
        """Test prepending to a mapping puts the key first."""
        result = nested.prepend({'b': 2, 'a': 0}, 1, 'a')
        assert result == {'a': 1, 'b': 2}
        assert list(result) == ['a', 'b']

    def test_prepend_mapping_requires_key(self):
        """Test prepending to a mapping without a key fails."""
        with pytest.raises(ValueError):
            nested.prepend({'a': 1}, 2)

    def test_insert(self):
        """Test inserting values in place."""
        items = ['a', 'd']
        nested.insert(items, 1, 'b', 'c')
        assert items == ['a', 'b', 'c', 'd']
        nested.insert(items, 10, 'e')
        assert items[-1] == 'e'
