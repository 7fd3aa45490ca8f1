import pytest

from symform.algebra import Variable, Variables


@pytest.fixture
def xyz():
    return Variable('x'), Variable('y'), Variable('z')


def test_insert_is_idempotent(xyz):
    x, y, _ = xyz
    V = Variables()
    V.insert(x)
    V.insert(y)
    V.insert(x)
    assert len(V) == 2
    assert list(V) == [x, y]


def test_insert_rejects_non_variables():
    with pytest.raises(ValueError):
        Variables().insert('x')


def test_iteration_order_is_by_id(xyz):
    x, y, z = xyz
    assert list(Variables([z, y, x])) == [x, y, z]
    assert str(Variables([z, x])) == '{x, z}'


def test_equality_and_hash_ignore_insertion_order(xyz):
    x, y, z = xyz
    V, W = Variables([x, y, z]), Variables([z, x, y])
    assert V == W
    assert hash(V) == hash(W)
    assert V != Variables([x, y])


def test_same_name_different_variables():
    x, x_prime = Variable('x'), Variable('x')
    V = Variables([x, x_prime])
    assert len(V) == 2
    assert str(V) == '{x, x}'
    assert Variables([x]) != Variables([x_prime])


def test_union(xyz):
    x, y, z = xyz
    V = Variables([x])
    W = Variables([y, z])
    assert V + W == Variables([x, y, z])
    assert V + y == Variables([x, y])
    assert V == Variables([x])


def test_difference(xyz):
    x, y, z = xyz
    V = Variables([x, y, z])
    assert V - Variables([x, z]) == Variables([y])
    assert V - y == Variables([x, z])
    assert V - Variables() == V
    assert len(V) == 3


def test_in_place_operators(xyz):
    x, y, z = xyz
    V = Variables([x])
    V += Variables([y, z])
    V -= x
    assert V == Variables([y, z])


def test_contains(xyz):
    x, y, z = xyz
    V = Variables([x, y])
    assert x in V
    assert z not in V
    assert 'x' not in V


def test_subset(xyz):
    x, y, z = xyz
    assert Variables([x]).is_subset_of(Variables([x, y]))
    assert Variables([x, y]).is_superset_of(Variables([y]))
    assert not Variables([x, z]).is_subset_of(Variables([x, y]))
    assert Variables().is_subset_of(Variables())
