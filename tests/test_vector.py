import pytest

from cfkit.vector import DEFAULT_CAPACITY, Vector


def test_default_capacity():
    assert Vector().capacity == DEFAULT_CAPACITY == 128


def test_push_back_and_front_order():
    vec = Vector(4)
    vec.push_back(2)
    vec.push_back(3)
    vec.push_front(1)
    vec.push_front(0)
    assert list(vec) == [0, 1, 2, 3]
    assert vec.front() == 0
    assert vec.back() == 3
    assert len(vec) == 4


def test_pops_return_ends():
    vec = Vector(4)
    for item in "abc":
        vec.push_back(item)
    assert vec.pop_front() == "a"
    assert vec.pop_back() == "c"
    assert list(vec) == ["b"]


def test_capacity_doubles_when_full():
    initial = 4
    vec = Vector(initial)
    for item in range(initial):
        vec.push_back(item)
    assert vec.capacity == initial
    vec.push_front(-1)
    assert vec.capacity == initial * 2
    assert list(vec) == [-1, 0, 1, 2, 3]


def test_reserve_never_shrinks():
    vec = Vector(8)
    vec.reserve(2)
    assert vec.capacity == 8
    vec.reserve(20)
    assert vec.capacity == 20


def test_resize_fills_and_grows():
    vec = Vector(2)
    vec.push_back("x")
    vec.resize(5, "f")
    assert list(vec) == ["x", "f", "f", "f", "f"]
    assert vec.capacity >= 5


def test_resize_smaller_keeps_items():
    vec = Vector(4)
    for item in range(3):
        vec.push_back(item)
    vec.resize(1, 9)
    assert list(vec) == [0, 1, 2]


def test_clear_keeps_capacity():
    vec = Vector(2)
    for item in range(5):
        vec.push_back(item)
    capacity = vec.capacity
    vec.clear()
    assert len(vec) == 0
    assert vec.capacity == capacity


def test_empty_access_raises():
    vec = Vector()
    for op in (vec.pop_back, vec.pop_front, vec.back, vec.front):
        with pytest.raises(IndexError):
            op()


def test_none_rejected():
    vec = Vector()
    with pytest.raises(ValueError):
        vec.push_back(None)
    with pytest.raises(ValueError):
        vec.push_front(None)
    with pytest.raises(ValueError):
        vec.resize(3, None)


def test_bad_capacity_rejected():
    with pytest.raises(ValueError):
        Vector(0)