from lazyseq.core import LazyList, nil, cons, head, tail, uncons, null, lazy_list, step_at
from lazyseq.fixpoint import *
from lazyseq.algorithms import take, drop, length, zip_with
from lazyseq.errors import ReentrantForceError

from pytest import raises


def tail_of(xs):
    return LazyList.defer(lambda: tail(xs).step())

def zip_add(xs, ys):
    return zip_with(lambda a, b: a + b, xs, ys)


def test_repeat():
    assert list(take(3, repeat(5))) == [5, 5, 5]
    assert list(take(0, repeat(5))) == []
    for n in range(10):
        assert list(take(n, repeat('x'))) == ['x'] * n

def test_repeat_is_one_cell():
    xs = repeat(1)
    assert tail(xs) is xs
    assert step_at(1000, xs) is xs.step()

def test_iterate(counter):
    assert list(take(5, iterate(lambda n: n + 1, 0))) == [0, 1, 2, 3, 4]

    def double(n):
        counter()
        return n * 2

    xs = iterate(double, 1)
    assert list(take(11, xs)) == [2 ** i for i in range(11)]
    assert list(take(11, xs)) == [2 ** i for i in range(11)]
    assert counter.count == 10

def test_iterate_deep():
    assert head(drop(5000, iterate(lambda n: n + 1, 0))) == 5000

def test_cycle():
    assert list(take(7, cycle(lazy_list([1, 2, 3])))) == [1, 2, 3, 1, 2, 3, 1]
    assert list(take(3, cycle(lazy_list(['a'])))) == ['a', 'a', 'a']

def test_cycle_empty():
    assert null(cycle(nil()))
    assert list(cycle(nil())) == []

def test_cycle_lazy(bomb):
    cycle(bomb)
    assert head(cycle(cons(1, bomb))) == 1

def test_cycle_forces_source_once(counter):
    def source():
        for i in range(3):
            counter()
            yield i

    xs = cycle(lazy_list(source()))
    assert list(take(30, xs)) == [0, 1, 2] * 10
    assert counter.count == 3

def test_productive():
    assert uncons(repeat(1))[0] == 1
    assert uncons(iterate(lambda x: x, 'a'))[0] == 'a'
    assert uncons(cycle(lazy_list([7, 8])))[0] == 7

def test_unfold():
    def countdown(n):
        if n == 0:
            return None
        return n, n - 1

    assert list(unfold(countdown, 5)) == [5, 4, 3, 2, 1]
    assert list(unfold(countdown, 0)) == []

def test_unfold_lazy(counter):
    def naturals(n):
        counter()
        return n, n + 1

    xs = unfold(naturals, 0)
    assert counter.count == 0
    assert head(xs) == 0
    assert counter.count == 1
    assert list(take(4, xs)) == [0, 1, 2, 3]
    assert counter.count == 4

def test_unfold_bad_step():
    with raises(TypeError): unfold(lambda n: 'nope', 0).step()

def test_fix():
    ones = fix(lambda xs: cons(1, xs))
    assert list(take(4, ones)) == [1, 1, 1, 1]

    fibs = fix(lambda fs: cons(0, cons(1, zip_add(fs, tail_of(fs)))))
    assert list(take(10, fibs)) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

def test_fix_unproductive():
    xs = fix(lambda xs: xs)
    with raises(ReentrantForceError): xs.step()
    with raises(RecursionError): list(xs)

def test_fix_forced_during_definition():
    with raises(ReentrantForceError): fix(lambda xs: cons(head(xs), nil()))

def test_replicate():
    assert list(replicate(3, 'a')) == ['a', 'a', 'a']
    assert list(replicate(0, 'a')) == []
    assert list(replicate(-2, 'a')) == []

def test_range():
    assert list(range_(1, 5)) == [1, 2, 3, 4, 5]
    assert list(range_(3, 3)) == [3]
    assert list(range_(3, -1)) == [3, 2, 1, 0, -1]
    assert length(range_(0, 9999)) == 10000