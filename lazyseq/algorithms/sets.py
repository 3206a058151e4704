import operator

from lazyseq.core import LazyList, append
from lazyseq.step import NIL, Cons
from .transform import filter, nub_by


def delete_by(eq, x, xs):
    """Lazily remove the first element of xs equal to x under eq"""
    def go():
        match xs.step():
            case Cons(head, tail):
                if eq(x, head):
                    return tail.step()
                return Cons(head, delete_by(eq, x, tail))
        return NIL

    return LazyList.defer(go)


def delete(x, xs):
    return delete_by(operator.eq, x, xs)


def _delete_each(eq, pending, xs):
    # Removes one element of xs per entry of pending, the same as
    # deleting each entry in turn, but as a single flat walk.
    # pending is never mutated; later layers get their own copy.
    def go(xs, pending):
        step = xs.step()
        while step:
            for i, y in enumerate(pending):
                if eq(y, step.head):
                    pending = pending[:i] + pending[i+1:]
                    break
            else:
                tail, rest = step.tail, pending
                return Cons(step.head, LazyList.defer(lambda: go(tail, rest)))
            step = step.tail.step()
        return NIL

    return LazyList.defer(lambda: go(xs, pending))


def difference(xs, ys):
    """
    Multiset difference, written xs \\\\ ys elsewhere.

    Each element of ys removes at most one matching element of xs.  ys
    is walked immediately and must be finite.
    """
    return _delete_each(operator.eq, list(ys), xs)


def intersect_by(eq, xs, ys):
    return filter(lambda x: any(eq(x, y) for y in ys), xs)


def intersect(xs, ys):
    return intersect_by(operator.eq, xs, ys)


def union_by(eq, xs, ys):
    """
    xs followed by the distinct elements of ys that aren't in xs.

    Duplicates already within xs are kept.
    """
    # Only reached once xs has run out, so xs is finite by then
    extra = LazyList.defer(lambda: _delete_each(eq, list(xs), nub_by(eq, ys)).step())
    return append(xs, extra)


def union(xs, ys):
    return union_by(operator.eq, xs, ys)


def _default_cmp(a, b):
    return (a > b) - (a < b)


def insert_by(cmp, x, xs):
    """
    Insert x into xs, which should already be sorted according to cmp.

    x goes before the first element it does not compare greater than.
    cmp(a, b) returns a negative, zero or positive number the way
    functools.cmp_to_key expects.
    """
    def go():
        match xs.step():
            case Cons(head, tail) if cmp(x, head) > 0:
                return Cons(head, insert_by(cmp, x, tail))
        return Cons(x, xs)

    return LazyList.defer(go)


def insert(x, xs):
    return insert_by(_default_cmp, x, xs)
