"""
Self-referential constructors.

Each list here is defined in terms of itself.  The trick is always the
same: create the LazyList first with a computation that closes over a
name that is only bound afterwards, and never force it while it is being
set up.  As long as every layer can be produced before its own tail is
looked at, the result is productive and can be forced one layer at a
time forever.
"""

from lazyseq.core import LazyList, nil, cons, map, append, null
from lazyseq.step import NIL, Cons
from lazyseq.errors import ReentrantForceError


def fix(f):
    """
    The list xs such that xs == f(xs).

    f receives the list being defined and must produce a first layer
    without forcing it; otherwise forcing the result raises
    ReentrantForceError.
    """
    result = None

    def go():
        # Only None while f itself is still running
        if result is None:
            raise ReentrantForceError.reentered(xs.thunk, thunk=xs.thunk)
        return result.step()

    xs = LazyList.defer(go)
    result = f(xs)
    return xs


def repeat(x):
    def go():
        return Cons(x, xs)

    xs = LazyList.defer(go)
    return xs


def iterate(f, x):
    # Every element after the first is f of the element before it, read
    # back out of this same list, so f runs once per element.
    return fix(lambda xs: cons(x, map(f, xs)))


def cycle(xs):
    def go():
        # The fixed point of an empty list never produces a Cons
        if null(xs):
            return NIL
        return fix(lambda ys: append(xs, ys)).step()

    return LazyList.defer(go)


def unfold(f, seed):
    """
    Build a list from a seed.

    f(seed) returns None to end the list, or a (value, next_seed) pair.
    f is not called on next_seed until the tail is forced.
    """
    def go():
        step = f(seed)
        match step:
            case None:
                return NIL
            case (value, next_seed):
                return Cons(value, unfold(f, next_seed))

        raise TypeError(
            f'unfold step must return None or a (value, seed) pair, '
            f'not {type(step).__name__}'
        )

    return LazyList.defer(go)


def replicate(n, x):
    from lazyseq.algorithms.slicing import take
    return take(n, repeat(x))


def range_(start, end):
    """Every integer from start to end, both ends included"""
    delta = 1 if start <= end else -1

    def go(n):
        if n == end:
            return Cons(n, nil())
        return Cons(n, LazyList.defer(lambda: go(n + delta)))

    return LazyList.defer(lambda: go(start))
