"""
Generic behaviour for LazyList: mapping, folding, traversing,
comprehension and choice.

Equality, ordering and appending live on LazyList itself (see
lazyseq.core); this module has the rest, as plain functions over lists.
"""

import operator
import dataclasses as dc
from collections.abc import Callable

from lazyseq.thunk import Thunk
from lazyseq.core import nil, cons, singleton, append, map
from lazyseq.step import Cons
from lazyseq.algorithms.transform import concat_map
from lazyseq.algorithms.strict import reverse


# Folds.  All of these are strict in the spine of the list.

def fold_left(f, acc, xs):
    for x in xs:
        acc = f(acc, x)
    return acc


def fold_right(f, acc, xs):
    # Done back to front over the reversed list so long lists don't run
    # out of stack.
    for x in reverse(xs):
        acc = f(x, acc)
    return acc


def fold_map(f, xs, empty, combine=operator.add):
    return fold_left(lambda acc, x: combine(acc, f(x)), empty, xs)


def fold_right_lazy(f, acc, xs):
    """
    Right fold where f receives the rest of the fold as a Thunk.

    If f never forces the thunk, the fold stops there, so this works on
    infinite lists as long as f eventually doesn't look further.
    """
    def go(xs):
        match xs.step():
            case Cons(head, tail):
                return f(head, Thunk(lambda: go(tail)))
        return acc

    return go(xs)


# Comprehension.

pure = singleton

def bind(xs, f):
    return concat_map(f, xs)

def apply(fs, xs):
    """Every function in fs applied to every element of xs, fs outermost"""
    return concat_map(lambda f: map(f, xs), fs)

def lift2(f, xs, ys):
    return concat_map(lambda x: map(lambda y: f(x, y), ys), xs)


# Choice.  This is just concatenation: everything from the left, then
# everything from the right.  Nothing is ever backtracked.

empty = nil

def alt(xs, ys):
    return append(xs, ys)


# Traversal

@dc.dataclass(frozen=True)
class Applicative:
    """
    An effect that traverse can rebuild a list inside of.

    pure(x) wraps a plain value, map(f, fa) transforms the value inside,
    and lift2(f, fa, fb) combines two effects left then right.
    """
    pure: Callable
    map: Callable
    lift2: Callable


def _optional_map(f, a):
    return None if a is None else f(a)

def _optional_lift2(f, a, b):
    if a is None or b is None:
        return None
    return f(a, b)

# None is absence, anything else is present
OPTIONAL = Applicative(lambda x: x, _optional_map, _optional_lift2)

LAZY_LIST = Applicative(pure, map, lift2)


def traverse(app, f, xs):
    """
    Apply the effectful f to each element and collect the results into
    a single effect producing a LazyList.

    f is called on the elements in order, and the effects are combined
    left to right.  Strict in the spine of xs.
    """
    acc = app.pure(nil())
    for x in xs:
        acc = app.lift2(lambda built, y: cons(y, built), acc, f(x))
    # The list was built back to front
    return app.map(reverse, acc)


def sequence(app, xs):
    return traverse(app, lambda fx: fx, xs)
