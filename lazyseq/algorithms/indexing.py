from lazyseq.core import step_at
from lazyseq.step import Cons


def index(xs, i):
    """The element at position i, or None if there isn't one"""
    if i < 0:
        return None
    match step_at(i, xs):
        case Cons(head, _):
            return head
    return None


def find(p, xs):
    for x in xs:
        if p(x):
            return x
    return None

def find_index(p, xs):
    for i, x in enumerate(xs):
        if p(x):
            return i
    return None

def find_last_index(p, xs):
    # Strict: there is no way to know an index is the last without
    # reaching the end.
    found = None
    for i, x in enumerate(xs):
        if p(x):
            found = i
    return found


def elem(x, xs):
    return find_index(lambda y: y == x, xs) is not None

def elem_index(x, xs):
    return find_index(lambda y: y == x, xs)

def elem_last_index(x, xs):
    return find_last_index(lambda y: y == x, xs)
