from lazyseq.core import LazyList, nil, step_at
from lazyseq.step import NIL, Cons


def drop(n, xs):
    """
    Everything after the first n elements.

    Nothing is forced until the result is, at which point all n skipped
    layers are forced at once.  The remainder is shared with xs, not
    copied.
    """
    return LazyList.defer(lambda: step_at(n, xs))


def take(n, xs):
    if n <= 0:
        return nil()

    def go():
        match xs.step():
            case Cons(head, tail):
                return Cons(head, take(n - 1, tail))
        return NIL

    return LazyList.defer(go)


def drop_while(p, xs):
    def go():
        step = xs.step()
        while step and p(step.head):
            step = step.tail.step()
        return step

    return LazyList.defer(go)


def take_while(p, xs):
    def go():
        match xs.step():
            case Cons(head, tail) if p(head):
                return Cons(head, take_while(p, tail))
        return NIL

    return LazyList.defer(go)


def span(p, xs):
    """Split xs into its longest prefix satisfying p, and the rest"""
    return take_while(p, xs), drop_while(p, xs)


def slice_(start, end, xs):
    """Elements from position start up to but not including end"""
    return take(end - max(start, 0), drop(start, xs))


def every(n, xs):
    """Every nth element, starting with the first"""
    def go():
        match xs.step():
            case Cons(head, tail):
                return Cons(head, every(n, drop(n - 1, tail)))
        return NIL

    return LazyList.defer(go)


def strip_prefix(prefix, xs):
    """What follows prefix in xs, or None if xs doesn't start with it"""
    for p in prefix:
        match xs.step():
            case Cons(head, xs) if head == p:
                pass
            case _:
                return None
    return xs
