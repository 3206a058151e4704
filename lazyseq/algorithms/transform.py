import operator

from lazyseq.core import LazyList, nil, cons, append, map, lazy_list
from lazyseq.step import NIL, Cons
from .slicing import span


def filter(p, xs):
    """
    Lazily keep the elements satisfying p.

    Forcing a layer walks as far into xs as it takes to find the next
    match, and no further.
    """
    def go():
        step = xs.step()
        while step:
            if p(step.head):
                return Cons(step.head, filter(p, step.tail))
            step = step.tail.step()
        return NIL

    return LazyList.defer(go)


def map_maybe(f, xs):
    """Lazily map f over xs, dropping elements where f gives None"""
    def go():
        step = xs.step()
        while step:
            if (value := f(step.head)) is not None:
                return Cons(value, map_maybe(f, step.tail))
            step = step.tail.step()
        return NIL

    return LazyList.defer(go)


def cat_optionals(xs):
    return map_maybe(lambda x: x, xs)


def partition(p, xs):
    return filter(p, xs), filter(lambda x: not p(x), xs)


def zip_with(f, xs, ys):
    def go():
        match xs.step(), ys.step():
            case Cons(x, xt), Cons(y, yt):
                return Cons(f(x, y), zip_with(f, xt, yt))
        return NIL

    return LazyList.defer(go)


def zip(xs, ys):
    return zip_with(lambda x, y: (x, y), xs, ys)


def unzip(pairs):
    return map(operator.itemgetter(0), pairs), map(operator.itemgetter(1), pairs)


def concat(xss):
    """Flatten a list of lists, exhausting each inner list in turn"""
    def go():
        outer = xss
        # Empty inner lists are skipped here rather than by recursing
        while True:
            match outer.step():
                case Cons(inner, outer):
                    match inner.step():
                        case Cons(head, tail):
                            return Cons(head, append(tail, concat(outer)))
                case _:
                    return NIL

    return LazyList.defer(go)


def concat_map(f, xs):
    return concat(map(f, xs))


def transpose(xss):
    """
    Swap rows and columns.

    Rows of different lengths are allowed; a short row simply stops
    contributing to later columns.  The outer list is walked in full
    when the first column is forced, so it must be finite; the rows
    themselves are only forced one layer per column.
    """
    def go(rows):
        column, rest = [], []
        for row in rows:
            match row.step():
                case Cons(x, tail):
                    column.append(x)
                    rest.append(tail)
        if not column:
            return NIL
        return Cons(lazy_list(column), LazyList.defer(lambda: go(rest)))

    return LazyList.defer(lambda: go(xss))


def scanl(f, acc, xs):
    """Running fold of xs; the starting value is not included"""
    def go():
        match xs.step():
            case Cons(head, tail):
                new_acc = f(acc, head)
                return Cons(new_acc, scanl(f, new_acc, tail))
        return NIL

    return LazyList.defer(go)


def intersperse(sep, xs):
    def prepend_to_all(xs):
        def go():
            match xs.step():
                case Cons(head, tail):
                    return Cons(sep, cons(head, prepend_to_all(tail)))
            return NIL
        return LazyList.defer(go)

    def go():
        match xs.step():
            case Cons(head, tail):
                return Cons(head, prepend_to_all(tail))
        return NIL

    return LazyList.defer(go)


def group_by(eq, xs):
    """
    Split xs into runs of consecutive elements equal under eq.

    Each run is compared against its first element, and is itself a
    lazy list.
    """
    def go():
        match xs.step():
            case Cons(head, tail):
                run, rest = span(lambda y: eq(head, y), tail)
                return Cons(cons(head, run), group_by(eq, rest))
        return NIL

    return LazyList.defer(go)


def group(xs):
    return group_by(operator.eq, xs)


def nub_by(eq, xs):
    """
    Drop every element equal under eq to one kept before it.

    Quadratic: each candidate is checked against everything kept so far.
    """
    def go(xs, kept):
        step = xs.step()
        while step:
            x = step.head
            if not any(eq(k, x) for k in kept):
                kept = cons(x, kept)
                return Cons(x, LazyList.defer(lambda: go(step.tail, kept)))
            step = step.tail.step()
        return NIL

    return LazyList.defer(lambda: go(xs, nil()))


def nub(xs):
    return nub_by(operator.eq, xs)
