from lazyseq.core import LazyList, cons, nil
from lazyseq.step import NIL, Cons

# Positional edits.  Indices that don't exist are not errors: inserting
# past the end appends, while every other edit leaves the list as it
# was.


def _edit_at(n, xs, edit):
    # edit(head, tail) gives the Step that replaces position n
    if n < 0:
        return xs

    def go():
        match xs.step():
            case Cons(head, tail):
                if n == 0:
                    return edit(head, tail)
                return Cons(head, _edit_at(n - 1, tail, edit))
        return NIL

    return LazyList.defer(go)


def insert_at(n, x, xs):
    """Insert x so that it ends up at position n, or last if n is too big"""
    if n == 0:
        return cons(x, xs)

    def go():
        match xs.step():
            case Cons(head, tail):
                return Cons(head, insert_at(n - 1, x, tail))
        return Cons(x, nil())

    return LazyList.defer(go)


def delete_at(n, xs):
    return _edit_at(n, xs, lambda head, tail: tail.step())


def update_at(n, x, xs):
    return _edit_at(n, xs, lambda head, tail: Cons(x, tail))


def modify_at(n, f, xs):
    return _edit_at(n, xs, lambda head, tail: Cons(f(head), tail))


def alter_at(n, f, xs):
    """
    Replace the element at n with f of it, or delete it if f gives None.
    """
    def edit(head, tail):
        if (value := f(head)) is None:
            return tail.step()
        return Cons(value, tail)

    return _edit_at(n, xs, edit)
