from lazyseq.thunk import Thunk
from lazyseq.step import NIL, Nil, Cons


class LazyList:
    """
    A persistent singly-linked list whose layers are computed on demand.

    A LazyList is nothing but a memoized thunk that produces one Step:
    either Nil, or a Cons whose tail is another LazyList.  Forcing a list
    evaluates exactly one layer, and evaluates it at most once no matter
    how many lists share it.
    """

    __slots__ = '_thunk',

    def __init__(self, thunk: Thunk):
        self._thunk = thunk

    @classmethod
    def defer(cls, compute):
        """Build a list whose first layer is the Step returned by compute"""
        return cls(Thunk(compute))

    @property
    def thunk(self):
        return self._thunk

    def step(self):
        return self._thunk.force()

    def __bool__(self):
        return bool(self.step())

    # Indirectly implemented as static method because it seems bound
    # generators retain a reference to self even if you reassign it, so
    # the head of an infinite list would never get GC'd while iterating.
    @staticmethod
    def _iter(xs):
        while True:
            match xs.step():
                case Cons(head, xs):
                    yield head
                case _:
                    return

    def __iter__(self):
        return self._iter(self)

    def __getitem__(self, key):
        from lazyseq.algorithms.slicing import drop, take, every

        if isinstance(key, slice):
            start = 0 if key.start is None else key.start
            stride = 1 if key.step is None else key.step
            if start < 0 or stride < 1 or (key.stop is not None and key.stop < 0):
                raise ValueError(
                    'LazyList slices need non-negative start and stop '
                    'and a positive step'
                )

            result = drop(start, self)
            if key.stop is not None:
                result = take(key.stop - start, result)
            if stride != 1:
                result = every(stride, result)
            return result

        if not isinstance(key, int):
            raise TypeError(
                f'LazyList indices must be integers or slices, '
                f'not {type(key).__name__}'
            )

        if key >= 0:
            match step_at(key, self):
                case Cons(head, _):
                    return head
        raise IndexError('LazyList index out of range')

    def __eq__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented

        xs, ys = self, other
        # Shared structure is equal to itself without walking it
        while xs.thunk is not ys.thunk:
            match xs.step(), ys.step():
                case Cons(x, xs), Cons(y, ys):
                    if not (x is y or x == y):
                        return False
                case Nil(), Nil():
                    return True
                case _:
                    return False
        return True

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return compare(self, other) >= 0

    def __add__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return append(self, other)

    def __repr__(self):
        # Only show what has already been computed.  Steps are tracked so
        # that a fully forced cycle is not printed forever.
        items = []
        seen = set()
        xs = self
        while xs.thunk.is_evaluated:
            match xs.step():
                case Cons(head, tail) as cell:
                    if id(cell) in seen:
                        break
                    seen.add(id(cell))
                    items.append(repr(head))
                    xs = tail
                case _:
                    return f'lazy_list([{", ".join(items)}])'
        items.append('...')
        return f'lazy_list([{", ".join(items)}])'


def nil():
    return LazyList(Thunk.evaluated(NIL))

def cons(x, xs):
    return LazyList(Thunk.evaluated(Cons(x, xs)))

def singleton(x):
    return cons(x, nil())


def uncons(xs):
    match xs.step():
        case Cons(head, tail):
            return head, tail
    return None

def head(xs):
    match xs.step():
        case Cons(head, _):
            return head
    return None

def tail(xs):
    match xs.step():
        case Cons(_, tail):
            return tail
    return None

def null(xs):
    return not xs.step()


def step_at(n, xs):
    """Force forward n layers and return the Step found there"""
    step = xs.step()
    while n > 0 and step:
        step = step.tail.step()
        n -= 1
    return step


def lazy_list(iterable):
    """
    Build a LazyList that pulls from iterable only as layers are forced.

    Each element is pulled exactly once, however many lists end up
    sharing the resulting nodes.
    """
    iterator = iter(iterable)

    def pull():
        try:
            item = next(iterator)
        except StopIteration:
            return NIL
        return Cons(item, LazyList.defer(pull))

    return LazyList.defer(pull)

from_iterable = lazy_list


def append(xs, ys):
    """
    Lazily concatenate two lists.

    Only the layers of xs are forced until xs runs out, after which the
    first layer of ys is handed back unchanged.
    """
    def go():
        match xs.step():
            case Cons(head, tail):
                return Cons(head, append(tail, ys))
        return ys.step()

    return LazyList.defer(go)


def compare(xs, ys):
    """Lexicographic comparison, Nil sorting before any Cons"""
    while xs.thunk is not ys.thunk:
        match xs.step(), ys.step():
            case Cons(x, xs), Cons(y, ys):
                if x < y:
                    return -1
                if y < x:
                    return 1
            case Nil(), Nil():
                return 0
            case Nil(), _:
                return -1
            case _:
                return 1
    return 0


def map(f, xs):
    """Lazily apply f to each element as its layer is demanded"""
    def go():
        match xs.step():
            case Cons(head, tail):
                return Cons(f(head), map(f, tail))
        return NIL

    return LazyList.defer(go)
