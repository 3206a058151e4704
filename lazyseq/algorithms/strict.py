from lazyseq.core import nil, cons
from lazyseq.step import Cons

# Everything in here has to reach the end of the list before it can
# answer, so none of it terminates on an infinite list.


def length(xs):
    count = 0
    for _ in xs:
        count += 1
    return count


def reverse(xs):
    acc = nil()
    for x in xs:
        acc = cons(x, acc)
    return acc


def last(xs):
    step = xs.step()
    if not step:
        return None
    while (next_step := step.tail.step()):
        step = next_step
    return step.head


def init(xs):
    """All but the last element, or None for an empty list"""
    match reverse(xs).step():
        case Cons(_, rest):
            return reverse(rest)
    return None
