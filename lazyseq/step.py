# One layer of a lazy list: either the end, or a head and the (possibly
# unforced) rest of the list.

class Nil:
    __slots__ = ()
    __match_args__ = ()

    def __repr__(self):
        return 'Nil()'

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, Nil)

    def __hash__(self):
        return hash(Nil)

# Nil carries no data, so everything shares this one
NIL = Nil()


class Cons:
    __slots__ = 'head', 'tail'
    __match_args__ = 'head', 'tail'

    def __init__(self, head, tail):
        self.head = head
        self.tail = tail

    def __repr__(self):
        return f'Cons({self.head!r}, {self.tail!r})'

    def __bool__(self):
        return True

    def __eq__(self, other):
        if not isinstance(other, Cons):
            return NotImplemented
        return self.head == other.head and self.tail == other.tail

    __hash__ = None


Step = Nil | Cons
