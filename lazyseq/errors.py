def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class LazyListError(Exception):
    pass


# Also a RecursionError so that code already guarding against runaway
# recursion catches non-productive fixed points the same way.
class ReentrantForceError(LazyListError, RecursionError):
    def __init__(self, message, thunk=None):
        super().__init__(message)
        self.thunk = thunk

    reentered = _message('Thunk forced during its own evaluation: {thunk!r}')
