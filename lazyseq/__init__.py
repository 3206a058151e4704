from .errors import *
from .thunk import Thunk, defer, force
from .step import Nil, Cons, NIL
from .core import *
from .fixpoint import *
from .algorithms import *
from .instances import *
