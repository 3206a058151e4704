from .indexing import *
from .slicing import *
from .transform import *
from .sets import *
from .edits import *
from .strict import *
