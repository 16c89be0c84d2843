from .misc import *
from .types import *

from . import misc
from . import types
