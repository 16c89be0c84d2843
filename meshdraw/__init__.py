import logging

from . import errors
from . import util

from .config import DrawConfig
from .errors import MeshdrawError, IndexOutOfRange, DegenerateTransform
from .mesh import Mesh

from .rendering import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

# pylama:ignore=W0611
