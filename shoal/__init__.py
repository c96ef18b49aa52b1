from __future__ import annotations

from . import utils
from .cache import *
from .client import *
from .errors import *
from .http import *
from .managers import *
from .objects import *
from .state import *

__version__ = "0.1.0"
