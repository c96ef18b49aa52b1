from .base import *
from .channel import *
from .role import *
from .user import *
from .voice_state import *
