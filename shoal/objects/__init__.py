from .channel import *
from .enums import *
from .flags import *
from .guild import *
from .member import *
from .message import *
from .role import *
from .user import *
from .voice_state import *
