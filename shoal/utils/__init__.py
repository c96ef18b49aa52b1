from .color import *
from .snowflake import *
