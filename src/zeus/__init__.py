"""Unix-style file-management commands behind one subcommand dispatcher."""

from .commands import Cat as Cat
from .commands import Command as Command
from .commands import Create as Create
from .commands import Echo as Echo
from .commands import Grep as Grep
from .commands import Mkdir as Mkdir
from .commands import Rm as Rm
from .commands import Rmdir as Rmdir
from .commands import Stat as Stat
from .config import Config as Config
from .handlers import dispatch as dispatch
from .search import MatchRecord as MatchRecord
from .search import search as search
