"""
Extended operations on immutable 8-bit byte strings: search, slicing,
splitting, substitution, case mapping and conversions.
"""

# pylint: disable=redefined-builtin

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('bytekit')

# relative
from .config import CONFIG
from .errors import ByteStringError, InvalidArgument, InvalidString, NotFound
from .buffer import (Buffer, as_bytes, as_unit, blit, copy, create, fill, get,
                     init, length, make, set, sub, unsafe_blit, unsafe_fill,
                     unsafe_get, unsafe_set)
from .search import (contains, contains_from, ends_with, exists, find, index,
                     index_from, rcontains_from, rindex, rindex_from,
                     starts_with)
from .slicing import lchop, rchop, slice, strip
from .splitting import concat, join, nsplit, split
from .substitute import replace, replace_chars
from .casing import capitalize, lowercase, uncapitalize, uppercase
from .transforms import escaped, fold_left, fold_right, iter, map
from .convert import (compare, enum, explode, implode, of_char, of_enum,
                      of_float, of_int, to_float, to_int)


# ---------------------------------------------------------------------------- #

# version
__version__ = version('bytekit')
