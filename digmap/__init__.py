"""digmap - nested YAML/JSON mappings with ruby-like dig access"""

import logging

from ._version import version as __version__
from .decoding import decode_with, from_json, from_yaml, load_json, load_yaml, to_json, to_yaml
from .errors import MalformedInputError
from .mapping import Mapping, Scalar, Value, dup_value, normalize, normalize_value, stringify_key
from .merge import MergeOption, MergeOptions, merge, with_nillify, with_overwrite


logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MalformedInputError",
    "Mapping",
    "MergeOption",
    "MergeOptions",
    "Scalar",
    "Value",
    "__version__",
    "decode_with",
    "dup_value",
    "from_json",
    "from_yaml",
    "load_json",
    "load_yaml",
    "merge",
    "normalize",
    "normalize_value",
    "stringify_key",
    "to_json",
    "to_yaml",
    "with_nillify",
    "with_overwrite",
]
