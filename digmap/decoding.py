"""JSON and YAML hooks producing normalized mappings."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping as AbcMapping
from typing import IO, TYPE_CHECKING, Any, TypeAlias

import yaml

from .errors import MalformedInputError
from .mapping import Mapping, normalize


if TYPE_CHECKING:
    from collections.abc import Callable


log = logging.getLogger(__name__)

_JSON_ERRORS = (json.JSONDecodeError, UnicodeDecodeError)
_YAML_ERRORS = (yaml.YAMLError, UnicodeDecodeError)

YamlLoader: TypeAlias = type[yaml.BaseLoader | yaml.SafeLoader | yaml.FullLoader | yaml.Loader | yaml.UnsafeLoader]


def decode_with(
    decode: Callable[[], Any],
    errors: tuple[type[Exception], ...] = (ValueError,),
) -> Mapping:
    """Run a decoder callback and normalize its result into a ``Mapping``.

    Exceptions of the given types raised by ``decode`` are re-raised as
    :class:`MalformedInputError`. A null document gives an empty mapping.
    """
    try:
        decoded = decode()
    except errors as exc:
        log.debug("failed to decode document: %s", exc)
        msg = f"malformed input: {exc}"
        raise MalformedInputError(msg) from exc

    if decoded is not None and not isinstance(decoded, AbcMapping):
        msg = f"document root must be a mapping, got {type(decoded).__name__}"
        raise MalformedInputError(msg)
    return normalize(decoded)


def from_json(data: str | bytes, *, json_decoder: Callable[[str | bytes], Any] = json.loads) -> Mapping:
    """Decode a JSON document into a ``Mapping``."""
    return decode_with(lambda: json_decoder(data), _JSON_ERRORS)


def load_json(fp: IO[str] | IO[bytes], *, json_decoder: Callable[[str | bytes], Any] = json.loads) -> Mapping:
    """Read and decode a JSON document from a file object."""
    return from_json(fp.read(), json_decoder=json_decoder)


def from_yaml(data: str | bytes | IO[str] | IO[bytes], *, loader: YamlLoader = yaml.SafeLoader) -> Mapping:
    """Decode a YAML document into a ``Mapping``.

    Non-string keys such as integers or booleans are converted to strings.
    """
    return decode_with(lambda: yaml.load(data, Loader=loader), _YAML_ERRORS)


load_yaml = from_yaml


def to_json(mapping: Mapping, **kwargs: Any) -> str:
    """Encode a mapping as JSON. Keyword arguments go to :func:`json.dumps`."""
    return json.dumps(mapping.to_dict(), **kwargs)


def to_yaml(mapping: Mapping, **kwargs: Any) -> str:
    """Encode a mapping as YAML. Keyword arguments go to :func:`yaml.safe_dump`."""
    kwargs.setdefault("default_flow_style", False)
    kwargs.setdefault("sort_keys", False)
    return yaml.safe_dump(mapping.to_dict(), **kwargs)
