"""Recursive merge of one mapping into another."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .mapping import Mapping, dup_value


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MergeOptions:
    """Policy for :func:`merge`.

    Parameters
    ----------
    overwrite
        Replace values already present in the target. Nested mappings present
        on both sides are merged recursively regardless.
    nillify
        Set the target key to None when the source value is None. Without it
        None values in the source are skipped.
    """

    overwrite: bool = False
    nillify: bool = False


MergeOption = Callable[[MergeOptions], MergeOptions]


def with_overwrite() -> MergeOption:
    """Let source values replace existing target values."""
    return lambda options: dataclasses.replace(options, overwrite=True)


def with_nillify() -> MergeOption:
    """Let None values in the source clear target values."""
    return lambda options: dataclasses.replace(options, nillify=True)


def _resolve(options: tuple[MergeOption | MergeOptions, ...]) -> MergeOptions:
    resolved = MergeOptions()
    for option in options:
        if isinstance(option, MergeOptions):
            resolved = dataclasses.replace(
                resolved,
                overwrite=resolved.overwrite or option.overwrite,
                nillify=resolved.nillify or option.nillify,
            )
        else:
            resolved = option(resolved)
    return resolved


def merge(target: Mapping, source: Mapping, *options: MergeOption | MergeOptions) -> Mapping:
    """Fold ``source`` into ``target`` in place and return ``target``.

    Values are copied out of ``source`` before insertion, so the two trees
    never share containers. Sequences are replaced as a whole, never
    concatenated.
    """
    _merge(target, source, _resolve(options))
    return target


def _merge(target: Mapping, source: Mapping, options: MergeOptions) -> None:
    for key, value in source.items():
        existing = target.get(key)

        if isinstance(value, Mapping):
            if existing is None:
                target[key] = value.dup()
            elif isinstance(existing, Mapping):
                _merge(existing, value, options)
            elif options.overwrite:
                log.debug("overwriting %s value at %r with a mapping", type(existing).__name__, key)
                target[key] = value.dup()
            continue

        if value is None:
            if options.nillify:
                log.debug("nillifying %r", key)
                target[key] = None
            continue

        if existing is None:
            target[key] = dup_value(value)
        elif options.overwrite:
            log.debug("overwriting %s value at %r", type(existing).__name__, key)
            target[key] = dup_value(value)
