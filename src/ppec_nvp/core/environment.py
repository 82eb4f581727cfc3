"""
Layered lookup of the ``PPEC_*`` settings.

Sources, lowest precedence first: the process environment (or an explicit
``base``), a ``.env`` file that only fills gaps, and caller overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Mapping, MutableMapping, Optional, Tuple


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    text = line.strip()
    if text.startswith("export "):
        text = text[len("export "):].lstrip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    if not sep:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return key.strip(), value


def _iter_env_file(path: Path) -> Iterator[Tuple[str, str]]:
    if not path.is_file():
        return
    for line in path.read_text(encoding="utf-8").splitlines():
        pair = _parse_line(line)
        if pair is not None:
            yield pair


def _fill_missing(target: MutableMapping[str, str], path: Path) -> None:
    for key, value in _iter_env_file(path):
        target.setdefault(key, value)


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Copy settings from ``path`` into ``environ`` (``os.environ`` by default)
    without replacing keys that are already set, and return the result.
    """
    target = os.environ if environ is None else environ
    _fill_missing(target, Path(path))
    return dict(target)


@dataclass(frozen=True)
class NvpEnvironment:
    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> NvpEnvironment:
    """
    Merge ``base`` (``os.environ`` when ``None``), ``env_file`` and
    ``overrides`` into one :class:`NvpEnvironment`. Pass ``env_file=None`` to
    skip the file.
    """
    variables: Dict[str, str] = dict(os.environ if base is None else base)
    if env_file is not None:
        _fill_missing(variables, Path(env_file))
    variables.update(overrides or {})
    return NvpEnvironment(variables=variables)
