import os
from typing import IO, Any, TypeVar, TypedDict

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))


def resolve_config(config: T, default_config: U):
    _config = default_config.copy()
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config


def is_path(source: Any) -> bool:
    return isinstance(source, (str, bytes, os.PathLike))


def stream_name(stream: IO[str]) -> str:
    return getattr(stream, "name", "<stream>")
