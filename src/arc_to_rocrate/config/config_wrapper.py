"""
Defines the ConfigWrapper class that wraps loaded configuration data (e.g. a
yaml file) and supports overriding or adding single entries in the tree by
environment variables.

An entry at ``otel -> endpoint`` below the prefix ``ARC_TO_ROCRATE`` is
overridden by the environment variable ``ARC_TO_ROCRATE_OTEL_ENDPOINT``.
"""

import os
from abc import abstractmethod
from collections.abc import Generator
from pathlib import Path
from typing import TypeAlias, overload

import yaml

KeyType: TypeAlias = str | int
ScalarType: TypeAlias = str | int | float | bool | None
DictType: TypeAlias = dict[str, "ValueType"]
ListType: TypeAlias = list["ValueType"]
ValueType: TypeAlias = "DictType | ListType | ScalarType"
WrapType: TypeAlias = "ConfigWrapper | ScalarType"


class ConfigWrapper:
    """
    Wraps nested dicts and lists (aka loaded yaml) and supports env var overrides.
    """

    def __init__(self, path: str = "") -> None:
        self._path = path.upper()

    def _build_path(self, key: str) -> str:
        # children of an unprefixed wrapper stay unprefixed
        return f"{self._path}_{key}" if self._path else ""

    def _wrap(self, value: ValueType, key: str) -> WrapType:
        return ConfigWrapper._from_value(value, self._build_path(key))

    @staticmethod
    def _from_value(value: ValueType, path: str) -> WrapType:
        if isinstance(value, dict):
            return ConfigWrapperDict(value, path)
        if isinstance(value, list):
            return ConfigWrapperList(value, path)
        return value

    @classmethod
    def from_data(cls, data: DictType | ListType, prefix: str = "") -> "ConfigWrapper":
        """Wrap a dict or list, using ``prefix`` as the env var path of its root."""
        wrapped = cls._from_value(data, prefix)
        if not isinstance(wrapped, ConfigWrapper):
            raise TypeError(
                f"'ConfigWrapper' only wraps lists or dicts. "
                f"You're trying to wrap a '{type(data)}'"
            )
        return wrapped

    @classmethod
    def from_yaml_file(cls, path: Path, prefix: str = "") -> "ConfigWrapper":
        """
        Creates a ConfigWrapper from a yaml file
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            return cls.from_data(data, prefix)

    @overload
    def __getitem__(self, key: str) -> WrapType: ...
    @overload
    def __getitem__(self, key: int) -> WrapType: ...

    @abstractmethod
    def __getitem__(self, key: KeyType) -> WrapType:
        raise NotImplementedError("Please do not use class 'ConfigWrapper' directly, but a derived class")

    @classmethod
    def _unwrap(cls, wrapper: WrapType) -> ValueType:
        if isinstance(wrapper, ConfigWrapperDict):
            return {k: cls._unwrap(v) for k, v in wrapper.items()}
        if isinstance(wrapper, ConfigWrapperList):
            return [cls._unwrap(wrapper[i]) for i in range(len(wrapper))]
        if isinstance(wrapper, ConfigWrapper):
            raise TypeError(f"Cannot unwrap element of type '{type(wrapper)}'")
        return wrapper

    def unwrap(self) -> DictType | ListType:
        """Return plain data with all env var overrides applied."""
        unwrapped = ConfigWrapper._unwrap(self)
        if isinstance(unwrapped, dict | list):
            return unwrapped
        raise TypeError(f"Unwrapped values must be of type list or dict, found '{type(unwrapped)}'")

    @abstractmethod
    def __iter__(self) -> Generator[KeyType, None, None]:
        raise NotImplementedError("Please do not use class 'ConfigWrapper' directly, but a derived class")

    @abstractmethod
    def items(self) -> Generator[tuple[KeyType, WrapType], None, None]:
        raise NotImplementedError("Please do not use class 'ConfigWrapper' directly, but a derived class")

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError("Please do not use class 'ConfigWrapper' directly, but a derived class")

    def _override_key_access(self, key: str) -> str | None:
        # without a prefix there is nothing to override
        if not self._path:
            return None
        # self._path is always upper case
        return os.environ.get(f"{self._path}_{key.upper()}")


class ConfigWrapperDict(ConfigWrapper):
    """
    A ConfigWrapper flavour that specifically wraps dicts
    """

    def __init__(self, data: DictType, path: str = "") -> None:
        super().__init__(path)
        self._data = data

    def _all_keys(self) -> list[str]:
        """All keys including the ones only discovered in the environment."""
        keys = list(self._data.keys())
        if not self._path:
            return keys
        # nested dicts discover their own env vars
        nested = [k.upper() + "_" for k, v in self._data.items() if isinstance(v, dict | list)]
        for env_key in sorted(os.environ):
            if not env_key.startswith(self._path + "_"):
                continue
            key_suffix = env_key[len(self._path) + 1 :]
            if any(key_suffix.startswith(prefix) for prefix in nested):
                continue
            if key_suffix.lower() not in keys:
                keys.append(key_suffix.lower())
        return keys

    def __getitem__(self, key: str) -> WrapType:
        override_value = self._override_key_access(key)
        if override_value is not None:
            return override_value
        value = self._data[key]
        return super()._wrap(value, key)

    def __iter__(self) -> Generator[str, None, None]:
        """
        iterate over dict keys
        """
        yield from self._all_keys()

    def items(self) -> Generator[tuple[str, WrapType], None, None]:
        """
        iterate over key-value pairs
        """
        for key in self._all_keys():
            yield key, self[key]

    def __len__(self) -> int:
        return len(self._all_keys())


class ConfigWrapperList(ConfigWrapper):
    """
    A ConfigWrapper flavour that specifically wraps lists
    """

    def __init__(self, data: ListType, path: str = "") -> None:
        super().__init__(path)
        self._data = data

    def __getitem__(self, key: int) -> WrapType:
        value = self._data[key]
        key_str = str(key)
        override_value = self._override_key_access(key_str)
        if override_value is not None:
            return override_value
        return super()._wrap(value, key_str)

    def __iter__(self) -> Generator[int, None, None]:
        """
        iterate over list indices
        """
        yield from range(len(self._data))

    def items(self) -> Generator[tuple[int, WrapType], None, None]:
        """
        iterate over index-value pairs
        """
        for idx in range(len(self._data)):
            yield idx, self[idx]

    def __len__(self) -> int:
        return len(self._data)
