from __future__ import annotations

from typing import Any, Iterator, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SupportsToDict(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


class RequestParameters:
    """Mutable bag of request parameters for building a call step by step.

    ``None`` values are dropped from the serialized body.
    """

    def __init__(self, parameters: Mapping[str, Any] | None = None, **kwargs: Any):
        self._parameters: dict[str, Any] = {}
        for key, value in {**(parameters or {}), **kwargs}.items():
            self.set(key, value)

    def set(self, key: str, value: Any) -> RequestParameters:
        if isinstance(value, RequestParameters):
            value = value.to_dict()
        self._parameters[str(key)] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._parameters.get(key, default)

    def remove(self, key: str) -> RequestParameters:
        self._parameters.pop(key, None)
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._parameters

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in self._parameters.items() if v is not None}


def as_dict(parameters: Mapping[str, Any] | SupportsToDict | None) -> dict[str, Any]:
    if parameters is None:
        return {}
    if isinstance(parameters, SupportsToDict):
        return dict(parameters.to_dict())
    if isinstance(parameters, Mapping):
        return dict(parameters)
    raise TypeError(f"parameters must be a mapping or expose to_dict(), got {type(parameters).__name__}")
