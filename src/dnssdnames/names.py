"""
Parse-result types for DNS / DNS-SD name splitting.

A split name is one of three shapes: a host name, a service type or a
service instance. Each shape is its own frozen dataclass so a value can
only ever be one of them. The shape-asserting split functions report
their outcome through ``SplitResult`` instead of raising.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure kinds reported by the shape-asserting split functions"""

    INVALID_ARGS = "invalid_args"


class InvalidArgumentError(ValueError):
    """Raised when a name does not have the shape the caller asked for."""

    def __init__(self, name: str, kind: ErrorKind = ErrorKind.INVALID_ARGS):
        super().__init__(f"Name {name!r} does not have the expected shape")
        self.name = name
        self.kind = kind


class DnsNameInfo:
    """Common base of the three name shapes."""

    kind = ""

    @property
    def is_host(self) -> bool:
        return isinstance(self, HostName)

    @property
    def is_service(self) -> bool:
        return isinstance(self, ServiceName)

    @property
    def is_service_instance(self) -> bool:
        return isinstance(self, ServiceInstanceName)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        if "subtypes" in data:
            data["subtypes"] = list(data["subtypes"])
        data["kind"] = self.kind
        return data


@dataclass(frozen=True)
class HostName(DnsNameInfo):
    """A ``host.domain.`` name."""

    host_name: str
    domain: str

    kind = "host"


@dataclass(frozen=True)
class ServiceName(DnsNameInfo):
    """A ``_service._proto.domain.`` name."""

    service_name: str
    domain: str
    subtypes: Tuple[str, ...] = ()

    kind = "service"


@dataclass(frozen=True)
class ServiceInstanceName(DnsNameInfo):
    """An ``Instance._service._proto.domain.`` name."""

    instance_name: str
    service_name: str
    domain: str
    subtypes: Tuple[str, ...] = ()

    kind = "service_instance"


@dataclass(frozen=True)
class SplitResult(Generic[T]):
    """Outcome of a shape-asserting split: either a value or an error kind."""

    name: str
    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the split parts, raising InvalidArgumentError on failure."""
        if self.error is not None:
            raise InvalidArgumentError(self.name, self.error)
        return self.value

    @classmethod
    def success(cls, value: T, name: str) -> "SplitResult[T]":
        return cls(name=name, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, name: str) -> "SplitResult[T]":
        return cls(name=name, error=kind)
