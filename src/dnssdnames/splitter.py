"""
DNS / DNS-SD full name splitting.

Decomposes names such as ``MyPrinter._ipp._tcp.local.``,
``_ipp._tcp.local.`` or ``myhost.local.`` into their parts using only
positional substring search. Subtypes may be appended to the service
type as a comma-joined list, e.g. ``MyPrinter._ipp._tcp,_color,_duplex.local.``.
The subtype list is taken from the first comma in the whole name up to the
dot that starts the domain, wherever that comma is.
"""

import logging
from typing import Optional, Tuple, Type, TypeVar

from .names import (
    DnsNameInfo,
    ErrorKind,
    HostName,
    ServiceInstanceName,
    ServiceName,
    SplitResult,
)

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=DnsNameInfo)

# Searched in this order; the first label found wins
TRANSPORT_LABELS = ("._udp", "._tcp")
LABEL_SEPARATOR = "."
SUBTYPE_SEPARATOR = ","


def _with_trailing_dot(name: str) -> str:
    if name.endswith(LABEL_SEPARATOR):
        return name
    return name + LABEL_SEPARATOR


def _normalize_domain(domain: str) -> str:
    """Return ``domain`` ending in exactly one dot."""
    return domain.rstrip(LABEL_SEPARATOR) + LABEL_SEPARATOR


def _find_transport(full_name: str) -> int:
    for label in TRANSPORT_LABELS:
        pos = full_name.rfind(label)
        if pos != -1:
            return pos
    return -1


def split_subtypes_list(subtypes: str) -> Tuple[str, ...]:
    """
    Split a comma-joined subtype list like ``,_a,_b`` into ``("_a", "_b")``.

    Text before the first comma is ignored and labels are returned as-is,
    without trimming or validation.
    """
    return tuple(subtypes.split(SUBTYPE_SEPARATOR)[1:])


def split_full_dns_name(name: str) -> DnsNameInfo:
    """
    Split a full DNS name into host, service or service instance parts.

    Never raises: every string is classified as one of the three shapes,
    even when some of the parts come out empty. The returned domain
    always ends with a single trailing dot.

    Args:
        name: Full name, with or without the trailing dot

    Returns:
        A HostName, ServiceName or ServiceInstanceName
    """
    full_name = _with_trailing_dot(name)
    transport_pos = _find_transport(full_name)

    if transport_pos == -1:
        dot_pos = full_name.find(LABEL_SEPARATOR)
        info: DnsNameInfo = HostName(
            host_name=full_name[:dot_pos],
            domain=_normalize_domain(full_name[dot_pos + 1 :]),
        )
        logger.debug(f"Split {name!r} as host name")
        return info

    dot_pos = full_name.rfind(LABEL_SEPARATOR, 0, transport_pos)
    domain_pos = full_name.find(LABEL_SEPARATOR, transport_pos + 1)
    domain = _normalize_domain(full_name[domain_pos + 1 :])
    service_end = transport_pos + len(TRANSPORT_LABELS[0])

    subtypes: Tuple[str, ...] = ()
    comma_pos = full_name.find(SUBTYPE_SEPARATOR)
    if comma_pos != -1:
        # A comma past the domain separator takes the rest of the name
        subtypes_end = domain_pos if domain_pos >= comma_pos else len(full_name)
        subtypes = split_subtypes_list(full_name[comma_pos:subtypes_end])

    if dot_pos == -1:
        info = ServiceName(
            service_name=full_name[:service_end],
            domain=domain,
            subtypes=subtypes,
        )
        logger.debug(f"Split {name!r} as service name")
    else:
        info = ServiceInstanceName(
            instance_name=full_name[:dot_pos],
            service_name=full_name[dot_pos + 1 : service_end],
            domain=domain,
            subtypes=subtypes,
        )
        logger.debug(f"Split {name!r} as service instance name")

    return info


def _split_checked(name: str, shape: Type[N]) -> Optional[N]:
    """Split ``name`` and return it only if it has the wanted shape."""
    if LABEL_SEPARATOR not in name:
        logger.debug(f"Rejecting {name!r}: no domain separator")
        return None

    info = split_full_dns_name(name)
    if not isinstance(info, shape):
        logger.debug(f"Rejecting {name!r}: expected {shape.kind}, got {info.kind}")
        return None
    return info


def split_full_host_name(name: str) -> SplitResult[Tuple[str, str]]:
    """Split ``host.domain.`` into ``(host_name, domain)``."""
    info = _split_checked(name, HostName)
    if info is None:
        return SplitResult.failure(ErrorKind.INVALID_ARGS, name)
    return SplitResult.success((info.host_name, info.domain), name)


def split_full_service_name(name: str) -> SplitResult[Tuple[str, str]]:
    """Split ``_service._proto.domain.`` into ``(service_name, domain)``."""
    info = _split_checked(name, ServiceName)
    if info is None:
        return SplitResult.failure(ErrorKind.INVALID_ARGS, name)
    return SplitResult.success((info.service_name, info.domain), name)


def split_full_service_instance_name(
    name: str,
) -> SplitResult[Tuple[str, str, Tuple[str, ...], str]]:
    """
    Split ``Instance._service._proto.domain.`` into its parts.

    On success the value is ``(instance_name, service_name, subtypes,
    domain)``.
    """
    info = _split_checked(name, ServiceInstanceName)
    if info is None:
        return SplitResult.failure(ErrorKind.INVALID_ARGS, name)
    return SplitResult.success(
        (info.instance_name, info.service_name, info.subtypes, info.domain),
        name,
    )
