"""
dnssdnames - DNS / DNS-SD name splitting

This library splits full host, service and service instance names into
their parts for use by DNS-SD record construction code.
"""

__version__ = "0.1.0"

import argparse
import json
import logging
import sys
from typing import List, Optional

from .names import (
    DnsNameInfo,
    ErrorKind,
    HostName,
    InvalidArgumentError,
    ServiceInstanceName,
    ServiceName,
    SplitResult,
)
from .splitter import (
    split_full_dns_name,
    split_full_host_name,
    split_full_service_instance_name,
    split_full_service_name,
    split_subtypes_list,
)

__all__ = [
    "DnsNameInfo",
    "ErrorKind",
    "HostName",
    "InvalidArgumentError",
    "ServiceInstanceName",
    "ServiceName",
    "SplitResult",
    "split_full_dns_name",
    "split_full_host_name",
    "split_full_service_instance_name",
    "split_full_service_name",
    "split_subtypes_list",
]

_EXPECT_SPLITTERS = {
    "host": split_full_host_name,
    "service": split_full_service_name,
    "instance": split_full_service_instance_name,
}


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for dnssdnames."""
    parser = argparse.ArgumentParser(
        prog="dnssdnames", description="Split DNS-SD names into their parts"
    )
    parser.add_argument("names", nargs="+", help="Full names to split")
    parser.add_argument(
        "--expect",
        choices=sorted(_EXPECT_SPLITTERS),
        help="Fail unless every name has this shape",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    status = 0
    for name in args.names:
        if args.expect:
            result = _EXPECT_SPLITTERS[args.expect](name)
            if not result.ok:
                print(
                    f"{name}: not a {args.expect} name ({result.error.value})",
                    file=sys.stderr,
                )
                status = 1
                continue
        print(json.dumps(split_full_dns_name(name).to_dict()))

    return status
