#!/usr/bin/env python3
"""
Example usage of the dnssdnames splitter.

This example splits a handful of host, service and service instance names
and shows how the shape-checking helpers report a mismatch.
"""

import os

from dnssdnames import (
    split_full_dns_name,
    split_full_host_name,
    split_full_service_instance_name,
)


def main():
    """Run splitter example."""
    domain = os.getenv("DNSSD_DOMAIN", "default.service.arpa")

    names = [
        f"MyPrinter._ipp._tcp.{domain}",
        f"_ipp._tcp.{domain}",
        f"Living Room._airplay._tcp,_speaker,_video.{domain}.",
        f"thread-br.{domain}.",
    ]

    for name in names:
        info = split_full_dns_name(name)
        print(f"🔎 {name}")
        if info.is_host:
            print(f"   Host: {info.host_name}")
        elif info.is_service:
            print(f"   Service: {info.service_name}")
        else:
            print(f"   Instance: {info.instance_name}")
            print(f"   Service: {info.service_name}")
            if info.subtypes:
                print(f"   Subtypes: {', '.join(info.subtypes)}")
        print(f"   Domain: {info.domain}")
        print()

    # Asking for the wrong shape is reported, not raised
    result = split_full_host_name(names[0])
    print(f"❌ {names[0]} as host name: ok={result.ok} error={result.error}")

    instance, service, subtypes, found_domain = split_full_service_instance_name(
        names[2]
    ).unwrap()
    print(f"✅ {instance!r} offers {service} {subtypes} in {found_domain}")


if __name__ == "__main__":
    main()
