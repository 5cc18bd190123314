"""
IPv4 Subnet Module

Provides subnet analysis for an IPv4 address and prefix length: mask,
classful category, RFC1918 status, network/broadcast addresses, host
range, DHCP pool convention and default gateway.
"""

from ipv4calc.subnet.core import (
    IPClass,
    NetworkInfo,
    PrefixLength,
    analyze,
    apply_mask,
    classify,
    is_rfc1918,
    parse_address,
    parse_prefix_length,
    parse_target,
    prefix_to_mask,
)

__all__ = [
    "IPClass",
    "NetworkInfo",
    "PrefixLength",
    "analyze",
    "apply_mask",
    "classify",
    "is_rfc1918",
    "parse_address",
    "parse_prefix_length",
    "parse_target",
    "prefix_to_mask",
]
