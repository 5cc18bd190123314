"""
Core IPv4 subnet analysis.

Computes mask, classful category, RFC1918 status, network and broadcast
addresses, usable host range, a conventional DHCP pool and a default
gateway from an address and prefix length.
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from netaddr import AddrFormatError, IPAddress, IPNetwork

from ipv4calc.errors import (
    AddressParseError,
    InvalidAddressFamily,
    InvalidPrefixLength,
)

logger = logging.getLogger(__name__)

ALL_ONES = 0xFFFFFFFF
MAX_PREFIX_LENGTH = 32

# RFC 1918 - Address Allocation for Private Internets
PRIVATE_RANGES_V4 = [
    IPNetwork("10.0.0.0/8"),
    IPNetwork("172.16.0.0/12"),
    IPNetwork("192.168.0.0/16"),
]

# DHCP pool convention: +9 offset below /25, 90 address span
DHCP_OFFSET = 9
DHCP_OFFSET_BELOW_PREFIX = 25
DHCP_POOL_SPAN = 90


class IPClass(str, Enum):
    """Legacy classful address category."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"  # Multicast
    E = "E"  # Reserved / experimental


@dataclass(frozen=True)
class PrefixLength:
    """CIDR prefix length, guaranteed to be within [0, 32]."""
    value: int

    def __post_init__(self):
        # bool is an int subclass but never a meaningful prefix
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidPrefixLength(
                f"Prefix length must be an integer, got {self.value!r}"
            )
        if not 0 <= self.value <= MAX_PREFIX_LENGTH:
            raise InvalidPrefixLength(
                f"Prefix length /{self.value} is outside 0-{MAX_PREFIX_LENGTH}"
            )

    @classmethod
    def coerce(cls, value: "int | PrefixLength") -> "PrefixLength":
        """Return value as a PrefixLength, validating raw integers."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"/{self.value}"


@dataclass(frozen=True)
class NetworkInfo:
    """Everything derived from one (address, prefix length) pair."""
    ip_address: IPAddress
    cidr: int
    subnet_mask: IPAddress
    ip_class: IPClass
    is_private: bool
    network_address: IPAddress
    broadcast_address: IPAddress | None
    host_range_start: IPAddress | None
    host_range_end: IPAddress | None
    usable_hosts: int
    dhcp_range_start: IPAddress | None
    dhcp_range_end: IPAddress | None
    default_gateway: IPAddress | None
    needs_nat: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dict, keeping field order."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, IPAddress):
                value = str(value)
            elif isinstance(value, IPClass):
                value = value.value
            result[f.name] = value
        return result

    def rows(self) -> list[tuple[str, str]]:
        """Human readable (label, value) pairs for display."""
        def fmt(addr: IPAddress | None) -> str:
            return str(addr) if addr is not None else "-"

        if self.host_range_start is not None:
            host_range = f"{self.host_range_start} - {self.host_range_end}"
            dhcp_range = f"{self.dhcp_range_start} - {self.dhcp_range_end}"
        else:
            host_range = "-"
            dhcp_range = "-"

        return [
            ("IP Address", str(self.ip_address)),
            ("Prefix Length", f"/{self.cidr}"),
            ("Subnet Mask", str(self.subnet_mask)),
            ("Class", self.ip_class.value),
            ("Private", "Yes" if self.is_private else "No"),
            ("Network", str(self.network_address)),
            ("Broadcast", fmt(self.broadcast_address)),
            ("Host Range", host_range),
            ("Usable Hosts", f"{self.usable_hosts:,}"),
            ("DHCP Range", dhcp_range),
            ("Default Gateway", fmt(self.default_gateway)),
            ("Needs NAT", "Yes" if self.needs_nat else "No"),
        ]


def _require_ipv4(address: Any) -> IPAddress:
    if not isinstance(address, IPAddress) or address.version != 4:
        raise InvalidAddressFamily(
            f"Only IPv4 addresses are supported, got {address!r}"
        )
    return address


def prefix_to_mask(prefix_length: "int | PrefixLength") -> int:
    """Return the 32-bit mask for a prefix length as an integer."""
    prefix = int(PrefixLength.coerce(prefix_length))
    if prefix == 0:
        return 0
    return (ALL_ONES << (MAX_PREFIX_LENGTH - prefix)) & ALL_ONES


def apply_mask(address: IPAddress, prefix_length: "int | PrefixLength") -> IPAddress:
    """Zero the host bits of an address."""
    address = _require_ipv4(address)
    return IPAddress(int(address) & prefix_to_mask(prefix_length), 4)


def classify(address: IPAddress) -> IPClass:
    """Classful category from the first octet only.

    First octet 0 has no class in the classful scheme and falls through
    to E along with 240-255.
    """
    first = _require_ipv4(address).words[0]
    if 1 <= first <= 127:
        return IPClass.A
    if 128 <= first <= 191:
        return IPClass.B
    if 192 <= first <= 223:
        return IPClass.C
    if 224 <= first <= 239:
        return IPClass.D
    return IPClass.E


def is_rfc1918(address: IPAddress) -> bool:
    """Check if an IPv4 address is in RFC1918 private space."""
    address = _require_ipv4(address)
    return any(address in net for net in PRIVATE_RANGES_V4)


def _dhcp_range(host_start: int, prefix: int) -> tuple[int, int]:
    start = host_start + DHCP_OFFSET if prefix < DHCP_OFFSET_BELOW_PREFIX else host_start
    # The span saturates within the last octet instead of carrying
    last_octet = min((start & 0xFF) + DHCP_POOL_SPAN, 0xFF)
    end = (start & ~0xFF & ALL_ONES) | last_octet
    return start, end


def analyze(address: IPAddress, prefix_length: "int | PrefixLength") -> NetworkInfo:
    """Analyze an IPv4 address within the subnet given by prefix_length.

    Args:
        address: IPv4 address (netaddr.IPAddress, version 4)
        prefix_length: CIDR prefix length, 0-32

    Returns:
        NetworkInfo snapshot

    Raises:
        InvalidAddressFamily: address is not an IPv4 IPAddress
        InvalidPrefixLength: prefix_length is outside 0-32
    """
    address = _require_ipv4(address)
    prefix = int(PrefixLength.coerce(prefix_length))

    value = int(address)
    mask = prefix_to_mask(prefix)
    ip_class = classify(address)
    private = is_rfc1918(address)
    network = value & mask

    broadcast = None
    host_start = host_end = None
    dhcp_start = dhcp_end = None
    usable_hosts = 0

    if ip_class in (IPClass.A, IPClass.B, IPClass.C):
        broadcast = value | (~mask & ALL_ONES)
        # /31 and /32 carry no host range here (RFC 3021 not modeled)
        if prefix <= 30:
            host_start = network + 1
            host_end = broadcast - 1
            usable_hosts = 2 ** (MAX_PREFIX_LENGTH - prefix) - 2
            dhcp_start, dhcp_end = _dhcp_range(host_start, prefix)

    def to_ip(n: int | None) -> IPAddress | None:
        return IPAddress(n, 4) if n is not None else None

    info = NetworkInfo(
        ip_address=address,
        cidr=prefix,
        subnet_mask=IPAddress(mask, 4),
        ip_class=ip_class,
        is_private=private,
        network_address=IPAddress(network, 4),
        broadcast_address=to_ip(broadcast),
        host_range_start=to_ip(host_start),
        host_range_end=to_ip(host_end),
        usable_hosts=usable_hosts,
        dhcp_range_start=to_ip(dhcp_start),
        dhcp_range_end=to_ip(dhcp_end),
        default_gateway=to_ip(host_start),
        needs_nat=private,
    )
    logger.debug(f"Analyzed {address}/{prefix}: class {ip_class.value}, {usable_hosts} usable hosts")
    return info


def parse_address(text: str) -> IPAddress:
    """Parse dotted IPv4 text into an IPAddress.

    Raises:
        AddressParseError: text is not an IP address
        InvalidAddressFamily: text is a valid IPv6 address
    """
    text = text.strip()
    try:
        ip = IPAddress(text)
    except (AddrFormatError, ValueError, TypeError) as e:
        raise AddressParseError(f"Invalid IP address: {text!r}") from e
    return _require_ipv4(ip)


def parse_prefix_length(text: str) -> PrefixLength:
    """Parse '24' or '/24' into a PrefixLength."""
    raw = text.strip().lstrip("/")
    if not raw.isdecimal():
        raise InvalidPrefixLength(f"Invalid prefix length: {text!r}")
    return PrefixLength(int(raw))


def parse_target(address: str, prefix: str | None = None) -> tuple[IPAddress, PrefixLength]:
    """Parse CLI-style input into (address, prefix length).

    Either address is given in a.b.c.d/nn form and prefix is None, or the
    two are passed separately.
    """
    if "/" in address:
        if prefix is not None:
            raise AddressParseError(
                f"Prefix length given twice: {address!r} and {prefix!r}"
            )
        address, prefix = address.split("/", 1)
    elif prefix is None:
        raise InvalidPrefixLength(
            f"No prefix length given for {address!r} (use a.b.c.d/nn or pass it separately)"
        )
    return parse_address(address), parse_prefix_length(prefix)
