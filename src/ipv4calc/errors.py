"""
Exceptions raised by ipv4calc.
"""


class IPv4CalcError(Exception):
    """Base exception for ipv4calc errors."""
    pass


class InvalidAddressFamily(IPv4CalcError, TypeError):
    """Address is not IPv4."""
    pass


# Older name, kept for callers that catch it
UnsupportedAddressFamily = InvalidAddressFamily


class InvalidPrefixLength(IPv4CalcError, ValueError):
    """Prefix length is not an integer in [0, 32]."""
    pass


class AddressParseError(IPv4CalcError, ValueError):
    """Address text could not be parsed."""
    pass
