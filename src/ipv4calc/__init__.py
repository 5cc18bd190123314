"""
ipv4calc - IPv4 Subnet Calculator

Computes subnet mask, classful category, RFC1918 status, network and
broadcast addresses, usable host range, a conventional DHCP pool and a
default gateway for an IPv4 address and prefix length.
"""

__version__ = "0.1.0"
