"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for finding the subnet broadcast addresses of the
               local network interfaces and sending magic packets through them.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import Dict, Sequence, Tuple, TYPE_CHECKING

import logging

import netifaces

from mojo.wakeonlan.constants import WOL_PORT_DISCARD
from mojo.wakeonlan.exceptions import InterfaceAddressError
from mojo.wakeonlan.sender import send_magic_packet

if TYPE_CHECKING:
    from mojo.wakeonlan.magicpacket import MagicPacket

logger = logging.getLogger()


def get_ipv4_address_info(ifname: str) -> Tuple[str, str]:
    """
        Get the first IPv4 address and its broadcast address for the specified interface name.

        :param ifname: The interface name to lookup the addresses for.

        :returns: A tuple of the interface address and the broadcast address.

        :raises InterfaceAddressError: When the interface is unknown or has no IPv4 address
                                       with a broadcast address.
    """
    try:
        address_info = netifaces.ifaddresses(ifname)
    except ValueError as verr:
        errmsg = f"Unknown network interface. ifname={ifname}"
        raise InterfaceAddressError(errmsg, ifname) from verr

    if address_info is not None and netifaces.AF_INET in address_info:
        for addr_info in address_info[netifaces.AF_INET]:
            if "addr" in addr_info and "broadcast" in addr_info:
                return addr_info["addr"], addr_info["broadcast"]

    errmsg = f"The network interface has no IPv4 broadcast address. ifname={ifname}"
    raise InterfaceAddressError(errmsg, ifname)


def get_broadcast_address(ifname: str) -> str:
    """
        Get the IPv4 subnet broadcast address of the specified interface name.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The broadcast address, for example '192.168.1.255'.
    """
    _, broadcast_addr = get_ipv4_address_info(ifname)
    return broadcast_addr


def get_broadcast_addresses(exclude_interfaces: Sequence[str] = ("lo",)) -> Dict[str, str]:
    """
        Creates a dictionary lookup table of interface names to IPv4 broadcast addresses.
        Interfaces without a broadcast address are left out of the table.

        :param exclude_interfaces: Interface names to skip.

        :returns: The table of interface names to broadcast addresses.
    """
    results = {}

    for ifname in netifaces.interfaces():
        if ifname in exclude_interfaces:
            continue

        try:
            results[ifname] = get_broadcast_address(ifname)
        except InterfaceAddressError:
            logger.debug("Skipping interface without a broadcast address. ifname=%s", ifname)

    return results


def send_magic_packet_on_interface(packet: "MagicPacket", ifname: str, port: int = WOL_PORT_DISCARD) -> int:
    """
        Sends a magic packet to the subnet broadcast address of an interface, from the IPv4
        address of that interface.

        :param packet: The magic packet to send.
        :param ifname: The name of the interface to send through.
        :param port: The destination port.

        :returns: The number of bytes sent.
    """
    if_addr, broadcast_addr = get_ipv4_address_info(ifname)
    return send_magic_packet(packet, (if_addr, 0), (broadcast_addr, port))
