"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`MagicPacket` object which holds the 102 byte payload that
               wakes the host of a network interface.

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

from typing import Optional

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION,
    DEFAULT_SOURCE,
    MAC_REPEAT_COUNT,
    MAGIC_PACKET_HEADER,
    MAGIC_PACKET_SIZE
)
from mojo.wakeonlan.macaddress import BytesLike, MacAddress, mac_from_bytes, parse_mac_text
from mojo.wakeonlan.sender import Endpoint, send_magic_packet


class MagicPacket:
    """
        The :class:`MagicPacket` object holds the Wake-on-LAN payload for a single MAC address.

        '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'
    """

    __slots__ = ("_mac", "_payload")

    def __init__(self, mac: MacAddress):
        object.__setattr__(self, "_mac", mac)
        object.__setattr__(self, "_payload", MAGIC_PACKET_HEADER + (mac.octets * MAC_REPEAT_COUNT))
        return

    @classmethod
    def from_mac(cls, mac: MacAddress) -> "MagicPacket":
        return cls(mac)

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "MagicPacket":
        """
            Creates the magic packet for the MAC address given as six raw bytes.
        """
        return cls(mac_from_bytes(data))

    @classmethod
    def from_string(cls, text: str, separator: str = ":") -> "MagicPacket":
        """
            Creates the magic packet for the MAC address given in delimited hexadecimal text.
        """
        return cls(parse_mac_text(text, separator))

    @property
    def mac(self) -> MacAddress:
        return self._mac

    @property
    def payload(self) -> bytes:
        return self._payload

    def send(self) -> int:
        """
            Broadcasts the magic packet from 0.0.0.0:0 to 255.255.255.255:9.

            :returns: The number of bytes sent.
        """
        return send_magic_packet(self, DEFAULT_SOURCE, DEFAULT_DESTINATION)

    def send_to(self, source: Endpoint, destination: Endpoint, timeout: Optional[float] = None) -> int:
        """
            Broadcasts the magic packet from the `source` endpoint to the `destination` endpoint.

            :returns: The number of bytes sent.
        """
        return send_magic_packet(self, source, destination, timeout=timeout)

    def __setattr__(self, name, value):
        raise AttributeError("MagicPacket objects are immutable.")

    def __delattr__(self, name):
        raise AttributeError("MagicPacket objects are immutable.")

    def __bytes__(self) -> bytes:
        return self._payload

    def __len__(self) -> int:
        return MAGIC_PACKET_SIZE

    def __eq__(self, other) -> bool:
        if isinstance(other, MagicPacket):
            return self._payload == other._payload
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._payload)

    def __repr__(self) -> str:
        return "MagicPacket(mac='{}')".format(self._mac)


def build_magic_packet(mac: MacAddress) -> MagicPacket:
    """
        Expands a MAC address into its magic packet.  The six byte 0xFF header is followed by
        the MAC address repeated sixteen times.

        :param mac: The validated MAC address of the interface to wake.

        :returns: The :class:`MagicPacket` for the address.
    """
    return MagicPacket(mac)
