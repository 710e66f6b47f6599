"""
.. module:: sender
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the functions that resolve socket endpoints and transmit magic packets
               as broadcast UDP datagrams.

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

from typing import Optional, Tuple, Union, TYPE_CHECKING

import logging
import socket

from mojo.wakeonlan.constants import DEFAULT_DESTINATION, DEFAULT_SOURCE
from mojo.wakeonlan.exceptions import MagicPacketIOError

if TYPE_CHECKING:
    from mojo.wakeonlan.configuration import SenderSettings
    from mojo.wakeonlan.magicpacket import MagicPacket

logger = logging.getLogger()

Endpoint = Union[str, Tuple]


def parse_endpoint(endpoint: Endpoint) -> Tuple:
    """
        Normalizes an endpoint into a socket address tuple.

        :param endpoint: Either a socket address tuple whose first two items are the host and
                         the port, or text in the form 'host:port'.  IPv6 literals in text
                         form must be enclosed in brackets, '[::1]:9'.  The flowinfo and
                         scope_id items of an IPv6 4-tuple are kept.

        :returns: A (host, port) tuple, or a (host, port, flowinfo, scope_id) tuple when an
                  IPv6 4-tuple was given.
    """
    extra = ()

    if isinstance(endpoint, str):
        if endpoint.startswith("["):
            host, bracket, remainder = endpoint[1:].partition("]")
            if not bracket or not remainder.startswith(":"):
                raise ValueError(f"Invalid endpoint, expected '[host]:port'. endpoint={endpoint!r}")
            port_text = remainder[1:]
        else:
            host, colon, port_text = endpoint.rpartition(":")
            if not colon:
                raise ValueError(f"Invalid endpoint, expected 'host:port'. endpoint={endpoint!r}")

        try:
            port = int(port_text)
        except ValueError:
            raise ValueError(f"Invalid endpoint port. endpoint={endpoint!r}") from None
    else:
        if len(endpoint) not in (2, 4):
            raise ValueError(f"Invalid endpoint, expected a 2-tuple or an IPv6 4-tuple. endpoint={endpoint!r}")
        host, port = endpoint[0], int(endpoint[1])
        extra = tuple(int(v) for v in endpoint[2:])

    if port < 0 or port > 65535:
        raise ValueError(f"Endpoint port out of range. endpoint={endpoint!r}")

    return (host, port) + extra


def resolve_endpoint(endpoint: Endpoint, family: socket.AddressFamily = socket.AF_UNSPEC) -> Tuple[socket.AddressFamily, tuple]:
    """
        Resolves a host name or literal address and port to a concrete socket address.

        :param endpoint: The endpoint to resolve, see :func:`parse_endpoint`.
        :param family: Restricts the resolution to a specific address family.

        :returns: The address family and socket address of the first resolution result.

        :raises OSError: When the host cannot be resolved.
    """
    host, port, *extra = parse_endpoint(endpoint)

    flags = 0
    if host == "":
        # An empty host means any local address
        host = None
        flags = socket.AI_PASSIVE

    if extra:
        # flowinfo and scope_id only exist for IPv6
        family = socket.AF_INET6

    addr_info = socket.getaddrinfo(host, port, family, socket.SOCK_DGRAM, socket.IPPROTO_UDP, flags)
    addr_family, _, _, _, sock_addr = addr_info[0]

    if extra:
        sock_addr = (sock_addr[0], sock_addr[1]) + tuple(extra)

    return addr_family, sock_addr


def send_magic_packet(packet: "MagicPacket", source: Endpoint, destination: Endpoint, timeout: Optional[float] = None) -> int:
    """
        Sends a magic packet as a single UDP datagram.  A socket is bound to `source`, broadcast
        is enabled on it and the payload is sent once to `destination`.  The socket is closed
        before returning, whether or not the send succeeded.

        :param packet: The magic packet to send.
        :param source: The local endpoint to bind the socket to.
        :param destination: The endpoint to send the packet to.
        :param timeout: An optional send timeout in seconds.  The default is to block.

        :returns: The number of bytes sent.

        :raises MagicPacketIOError: When resolving an endpoint, creating, binding or configuring
                                    the socket, or sending the datagram fails.
    """
    payload = bytes(packet)

    operation = "resolve"
    try:
        src_family, src_addr = resolve_endpoint(source)
        _, dst_addr = resolve_endpoint(destination, family=src_family)

        operation = "socket"
        with socket.socket(src_family, socket.SOCK_DGRAM) as sock:
            operation = "bind"
            sock.bind(src_addr)

            operation = "broadcast"
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

            if timeout is not None:
                operation = "timeout"
                sock.settimeout(timeout)

            operation = "send"
            bytes_sent = sock.sendto(payload, dst_addr)

    except OSError as os_err:
        errmsg = "Failed to send magic packet, {} failed. source={!r} destination={!r} error={}".format(
            operation, source, destination, os_err)
        raise MagicPacketIOError(errmsg, operation, os_err) from os_err

    logger.debug("Sent magic packet (%d bytes) from %r to %r.", bytes_sent, src_addr, dst_addr)

    return bytes_sent


def send_magic_packet_default(packet: "MagicPacket") -> int:
    """
        Broadcasts a magic packet from 0.0.0.0:0 to the limited broadcast address on port 9.

        :returns: The number of bytes sent.
    """
    return send_magic_packet(packet, DEFAULT_SOURCE, DEFAULT_DESTINATION)


def send_magic_packet_with_settings(packet: "MagicPacket", settings: "SenderSettings") -> int:
    """
        Sends a magic packet using the endpoints and timeout held by a :class:`SenderSettings`.
    """
    return send_magic_packet(packet, settings.source, settings.destination, timeout=settings.timeout)
