"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants that describe the Wake-on-LAN magic packet layout
               and the default endpoints used to send it.

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

from typing import Tuple

MAC_SIZE = 6
MAC_REPEAT_COUNT = 16

MAGIC_PACKET_HEADER = b"\xff" * 6
MAGIC_PACKET_SIZE = len(MAGIC_PACKET_HEADER) + (MAC_SIZE * MAC_REPEAT_COUNT)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

WOL_PORT_ECHO = 7
WOL_PORT_DISCARD = 9

ANY_ADDRESS = "0.0.0.0"
LIMITED_BROADCAST_ADDRESS = "255.255.255.255"

DEFAULT_SOURCE: Tuple[str, int] = (ANY_ADDRESS, 0)
DEFAULT_DESTINATION: Tuple[str, int] = (LIMITED_BROADCAST_ADDRESS, WOL_PORT_DISCARD)

ENV_SOURCE = "MJR_WAKEONLAN_SOURCE"
ENV_DESTINATION = "MJR_WAKEONLAN_DESTINATION"
ENV_TIMEOUT = "MJR_WAKEONLAN_TIMEOUT"
