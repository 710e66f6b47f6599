"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the exceptions that can be raised while parsing MAC addresses
               and sending Wake-on-LAN magic packets.

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


class WakeOnLanError(RuntimeError):
    """
        Base error for every error raised by the :mod:`mojo.wakeonlan` package.
    """


class HexDecodeError(WakeOnLanError, ValueError):
    """
        This error is raised when the text form of a MAC address contains a character
        that is not a hexadecimal digit.
    """
    def __init__(self, message: str, character: str, index: int, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.character = character
        self.index = index
        return


class InvalidLengthError(WakeOnLanError, ValueError):
    """
        This error is raised when a decoded or supplied MAC address is not exactly
        six bytes long.
    """

    ORIGIN_TEXT = "text"
    ORIGIN_BYTES = "bytes"

    def __init__(self, message: str, length: int, origin: str, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.length = length
        self.origin = origin
        return


class MagicPacketIOError(WakeOnLanError):
    """
        This error is raised when one of the socket operations used to send a magic
        packet fails.  The original :class:`OSError` is available as `os_error` and
        is chained as the cause.
    """
    def __init__(self, message: str, operation: str, os_error: Optional[OSError], *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.operation = operation
        self.os_error = os_error
        return

    @property
    def errno(self) -> Optional[int]:
        errno = None
        if self.os_error is not None:
            errno = self.os_error.errno
        return errno


class InterfaceAddressError(WakeOnLanError, LookupError):
    """
        This error is raised when a network interface is unknown or has no IPv4
        broadcast address.
    """
    def __init__(self, message: str, ifname: str, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.ifname = ifname
        return
