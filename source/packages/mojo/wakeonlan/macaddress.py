"""
.. module:: macaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`MacAddress` object and the helper functions used to
               decode MAC addresses from text and from raw bytes.

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

from typing import Iterable, Union

from mojo.wakeonlan.constants import HEX_DIGITS, MAC_SIZE
from mojo.wakeonlan.exceptions import HexDecodeError, InvalidLengthError

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class MacAddress:
    """
        The :class:`MacAddress` object holds the six octets of a hardware address.  Instances
        are immutable, compare by value and can be used as dictionary keys.
    """

    __slots__ = ("_octets",)

    def __init__(self, octets: BytesLike):
        """
            Creates a :class:`MacAddress`.  Use :meth:`from_bytes` or :meth:`from_string` to
            create an address from unvalidated input.

            :param octets: Exactly six bytes.
        """
        # bytes(n) would create n zero bytes from an integer
        if isinstance(octets, (int, str)):
            errmsg = f"A MAC address must be created from a sequence of bytes. type={type(octets).__name__}"
            raise TypeError(errmsg)

        octets = bytes(octets)
        if len(octets) != MAC_SIZE:
            errmsg = f"A MAC address must be {MAC_SIZE} bytes long. length={len(octets)}"
            raise InvalidLengthError(errmsg, len(octets), InvalidLengthError.ORIGIN_BYTES)

        object.__setattr__(self, "_octets", octets)
        return

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "MacAddress":
        """
            Creates a :class:`MacAddress` from a sequence of six bytes.
        """
        return mac_from_bytes(data)

    @classmethod
    def from_string(cls, text: str, separator: str = ":") -> "MacAddress":
        """
            Creates a :class:`MacAddress` from its delimited hexadecimal text form.
        """
        return parse_mac_text(text, separator)

    @property
    def octets(self) -> bytes:
        return self._octets

    def format(self, separator: str = ":", upper: bool = False) -> str:
        """
            Renders the address as hexadecimal octets joined by `separator`.
        """
        parts = [ "{:02x}".format(b) for b in self._octets ]
        text = separator.join(parts)
        if upper:
            text = text.upper()
        return text

    def __setattr__(self, name, value):
        raise AttributeError("MacAddress objects are immutable.")

    def __delattr__(self, name):
        raise AttributeError("MacAddress objects are immutable.")

    def __bytes__(self) -> bytes:
        return self._octets

    def __len__(self) -> int:
        return len(self._octets)

    def __eq__(self, other) -> bool:
        if isinstance(other, MacAddress):
            return self._octets == other._octets
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._octets)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return "MacAddress('{}')".format(self.format())


def decode_hex_run(run: str) -> bytes:
    """
        Decodes a run of hexadecimal digits into bytes, two digits per byte.

        :param run: The hexadecimal characters to decode.

        :returns: The decoded bytes.

        :raises HexDecodeError: When a character in the run is not a hexadecimal digit.
        :raises InvalidLengthError: When the run has an odd number of digits.
    """
    for index, character in enumerate(run):
        if character not in HEX_DIGITS:
            errmsg = f"Invalid hexadecimal character {character!r} at index {index}."
            raise HexDecodeError(errmsg, character, index)

    # An odd digit count leaves a dangling nibble, so the byte count can never be whole.
    if len(run) % 2 != 0:
        errmsg = f"Hexadecimal text has an odd number of digits and cannot form whole bytes. digits={len(run)}"
        raise InvalidLengthError(errmsg, len(run) // 2, InvalidLengthError.ORIGIN_TEXT)

    return bytes.fromhex(run)


def parse_mac_text(text: str, separator: str) -> MacAddress:
    """
        Parses the text form of a MAC address such as '01:02:03:04:05:06'.

        Every occurrence of `separator` is stripped from the text, wherever it appears,
        and the remaining characters are decoded as hexadecimal pairs.  Text without any
        separator is decoded as a single run, so '010203040506' is accepted as well.

        :param text: The MAC address text.
        :param separator: The single character that delimits the octets.

        :returns: The parsed :class:`MacAddress`.

        :raises HexDecodeError: When the stripped text contains a non-hexadecimal character.
                                The error carries the character and its index in the stripped
                                text.
        :raises InvalidLengthError: When the stripped text does not decode to six bytes.
    """
    if len(separator) != 1:
        raise ValueError(f"The separator must be a single character. separator={separator!r}")

    run = "".join(text.split(separator))

    octets = decode_hex_run(run)
    if len(octets) != MAC_SIZE:
        errmsg = f"MAC address text must decode to {MAC_SIZE} bytes. text={text!r} length={len(octets)}"
        raise InvalidLengthError(errmsg, len(octets), InvalidLengthError.ORIGIN_TEXT)

    return MacAddress(octets)


def mac_from_bytes(data: BytesLike) -> MacAddress:
    """
        Creates a :class:`MacAddress` from raw bytes.

        :param data: A bytes-like object or an iterable of integers in the range 0-255.

        :returns: The :class:`MacAddress` for the bytes.

        :raises TypeError: When `data` is an integer or text instead of a sequence of bytes.
        :raises InvalidLengthError: When `data` is not exactly six bytes long.
    """
    return MacAddress(data)
