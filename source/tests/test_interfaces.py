
import inspect
import unittest

from unittest import mock

import netifaces

from mojo.wakeonlan.exceptions import InterfaceAddressError
from mojo.wakeonlan.interfaces import get_broadcast_address, get_broadcast_addresses, send_magic_packet_on_interface
from mojo.wakeonlan.magicpacket import MagicPacket

IFADDRESSES = {
    "lo": { netifaces.AF_INET: [{ "addr": "127.0.0.1", "netmask": "255.0.0.0", "peer": "127.0.0.1" }] },
    "eth0": { netifaces.AF_INET: [{ "addr": "192.168.1.10", "netmask": "255.255.255.0", "broadcast": "192.168.1.255" }] },
    "wlan0": { netifaces.AF_LINK: [{ "addr": "de:ad:be:ef:ca:fe" }] },
}


def fake_ifaddresses(ifname):
    if ifname not in IFADDRESSES:
        raise ValueError("You must specify a valid interface name.")
    return IFADDRESSES[ifname]


class TestInterfaceBroadcast(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch("mojo.wakeonlan.interfaces.netifaces.ifaddresses", side_effect=fake_ifaddresses)
        patcher.start()
        self.addCleanup(patcher.stop)

        patcher = mock.patch("mojo.wakeonlan.interfaces.netifaces.interfaces", return_value=list(IFADDRESSES.keys()))
        patcher.start()
        self.addCleanup(patcher.stop)
        return

    def test_get_broadcast_address(self):
        addr = get_broadcast_address("eth0")
        assert addr == "192.168.1.255", f"Unexpected broadcast address={addr}"
        return

    def test_get_broadcast_address_missing(self):
        for ifname in ["lo", "wlan0", "nosuch0"]:
            with self.subTest(ifname=ifname):
                with self.assertRaises(InterfaceAddressError) as ctx:
                    get_broadcast_address(ifname)
                assert ctx.exception.ifname == ifname, f"Unexpected ifname={ctx.exception.ifname}"
        return

    def test_get_broadcast_addresses(self):
        table = get_broadcast_addresses()
        assert table == { "eth0": "192.168.1.255" }, f"Unexpected table={table}"
        return

    def test_get_broadcast_addresses_exclude(self):
        table = get_broadcast_addresses(exclude_interfaces=["eth0"])
        assert table == {}, f"Unexpected table={table}"

        default = inspect.signature(get_broadcast_addresses).parameters["exclude_interfaces"].default
        assert default == ("lo",), f"Unexpected default={default!r}"
        return

    def test_send_on_interface(self):
        packet = MagicPacket.from_string("01:02:03:04:05:06")
        with mock.patch("mojo.wakeonlan.interfaces.send_magic_packet", return_value=102) as send_mock:
            bytes_sent = send_magic_packet_on_interface(packet, "eth0", port=7)
        assert bytes_sent == 102, f"Unexpected bytes_sent={bytes_sent}"
        send_mock.assert_called_once_with(packet, ("192.168.1.10", 0), ("192.168.1.255", 7))
        return


if __name__ == '__main__':
    unittest.main()
