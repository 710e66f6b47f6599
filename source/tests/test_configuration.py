
import unittest

from mojo.wakeonlan.configuration import SenderSettings, load_sender_settings


class TestSenderSettings(unittest.TestCase):

    def test_defaults(self):
        settings = load_sender_settings({})
        assert settings == SenderSettings(), f"Unexpected settings={settings}"
        assert settings.source == ("0.0.0.0", 0), f"Unexpected source={settings.source}"
        assert settings.destination == ("255.255.255.255", 9), f"Unexpected destination={settings.destination}"
        assert settings.timeout is None, f"Unexpected timeout={settings.timeout}"
        return

    def test_environment_overrides(self):
        environ = {
            "MJR_WAKEONLAN_SOURCE": "192.168.1.10:0",
            "MJR_WAKEONLAN_DESTINATION": "192.168.1.255:7",
            "MJR_WAKEONLAN_TIMEOUT": "2.5"
        }
        settings = load_sender_settings(environ)
        assert settings.source == ("192.168.1.10", 0), f"Unexpected source={settings.source}"
        assert settings.destination == ("192.168.1.255", 7), f"Unexpected destination={settings.destination}"
        assert settings.timeout == 2.5, f"Unexpected timeout={settings.timeout}"
        return

    def test_invalid_values(self):
        for environ in [{"MJR_WAKEONLAN_TIMEOUT": "soon"}, {"MJR_WAKEONLAN_TIMEOUT": "-1"}, {"MJR_WAKEONLAN_DESTINATION": "broadcast"}]:
            with self.subTest(environ=environ):
                with self.assertRaises(ValueError):
                    load_sender_settings(environ)
        return


if __name__ == '__main__':
    unittest.main()
