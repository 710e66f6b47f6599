"""
.. module:: configuration
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`SenderSettings` object and the helper that loads sender
               settings from environment variables.

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

from typing import Mapping, Optional

import os

from dataclasses import dataclass

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION,
    DEFAULT_SOURCE,
    ENV_DESTINATION,
    ENV_SOURCE,
    ENV_TIMEOUT
)
from mojo.wakeonlan.sender import Endpoint, parse_endpoint


@dataclass(frozen=True)
class SenderSettings:
    """
        The endpoints and send timeout used when sending magic packets.
    """
    source: Endpoint = DEFAULT_SOURCE
    destination: Endpoint = DEFAULT_DESTINATION
    timeout: Optional[float] = None


def load_sender_settings(environ: Optional[Mapping[str, str]] = None) -> SenderSettings:
    """
        Loads :class:`SenderSettings` from the environment.  Variables that are not set
        fall back to the default endpoints and a blocking send.

        MJR_WAKEONLAN_SOURCE - 'host:port' to bind to
        MJR_WAKEONLAN_DESTINATION - 'host:port' to send to
        MJR_WAKEONLAN_TIMEOUT - send timeout in seconds

        :param environ: The mapping to read the variables from, `os.environ` by default.

        :returns: The loaded settings.

        :raises ValueError: When an endpoint or the timeout is malformed.
    """
    if environ is None:
        environ = os.environ

    source = DEFAULT_SOURCE
    if ENV_SOURCE in environ:
        source = parse_endpoint(environ[ENV_SOURCE])

    destination = DEFAULT_DESTINATION
    if ENV_DESTINATION in environ:
        destination = parse_endpoint(environ[ENV_DESTINATION])

    timeout = None
    if ENV_TIMEOUT in environ:
        timeout_text = environ[ENV_TIMEOUT]
        try:
            timeout = float(timeout_text)
        except ValueError:
            raise ValueError(f"Invalid value for {ENV_TIMEOUT}. value={timeout_text!r}") from None
        if timeout < 0:
            raise ValueError(f"The {ENV_TIMEOUT} value must not be negative. value={timeout_text!r}")

    settings = SenderSettings(source=source, destination=destination, timeout=timeout)

    return settings
