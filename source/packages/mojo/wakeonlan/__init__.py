"""
.. module:: wakeonlan
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The wakeonlan package contains modules for parsing MAC addresses and building and
               broadcasting Wake-on-LAN magic packets.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
