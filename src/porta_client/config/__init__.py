"""
Configuration package for Porta Client.

This package contains the environment-driven settings used to build a
client and to configure library logging.
"""

from .settings import PortaClientSettings, get_settings, configure_logging

__all__ = ["PortaClientSettings", "get_settings", "configure_logging"]
