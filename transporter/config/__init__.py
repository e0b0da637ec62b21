"""Configuration module for loading and accessing Transporter settings."""

from transporter.exceptions import ConfigurationError

from .loader import Config, config

__all__ = ["Config", "ConfigurationError", "config"]
