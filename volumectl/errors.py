"""Exceptions raised by volumectl."""


class VolumectlError(Exception):
    """Base exception for all volumectl errors"""
    pass


class ConfigError(VolumectlError):
    """Raised when the configuration file cannot be read"""
    pass


class InvalidTargetError(VolumectlError):
    """Raised when the API target is missing or is not a valid URL"""
    pass


class DecodeError(VolumectlError):
    """Raised when a response body is not the JSON document we expect"""
    pass


class StreamError(VolumectlError):
    """Raised when the server reports an error inside a streamed response"""
    pass


class AppNameError(VolumectlError):
    """Raised when a command needs an app name and none was given"""
    pass
