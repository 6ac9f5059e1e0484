"""
Custom exceptions for the WoW collection guide service.

Each failure mode maps to one error type so the HTTP layer and the CLI can
translate it into the right status code or exit path.
"""


class WowGuideError(Exception):
    pass


class ConfigurationError(WowGuideError):
    pass


class InvalidRequestError(WowGuideError):
    pass


class GenerationError(WowGuideError):
    pass
