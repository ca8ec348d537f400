# pingsweep/errors.py


class SweepError(Exception):
    """Base class for every error raised by the sweeper."""


class InvalidSubnet(SweepError, ValueError):
    """The subnet string is not IPv4 CIDR notation (or is too large to sweep)."""

    def __init__(self, reason: str):
        super().__init__(f"invalid CIDR notation: {reason}")
        self.reason = reason


class MalformedRequest(SweepError):
    """The /scan request body could not be turned into a subnet string."""


class ConfigError(SweepError):
    """An environment variable holds a value the server cannot use."""
