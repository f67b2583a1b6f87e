class BrainzError(Exception):
    """Base class for fatal errors raised while running brainz."""


class ConfigError(BrainzError):
    """Required configuration is missing or invalid."""


class InvalidFilterError(ConfigError):
    """A time filter string could not be parsed."""


class NetworkError(BrainzError):
    """A request to ListenBrainz could not be completed."""


class DecodeError(BrainzError):
    """A ListenBrainz response body did not have the expected shape."""


class PatternError(BrainzError):
    """The search pattern is not a valid regular expression."""
