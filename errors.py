# errors.py


class ScanError(Exception):
    """Base class for everything the scanner raises on purpose."""


class InvalidRangeError(ScanError, ValueError):
    """A network argument is not a valid IPv4 CIDR block."""


class ProbeError(ScanError):
    """The management port could not be reached."""


class ProbeTimeout(ProbeError):
    pass


class ProbeRefused(ProbeError):
    pass


class MetadataFetchError(ScanError):
    """The metadata document could not be retrieved."""


class MetadataParseError(ScanError):
    """The metadata document is not the expected RIMP XML."""


class NameResolutionError(ScanError):
    """Server/device names could not be read from the controller."""
