"""Exception hierarchy for merkle_partial."""


class MerklePartialError(Exception):
    """Base class for all errors raised by this package."""


class OverlayContractError(MerklePartialError):
    """An overlay was composed from an element type with an invalid root shape."""


class UnknownTypeError(MerklePartialError):
    """A type name or type description could not be resolved to an overlay."""


class UnknownFieldError(MerklePartialError):
    """A container has no field with the requested name."""


class SSZDecodeError(MerklePartialError):
    """Raised when decoding fails due to insufficient or malformed input."""
