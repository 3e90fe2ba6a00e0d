class TransportError(Exception):
    """Base exception for transport network failures."""


class FormatError(TransportError):
    """Raised when a network document or record is malformed.

    Covers grammar, count, reference-resolution and type-compatibility
    violations. A decode that raises this never yields a partial network.
    """


class AvailabilityError(TransportError):
    """Raised when a document source or destination cannot be accessed."""


class CapacityError(TransportError):
    """Raised when boarding a vehicle that is already full."""


class EmptyRouteError(TransportError):
    """Raised when a route with no stops is asked for its start stop or a vehicle."""


class IncompatibleTypeError(TransportError):
    """Raised when a vehicle is added to a route of a different type."""


class DuplicateStopError(TransportError):
    """Raised when a stop equal to an existing one is added to a network."""


class DuplicateRouteError(TransportError):
    """Raised when a route number is already used in a network."""


class NoNameError(TransportError, ValueError):
    """Raised when a stop is created with a missing or empty name."""


class UnknownStopError(TransportError):
    """Raised when a route references a stop that is not part of the network."""


class UnknownRouteError(TransportError):
    """Raised when a vehicle references a route that is not part of the network."""


class InvalidNameError(TransportError, ValueError):
    """Raised when a name or text field contains a record delimiter (``,`` ``:`` ``|``)."""
