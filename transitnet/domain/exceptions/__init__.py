from .transport import (
    AvailabilityError,
    CapacityError,
    DuplicateRouteError,
    DuplicateStopError,
    EmptyRouteError,
    FormatError,
    IncompatibleTypeError,
    InvalidNameError,
    NoNameError,
    TransportError,
    UnknownRouteError,
    UnknownStopError,
)

__all__ = [
    "AvailabilityError",
    "CapacityError",
    "DuplicateRouteError",
    "DuplicateStopError",
    "EmptyRouteError",
    "FormatError",
    "IncompatibleTypeError",
    "InvalidNameError",
    "NoNameError",
    "TransportError",
    "UnknownRouteError",
    "UnknownStopError",
]
