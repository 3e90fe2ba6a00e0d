from .network import Network
from .passenger import ConcessionPassenger, Passenger
from .route import BusRoute, FerryRoute, Route, TrainRoute
from .stop import Stop
from .transport_type import TransportType
from .vehicle import Bus, Ferry, PublicTransport, Train

__all__ = [
    "Bus",
    "BusRoute",
    "ConcessionPassenger",
    "Ferry",
    "FerryRoute",
    "Network",
    "Passenger",
    "PublicTransport",
    "Route",
    "Stop",
    "Train",
    "TrainRoute",
    "TransportType",
]
