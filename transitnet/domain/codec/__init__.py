from .assembler import decode_network
from .records import (
    decode_route,
    decode_stop,
    decode_vehicle,
    encode_route,
    encode_stop,
    encode_vehicle,
)
from .writer import encode_network, iter_network_lines

__all__ = [
    "decode_network",
    "decode_route",
    "decode_stop",
    "decode_vehicle",
    "encode_network",
    "encode_route",
    "encode_stop",
    "encode_vehicle",
    "iter_network_lines",
]
