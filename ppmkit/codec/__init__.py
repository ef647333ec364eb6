from .decoding import MAGIC, MAX_VALUE, decode, decode_bytes
from .encoding import encode, encode_bytes, encode_header, encode_pixels

__all__ = [
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "encode_header",
    "encode_pixels",
    "MAGIC",
    "MAX_VALUE",
]
