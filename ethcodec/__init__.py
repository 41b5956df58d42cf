"""RLP and SSZ encoding and decoding for Ethereum data, with an RLP command line."""

__version__ = "0.1.0"

__all__ = [
    "rlp_errors",
    "rlp_encode",
    "rlp_decode",
    "rlp_encodable",
    "ssz_errors",
    "ssz_encode",
    "ssz_decode",
    "ssz_types",
    "cli",
]