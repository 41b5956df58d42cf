"""Command-line tools for encoding, decoding and tracing RLP values."""

from __future__ import annotations

import argparse
import json
import re
import sys
from typing import Callable, Optional, Sequence

from ethcodec.rlp_decode import decode
from ethcodec.rlp_encodable import rlp_encode
from ethcodec.rlp_encode import encode

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")
_UNSIGNED = re.compile(r"\+?[0-9]+")

_TRACE_CASES = (
    ("case: 0", 0),
    ("case: 1", 1),
    ("case: 55", 55),
    ("case: 56 (first long-string length)", 56),
    ("case: 255", 255),
    ("case: 256", 256),
    ("case: 1024", 1024),
)
_SHORT_TEXT = "dog"
_LONG_TEXT = "Lorem ipsum dolor sit amet, consectetur adipisicing elit"


def from_hex(text: str) -> bytes:
    """Parse a hex string, with or without a leading ``0x``, into bytes."""
    if text.startswith("0x"):
        text = text[2:]
    if len(text) % 2 != 0:
        raise ValueError("hex string must have even length")
    out = bytearray()
    for start in range(0, len(text), 2):
        pair = text[start:start + 2]
        if not _HEX_PAIR.fullmatch(pair):
            raise ValueError(f"invalid hex byte: {pair}")
        out.append(int(pair, 16))
    return bytes(out)


def to_hex(data: bytes) -> str:
    """Render bytes as lower-case hex without a prefix."""
    return bytes(data).hex()


def _spaced_hex(data: bytes) -> str:
    return " ".join(f"{b:02x}" for b in data) if data else "(empty)"


def _byte_list(data: bytes) -> str:
    return str(list(data))


def _trace_line(label: str, data: bytes) -> str:
    return f"{label:<20}= {_byte_list(data)} | hex [{_spaced_hex(data)}]"


def trace_encode_length_be(n: int) -> bytes:
    """Encode ``n`` as minimal big-endian bytes, printing every step."""
    if n < 0:
        raise ValueError("length must be non-negative")
    print(f"start n = {n} (0x{n:x})")
    collected = bytearray()
    step = 1
    while n > 0:
        low = n & 0xFF
        print(f"step {step}:")
        print(f"  current n         = {n} (0x{n:x})")
        print(f"  low byte pushed   = {low} (0x{low:02x})")
        collected.append(low)
        print(f"  bytes so far      = {_byte_list(collected)} | hex [{_spaced_hex(collected)}]")
        n >>= 8
        print(f"  n after >> 8      = {n} (0x{n:x})")
        step += 1
    print(_trace_line("before reverse", collected))
    collected.reverse()
    print(_trace_line("after reverse", collected))
    print()
    return bytes(collected)


def _trace_case(label: str, n: int) -> None:
    print("=" * 60)
    print(label)
    out = trace_encode_length_be(n)
    print(_trace_line("returned bytes", out))
    print()


def _item_debug(item) -> str:
    if isinstance(item, (bytes, bytearray)):
        return f"Bytes({_byte_list(item)})"
    return "List([" + ", ".join(_item_debug(child) for child in item) + "])"


def _quoted(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _strip_hex_prefixes(text: str) -> str:
    while text.startswith("0x"):
        text = text[2:]
    return text


def _parse_uint(text: Optional[str], bits: int, default: int) -> int:
    if text is None or not _UNSIGNED.fullmatch(text):
        return default
    value = int(text)
    return value if value < (1 << bits) else default


def _decode_input(raw: str):
    encoded = from_hex(raw)
    decoded = decode(encoded)
    print(f"hex: 0x{_strip_hex_prefixes(raw)}")
    print(f"encoded: {_byte_list(encoded)}")
    print(f"decoded: {_item_debug(decoded)}")
    return decoded


def _cmd_decode_bytes(value: Optional[str]) -> None:
    decoded = _decode_input(value if value is not None else "8180")
    if isinstance(decoded, bytes):
        print(f"decoded hex: 0x{to_hex(decoded)}")


def _cmd_decode_list(value: Optional[str]) -> None:
    _decode_input(value if value is not None else "c88363617483646f67")


def _cmd_decode_str(value: Optional[str]) -> None:
    decoded = _decode_input(value if value is not None else "83646f67")
    if isinstance(decoded, bytes):
        try:
            text = decoded.decode("utf-8")
        except UnicodeDecodeError:
            return
        print(f"as utf8: {_quoted(text)}")


def _cmd_decode_u8(value: Optional[str]) -> None:
    decoded = _decode_input(value if value is not None else "7f")
    if isinstance(decoded, bytes) and len(decoded) == 1:
        print(f"as u8: {decoded[0]}")
    elif isinstance(decoded, bytes) and not decoded:
        print("as u8: 0")
    else:
        print("as u8: not a canonical single-byte integer view")


def _print_encoded(input_text: str, encoded: bytes) -> None:
    print(f"input: {input_text}")
    print(f"encoded: {_byte_list(encoded)}")
    print(f"hex: 0x{to_hex(encoded)}")


def _cmd_encode_bool(value: Optional[str]) -> None:
    flag = value in ("true", "1")
    _print_encoded("true" if flag else "false", rlp_encode(flag))


def _cmd_encode_bytes(value: Optional[str]) -> None:
    raw = value if value is not None else "80"
    data = from_hex(raw)
    encoded = rlp_encode(data)
    print(f"input bytes: {_byte_list(data)}")
    print(f"input hex: 0x{_strip_hex_prefixes(raw)}")
    print(f"encoded: {_byte_list(encoded)}")
    print(f"encoded hex: 0x{to_hex(encoded)}")


def _cmd_encode_list(value: Optional[str]) -> None:
    item = [b"cat", b"dog"]
    _print_encoded(_item_debug(item), encode(item))


def _cmd_encode_str(value: Optional[str]) -> None:
    text = value if value is not None else "dog"
    _print_encoded(_quoted(text), rlp_encode(text))


def _cmd_encode_u64(value: Optional[str]) -> None:
    number = _parse_uint(value, 64, 1024)
    _print_encoded(str(number), rlp_encode(number))


def _cmd_encode_u8(value: Optional[str]) -> None:
    number = _parse_uint(value, 8, 0)
    _print_encoded(str(number), rlp_encode(number))


_COMMANDS: dict[str, tuple[Callable[[Optional[str]], None], str]] = {
    "decode-bytes": (_cmd_decode_bytes, "decode RLP hex and show the byte string"),
    "decode-list": (_cmd_decode_list, "decode RLP hex holding a list"),
    "decode-str": (_cmd_decode_str, "decode RLP hex and show it as UTF-8 text"),
    "decode-u8": (_cmd_decode_u8, "decode RLP hex as a single-byte integer"),
    "encode-bool": (_cmd_encode_bool, "encode a boolean ('true' or '1' is true)"),
    "encode-bytes": (_cmd_encode_bytes, "encode bytes given as hex"),
    "encode-list": (_cmd_encode_list, "encode the list ['cat', 'dog']"),
    "encode-str": (_cmd_encode_str, "encode a text string"),
    "encode-u64": (_cmd_encode_u64, "encode an unsigned 64-bit integer"),
    "encode-u8": (_cmd_encode_u8, "encode an unsigned 8-bit integer"),
}


def _run_trace(numbers: Sequence[int]) -> None:
    if numbers:
        for n in numbers:
            _trace_case(f"case: {n}", n)
        return
    for label, n in _TRACE_CASES:
        _trace_case(label, n)
    thousand_as = "a" * 1024
    _trace_case(f"string length: {_quoted(_SHORT_TEXT)} -> {len(_SHORT_TEXT)}", len(_SHORT_TEXT))
    _trace_case(f"string length: lorem ipsum -> {len(_LONG_TEXT)}", len(_LONG_TEXT))
    _trace_case(f"string length: 1024 x 'a' -> {len(thousand_as)}", len(thousand_as))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ethcodec", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("value", nargs="?", default=None)
    trace = commands.add_parser("trace-length", help="trace big-endian length encoding")
    trace.add_argument("numbers", nargs="*", type=int)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "trace-length":
            _run_trace(args.numbers)
        else:
            _COMMANDS[args.command][0](args.value)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())