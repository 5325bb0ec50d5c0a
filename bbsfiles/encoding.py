"""Conversions between Big5 bytes, NUL-terminated C strings and str."""

_BIG5_CODEC = "cp950"


def big5_to_utf8(data: bytes) -> str:
    """Decode Big5 bytes to text; undecodable bytes become U+FFFD."""
    return bytes(data).decode(_BIG5_CODEC, errors="replace")


def utf8_to_big5(text: str) -> bytes:
    """Encode text as Big5; characters without a Big5 form become '?'."""
    return text.encode(_BIG5_CODEC, errors="replace")


def _cstring_bytes(data: bytes) -> bytes:
    data = bytes(data)
    end = data.find(b"\x00")
    return data if end < 0 else data[:end]


def cstring_to_str(data: bytes) -> str:
    """Return the text before the first NUL byte of ``data``."""
    return _cstring_bytes(data).decode("utf-8", errors="replace")


def big5_cstring_to_str(data: bytes) -> str:
    """Return the Big5 text before the first NUL byte of ``data``."""
    return big5_to_utf8(_cstring_bytes(data))