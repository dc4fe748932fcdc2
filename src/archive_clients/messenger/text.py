"""Repair of mis-encoded text fields in Messenger exports.

Facebook writes UTF-8 text into its JSON as ``\\u00XX`` escapes, one per byte,
so after ``json.loads`` every character of a field holds a single byte of the
real UTF-8 encoding. ``"Jos\\u00c3\\u00a9"`` is ``"José"``.
"""

from __future__ import annotations


def decode_string(raw: str | None) -> str:
    """Reinterpret each character of ``raw`` as a byte and decode as UTF-8.

    Never raises. Invalid byte sequences decode to U+FFFD, and text that
    contains characters outside the byte range (already correct text) is
    returned unchanged. Non-string values are stringified. Apply once per
    raw field: decoding correct non-ASCII text a second time garbles it.
    """
    if not raw:
        return ""
    if not isinstance(raw, str):
        return str(raw)
    try:
        data = raw.encode("latin-1")
    except UnicodeEncodeError:
        return raw
    return data.decode("utf-8", errors="replace")


normalize = decode_string
