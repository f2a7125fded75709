"""Identifier Shape Check — validates the 36-char dashed hexadecimal record id.

Invariants:
    - Valid iff length 36, '-' at 8/13/18/23, ASCII hex digit everywhere else
    - Upper and lower case hex digits both accepted, never normalized
    - No version/variant nibble checks (shape only, not RFC 4122 conformance)

Design Decisions:
    - Explicit character walk over uuid.UUID(): the stdlib parser accepts braces,
      urn: prefixes and undashed forms that this shape must reject
"""

GUID_LENGTH = 36
HYPHEN_POSITIONS = frozenset({8, 13, 18, 23})
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_valid_identifier(value: str) -> bool:
    """Return True if value has the xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx shape."""
    if len(value) != GUID_LENGTH:
        return False
    for index, char in enumerate(value):
        if index in HYPHEN_POSITIONS:
            if char != "-":
                return False
        elif char not in _HEX_DIGITS:
            return False
    return True
