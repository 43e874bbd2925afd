"""Control Addresses — typed variants for control identifiers, encoded only at the boundary.

Invariants:
    - toggle wire form: "toggle:<absoluteIndex>:chunk:<pageIndex>" (exactly 4 fields)
    - spacer wire form: "spacer:<pageIndex>:<slot>" — filler controls, never addressable
    - Index fields are non-negative base-10 integers; anything else is BadAddressError
    - Unknown discriminants decode to ReservedControl (ignored, not an error)
    - decode(encode(x)) == x for ToggleAddress and SpacerAddress

Design Decisions:
    - Tagged dataclasses over raw split strings: internal logic never touches ":"
    - Strict digit regex over int(): int() accepts "+1", " 1", "1_0"
"""

import re
from dataclasses import dataclass

from rosterboard.core.domain_types import ControlKind
from rosterboard.core.errors import BadAddressError

_SEPARATOR = ":"
_PAGE_MARKER = "chunk"
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ToggleAddress:
    """Live control: flips the claim of the entry at entry_index."""
    entry_index: int
    page_index: int

    @property
    def is_addressable(self) -> bool:
        return True


@dataclass(frozen=True)
class SpacerAddress:
    """Filler control padding a row — carries no entry."""
    page_index: int
    slot: int

    @property
    def is_addressable(self) -> bool:
        return False


@dataclass(frozen=True)
class ReservedControl:
    """Identifier with a discriminant this service does not handle."""
    discriminant: str

    @property
    def is_addressable(self) -> bool:
        return False


ControlAddress = ToggleAddress | SpacerAddress | ReservedControl


def encode_control_id(address: ToggleAddress | SpacerAddress) -> str:
    """Serialize a typed address to its wire identifier."""
    if isinstance(address, ToggleAddress):
        return _SEPARATOR.join((
            ControlKind.TOGGLE.value, str(address.entry_index),
            _PAGE_MARKER, str(address.page_index),
        ))
    return _SEPARATOR.join((
        ControlKind.SPACER.value, str(address.page_index), str(address.slot),
    ))


def decode_control_id(custom_id: str) -> ControlAddress:
    """Parse a wire identifier. Raises BadAddressError when malformed."""
    if not custom_id:
        raise BadAddressError(custom_id, "empty identifier")
    parts = custom_id.split(_SEPARATOR)
    kind = parts[0]
    if kind == ControlKind.TOGGLE.value:
        return _decode_toggle(custom_id, parts)
    if kind == ControlKind.SPACER.value:
        return _decode_spacer(custom_id, parts)
    return ReservedControl(discriminant=kind)


def _decode_toggle(custom_id: str, parts: list[str]) -> ToggleAddress:
    if len(parts) != 4:
        raise BadAddressError(custom_id, f"expected 4 fields, got {len(parts)}")
    if parts[2] != _PAGE_MARKER:
        raise BadAddressError(custom_id, f"expected '{_PAGE_MARKER}' marker")
    return ToggleAddress(
        entry_index=_parse_index(custom_id, parts[1], "entry index"),
        page_index=_parse_index(custom_id, parts[3], "page index"),
    )


def _decode_spacer(custom_id: str, parts: list[str]) -> SpacerAddress:
    if len(parts) != 3:
        raise BadAddressError(custom_id, f"expected 3 fields, got {len(parts)}")
    return SpacerAddress(
        page_index=_parse_index(custom_id, parts[1], "page index"),
        slot=_parse_index(custom_id, parts[2], "slot"),
    )


def _parse_index(custom_id: str, raw: str, label: str) -> int:
    if not _DIGITS.fullmatch(raw):
        raise BadAddressError(custom_id, f"{label} '{raw}' is not an integer")
    return int(raw)
