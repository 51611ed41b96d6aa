from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Positional column layout of the market export sheet.

The source sheet has no reliable header names, so cells are addressed by their
0-based position. Changing the layout means editing COLUMN_SCHEMA only; the row
mapper iterates it and never uses literal indices.

    A=0  ID               H=7   Name
    C=2  Channel          I=8   PLZ
    E=4  Banner           J=9   Stadt
    F=5  Handelskette     K=10  Straße
                          L=11  GL Name
                          M=12  GL Email
                          N=13  Status (Aktiv/Inaktiv)
                          P=15  Frequenz
                          R=17  Market Tel
                          S=18  Market Email
"""

__all__ = [
    "ColumnKind",
    "ColumnSpec",
    "COLUMN_SCHEMA",
]


class ColumnKind(Enum):
    """How a cell value is converted.

    - TEXT: trimmed text, empty cell -> default ("")
    - OPTIONAL_TEXT: trimmed text, empty cell -> None
    - NUMBER: float parse, unparsable/empty -> default
    """
    TEXT = "text"
    OPTIONAL_TEXT = "optional_text"
    NUMBER = "number"


@dataclass(frozen=True)
class ColumnSpec:
    position: int  # 0-indexed cell position
    field: str  # mapper field name
    kind: ColumnKind = ColumnKind.TEXT
    default: object = ""


COLUMN_SCHEMA: tuple[ColumnSpec, ...] = (
    ColumnSpec(0, "internal_id"),
    ColumnSpec(2, "channel", ColumnKind.OPTIONAL_TEXT, None),
    ColumnSpec(4, "banner", ColumnKind.OPTIONAL_TEXT, None),
    ColumnSpec(5, "chain"),
    ColumnSpec(7, "name"),
    ColumnSpec(8, "postal_code"),
    ColumnSpec(9, "city"),
    ColumnSpec(10, "address"),
    ColumnSpec(11, "gebietsleiter_name", ColumnKind.OPTIONAL_TEXT, None),
    ColumnSpec(12, "gebietsleiter_email", ColumnKind.OPTIONAL_TEXT, None),
    ColumnSpec(13, "status"),
    ColumnSpec(15, "frequency", ColumnKind.NUMBER, 12),
    ColumnSpec(17, "market_tel", ColumnKind.OPTIONAL_TEXT, None),
    ColumnSpec(18, "market_email", ColumnKind.OPTIONAL_TEXT, None),
)
