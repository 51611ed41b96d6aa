from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

"""ImportedMarket record model.

One ImportedMarket is produced per accepted spreadsheet row. Attribute names are
snake_case; ``to_dict`` renders the camelCase payload consumed by the admin
data store.
"""

__all__ = [
    "ImportedMarket",
]

# snake_case 属性名 -> 出力 (camelCase) キー
_PAYLOAD_KEYS: dict[str, str] = {
    "id": "id",
    "internal_id": "internalId",
    "name": "name",
    "address": "address",
    "city": "city",
    "postal_code": "postalCode",
    "chain": "chain",
    "frequency": "frequency",
    "current_visits": "currentVisits",
    "is_active": "isActive",
    "channel": "channel",
    "banner": "banner",
    "gebietsleiter_name": "gebietsleiterName",
    "gebietsleiter_email": "gebietsleiterEmail",
    "market_tel": "marketTel",
    "market_email": "marketEmail",
}

OPTIONAL_FIELDS = frozenset(
    {
        "channel",
        "banner",
        "gebietsleiter_name",
        "gebietsleiter_email",
        "market_tel",
        "market_email",
    }
)


@dataclass(frozen=True)
class ImportedMarket:
    """Normalized market record built from a single spreadsheet row.

    Attributes:
        id: Record identifier (the source ID, or ``IMPORT-NNNN`` fallback)
        internal_id: Raw market identifier from the source file, never empty
        name: Market name, never empty
        chain: Canonical chain name, ``"Sonstige"`` when the source is empty
        frequency: Planned visits, always >= 1
        current_visits: Always 0 for freshly imported markets
        is_active: True iff the status column reads "aktiv"
    """
    id: str
    internal_id: str
    name: str
    address: str = ""
    city: str = ""
    postal_code: str = ""
    chain: str = "Sonstige"
    frequency: int = 12
    current_visits: int = 0
    is_active: bool = False
    # 任意項目: 空セルは None (出力 dict では省略)
    channel: str | None = None
    banner: str | None = None
    gebietsleiter_name: str | None = None  # GL Name
    gebietsleiter_email: str | None = None  # GL Email
    market_tel: str | None = None
    market_email: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase payload, omitting unset optional fields."""
        payload: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in OPTIONAL_FIELDS and value is None:
                continue
            payload[_PAYLOAD_KEYS[f.name]] = value
        return payload

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> ImportedMarket:
        """Build a record from a camelCase payload (inverse of ``to_dict``).

        Unknown keys are ignored.
        """
        kwargs = {attr: payload[key] for attr, key in _PAYLOAD_KEYS.items() if key in payload}
        return ImportedMarket(**kwargs)
