from __future__ import annotations

from market_import.models.imported_market import ImportedMarket
from market_import.services.importer import process_import_data

"""Payload contract: keys of the serialized record consumed by the admin data store."""

REQUIRED_KEYS = {
    "id", "internalId", "name", "address", "city", "postalCode", "chain",
    "frequency", "currentVisits", "isActive",
}
OPTIONAL_KEYS = {
    "channel", "banner", "gebietsleiterName", "gebietsleiterEmail", "marketTel", "marketEmail",
}


def test_full_record_has_exactly_the_contract_keys(header, market_row):
    (market,) = process_import_data([header, market_row()])
    assert set(market.to_dict()) == REQUIRED_KEYS | OPTIONAL_KEYS


def test_minimal_record_has_required_keys_only():
    payload = ImportedMarket(id="1", internal_id="1", name="Spar").to_dict()
    assert set(payload) == REQUIRED_KEYS


def test_record_invariants(header, market_row):
    rows = [header] + [
        market_row(internal_id=str(i), chain=chain, frequency=freq)
        for i, (chain, freq) in enumerate([("", "0"), ("x", "-3"), ("SPAR", ""), ("hofer", "1.49")], start=1)
    ]
    for market in process_import_data(rows):
        payload = market.to_dict()
        assert payload["id"] and payload["internalId"]
        assert payload["chain"]
        assert isinstance(payload["frequency"], int) and payload["frequency"] >= 1
        assert payload["currentVisits"] == 0
