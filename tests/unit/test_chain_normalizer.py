from __future__ import annotations

import pytest

from market_import.services.chain_normalizer import CHAIN_NAMES, FALLBACK_CHAIN, normalize_chain_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("SPAR", "Spar"),
        ("spar", "Spar"),
        ("  Spar  ", "Spar"),
        ("Billa Plus", "Billa+"),
        ("BILLA PLUS", "Billa+"),
        ("billa+", "Billa+"),
        ("Billa+ Privat", "BILLA+ Privat"),
        ("billa privat", "BILLA Privat"),
        ("Spar Gourmet", "Spar Gourmet"),
        ("HOFER", "Hofer"),
        ("merkur", "Merkur"),
    ],
)
def test_known_variants_map_to_canonical_name(raw: str, expected: str):
    assert normalize_chain_name(raw) == expected


def test_empty_chain_falls_back_to_sonstige():
    assert normalize_chain_name("") == FALLBACK_CHAIN == "Sonstige"


def test_unknown_chain_is_returned_unmodified():
    assert normalize_chain_name("Acme") == "Acme"
    # 未登録値は大文字小文字・前後空白もそのまま
    assert normalize_chain_name(" acme Markt ") == " acme Markt "


def test_no_partial_matching():
    assert normalize_chain_name("Spar Express") == "Spar Express"
    assert normalize_chain_name("Billa") == "Billa"


def test_lookup_table_is_immutable():
    with pytest.raises(TypeError):
        CHAIN_NAMES["lidl"] = "Lidl"  # type: ignore[index]
    assert len(CHAIN_NAMES) == 14
    assert all(key == key.strip().lower() for key in CHAIN_NAMES)
