from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

"""Chain name normalization.

Lookup-or-passthrough: known spellings map to the canonical display name, every
other value is returned untouched. Matching is exact on the lowercased, trimmed
input; there is no fuzzy or partial matching.
"""

__all__ = [
    "FALLBACK_CHAIN",
    "CHAIN_NAMES",
    "normalize_chain_name",
]

FALLBACK_CHAIN = "Sonstige"

CHAIN_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "adeg": "Adeg",
        "billa+": "Billa+",
        "billa plus": "Billa+",
        "billa+ privat": "BILLA+ Privat",
        "billa privat": "BILLA Privat",
        "eurospar": "Eurospar",
        "futterhaus": "Futterhaus",
        "hagebau": "Hagebau",
        "interspar": "Interspar",
        "spar": "Spar",
        "spar gourmet": "Spar Gourmet",
        "zoofachhandel": "Zoofachhandel",
        "hofer": "Hofer",
        "merkur": "Merkur",
    }
)


def normalize_chain_name(chain: str) -> str:
    """Map a raw chain name to its canonical display form.

    >>> normalize_chain_name("SPAR")
    'Spar'
    >>> normalize_chain_name("")
    'Sonstige'
    >>> normalize_chain_name(" Acme ")
    ' Acme '
    """
    if not chain:
        return FALLBACK_CHAIN
    # 未登録の値は元の表記 (大文字小文字・空白) のまま返す
    return CHAIN_NAMES.get(chain.strip().lower(), chain)
