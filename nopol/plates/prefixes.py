"""
Indonesian Regional Plate Prefixes

Registration prefixes ("kode wilayah") grouped by the region that issues them.
"""

from types import MappingProxyType
from typing import Optional


# Region -> prefixes issued there
REGION_PREFIXES = MappingProxyType({
    "Jakarta": ("B",),
    "West Java": ("D", "E", "F", "T", "Z"),
    "Central Java": ("G", "H", "K", "R", "AA", "AD"),
    "East Java": ("L", "M", "N", "S", "W", "AE", "AG", "P"),
    "North Sumatra": ("BB", "BK"),
    "West Sumatra": ("BA",),
    "Riau": ("BM",),
    "South Sumatra": ("BG",),
    "Lampung": ("BE",),
    "Bengkulu": ("BD",),
    "Jambi": ("BH",),
    "Bangka Belitung": ("BN",),
    "Riau Islands": ("BP",),
    "Banten": ("A",),
    "Yogyakarta": ("AB",),
    "Bali": ("DK",),
    "West Nusa Tenggara": ("DR", "EA"),
    "East Nusa Tenggara": ("DH", "EB"),
    "West Kalimantan": ("KB",),
    "Central Kalimantan": ("KH",),
    "South Kalimantan": ("DA",),
    "East Kalimantan": ("KT",),
    "North Kalimantan": ("KU",),
    "North Sulawesi": ("DB", "DL"),
    "Central Sulawesi": ("DN",),
    "South Sulawesi": ("DD", "DP", "DW"),
    "Southeast Sulawesi": ("DT",),
    "Gorontalo": ("DM",),
    "West Sulawesi": ("DC",),
    "Maluku": ("DE",),
    "North Maluku": ("DG",),
    "Papua": ("PA", "PB"),
    "West Papua": ("PK",),
})

VALID_PREFIXES = frozenset(
    prefix for prefixes in REGION_PREFIXES.values() for prefix in prefixes
)

_REGION_BY_PREFIX = MappingProxyType({
    prefix: region
    for region, prefixes in REGION_PREFIXES.items()
    for prefix in prefixes
})


def region_for_prefix(prefix: Optional[str]) -> Optional[str]:
    """
    Look up the issuing region of a prefix.

    Args:
        prefix: Plate prefix, any case

    Returns:
        Region name, or None for unknown prefixes
    """
    if not isinstance(prefix, str):
        return None
    return _REGION_BY_PREFIX.get(prefix.strip().upper())
