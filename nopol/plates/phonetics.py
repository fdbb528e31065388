"""
Phonetic Corrections

Spoken forms that speech recognition returns for plate letters and digits,
mapped back to the characters the speaker meant.
"""

from types import MappingProxyType
from typing import Tuple


# Ordered (heard, meant) pairs, uppercase
PHONETIC_CORRECTIONS: Tuple[Tuple[str, str], ...] = (
    # Spoken letters
    ("ABI", "AB"),
    ("ABE", "AB"),
    ("ABEH", "AB"),
    ("ABEY", "AB"),
    ("ADEH", "AD"),
    ("ADE", "AD"),
    ("ADEY", "AD"),
    ("ADI", "AD"),
    ("BEH", "B"),
    ("BEE", "B"),
    ("BEY", "B"),
    ("CEH", "C"),
    ("SEE", "C"),
    ("SEY", "C"),
    ("DEH", "D"),
    ("DEE", "D"),
    ("DEY", "D"),
    ("EH", "E"),
    ("EY", "E"),
    ("EF", "F"),
    ("GEH", "G"),
    ("JEE", "G"),
    ("GEY", "G"),
    ("AITCH", "H"),
    ("HAH", "H"),
    ("HEH", "H"),
    ("JAY", "J"),
    ("JEH", "J"),
    ("KAY", "K"),
    ("KEH", "K"),
    ("KEI", "K"),
    ("EL", "L"),
    ("LEH", "L"),
    ("EM", "M"),
    ("MEH", "M"),
    ("EN", "N"),
    ("NEH", "N"),
    ("PEE", "P"),
    ("PEH", "P"),
    ("PEY", "P"),
    ("AR", "R"),
    ("REH", "R"),
    ("ES", "S"),
    ("SEH", "S"),
    ("TEE", "T"),
    ("TEH", "T"),
    ("TEY", "T"),
    ("WEE", "W"),
    ("WEH", "W"),
    ("DOUBLE U", "W"),
    ("ZED", "Z"),
    ("ZEE", "Z"),
    ("ZEH", "Z"),

    # Two-letter prefixes heard as Indonesian names
    ("EDI", "ED"),
    ("EFI", "EF"),
    ("AGI", "AG"),
    ("AEI", "AE"),
    ("BAI", "BA"),
    ("BEI", "BE"),
    ("BDI", "BD"),
    ("BGI", "BG"),
    ("BHI", "BH"),
    ("BKI", "BK"),
    ("BMI", "BM"),
    ("BNI", "BN"),
    ("BPI", "BP"),
    ("DAI", "DA"),
    ("DBI", "DB"),
    ("DCI", "DC"),
    ("DDI", "DD"),
    ("DEI", "DE"),
    ("DGI", "DG"),
    ("DHI", "DH"),
    ("DKI", "DK"),
    ("DLI", "DL"),
    ("DMI", "DM"),
    ("DNI", "DN"),
    ("DPI", "DP"),
    ("DRI", "DR"),
    ("DTI", "DT"),
    ("DWI", "DW"),
    ("EAI", "EA"),
    ("EBI", "EB"),
    ("KBI", "KB"),
    ("KHI", "KH"),
    ("KTI", "KT"),
    ("KUI", "KU"),
    ("PAI", "PA"),
    ("PBI", "PB"),
    ("PKI", "PK"),

    # Doubled letters
    ("ABEH ABEH", "AA"),
    ("ABI ABI", "AA"),
    ("BEH BEH", "BB"),
    ("BEE BEE", "BB"),
    ("DEH DEH", "DD"),
    ("DEE DEE", "DD"),

    # Spelling alphabet
    ("ALPHA", "A"),
    ("BRAVO", "B"),
    ("CHARLIE", "C"),
    ("DELTA", "D"),
    ("ECHO", "E"),
    ("FOXTROT", "F"),
    ("GOLF", "G"),
    ("HOTEL", "H"),

    # Indonesian number words
    ("SATU", "1"),
    ("DUA", "2"),
    ("TIGA", "3"),
    ("EMPAT", "4"),
    ("LIMA", "5"),
    ("ENAM", "6"),
    ("TUJUH", "7"),
    ("DELAPAN", "8"),
    ("SEMBILAN", "9"),
    ("NOL", "0"),
    ("KOSONG", "0"),
)

# Whole-word lookup
PHONETIC_LOOKUP = MappingProxyType(dict(PHONETIC_CORRECTIONS))


def substitution_order() -> Tuple[Tuple[str, str], ...]:
    """
    Corrections in the order they are applied as substitutions.

    Longer phrases go first so "DELAPAN" is rewritten before "EL" can eat
    into it and "BEH BEH" before "BEH". Equal lengths keep table order.
    """
    return _SUBSTITUTION_ORDER


_SUBSTITUTION_ORDER = tuple(
    sorted(PHONETIC_CORRECTIONS, key=lambda pair: -len(pair[0]))
)
