"""
rulebook/icons.py — podmiana znaczników ikon %token% na tokeny wyświetlania.

Tabela ICONS jest stała. Klucze tworzą rozłączne zbiory (cyfry, pojedyncze
litery, słowa), a tokeny wynikowe nie zawierają '%', więc kolejność
podmian nie ma znaczenia, a iconify jest idempotentne.
"""

from __future__ import annotations

from collections.abc import Mapping

ICONS: Mapping[str, str] = {
    # koszty
    "1": "<:icon_1:1294668469257633874>",
    "2": "<:icon_2:1294668512035344384>",
    "3": "<:icon_3:1294668541651324969>",
    "4": "<:icon_4:1294668575738691687>",
    "5": "<:icon_5:1294668611083960361>",
    "6": "<:icon_6:1294668649621094554>",
    "7": "<:icon_7:1294668688347369564>",
    "8": "<:icon_8:1294668756521324646>",
    "9": "<:icon_9:1294668790566617088>",
    "x": "<:icon_x:1294668825354309643>",
    # wyzwalacze i strefy
    "j": "<:icon_j:1294649576124321813>",
    "r": "<:icon_r:1294668318812143697>",
    "h": "<:icon_h:1294670002439454775>",
    "T": "<:icon_T:1294670251493032000>",
    "D": "<:icon_D:1294670405251891250>",
    "O": "<:icon_O:1294671037681897584>",
    "V": "<:icon_V:1294671319320891433>",
    "M": "<:icon_M:1294671220221939826>",
    # rzadkość
    "common": "<:icon_common:1294678013404774422>",
    "rare":   "<:icon_rare:1294678128664379522>",
    "unique": "<:icon_unique:1294678091007918120>",
    # frakcje
    "axiom":  "<:icon_axiom:1294678780144521330>",
    "bravos": "<:icon_bravos:1294678819608727693>",
    "lyra":   "<:icon_lyra:1294678874403110913>",
    "muna":   "<:icon_muna:1294678905541890171>",
    "ordis":  "<:icon_ordis:1294678944959823872>",
    "yzmir":  "<:icon_yzmir:1294678973246083124>",
}


def iconify(text: str, icons: Mapping[str, str] = ICONS) -> str:
    """
    Zamienia każde wystąpienie %token% na odpowiadający mu token z `icons`.

    Nieznane sekwencje %...% zostają bez zmian. Dopasowanie jest
    wrażliwe na wielkość liter ("%T%" ≠ "%t%").

    Przykład::

        iconify("Pay %1% %x% mana")
        → "Pay <:icon_1:…> <:icon_x:…> mana"
    """
    for token, replacement in icons.items():
        text = text.replace(f"%{token}%", replacement)
    return text
