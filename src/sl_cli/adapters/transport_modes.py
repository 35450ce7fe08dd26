"""Classification of SL product names and transport modes into transport kinds."""

import unicodedata

from sl_cli.domain.models.transport_kind import TransportKind

# Substring tokens checked in order; the first group with a hit wins
PRODUCT_NAME_TOKENS: tuple[tuple[TransportKind, tuple[str, ...]], ...] = (
    (TransportKind.WALK, ("FOOTPATH", "FOOT", "WALK")),
    (TransportKind.METRO, ("TUNNELBANA", "METRO")),
    (TransportKind.TRAIN, ("PENDEL", "TAG", "TRAIN")),
    (TransportKind.TRAM, ("SPARV", "TRAM")),
    (TransportKind.SHIP, ("BAT", "SHIP", "FERRY")),
    (TransportKind.BUS, ("BUS",)),
)

# Controlled vocabulary of the departures feed
TRANSPORT_MODE_MAP: dict[str, TransportKind] = {
    "METRO": TransportKind.METRO,
    "TRAIN": TransportKind.TRAIN,
    "COMMUTER_TRAIN": TransportKind.TRAIN,
    "TRAM": TransportKind.TRAM,
    "SHIP": TransportKind.SHIP,
    "FERRY": TransportKind.SHIP,
}


def _strip_diacritics(text: str) -> str:
    """Remove combining marks, e.g. 'Pendeltåg' -> 'Pendeltag'."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def classify_product_name(product_name: str | None) -> TransportKind:
    """Map a free-text journey planner product name to a transport kind.

    Args:
        product_name: Product name such as "Tunnelbana", "Pendeltåg" or "footpath".

    Returns:
        The matching transport kind, BUS when nothing matches.
    """
    upper = _strip_diacritics(product_name or "").upper()

    for kind, tokens in PRODUCT_NAME_TOKENS:
        if any(token in upper for token in tokens):
            return kind

    return TransportKind.BUS


def classify_transport_mode(mode: str | None) -> TransportKind:
    """Map a departures-feed transport mode code to a transport kind."""
    return TRANSPORT_MODE_MAP.get((mode or "").upper(), TransportKind.BUS)
