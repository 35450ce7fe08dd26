"""Transport kind domain model."""

from enum import Enum


class TransportKind(str, Enum):
    """Kinds of transport a leg or departure can use."""

    WALK = "walk"
    METRO = "metro"
    TRAIN = "train"
    TRAM = "tram"
    BUS = "bus"
    SHIP = "ship"
