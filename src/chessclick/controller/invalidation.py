"""Redraw invalidation for the two cached visual layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class Layer(IntEnum):
    """Independently cached visual layers."""

    BOARD = auto()  # board background + pieces
    MARKERS = auto()  # selection, legal-move markers, last move


@dataclass
class LayerRecord:
    dirty: bool
    last_size: tuple[float, float]


class InvalidationTracker:
    """Decides once per frame whether each layer must be rebuilt.

    A layer is due when it was marked dirty or the viewport size differs
    from the size it was last built for. Resizing therefore invalidates
    both layers, while a selection change only dirties the markers.
    """

    __slots__ = ("_records",)

    def __init__(self, initial_size: tuple[float, float]) -> None:
        self._records = {layer: LayerRecord(True, initial_size) for layer in Layer}

    def mark_dirty(self, *layers: Layer) -> None:
        for layer in layers:
            self._records[layer].dirty = True

    def is_dirty(self, layer: Layer) -> bool:
        return self._records[layer].dirty

    def last_size(self, layer: Layer) -> tuple[float, float]:
        return self._records[layer].last_size

    def should_rebuild(self, layer: Layer, size: tuple[float, float]) -> bool:
        record = self._records[layer]
        return record.dirty or record.last_size != size

    def mark_rebuilt(self, layer: Layer, size: tuple[float, float]) -> None:
        self._records[layer] = LayerRecord(False, size)
