"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, List, Optional

from hazel.events import Event


class Layer:
    """A slice of an application that is updated, rendered and given events.

    The default hooks keep simple bookkeeping: whether the layer is attached,
    the last event it was offered and how many UI frames it has drawn.
    """

    def __init__(self, name: str = "layer") -> None:
        self.debug_name = name
        self.attached = False
        self.last_event: Optional[Event] = None
        self.ui_frames = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack."""
        self.attached = False

    def on_update(self) -> None:
        """Called once per frame."""

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""
        self.last_event = event

    def on_imgui_render(self) -> None:
        """Called once per frame while the UI frame is open."""
        self.ui_frames += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.debug_name!r})"


class LayerStack:
    """Ordered layers with overlays kept after all ordinary layers.

    Iterating forwards gives update and render order; iterating in reverse
    gives the order in which events are offered.
    """

    def __init__(self) -> None:
        self._layers: List[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> Optional[int]:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Attach ``layer`` and place it after the other ordinary layers."""
        layer.on_attach()
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Attach ``overlay`` and place it at the very end."""
        overlay.on_attach()
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach ``layer`` and remove it if present."""
        layer.on_detach()
        index = self._find(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach ``overlay`` and remove it if present."""
        overlay.on_detach()
        index = self._find(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def close(self) -> None:
        """Detach every layer and empty the stack."""
        layers, self._layers = self._layers, []
        self._insert_index = 0
        for layer in layers:
            layer.on_detach()

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()