"""Mixing components for combining multiple streams."""

from process_plant.components.mixing.mixer import Mixer

__all__ = ['Mixer']
