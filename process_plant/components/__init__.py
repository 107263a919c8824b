"""Concrete process devices."""

from process_plant.components.mixing import Mixer
from process_plant.components.reaction import Reactor

__all__ = ['Mixer', 'Reactor']
