"""Reactor components."""

from process_plant.components.reaction.reactor import Reactor

__all__ = ['Reactor']
