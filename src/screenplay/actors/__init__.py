"""Actors and their abilities."""

from screenplay.actors.abilities import Ability, BrowseTheWeb
from screenplay.actors.actor import Actor

__all__ = ["Ability", "Actor", "BrowseTheWeb"]
