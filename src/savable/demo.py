"""Example domain types and a save/load walkthrough used by ``python -m savable demo``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from savable.entity import SavableObject

if TYPE_CHECKING:
    from savable.store import EntityStore

logger = logging.getLogger(__name__)


@dataclass
class Address:
    street: str | None = None
    city: str | None = None
    stateCode: str | None = None
    postIndex: str | None = None


@dataclass
class Person(SavableObject):
    firstName: str | None = None
    lastName: str | None = None
    address: Address = field(default_factory=Address)


@dataclass
class Business(SavableObject):
    name: str | None = None
    address: Address = field(default_factory=Address)


def run_demo(store: EntityStore) -> list[SavableObject]:
    """Save a Person and a Business, then reload both by id."""
    person = Person("Ann", "Lee", Address("Main", "X", "CA", "00001"))
    business = Business("Lee & Co", Address("Market", "Y", "NY", "10001"))
    store.save(person)
    store.save(business)
    logger.info("Saved person=%s business=%s", person.id, business.id)
    return [store.find_by_id(person.id, Person), store.find_by_id(business.id, Business)]
