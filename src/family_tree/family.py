"""Family facade combining storage and relationship resolution."""

from pathlib import Path
from typing import Optional, Union

from src.family_tree.loader import load_members
from src.family_tree.models import Gender, Person, RelationshipKind, ResultMessage
from src.family_tree.relationships import RelationshipResolver
from src.family_tree.store import FamilyStore


class Family:
    """
    Main interface for family tree operations.

    Usage:
        family = Family.from_seed("data/family.json")
        family.add_child("Flora", "Minerva", Gender.FEMALE)
        family.get_relationship("Minerva", "Siblings")
    """

    def __init__(self, members: Optional[list[Person]] = None):
        self.store = FamilyStore(members)
        self.relationships = RelationshipResolver(self.store)

    @classmethod
    def from_seed(cls, path: Union[str, Path]) -> "Family":
        """Build a Family from the JSON seed file at `path`."""
        return cls(load_members(path))

    def get_family_members(self) -> list[Person]:
        return self.store.members

    def find_member(self, name: str) -> Optional[Person]:
        return self.store.find_member(name)

    def add_child(self, mother_name: str, child_name: str, gender: Gender) -> ResultMessage:
        return self.store.add_child(mother_name, child_name, gender)

    def get_relationship(self, name: str, relationship: Union[RelationshipKind, str]) -> Union[list[str], ResultMessage]:
        return self.relationships.resolve(name, relationship)
