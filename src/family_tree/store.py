"""In-memory storage of the family tree."""

import logging
from typing import Iterator, Optional, Sequence, Union

from src.family_tree.helpers import is_member_spouse, is_mother
from src.family_tree.models import Gender, Person, ResultMessage

logger = logging.getLogger(__name__)

IDENTITY_KEYS = ("name", "husband", "spouse")


class FamilyStore:
    """
    Owns the forest of person records.

    Lookups walk the tree depth-first, matching the primary name as well as
    partner aliases, so searching for a married-in partner returns the
    record of the blood member who holds that partner.
    """

    def __init__(self, members: Optional[list[Person]] = None):
        self.members: list[Person] = members if members is not None else []

    def find_member(
        self,
        name: Optional[str],
        members: Optional[list[Person]] = None,
        keys: Sequence[str] = IDENTITY_KEYS,
    ) -> Optional[Person]:
        """Return the first member in pre-order whose `keys` fields match `name`."""
        if not name:
            return None
        if members is None:
            members = self.members

        for person in members:
            if any(getattr(person, key, None) == name for key in keys):
                return person
            if person.children:
                found = self.find_member(name, person.children, keys)
                if found:
                    return found
        return None

    def find_mother(self, mother_name: str) -> Union[Person, ResultMessage]:
        """Resolve the record a child of `mother_name` should be added to."""
        mother = self.find_member(mother_name)
        if mother is None:
            return ResultMessage.PERSON_NOT_FOUND

        if mother.name == mother_name and mother.gender == Gender.MALE:
            return ResultMessage.CHILD_ADDITION_FAILED
        if mother.husband and mother.husband == mother_name:
            return ResultMessage.CHILD_ADDITION_FAILED

        # Married-in wives resolve to their husband's record
        if is_mother(mother, mother_name) or is_member_spouse(mother, mother_name):
            return mother

        return ResultMessage.CHILD_ADDITION_FAILED

    def add_child(self, mother_name: str, child_name: str, gender: Gender) -> ResultMessage:
        """Append a new child under the resolved mother record."""
        mother = self.find_mother(mother_name)
        if isinstance(mother, ResultMessage):
            logger.info("Cannot add %s under %s: %s", child_name, mother_name, mother.value)
            return mother

        child = Person(name=child_name, gender=gender, mother=mother_name, children=[])
        mother.children.append(child)
        logger.debug("Added %s under record %s", child_name, mother.name)
        return ResultMessage.CHILD_ADDED

    def iter_members(self, members: Optional[list[Person]] = None) -> Iterator[Person]:
        """Yield every member in pre-order."""
        for person in self.members if members is None else members:
            yield person
            yield from self.iter_members(person.children)

    def count(self) -> int:
        return sum(1 for _ in self.iter_members())
