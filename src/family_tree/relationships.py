"""Relationship resolution over the family tree."""

import logging
from typing import Callable, Optional, Union

from src.family_tree.helpers import (
    PartnerKey,
    exclude_name,
    filter_by_gender,
    filter_by_partner,
    names_of,
)
from src.family_tree.models import Gender, Parent, Person, RelationshipKind, ResultMessage
from src.family_tree.store import FamilyStore

logger = logging.getLogger(__name__)


class RelationshipResolver:
    """Derives relatives of a member by walking parent, child and partner links."""

    def __init__(self, store: FamilyStore):
        self.store = store

    def resolve(self, name: str, relationship: Union[RelationshipKind, str]) -> Union[list[str], ResultMessage]:
        """
        Resolve `relationship` for the member called `name`.

        Args:
            name: Member name, or the name of a partner who married in.
            relationship: A RelationshipKind or its token, e.g. "Paternal-Uncle".

        Returns:
            Names of the matching relatives (possibly empty), PERSON_NOT_FOUND
            when no member matches `name`, or RELATIONSHIP_NOT_HANDLED when the
            relationship is not supported.
        """
        person = self.store.find_member(name)
        if person is None:
            return ResultMessage.PERSON_NOT_FOUND

        handler = self._handler_for(person, name, relationship)
        if handler is None:
            logger.info("Relationship not handled: %r", relationship)
            return ResultMessage.RELATIONSHIP_NOT_HANDLED

        return handler()

    def _handler_for(self, person: Person, name: str, relationship) -> Optional[Callable[[], list[str]]]:
        try:
            kind = RelationshipKind(relationship)
        except ValueError:
            return None

        handlers: dict[RelationshipKind, Callable[[], list[str]]] = {
            RelationshipKind.SIBLINGS: lambda: names_of(self.get_siblings(person, name)),
            RelationshipKind.SON: lambda: names_of(self.get_sons(person)),
            RelationshipKind.DAUGHTER: lambda: names_of(self.get_daughters(person)),
            RelationshipKind.PATERNAL_UNCLE: lambda: names_of(self.get_relatives(person, Parent.FATHER, Gender.MALE)),
            RelationshipKind.PATERNAL_AUNT: lambda: names_of(self.get_relatives(person, Parent.FATHER, Gender.FEMALE)),
            RelationshipKind.MATERNAL_UNCLE: lambda: names_of(self.get_relatives(person, Parent.MOTHER, Gender.MALE)),
            RelationshipKind.MATERNAL_AUNT: lambda: names_of(self.get_relatives(person, Parent.MOTHER, Gender.FEMALE)),
            RelationshipKind.SISTER_IN_LAW: lambda: self.get_sister_in_law(person),
            RelationshipKind.BROTHER_IN_LAW: lambda: self.get_brother_in_law(person),
        }
        return handlers.get(kind)

    # ─────────────────────────────────────────
    # Siblings
    # ─────────────────────────────────────────

    def find_siblings(self, mother_name: str) -> list[Person]:
        """Children of the record `mother_name` resolves to."""
        mother = self.store.find_member(mother_name)
        return list(mother.children) if mother else []

    def get_siblings(self, person: Person, name: str) -> list[Person]:
        # A name missing from the mother's children belongs to a married-in
        # partner, who has no siblings in this tree
        siblings = self.find_siblings(person.mother)
        if not any(sibling.name == name for sibling in siblings):
            return []
        return exclude_name(siblings, name)

    # ─────────────────────────────────────────
    # Children
    # ─────────────────────────────────────────

    def get_sons(self, person: Person) -> list[Person]:
        return filter_by_gender(person.children, Gender.MALE)

    def get_daughters(self, person: Person) -> list[Person]:
        return filter_by_gender(person.children, Gender.FEMALE)

    # ─────────────────────────────────────────
    # Uncles and aunts
    # ─────────────────────────────────────────

    def get_relatives(self, person: Person, parent: Parent, gender: Gender) -> list[Person]:
        """
        Uncles (gender=MALE) or aunts (gender=FEMALE) on the `parent` side.

        The parent's siblings are the children of the grandparent named on
        the parent's own record. A parent who married into the family has no
        blood siblings in the tree, so the result is empty.
        """
        parent_name = getattr(person, parent.value)
        if not parent_name:
            return []

        parent_record = self.store.find_member(parent_name)
        if parent_record is None:
            return []
        if parent_name in (parent_record.husband, parent_record.spouse):
            return []

        grandparent_name = getattr(parent_record, parent.value)
        parent_siblings = [
            sibling for sibling in self.find_siblings(grandparent_name)
            if sibling.name != parent_name
        ]
        return filter_by_gender(parent_siblings, gender)

    # ─────────────────────────────────────────
    # In-laws
    # ─────────────────────────────────────────

    def find_inlaws(self, person: Person, gender: Gender, partner_gender: Gender,
                    partner_key: PartnerKey) -> list[str]:
        """
        In-laws reachable through the sibling set of `person`'s record.

        Merges siblings of `gender` with the partners (under `partner_key`)
        of married siblings of `partner_gender`. Only the one sibling set is
        read; the siblings of a spouse's own record are not merged in.
        """
        siblings = self.find_siblings(person.mother)

        inlaws = names_of(exclude_name(filter_by_gender(siblings, gender), person.name))
        if siblings:
            married = exclude_name(filter_by_partner(siblings, partner_gender, partner_key), person.name)
            inlaws.extend(getattr(sibling, partner_key) for sibling in married)
        return inlaws

    def get_sister_in_law(self, person: Person) -> list[str]:
        return self.find_inlaws(person, Gender.FEMALE, Gender.MALE, "spouse")

    def get_brother_in_law(self, person: Person) -> list[str]:
        return self.find_inlaws(person, Gender.MALE, Gender.FEMALE, "husband")
