"""Filtering helpers shared by the store and the relationship resolver."""

from typing import Literal
from src.family_tree.models import Gender, Person

PartnerKey = Literal["spouse", "husband"]


def filter_by_gender(members: list[Person], gender: Gender) -> list[Person]:
    return [member for member in members if member.gender == gender]


def filter_by_partner(members: list[Person], gender: Gender, partner_key: PartnerKey) -> list[Person]:
    """Members of the given gender who have a partner under `partner_key`."""
    return [
        member for member in members
        if member.gender == gender and getattr(member, partner_key)
    ]


def exclude_name(members: list[Person], name: str) -> list[Person]:
    return [member for member in members if member.name and member.name != name]


def is_mother(member: Person, mother_name: str) -> bool:
    """True when `mother_name` is the member's own name and she is married."""
    return member.name == mother_name and bool(member.husband)


def is_member_spouse(member: Person, mother_name: str) -> bool:
    """True when `mother_name` is the wife recorded on the member."""
    return bool(member.spouse) and member.spouse == mother_name


def names_of(members: list[Person]) -> list[str]:
    return [member.name for member in members]
