"""Family tree package - nested person records and relationship queries."""
from src.family_tree.models import (
    Command,
    Gender,
    Person,
    RelationshipKind,
    ResultMessage,
)
from src.family_tree.store import FamilyStore
from src.family_tree.relationships import RelationshipResolver
from src.family_tree.family import Family

__all__ = [
    "Command",
    "Gender",
    "Person",
    "RelationshipKind",
    "ResultMessage",
    "FamilyStore",
    "RelationshipResolver",
    "Family",
]
