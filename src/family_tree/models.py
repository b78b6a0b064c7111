"""Data models for the family tree."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Gender(str, Enum):
    """Gender of a family member."""
    MALE = "Male"
    FEMALE = "Female"


class RelationshipKind(str, Enum):
    """Relationships that can be resolved for a member."""
    PATERNAL_UNCLE = "Paternal-Uncle"
    MATERNAL_UNCLE = "Maternal-Uncle"
    PATERNAL_AUNT = "Paternal-Aunt"
    MATERNAL_AUNT = "Maternal-Aunt"
    SISTER_IN_LAW = "Sister-In-Law"
    BROTHER_IN_LAW = "Brother-In-Law"
    SIBLINGS = "Siblings"
    SON = "Son"
    DAUGHTER = "Daughter"


class Parent(str, Enum):
    """Parent side used for uncle/aunt lookups (matches Person field names)."""
    MOTHER = "mother"
    FATHER = "father"


class Command(str, Enum):
    """Actions accepted in a command stream."""
    ADD_CHILD = "ADD_CHILD"
    GET_RELATIONSHIP = "GET_RELATIONSHIP"


class ResultMessage(str, Enum):
    """Typed outcomes returned instead of raising."""
    CHILD_ADDED = "CHILD_ADDED"
    PERSON_NOT_FOUND = "PERSON_NOT_FOUND"
    CHILD_ADDITION_FAILED = "CHILD_ADDITION_FAILED"
    RELATIONSHIP_NOT_HANDLED = "RELATIONSHIP_NOT_HANDLED"
    NONE = "NONE"
    INVALID_COMMAND = "INVALID_COMMAND"


class Person(BaseModel):
    """
    A member of the family tree.

    Children are nested under their parent record. Mother, father and partner
    links are plain names and have to be resolved by searching the tree.
    Wives who married in are stored as `spouse` on the male record, husbands
    who married in as `husband` on the female record.
    """

    name: str
    gender: Gender
    mother: str = ""
    father: Optional[str] = None
    spouse: Optional[str] = None
    husband: Optional[str] = None
    children: list["Person"] = Field(default_factory=list)


Person.model_rebuild()


class AddChildRequest(BaseModel):
    """Validated arguments of an ADD_CHILD command."""

    mother_name: str
    child_name: str
    gender: Gender
