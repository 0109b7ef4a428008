# Reduces an enum declaration to the ordered list of its cases and their
# associated values. Purely syntactic: type names are copied as written.

import logging

from dataclasses import dataclass, field

from .declarations import visit_decl
from .diagnostics import ErrorKind, ExtractionError

logger = logging.getLogger(__name__)

IDENTITY_TOKEN = "id"


def is_identity_name(name):
    "True if a value with that label takes part in the identity of its case."

    return name is not None and IDENTITY_TOKEN in name.lower()


@dataclass(frozen=True)
class Field:
    name: object
    type_name: str
    is_identity: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "is_identity", is_identity_name(self.name))


@dataclass(frozen=True)
class Variant:
    name: str
    fields: tuple = ()

    @property
    def identity_fields(self):
        "The identity fields of this variant, in declaration order."
        return tuple(f for f in self.fields if f.is_identity)

    @property
    def has_identity(self):
        return any(f.is_identity for f in self.fields)


class _DeclVisitor:
    def visit_EnumDecl(self, decl):
        variants = []
        members = _MemberVisitor()
        for member in decl.members:
            variants.extend(visit_decl(member, members))
        return variants

    def visit_StructDecl(self, decl):
        raise ExtractionError(ErrorKind.NOT_AN_ENUM, decl.location)

    def visit_ClassDecl(self, decl):
        raise ExtractionError(ErrorKind.NOT_AN_ENUM, decl.location)


class _MemberVisitor:
    def visit_CaseDecl(self, decl):
        return [
            Variant(
                element.name,
                tuple(Field(param.name, param.type) for param in element.params),
            )
            for element in decl.elements
        ]

    def visit_FuncDecl(self, decl):
        return []

    def visit_VarDecl(self, decl):
        return []

    # Nested types do not contribute cases.
    def visit_EnumDecl(self, decl):
        return []

    def visit_StructDecl(self, decl):
        return []

    def visit_ClassDecl(self, decl):
        return []


def extract(decl):
    """Returns the variants of the given enum declaration in declaration order.
    Raises ExtractionError if the declaration is not an enum or has no cases."""

    variants = tuple(visit_decl(decl, _DeclVisitor()))
    if not variants:
        raise ExtractionError(ErrorKind.NO_CASES, decl.location)

    logger.debug(
        "Extracted %d cases from %s: %s",
        len(variants),
        decl.name,
        ", ".join(variant.name for variant in variants),
    )
    return variants
