# Derives the identity type of an enum and the members that compare and hash
# enum values through it.
#
# For every case of the original enum the identity type has a case carrying
# only the associated values that take part in the identity (see
# variants.is_identity_name). Every value maps to a string key:
#
#   one                 -> "one"
#   one(id: "x")        -> "one-x"
#   four(xxx: 5, modelId: "z") -> "four-z"
#
# Equality and hashing of the original enum are defined on that key only.

import logging
import re

from dataclasses import dataclass

from .exprs import (
    Arm,
    CasePattern,
    Concat,
    Construct,
    EnumCaseDef,
    EnumDef,
    Equals,
    FunctionDef,
    FunctionParam,
    HashCombine,
    Length,
    Literal,
    Member,
    Name,
    ParamDef,
    PropertyDef,
    SelfRef,
    Stringify,
    Switch,
)
from .diagnostics import ExtractionError
from .variants import extract

logger = logging.getLogger(__name__)

STRING_BACKED = "string"
COMPUTED_KEY = "computed"

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
IDENTIFIER_CHAR_RE = re.compile(r"\w")


class IdentityConfig:
    def __init__(self):
        self.type_name = "CaseID"
        self.case_accessor = "caseId"
        self.id_accessor = "id"
        self.key_separator = "-"

    # Name of the nested identity enum.
    def set_type_name(self, name):
        self.type_name = _check_identifier(name, "type_name")
        return self

    # Name of the property mapping values to their identity case.
    def set_case_accessor(self, name):
        self.case_accessor = _check_identifier(name, "case_accessor")
        return self

    # Name of the string key property.
    def set_id_accessor(self, name):
        self.id_accessor = _check_identifier(name, "id_accessor")
        return self

    # Separates the case name from the identity values in computed keys.
    # Must not contain identifier characters, otherwise a computed key could
    # spell the name of another case.
    def set_key_separator(self, separator):
        if (
            not isinstance(separator, str)
            or not separator
            or IDENTIFIER_CHAR_RE.search(separator)
        ):
            raise RuntimeError(f"Invalid value for 'separator': {repr(separator)}.")
        self.key_separator = separator
        return self


def _check_identifier(name, what):
    if not isinstance(name, str) or not IDENTIFIER_RE.match(name):
        raise RuntimeError(f"Invalid value for '{what}': {repr(name)}.")
    return name


class IdentityModel:
    "The identity fields of every variant, in declaration order."

    def __init__(self, variants):
        if not variants:
            raise RuntimeError("Cannot build an identity model without variants.")

        self.variants = tuple(variants)
        self.reduced = tuple(
            (variant.name, variant.identity_fields) for variant in self.variants
        )

    @property
    def has_any_identity_field(self):
        return any(fields for (_, fields) in self.reduced)

    @property
    def backing(self):
        # Payload prevents static raw values, so a single case with identity
        # fields forces computed keys for all of them.
        return COMPUTED_KEY if self.has_any_identity_field else STRING_BACKED


@dataclass(frozen=True)
class IdentityOutput:
    identity_type: EnumDef
    backing: str
    key_function: object
    map_function: PropertyDef
    id_accessor: PropertyDef
    hash_function: FunctionDef
    equality_function: FunctionDef

    @property
    def declarations(self):
        "The members added to the original enum, in emission order."
        return [
            self.identity_type,
            self.map_function,
            self.id_accessor,
            self.hash_function,
            self.equality_function,
        ]


def key_expr(name, fields, separator="-"):
    """Returns the key expression for an identity case with the given fields.
    The fields must be bound to their own names.

    With more than one field, every value is prefixed by its length so that
    values containing the separator cannot produce colliding keys:
    `name-<len>:<value>-<len>:<value>`."""

    if not fields:
        return Literal(name)

    if len(fields) == 1:
        return Concat((Literal(name + separator), Stringify(Name(fields[0].name))))

    parts = []
    for (index, f) in enumerate(fields):
        value = Stringify(Name(f.name))
        parts.append(Literal(name + separator if index == 0 else separator))
        parts.append(Length(value))
        parts.append(Literal(":"))
        parts.append(value)
    return Concat(tuple(parts))


def _identity_type(model, config):
    cases = tuple(
        EnumCaseDef(name, tuple(ParamDef(f.name, f.type_name) for f in fields))
        for (name, fields) in model.reduced
    )

    if model.backing == STRING_BACKED:
        return EnumDef(config.type_name, "String", cases), None

    arms = tuple(
        Arm(
            CasePattern(name, tuple(f.name for f in fields)),
            key_expr(name, fields, config.key_separator),
        )
        for (name, fields) in model.reduced
    )
    key_function = PropertyDef("rawValue", "String", Switch(SelfRef(), arms))
    return EnumDef(config.type_name, None, cases, (key_function,)), key_function


def _map_function(model, config):
    arms = []
    for variant in model.variants:
        identity_fields = variant.identity_fields
        if identity_fields:
            bindings = tuple(f.name if f.is_identity else None for f in variant.fields)
        else:
            bindings = ()

        args = tuple((f.name, Name(f.name)) for f in identity_fields)
        arms.append(Arm(CasePattern(variant.name, bindings), Construct(variant.name, args)))

    return PropertyDef(config.case_accessor, config.type_name, Switch(SelfRef(), tuple(arms)))


def synthesize(variants, config=None):
    """Builds the identity type and the members derived from it.
    Never fails for a non-empty list of variants."""

    config = IdentityConfig() if config is None else config
    model = IdentityModel(variants)

    identity_type, key_function = _identity_type(model, config)
    map_function = _map_function(model, config)
    id_accessor = PropertyDef(
        config.id_accessor,
        "String",
        Member(Member(SelfRef(), config.case_accessor), "rawValue"),
    )
    hash_function = FunctionDef(
        "hash",
        (FunctionParam("into", "hasher", "inout Hasher"),),
        None,
        HashCombine("hasher", Name(config.id_accessor)),
    )
    equality_function = FunctionDef(
        "==",
        (FunctionParam(None, "lhs", "Self"), FunctionParam(None, "rhs", "Self")),
        "Bool",
        Equals(
            Member(Name("lhs"), config.id_accessor),
            Member(Name("rhs"), config.id_accessor),
        ),
        static=True,
    )

    logger.debug(
        "Synthesized %s with %d cases (%s backing)",
        config.type_name,
        len(model.variants),
        model.backing,
    )
    return IdentityOutput(
        identity_type=identity_type,
        backing=model.backing,
        key_function=key_function,
        map_function=map_function,
        id_accessor=id_accessor,
        hash_function=hash_function,
        equality_function=equality_function,
    )


def expand(decl, sink, config=None):
    """Returns the members generated for the given declaration.
    Problems with the declaration are reported to `sink` and produce no members."""

    try:
        variants = extract(decl)
    except ExtractionError as e:
        sink.diagnose(e.diagnostic)
        return []
    return synthesize(variants, config).declarations


def expand_all(decls, sink, config=None):
    "Expands every declaration independently of the others."

    return [expand(decl, sink, config) for decl in decls]
