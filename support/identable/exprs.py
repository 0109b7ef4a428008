# The declarations and expressions produced by the synthesizer.
# Nothing in here knows about swift syntax, see render.py for that.

from dataclasses import dataclass


def visit_expr(expr, visitor):
    typename = type(expr).__name__
    visit = getattr(visitor, f"visit_{typename}")
    return visit(expr)


# ---------------------------
#       Declarations
#


@dataclass(frozen=True)
class ParamDef:
    name: str
    type: str


@dataclass(frozen=True)
class EnumCaseDef:
    name: str
    params: tuple = ()


@dataclass(frozen=True)
class EnumDef:
    """A nested enum. `raw_type` is set for enums whose cases are backed by
    static raw values."""

    name: str
    raw_type: object
    cases: tuple
    members: tuple = ()


@dataclass(frozen=True)
class PropertyDef:
    name: str
    type: str
    body: object


@dataclass(frozen=True)
class FunctionParam:
    label: object
    name: str
    type: str


@dataclass(frozen=True)
class FunctionDef:
    name: str
    params: tuple
    returns: object
    body: object
    static: bool = False


# ---------------------------
#       Expressions
#


@dataclass(frozen=True)
class Literal:
    "A string literal."
    value: str


@dataclass(frozen=True)
class Name:
    "A local binding, parameter or implicit member of `self`."
    name: str


@dataclass(frozen=True)
class SelfRef:
    pass


@dataclass(frozen=True)
class Member:
    base: object
    name: str


@dataclass(frozen=True)
class Stringify:
    "The textual description of a value."
    value: object


@dataclass(frozen=True)
class Length:
    "The number of characters of a string."
    value: object


@dataclass(frozen=True)
class Concat:
    parts: tuple


@dataclass(frozen=True)
class Construct:
    "Creates an enum case. `args` are (label, expr) pairs."
    case: str
    args: tuple = ()


@dataclass(frozen=True)
class Equals:
    lhs: object
    rhs: object


@dataclass(frozen=True)
class HashCombine:
    "Feeds `value` into the hasher parameter of the enclosing function."
    hasher: str
    value: object


@dataclass(frozen=True)
class CasePattern:
    """Matches a single enum case. `bindings` has one entry per associated
    value, None discards the value. Empty bindings match the case without
    destructuring it."""

    case: str
    bindings: tuple = ()


@dataclass(frozen=True)
class Arm:
    pattern: CasePattern
    body: object


@dataclass(frozen=True)
class Switch:
    "Switch over a closed set of enum cases. There is never a default arm."
    subject: object
    arms: tuple
