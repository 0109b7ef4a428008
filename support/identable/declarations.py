# Describes the declarations handed to the identity synthesizer.
# Only the parts of a declaration that matter for case extraction are modeled:
# the kind of declaration, its case statements and their parameters.
# Attributes, inherited types and generic parameters are never inspected.


def visit_decl(decl, visitor):
    typename = type(decl).__name__
    visit = getattr(visitor, f"visit_{typename}")
    return visit(decl)


class Location:
    "Points at a declaration in its source file."

    def __init__(self, file=None, line=None, column=None):
        self.file = file
        self.line = line
        self.column = column

    def __str__(self):
        parts = [self.file or "<unknown>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def __repr__(self):
        return f"Location({self.file!r}, {self.line!r}, {self.column!r})"

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return (self.file, self.line, self.column) == (
            other.file,
            other.line,
            other.column,
        )

    def __hash__(self):
        return hash((self.file, self.line, self.column))


class Decl:
    "A named type declaration."

    def __init__(self, name, kind, members=None, location=None, doc=None):
        if not name:
            raise RuntimeError(f"Invalid declaration name: {repr(name)}.")

        self.name = name
        self.kind = kind
        self.members = [] if members is None else list(members)
        self.location = location
        self.doc = doc


class EnumDecl(Decl):
    def __init__(self, name, members=None, location=None, doc=None):
        super().__init__(name, "enum", members, location, doc)


class StructDecl(Decl):
    def __init__(self, name, members=None, location=None, doc=None):
        super().__init__(name, "struct", members, location, doc)


class ClassDecl(Decl):
    def __init__(self, name, members=None, location=None, doc=None):
        super().__init__(name, "class", members, location, doc)


class CaseDecl:
    """A single `case` statement. Swift allows several comma separated elements
    in one statement (`case one, two(id: Int)`), each of them is a case of its own."""

    def __init__(self, *elements, location=None):
        if not elements:
            raise RuntimeError("A case statement needs at least one element.")

        self.elements = list(elements)
        self.location = location


class CaseElement:
    def __init__(self, name, params=None, doc=None):
        if not name:
            raise RuntimeError(f"Invalid case name: {repr(name)}.")

        self.name = name
        self.params = [] if params is None else list(params)
        self.doc = doc


class Param:
    """An associated value of a case element.
    Unlabeled values (`case one(String)`) have no name."""

    def __init__(self, name, type):
        if not type:
            raise RuntimeError(f"Parameter {repr(name)} has no type.")

        self.name = None if name == "_" else name
        self.type = type


class FuncDecl:
    def __init__(self, name, location=None):
        self.name = name
        self.location = location


class VarDecl:
    def __init__(self, name, type=None, location=None):
        self.name = name
        self.type = type
        self.location = location


def case(name, *params, location=None):
    "Shorthand for a case statement with a single element."

    return CaseDecl(CaseElement(name, params=params), location=location)
