# Generates identity types for Swift enums.
# Values of an enum become comparable and hashable by their case and by the
# associated values whose label mentions "id"; everything else is ignored.

import os

import jinja2

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)

SWIFT_KEYWORDS = {
    "as",
    "associatedtype",
    "break",
    "case",
    "catch",
    "class",
    "continue",
    "default",
    "defer",
    "deinit",
    "do",
    "else",
    "enum",
    "extension",
    "fallthrough",
    "false",
    "fileprivate",
    "for",
    "func",
    "guard",
    "if",
    "import",
    "in",
    "init",
    "inout",
    "internal",
    "is",
    "let",
    "nil",
    "operator",
    "private",
    "protocol",
    "public",
    "repeat",
    "return",
    "self",
    "static",
    "struct",
    "subscript",
    "super",
    "switch",
    "throw",
    "throws",
    "true",
    "try",
    "typealias",
    "var",
    "where",
    "while",
}


def avoid_keyword(name):
    "Escapes names that would otherwise be parsed as swift keywords."

    if name in SWIFT_KEYWORDS:
        return f"`{name}`"
    return name
