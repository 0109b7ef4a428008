# Renders synthesized declarations as swift source code.
# Declarations are laid out by the macros in templates/identable.jinja2,
# expressions are rendered by the visitor below (exposed as the `swift` filter).

from . import ENV, avoid_keyword
from .exprs import EnumDef, FunctionDef, Literal, PropertyDef, Stringify, visit_expr
from .identity import IDENTIFIER_RE


def escape_string(text):
    return text.replace("\\", "\\\\").replace('"', '\\"')


def render_expr(expr):
    "Returns the swift source for an expression. Switches span multiple lines."
    return visit_expr(expr, _SwiftExpr())


class _SwiftExpr:
    def visit_Literal(self, expr):
        return f'"{escape_string(expr.value)}"'

    def visit_Name(self, expr):
        return avoid_keyword(expr.name)

    def visit_SelfRef(self, expr):
        return "self"

    def visit_Member(self, expr):
        return f"{render_expr(expr.base)}.{expr.name}"

    def visit_Stringify(self, expr):
        return f"String(describing: {render_expr(expr.value)})"

    def visit_Length(self, expr):
        return f"{render_expr(expr.value)}.count"

    # Concatenations become a single interpolated string literal.
    def visit_Concat(self, expr):
        pieces = []
        for part in expr.parts:
            if isinstance(part, Literal):
                pieces.append(escape_string(part.value))
            elif isinstance(part, Stringify):
                pieces.append(f"\\({render_expr(part.value)})")
            else:
                pieces.append(f"\\({render_expr(part)})")
        return '"' + "".join(pieces) + '"'

    def visit_Construct(self, expr):
        if not expr.args:
            return f".{expr.case}"
        args = ", ".join(f"{label}: {render_expr(arg)}" for (label, arg) in expr.args)
        return f".{expr.case}({args})"

    def visit_Equals(self, expr):
        return f"{render_expr(expr.lhs)} == {render_expr(expr.rhs)}"

    def visit_HashCombine(self, expr):
        return f"{expr.hasher}.combine({render_expr(expr.value)})"

    def visit_CasePattern(self, expr):
        if not expr.bindings:
            return f".{expr.case}"
        names = ", ".join(
            "_" if binding is None else avoid_keyword(binding)
            for binding in expr.bindings
        )
        return f"let .{expr.case}({names})"

    def visit_Switch(self, expr):
        lines = [f"switch {render_expr(expr.subject)} {{"]
        for arm in expr.arms:
            lines.append(f"case {render_expr(arm.pattern)}:")
            lines.extend("    " + line for line in render_expr(arm.body).splitlines())
        lines.append("}")
        return "\n".join(lines)


def render_case(case):
    if not case.params:
        return avoid_keyword(case.name)
    params = ", ".join(f"{param.name}: {param.type}" for param in case.params)
    return f"{avoid_keyword(case.name)}({params})"


def render_signature(fn):
    params = ", ".join(
        f"{param.label} {param.name}: {param.type}"
        if param.label
        else f"{param.name}: {param.type}"
        for param in fn.params
    )

    # Operators are separated from their parameter list: `func == (...)`.
    name = fn.name if IDENTIFIER_RE.match(fn.name) else fn.name + " "
    text = f"func {name}({params})"
    if fn.static:
        text = "static " + text
    if fn.returns is not None:
        text += f" -> {fn.returns}"
    return text


ENV.filters["swift"] = render_expr
ENV.filters["swift_case"] = render_case
ENV.filters["swift_signature"] = render_signature


def render_decl(decl):
    module = ENV.get_template("identable.jinja2").module
    if isinstance(decl, EnumDef):
        text = module.enum_def(decl)
    elif isinstance(decl, PropertyDef):
        text = module.property_def(decl)
    elif isinstance(decl, FunctionDef):
        text = module.function_def(decl)
    else:
        raise RuntimeError(f"Invalid declaration: {repr(decl)}.")
    return str(text).rstrip("\n")


def render_members(decls):
    "Renders the given declarations, separated by empty lines."
    return "\n\n".join(render_decl(decl) for decl in decls)
