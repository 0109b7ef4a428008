# Evaluates the synthesized members against sample enum values.
# This is how the generated swift code behaves, without a swift toolchain:
# the same declarations that get rendered are walked here expression by expression.

from dataclasses import dataclass

from .exprs import visit_expr
from .identity import synthesize
from .variants import extract


@dataclass(frozen=True)
class EnumValue:
    type_name: str
    case: str
    args: tuple = ()


def describe(value):
    "Mirrors swift's String(describing:) for the types used in associated values."

    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    if isinstance(value, EnumValue):
        if not value.args:
            return value.case
        return f"{value.case}({', '.join(describe(arg) for arg in value.args)})"
    return str(value)


class Hasher:
    def __init__(self):
        self.combined = []

    def combine(self, value):
        self.combined.append(value)

    def finalize(self):
        return hash(tuple(self.combined))


class Evaluator:
    def __init__(self, type_name, variants, output):
        self.type_name = type_name
        self.output = output
        self.identity_type = output.identity_type
        self.arity = {
            type_name: {variant.name: len(variant.fields) for variant in variants},
            self.identity_type.name: {
                case.name: len(case.params) for case in self.identity_type.cases
            },
        }
        self.members = {
            output.map_function.name: output.map_function,
            output.id_accessor.name: output.id_accessor,
        }

    @classmethod
    def for_declaration(cls, decl, config=None):
        variants = extract(decl)
        return cls(decl.name, variants, synthesize(variants, config))

    def make(self, case, *args):
        "Creates a value of the original enum."
        return self.check(EnumValue(self.type_name, case, tuple(args)))

    def case_id(self, value):
        return self.member(value, self.output.map_function.name)

    def id(self, value):
        return self.member(value, self.output.id_accessor.name)

    def equals(self, lhs, rhs):
        fn = self.output.equality_function
        env = {fn.params[0].name: self.check(lhs), fn.params[1].name: self.check(rhs)}
        return self.evaluate(fn.body, env)

    def hash_into(self, value, hasher):
        fn = self.output.hash_function
        self.evaluate(fn.body, {"self": self.check(value), fn.params[0].name: hasher})
        return hasher

    def hash_contribution(self, value):
        "The values fed into the hasher, in order."
        return self.hash_into(value, Hasher()).combined

    def hash(self, value):
        return self.hash_into(value, Hasher()).finalize()

    def member(self, value, name):
        if value.type_name == self.type_name and name in self.members:
            return self.evaluate(self.members[name].body, {"self": value})

        if value.type_name == self.identity_type.name and name == "rawValue":
            key_function = self.output.key_function
            if key_function is None:
                return value.case
            return self.evaluate(key_function.body, {"self": value})

        raise RuntimeError(f"Type {repr(value.type_name)} has no member {repr(name)}.")

    def evaluate(self, expr, env):
        return visit_expr(expr, _ExprEvaluator(self, env))

    def check(self, value):
        cases = self.arity.get(value.type_name)
        if cases is None:
            raise RuntimeError(f"Unexpected value of type {repr(value.type_name)}.")
        if value.case not in cases:
            raise RuntimeError(
                f"Type {repr(value.type_name)} has no case {repr(value.case)}."
            )
        if cases[value.case] != len(value.args):
            raise RuntimeError(
                f"Case {repr(value.case)} expects {cases[value.case]} values, "
                f"got {len(value.args)}."
            )
        return value


class _ExprEvaluator:
    def __init__(self, evaluator, env):
        self.evaluator = evaluator
        self.env = env

    def eval(self, expr):
        return visit_expr(expr, self)

    def visit_Literal(self, expr):
        return expr.value

    def visit_Name(self, expr):
        if expr.name in self.env:
            return self.env[expr.name]
        return self.evaluator.member(self.env["self"], expr.name)

    def visit_SelfRef(self, expr):
        return self.env["self"]

    def visit_Member(self, expr):
        return self.evaluator.member(self.eval(expr.base), expr.name)

    def visit_Stringify(self, expr):
        return describe(self.eval(expr.value))

    def visit_Length(self, expr):
        return len(self.eval(expr.value))

    def visit_Concat(self, expr):
        return "".join(describe(self.eval(part)) for part in expr.parts)

    # Constructed cases always belong to the identity type.
    def visit_Construct(self, expr):
        value = EnumValue(
            self.evaluator.identity_type.name,
            expr.case,
            tuple(self.eval(arg) for (_, arg) in expr.args),
        )
        return self.evaluator.check(value)

    def visit_Equals(self, expr):
        return self.eval(expr.lhs) == self.eval(expr.rhs)

    def visit_HashCombine(self, expr):
        self.env[expr.hasher].combine(self.eval(expr.value))

    def visit_Switch(self, expr):
        subject = self.evaluator.check(self.eval(expr.subject))
        for arm in expr.arms:
            pattern = arm.pattern
            if pattern.case != subject.case:
                continue

            env = dict(self.env)
            if pattern.bindings:
                if len(pattern.bindings) != len(subject.args):
                    raise RuntimeError(
                        f"Pattern for case {repr(pattern.case)} binds "
                        f"{len(pattern.bindings)} values, the case has {len(subject.args)}."
                    )
                for (binding, arg) in zip(pattern.bindings, subject.args):
                    if binding is not None:
                        env[binding] = arg
            return self.evaluator.evaluate(arm.body, env)

        raise RuntimeError(f"Switch does not handle case {repr(subject.case)}.")
