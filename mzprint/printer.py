"""Print MiniZinc models.

Every `*_document` method of `Printer` turns a piece of syntax tree into a
`document.Document`; the `print_*` methods lay that document out into a
string. Composite nodes are assembled from the documents of their children,
so the indentation of a block (a `let`, a two-dimensional array literal, an
item body) is decided where the block is built and nowhere else.

For example,

    print_item(Pred("even", [Param(Inst.Dec, Int(), "x")], [],
        Bi(EQ, Bi(MOD, Var("x"), IConst(2)), IConst(0))))

gives

    predicate even(var int: x) =
      x mod 2 = 0;
"""
import logging
import math
import typing

from . import ast
from .builtins import DOTDOT as RANGE, MINIZINC_OPERATORS, Assoc, OperatorTable
from .document import (
    Document,
    NewLine,
    braces,
    brackets,
    comma_sep,
    cons,
    double_quotes,
    hsep,
    indent,
    parens,
    render,
    text,
    vcat,
)


print_log = logging.getLogger("mzprint.printer")


class InvalidModelError(ValueError):
    pass


###############################################################################
# Helpers
###############################################################################


ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    "\f": "\\f",
    "\a": "\\a",
}


def escape(value: str) -> str:
    return "".join(ESCAPES.get(c, c) for c in value)


def is_atomic(e: ast.NakedExpr) -> bool:
    """Atomic expressions never need parentheses as an operand."""
    match e:
        case (
            ast.AnonVar()
            | ast.Var()
            | ast.BConst()
            | ast.IConst()
            | ast.FConst()
            | ast.SConst()
            | ast.SetLit()
        ):
            return True
        case _:
            return False


###############################################################################
# Printer
###############################################################################


class Printer:
    operators: OperatorTable

    def __init__(self, operators: OperatorTable | None = None):
        if operators is None:
            operators = MINIZINC_OPERATORS
        self.operators = operators

    # Models and items ########################################################

    def model_document(self, items: ast.Model) -> Document:
        if len(items) == 0:
            raise InvalidModelError("Cannot print a model with no items")

        if print_log.isEnabledFor(logging.DEBUG):
            print_log.debug(f"printing model with {len(items)} items")

        return vcat(self.item_document(item) for item in items)

    def item_document(self, item: ast.Item) -> Document:
        match item:
            case ast.Empty():
                return text("")

            case ast.Comment(comment):
                return vcat(hsep(text("%"), text(line)) for line in comment.split("\n"))

            case ast.Include(file):
                return cons(hsep(text("include"), double_quotes(text(escape(file)))), text(";"))

            case ast.Declare(param, annotations, body):
                return cons(
                    hsep(self.param_document(param), self._annotations(annotations)),
                    self._body(body),
                    text(";"),
                )

            case ast.Constraint(expr):
                return cons(hsep(text("constraint"), self.expr_document(expr)), text(";"))

            case ast.Assign(name, expr):
                return cons(text(name), self._body(expr), text(";"))

            case ast.Output(expr):
                return cons(hsep(text("output"), self.naked_expr_document(expr)), text(";"))

            case ast.AnnotDec(name, params):
                signature = text(name)
                if len(params) > 0:
                    signature = cons(signature, parens(self._params(params)))
                return cons(
                    hsep(text("annotation"), signature),
                    text(";"),
                )

            case ast.Solve(annotations, goal):
                return cons(
                    hsep(text("solve"), self._annotations(annotations), self._solve_goal(goal)),
                    text(";"),
                )

            case ast.Pred(name, params, annotations, body):
                return self._definition("predicate", text(name), params, annotations, body)

            case ast.Test(name, params, annotations, body):
                return self._definition("test", text(name), params, annotations, body)

            case ast.Function(param, params, annotations, body):
                return self._definition(
                    "function", self.param_document(param), params, annotations, body
                )

            case _:
                typing.assert_never(item)

    def _definition(
        self,
        keyword: str,
        name: Document,
        params: typing.Sequence[ast.Param],
        annotations: typing.Sequence[ast.Annotation],
        body: ast.NakedExpr | None,
    ) -> Document:
        return cons(
            hsep(text(keyword), cons(name, parens(self._params(params))), self._annotations(annotations)),
            self._body(body),
            text(";"),
        )

    def _body(self, body: ast.NakedExpr | None) -> Document:
        if body is None:
            return None
        return cons(text(" ="), indent(2, cons(NewLine(), self.naked_expr_document(body))))

    def _solve_goal(self, goal: ast.SolveGoal) -> Document:
        match goal:
            case ast.Satisfy():
                return text("satisfy")
            case ast.Minimize(expr):
                return hsep(text("minimize"), self.expr_document(expr))
            case ast.Maximize(expr):
                return hsep(text("maximize"), self.expr_document(expr))
            case _:
                typing.assert_never(goal)

    # Expressions #############################################################

    def expr_document(self, expr: ast.Expr) -> Document:
        return hsep(self.naked_expr_document(expr.expr), self._annotations(expr.annotations))

    def naked_expr_document(self, e: ast.NakedExpr) -> Document:
        match e:
            case ast.AnonVar():
                return text("_")

            case ast.Var(name):
                return text(name)

            case ast.BConst(value):
                return text("true" if value else "false")

            case ast.IConst(value):
                return text(str(value))

            case ast.FConst(value):
                if not math.isfinite(value):
                    raise ValueError(f"Float literal {value} has no MiniZinc spelling")
                return text(repr(float(value)))

            case ast.SConst(value):
                return double_quotes(text(escape(value)))

            case ast.Range(lower, upper):
                return self._range(lower, upper)

            case ast.SetLit(elements):
                return braces(self._exprs(elements))

            case ast.SetComp(element, tail):
                return braces(self._comprehension(element, tail))

            case ast.ArrayLit(elements):
                return brackets(self._exprs(elements))

            case ast.ArrayLit2D(rows):
                if len(rows) == 0:
                    return text("[||]")
                lines = [hsep(text("|"), self._exprs(row)) for row in rows]
                lines.append(text("|"))
                return brackets(vcat(lines))

            case ast.ArrayComp(element, tail):
                return brackets(self._comprehension(element, tail))

            case ast.ArrayElem(name, indices):
                return cons(text(name), brackets(self._exprs(indices)))

            case ast.U(op, operand):
                if is_atomic(operand):
                    operand_doc = self.naked_expr_document(operand)
                else:
                    operand_doc = parens(self.naked_expr_document(operand))
                return hsep(text(self.operators.display_of(op)), operand_doc)

            case ast.Bi(op, left, right):
                precedence = self.operators.precedence_of(op)
                assoc = self.operators.assoc_of(op)
                return hsep(
                    self.operand_document(precedence, left, assoc == Assoc.LEFT),
                    text(self.operators.display_of(op)),
                    self.operand_document(precedence, right, assoc == Assoc.RIGHT),
                )

            case ast.Call(func, args):
                return cons(self._func(func), parens(self._exprs(args)))

            case ast.ITE(clauses, otherwise):
                if len(clauses) == 0:
                    raise ValueError("An if-then-else needs at least one condition")
                lines = []
                for index, (condition, result) in enumerate(clauses):
                    lines.append(
                        hsep(
                            text("if" if index == 0 else "elseif"),
                            self.naked_expr_document(condition),
                            text("then"),
                            self.naked_expr_document(result),
                        )
                    )
                lines.append(hsep(text("else"), self.naked_expr_document(otherwise), text("endif")))
                return vcat(lines)

            case ast.Let(items, body):
                return cons(
                    text("let {"),
                    indent(4, cons(*(cons(NewLine(), self.item_document(i)) for i in items))),
                    NewLine(),
                    text("}"),
                    NewLine(),
                    hsep(text("in"), self.naked_expr_document(body)),
                )

            case ast.GenCall(func, tail, body):
                return cons(
                    self._func(func),
                    parens(self._comp_tail(tail)),
                    indent(2, cons(NewLine(), parens(self.naked_expr_document(body)))),
                )

            case _:
                typing.assert_never(e)

    def operand_document(self, level: int, e: ast.NakedExpr, associates: bool = False) -> Document:
        """Print `e` as the operand of an operator at precedence `level`.

        A binary operation that binds looser than `level` is parenthesized.
        One that binds exactly as tight is parenthesized too, unless
        `associates` says the enclosing operator groups towards this side.
        Ranges are treated as a use of `..`, and are always parenthesized
        when the table has no `..`. A `let` always gets parentheses since its
        body runs as far right as it can.
        """
        match e:
            case ast.Bi(op=op):
                precedence = self.operators.precedence_of(op)
            case ast.Range():
                info = self.operators.binary.get(RANGE.symbol)
                if info is None:
                    return parens(self.naked_expr_document(e))
                precedence = info.precedence
            case ast.Let():
                return parens(self.naked_expr_document(e))
            case _:
                return self.naked_expr_document(e)

        if precedence > level or (precedence == level and not associates):
            return parens(self.naked_expr_document(e))
        return self.naked_expr_document(e)

    def _range(self, lower: ast.NakedExpr, upper: ast.NakedExpr) -> Document:
        return cons(
            self.operand_document(0, lower, associates=True),
            text(".."),
            self.operand_document(0, upper, associates=True),
        )

    def _exprs(self, es: typing.Iterable[ast.NakedExpr]) -> Document:
        return comma_sep(self.naked_expr_document(e) for e in es)

    def _comprehension(self, element: ast.NakedExpr, tail: ast.CompTail) -> Document:
        return hsep(self.naked_expr_document(element), text("|"), self._comp_tail(tail))

    def _comp_tail(self, tail: ast.CompTail) -> Document:
        generators = comma_sep(self._generator(g) for g in tail.generators)
        if tail.where is None:
            return generators
        return hsep(generators, text("where"), self.naked_expr_document(tail.where))

    def _generator(self, generator: ast.Generator) -> Document:
        return hsep(
            text(", ".join(generator.names)),
            text("in"),
            self.naked_expr_document(generator.source),
        )

    def _func(self, func: ast.Func) -> Document:
        match func:
            case ast.CName(name):
                return text(name)
            case ast.PrefBop(op):
                return text(f"'{self.operators.display_of(op)}'")
            case _:
                typing.assert_never(func)

    # Types, params and annotations ###########################################

    def type_document(self, t: ast.Type) -> Document:
        match t:
            case ast.Bool():
                return text("bool")
            case ast.Float():
                return text("float")
            case ast.Int():
                return text("int")
            case ast.String():
                return text("string")
            case ast.Set(element):
                return hsep(text("set of"), self.type_document(element))
            case ast.Array(dimensions, type_inst):
                return hsep(
                    cons(text("array"), brackets(comma_sep(self.type_document(d) for d in dimensions))),
                    text("of"),
                    self.type_inst_document(type_inst),
                )
            case ast.List(type_inst):
                return hsep(text("list of"), self.type_inst_document(type_inst))
            case ast.Opt(element):
                return hsep(text("opt"), self.type_document(element))
            case ast.Ann():
                return text("ann")
            case ast.Interval(lower, upper):
                return self._range(lower, upper)
            case ast.Elems(elements):
                return braces(self._exprs(elements))
            case ast.AOS(name):
                return text(name)
            case ast.VarType(name):
                return text(f"${name}")
            case _:
                typing.assert_never(t)

    def type_inst_document(self, type_inst: ast.TypeInst | tuple[ast.Inst, ast.Type]) -> Document:
        # Arrays and strings have a fixed inst, annotations have none.
        inst, t = type_inst
        match t:
            case ast.Array() | ast.String() | ast.Ann():
                return self.type_document(t)
            case _:
                return hsep(text(inst.value), self.type_document(t))

    def param_document(self, param: ast.Param | tuple[ast.Inst, ast.Type, str]) -> Document:
        inst, t, name = param
        return cons(self.type_inst_document((inst, t)), text(": "), text(name))

    def _params(self, params: typing.Iterable[ast.Param]) -> Document:
        return comma_sep(self.param_document(p) for p in params)

    def annotation_document(self, annotation: ast.Annotation) -> Document:
        name, args = annotation
        if len(args) == 0:
            return text(f"::{name}")
        return cons(text(f"::{name}"), parens(self._exprs(args)))

    def _annotations(self, annotations: typing.Iterable[ast.Annotation]) -> Document:
        return hsep(*(self.annotation_document(a) for a in annotations))

    # Rendering ###############################################################

    def print_model(self, items: ast.Model) -> str:
        return render(self.model_document(items))

    def print_item(self, item: ast.Item) -> str:
        return render(self.item_document(item))

    def print_expr(self, expr: ast.Expr) -> str:
        return render(self.expr_document(expr))

    def print_naked_expr(self, e: ast.NakedExpr) -> str:
        return render(self.naked_expr_document(e))

    def print_type(self, t: ast.Type) -> str:
        return render(self.type_document(t))


DEFAULT_PRINTER = Printer()


def _printer(operators: OperatorTable | None) -> Printer:
    if operators is None:
        return DEFAULT_PRINTER
    return Printer(operators)


def print_model(items: ast.Model, *, operators: OperatorTable | None = None) -> str:
    """Print a whole model, one item after another."""
    return _printer(operators).print_model(items)


def print_item(item: ast.Item, *, operators: OperatorTable | None = None) -> str:
    return _printer(operators).print_item(item)


def print_expr(expr: ast.Expr, *, operators: OperatorTable | None = None) -> str:
    return _printer(operators).print_expr(expr)


def print_naked_expr(e: ast.NakedExpr, *, operators: OperatorTable | None = None) -> str:
    return _printer(operators).print_naked_expr(e)


def print_type(t: ast.Type, *, operators: OperatorTable | None = None) -> str:
    return _printer(operators).print_type(t)
