"""Pretty-print MiniZinc models.

Build a model out of the node classes in [ast], then turn it into MiniZinc
source with `print_model`:

    from mzprint import *

    model = [
        Declare(Param(Inst.Dec, Int(), "x")),
        Constraint(Expr(Bi(EQ, Bi(MOD, Var("x"), IConst(2)), IConst(0)))),
        Solve([], Satisfy()),
    ]
    print(print_model(model))

Operator precedence and spelling come from an [builtins.OperatorTable];
`MINIZINC_OPERATORS` is used unless you pass `operators=` yourself.
"""
from . import ast
from . import builtins
from . import document
from . import printer

from .ast import *
from .builtins import *
from .printer import (
    InvalidModelError,
    Printer,
    escape,
    is_atomic,
    print_expr,
    print_item,
    print_model,
    print_naked_expr,
    print_type,
)
