"""Syntax tree for MiniZinc models.

The node classes are plain immutable data; the printer never mutates them.
Every union at the bottom of the module is closed, so a `match` over one of
them can end in `typing.assert_never`.
"""
import dataclasses
import enum
import typing


class Inst(enum.Enum):
    """Instantiation of a type: decision variable or fixed parameter."""

    Dec = "var"
    Par = "par"


@dataclasses.dataclass(frozen=True)
class Bop:
    symbol: str


@dataclasses.dataclass(frozen=True)
class Uop:
    symbol: str


###############################################################################
# Types
###############################################################################


@dataclasses.dataclass(frozen=True)
class Bool:
    pass


@dataclasses.dataclass(frozen=True)
class Float:
    pass


@dataclasses.dataclass(frozen=True)
class Int:
    pass


@dataclasses.dataclass(frozen=True)
class String:
    pass


@dataclasses.dataclass(frozen=True)
class Set:
    type: "Type"


@dataclasses.dataclass(frozen=True)
class Array:
    dimensions: typing.Sequence["Type"]
    type_inst: "TypeInst"


@dataclasses.dataclass(frozen=True)
class List:
    type_inst: "TypeInst"


@dataclasses.dataclass(frozen=True)
class Opt:
    type: "Type"


@dataclasses.dataclass(frozen=True)
class Ann:
    pass


@dataclasses.dataclass(frozen=True)
class Interval:
    lower: "NakedExpr"
    upper: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class Elems:
    elements: typing.Sequence["NakedExpr"]


@dataclasses.dataclass(frozen=True)
class AOS:
    """A named type: an enum or a type alias."""

    name: str


@dataclasses.dataclass(frozen=True)
class VarType:
    """A type variable, `$T`."""

    name: str


class TypeInst(typing.NamedTuple):
    inst: Inst
    type: "Type"


class Param(typing.NamedTuple):
    inst: Inst
    type: "Type"
    name: str


###############################################################################
# Expressions
###############################################################################


class Annotation(typing.NamedTuple):
    name: str
    args: typing.Sequence["NakedExpr"] = ()


class Generator(typing.NamedTuple):
    names: typing.Sequence[str]
    source: "NakedExpr"


class CompTail(typing.NamedTuple):
    generators: typing.Sequence[Generator]
    where: "NakedExpr | None" = None


@dataclasses.dataclass(frozen=True)
class CName:
    name: str


@dataclasses.dataclass(frozen=True)
class PrefBop:
    """A binary operator called like a function, `'+'(a, b)`."""

    op: Bop


@dataclasses.dataclass(frozen=True)
class AnonVar:
    pass


@dataclasses.dataclass(frozen=True)
class Var:
    name: str


@dataclasses.dataclass(frozen=True)
class BConst:
    value: bool


@dataclasses.dataclass(frozen=True)
class IConst:
    value: int


@dataclasses.dataclass(frozen=True)
class FConst:
    value: float


@dataclasses.dataclass(frozen=True)
class SConst:
    value: str


@dataclasses.dataclass(frozen=True)
class Range:
    lower: "NakedExpr"
    upper: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class SetLit:
    elements: typing.Sequence["NakedExpr"]


@dataclasses.dataclass(frozen=True)
class SetComp:
    element: "NakedExpr"
    tail: CompTail


@dataclasses.dataclass(frozen=True)
class ArrayLit:
    elements: typing.Sequence["NakedExpr"]


@dataclasses.dataclass(frozen=True)
class ArrayLit2D:
    rows: typing.Sequence[typing.Sequence["NakedExpr"]]


@dataclasses.dataclass(frozen=True)
class ArrayComp:
    element: "NakedExpr"
    tail: CompTail


@dataclasses.dataclass(frozen=True)
class ArrayElem:
    name: str
    indices: typing.Sequence["NakedExpr"]


@dataclasses.dataclass(frozen=True)
class U:
    op: Uop
    operand: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class Bi:
    op: Bop
    left: "NakedExpr"
    right: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class Call:
    func: "Func"
    args: typing.Sequence["NakedExpr"]


@dataclasses.dataclass(frozen=True)
class ITE:
    """if-then-elseif-else. `clauses` holds (condition, result) pairs, first
    one is the `if`, the rest are `elseif`s."""

    clauses: typing.Sequence[tuple["NakedExpr", "NakedExpr"]]
    otherwise: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class Let:
    items: typing.Sequence["Item"]
    body: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class GenCall:
    """An aggregate over a comprehension tail, `forall(i in S) (e)`."""

    func: "Func"
    tail: CompTail
    body: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class Expr:
    expr: "NakedExpr"
    annotations: typing.Sequence[Annotation] = ()


###############################################################################
# Items
###############################################################################


@dataclasses.dataclass(frozen=True)
class Satisfy:
    pass


@dataclasses.dataclass(frozen=True)
class Minimize:
    expr: Expr


@dataclasses.dataclass(frozen=True)
class Maximize:
    expr: Expr


@dataclasses.dataclass(frozen=True)
class Empty:
    pass


@dataclasses.dataclass(frozen=True)
class Comment:
    text: str


@dataclasses.dataclass(frozen=True)
class Include:
    file: str


@dataclasses.dataclass(frozen=True)
class Declare:
    param: Param
    annotations: typing.Sequence[Annotation] = ()
    body: "NakedExpr | None" = None


@dataclasses.dataclass(frozen=True)
class Constraint:
    expr: Expr


@dataclasses.dataclass(frozen=True)
class Assign:
    name: str
    expr: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class Output:
    expr: "NakedExpr"


@dataclasses.dataclass(frozen=True)
class AnnotDec:
    name: str
    params: typing.Sequence[Param]


@dataclasses.dataclass(frozen=True)
class Solve:
    annotations: typing.Sequence[Annotation]
    goal: "SolveGoal"


@dataclasses.dataclass(frozen=True)
class Pred:
    name: str
    params: typing.Sequence[Param]
    annotations: typing.Sequence[Annotation] = ()
    body: "NakedExpr | None" = None


@dataclasses.dataclass(frozen=True)
class Test:
    name: str
    params: typing.Sequence[Param]
    annotations: typing.Sequence[Annotation] = ()
    body: "NakedExpr | None" = None

    # Keep pytest from collecting this as a test class.
    __test__ = False


@dataclasses.dataclass(frozen=True)
class Function:
    param: Param
    params: typing.Sequence[Param]
    annotations: typing.Sequence[Annotation] = ()
    body: "NakedExpr | None" = None


Type = (
    Bool | Float | Int | String | Set | Array | List | Opt | Ann | Interval | Elems | AOS | VarType
)

Func = CName | PrefBop

NakedExpr = (
    AnonVar
    | Var
    | BConst
    | IConst
    | FConst
    | SConst
    | Range
    | SetLit
    | SetComp
    | ArrayLit
    | ArrayLit2D
    | ArrayComp
    | ArrayElem
    | U
    | Bi
    | Call
    | ITE
    | Let
    | GenCall
)

SolveGoal = Satisfy | Minimize | Maximize

Item = (
    Empty
    | Comment
    | Include
    | Declare
    | Constraint
    | Assign
    | Output
    | AnnotDec
    | Solve
    | Pred
    | Test
    | Function
)

Model = typing.Sequence[Item]
