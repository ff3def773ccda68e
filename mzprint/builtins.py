"""The operator table.

The printer does not know anything about operators beyond what it finds in
an `OperatorTable`: the text to display, the precedence level (lower numbers
bind tighter) and the associativity. `MINIZINC_OPERATORS` is the table for
MiniZinc 2; pass your own to the printer to render a different set.
"""
import enum
import typing

from .ast import Bop, Uop


class Assoc(enum.Enum):
    """Associativity of an operator."""

    NONE = 0
    LEFT = 1
    RIGHT = 2


class OperatorInfo(typing.NamedTuple):
    display: str
    precedence: int = 0
    assoc: Assoc = Assoc.LEFT


class UnknownOperatorError(KeyError):
    op: Bop | Uop

    def __init__(self, op: Bop | Uop):
        super().__init__(op.symbol)
        self.op = op

    def __str__(self):
        kind = "binary" if isinstance(self.op, Bop) else "unary"
        return f"No {kind} operator '{self.op.symbol}' in the operator table"


class OperatorTable:
    binary: dict[str, OperatorInfo]
    unary: dict[str, OperatorInfo]

    def __init__(
        self,
        binary: typing.Mapping[str, OperatorInfo],
        unary: typing.Mapping[str, OperatorInfo] | None = None,
    ):
        self.binary = dict(binary)
        self.unary = dict(unary or {})

    def lookup(self, op: Bop | Uop) -> OperatorInfo:
        table = self.binary if isinstance(op, Bop) else self.unary
        info = table.get(op.symbol)
        if info is None:
            raise UnknownOperatorError(op)
        return info

    def precedence_of(self, op: Bop) -> int:
        return self.lookup(op).precedence

    def assoc_of(self, op: Bop) -> Assoc:
        return self.lookup(op).assoc

    def display_of(self, op: Bop | Uop) -> str:
        return self.lookup(op).display


def _binary(precedence: int, assoc: Assoc, *symbols: str) -> dict[str, OperatorInfo]:
    return {symbol: OperatorInfo(symbol, precedence, assoc) for symbol in symbols}


MINIZINC_OPERATORS = OperatorTable(
    binary={
        **_binary(1200, Assoc.LEFT, "<->"),
        **_binary(1100, Assoc.LEFT, "->", "<-"),
        **_binary(1000, Assoc.LEFT, "\\/", "xor"),
        **_binary(900, Assoc.LEFT, "/\\"),
        **_binary(800, Assoc.NONE, "<", ">", "<=", ">=", "==", "=", "!="),
        **_binary(700, Assoc.NONE, "in", "subset", "superset"),
        **_binary(600, Assoc.LEFT, "union", "diff", "symdiff"),
        **_binary(500, Assoc.NONE, ".."),
        **_binary(400, Assoc.LEFT, "+", "-"),
        **_binary(300, Assoc.LEFT, "*", "/", "div", "mod", "intersect"),
        **_binary(200, Assoc.LEFT, "^"),
        **_binary(100, Assoc.RIGHT, "++"),
        **_binary(70, Assoc.LEFT, "default"),
    },
    unary={
        "not": OperatorInfo("not"),
        "-": OperatorInfo("-"),
        "+": OperatorInfo("+"),
    },
)


# Binary operators
EQUIV = Bop("<->")
IMPL = Bop("->")
RIMPL = Bop("<-")
OR = Bop("\\/")
XOR = Bop("xor")
AND = Bop("/\\")
LT = Bop("<")
GT = Bop(">")
LTE = Bop("<=")
GTE = Bop(">=")
EQEQ = Bop("==")
EQ = Bop("=")
NEQ = Bop("!=")
IN = Bop("in")
SUBSET = Bop("subset")
SUPERSET = Bop("superset")
UNION = Bop("union")
DIFF = Bop("diff")
SYMDIFF = Bop("symdiff")
DOTDOT = Bop("..")
PLUS = Bop("+")
MINUS = Bop("-")
TIMES = Bop("*")
FDIV = Bop("/")
DIV = Bop("div")
MOD = Bop("mod")
INTERSECT = Bop("intersect")
POW = Bop("^")
CONCAT = Bop("++")
DEFAULT = Bop("default")

# Unary operators
NOT = Uop("not")
NEG = Uop("-")
POS = Uop("+")
