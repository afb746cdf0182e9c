"""Syntax tree nodes: expressions, statements and their kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Any


class NodeKind(IntEnum):
    """Kinds of statement and expression nodes."""

    # statements
    STMT_NOP = 0
    STMT_IF = auto()
    STMT_ELSE = auto()
    STMT_WHILE = auto()
    STMT_FORNUM = auto()
    STMT_FORVEC = auto()
    STMT_FORMAP = auto()
    STMT_FORSET = auto()
    STMT_FORSTACK = auto()
    STMT_FORQUEUE = auto()
    STMT_FORENUM = auto()
    STMT_BREAK = auto()
    STMT_CONTINUE = auto()
    STMT_SWITCH = auto()
    STMT_CASE = auto()
    STMT_DEFAULT = auto()
    STMT_RETURN = auto()
    STMT_EXPR = auto()
    STMT_ASSIGN = auto()
    STMT_INIT = auto()
    STMT_BLOCK = auto()
    # identifiers
    EXPR_VAR = auto()
    EXPR_STRUCTFIELD = auto()
    EXPR_ENUMFIELD = auto()
    # literals
    EXPR_NILLIT = auto()
    EXPR_BOOLLIT = auto()
    EXPR_INTLIT = auto()
    EXPR_FLOATLIT = auto()
    EXPR_STRINGLIT = auto()
    EXPR_FUNCLIT = auto()
    EXPR_VECLIT = auto()
    EXPR_MAPLIT = auto()
    EXPR_SETLIT = auto()
    EXPR_STACKLIT = auto()
    EXPR_QUEUELIT = auto()
    EXPR_STRUCTLIT = auto()
    EXPR_ENUMLIT = auto()
    EXPR_MODULELIT = auto()
    # binary
    EXPR_ADD = auto()
    EXPR_SUB = auto()
    EXPR_MUL = auto()
    EXPR_DIV = auto()
    EXPR_REM = auto()
    # relational
    EXPR_EQ = auto()
    EXPR_NEQ = auto()
    EXPR_LT = auto()
    EXPR_LTE = auto()
    EXPR_GT = auto()
    EXPR_GTE = auto()
    # bitwise
    EXPR_SHL = auto()
    EXPR_SHR = auto()
    EXPR_OR = auto()
    EXPR_XOR = auto()
    EXPR_AND = auto()
    # logical
    EXPR_LOGOR = auto()
    EXPR_LOGAND = auto()
    EXPR_LOGNOT = auto()
    # unary
    EXPR_POS = auto()
    EXPR_NEG = auto()
    EXPR_NOT = auto()
    EXPR_CONV = auto()
    # vec, map, struct, func
    EXPR_INDEX = auto()
    EXPR_MAPINDEX = auto()
    EXPR_STRUCTACCESS = auto()
    EXPR_ENUMACCESS = auto()
    EXPR_MODULEACCESS = auto()
    EXPR_CALL = auto()
    EXPR_ELEMENT = auto()
    # assignment
    EXPR_ASSIGN = auto()
    EXPR_ADDASSIGN = auto()
    EXPR_SUBASSIGN = auto()
    EXPR_MULASSIGN = auto()
    EXPR_DIVASSIGN = auto()
    EXPR_REMASSIGN = auto()
    EXPR_SHLASSIGN = auto()
    EXPR_SHRASSIGN = auto()
    EXPR_ORASSIGN = auto()
    EXPR_XORASSIGN = auto()
    EXPR_ANDASSIGN = auto()
    EXPR_INIT = auto()


class ValueKind(IntEnum):
    """The value type an expression produces."""

    NIL = 0
    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    STRING = auto()
    VEC = auto()
    MAP = auto()
    SET = auto()
    STACK = auto()
    QUEUE = auto()
    STRUCT = auto()
    ENUM = auto()
    MODULE = auto()
    FUNC = auto()
    ANY = auto()


_NODE_STRINGS = {
    NodeKind.STMT_NOP: "nop",
    NodeKind.STMT_IF: "if",
    NodeKind.STMT_ELSE: "else",
    NodeKind.STMT_WHILE: "while",
    NodeKind.STMT_FORNUM: "for (num)",
    NodeKind.STMT_FORVEC: "for (vec)",
    NodeKind.STMT_FORMAP: "for (map)",
    NodeKind.STMT_FORSET: "for (set)",
    NodeKind.STMT_FORSTACK: "for (stack)",
    NodeKind.STMT_FORQUEUE: "for (queue)",
    NodeKind.STMT_FORENUM: "for (enum)",
    NodeKind.STMT_BREAK: "break",
    NodeKind.STMT_CONTINUE: "continue",
    NodeKind.STMT_SWITCH: "switch",
    NodeKind.STMT_CASE: "case",
    NodeKind.STMT_DEFAULT: "default",
    NodeKind.STMT_RETURN: "return",
    NodeKind.STMT_EXPR: "expr",
    NodeKind.STMT_ASSIGN: "assign",
    NodeKind.STMT_INIT: "init",
    NodeKind.STMT_BLOCK: "block",
    NodeKind.EXPR_VAR: "var",
    NodeKind.EXPR_STRUCTFIELD: "structfield",
    NodeKind.EXPR_ENUMFIELD: "enumfield",
    NodeKind.EXPR_NILLIT: "nillit",
    NodeKind.EXPR_BOOLLIT: "boollit",
    NodeKind.EXPR_INTLIT: "intlit",
    NodeKind.EXPR_FLOATLIT: "floatlit",
    NodeKind.EXPR_STRINGLIT: "stringlit",
    NodeKind.EXPR_FUNCLIT: "funclit",
    NodeKind.EXPR_VECLIT: "veclit",
    NodeKind.EXPR_MAPLIT: "maplit",
    NodeKind.EXPR_SETLIT: "setlit",
    NodeKind.EXPR_STACKLIT: "stacklit",
    NodeKind.EXPR_QUEUELIT: "queuelit",
    NodeKind.EXPR_STRUCTLIT: "structlit",
    NodeKind.EXPR_ENUMLIT: "enumlit",
    NodeKind.EXPR_MODULELIT: "modulelit",
    NodeKind.EXPR_ADD: "+",
    NodeKind.EXPR_SUB: "-",
    NodeKind.EXPR_MUL: "*",
    NodeKind.EXPR_DIV: "/",
    NodeKind.EXPR_REM: "%",
    NodeKind.EXPR_EQ: "==",
    NodeKind.EXPR_NEQ: "!=",
    NodeKind.EXPR_LT: "<",
    NodeKind.EXPR_LTE: "<=",
    NodeKind.EXPR_GT: ">",
    NodeKind.EXPR_GTE: ">=",
    NodeKind.EXPR_SHL: "<<",
    NodeKind.EXPR_SHR: ">>",
    NodeKind.EXPR_OR: "|",
    NodeKind.EXPR_XOR: "^",
    NodeKind.EXPR_AND: "&",
    NodeKind.EXPR_LOGOR: "||",
    NodeKind.EXPR_LOGAND: "&&",
    NodeKind.EXPR_LOGNOT: "!",
    NodeKind.EXPR_POS: "+(pos)",
    NodeKind.EXPR_NEG: "-(neg)",
    NodeKind.EXPR_NOT: "~",
    NodeKind.EXPR_CONV: "conversion",
    NodeKind.EXPR_INDEX: "index",
    NodeKind.EXPR_MAPINDEX: "mapindex",
    NodeKind.EXPR_STRUCTACCESS: "structaccess",
    NodeKind.EXPR_ENUMACCESS: "enumaccess",
    NodeKind.EXPR_MODULEACCESS: "moduleaccess",
    NodeKind.EXPR_CALL: "call",
    NodeKind.EXPR_ELEMENT: "element",
    NodeKind.EXPR_ASSIGN: "=",
    NodeKind.EXPR_ADDASSIGN: "+=",
    NodeKind.EXPR_SUBASSIGN: "-=",
    NodeKind.EXPR_MULASSIGN: "*=",
    NodeKind.EXPR_DIVASSIGN: "/=",
    NodeKind.EXPR_REMASSIGN: "%=",
    NodeKind.EXPR_SHLASSIGN: "<<=",
    NodeKind.EXPR_SHRASSIGN: ">>=",
    NodeKind.EXPR_ORASSIGN: "|=",
    NodeKind.EXPR_XORASSIGN: "^=",
    NodeKind.EXPR_ANDASSIGN: "&=",
    NodeKind.EXPR_INIT: "init",
}


@dataclass
class Var:
    """A declared variable or parameter."""

    name: str
    type: ValueKind = ValueKind.NIL
    is_global: bool = False
    is_param: bool = False


@dataclass
class Expr:
    """An expression node.

    ``value`` holds the literal (or folded constant) value; ``kind_orig``
    keeps the kind an expression had before it was folded to a literal.
    """

    kind: NodeKind
    type: ValueKind = ValueKind.NIL
    left: Expr | None = None
    right: Expr | None = None
    var: Var | None = None
    value: Any = None
    is_const: bool = False
    kind_orig: NodeKind | None = None


@dataclass
class Stmt:
    """A statement node."""

    kind: NodeKind
    expr: Expr | None = None
    init: Stmt | None = None
    cond: Expr | None = None
    post: Stmt | None = None
    body: Stmt | None = None
    children: list[Stmt] = field(default_factory=list)


def node_string(kind: int) -> str:
    """Return the display name of a node kind."""
    try:
        return _NODE_STRINGS[NodeKind(kind)]
    except ValueError:
        raise ValueError(f"unknown node kind: {kind}") from None


def is_global(expr: Expr) -> bool:
    """Whether the expression refers to storage in a global variable."""
    if expr.kind == NodeKind.EXPR_VAR:
        return expr.var.is_global
    if expr.kind == NodeKind.EXPR_STRUCTACCESS:
        return is_global(expr.left)
    return False


def is_mutable(expr: Expr) -> bool:
    """Whether the expression may be assigned to; parameters may not."""
    if expr.kind == NodeKind.EXPR_VAR:
        return not expr.var.is_param
    return True


def nil_literal() -> Expr:
    return Expr(NodeKind.EXPR_NILLIT, ValueKind.NIL)


def bool_literal(value: bool) -> Expr:
    return Expr(NodeKind.EXPR_BOOLLIT, ValueKind.BOOL, value=bool(value),
                is_const=True)


def int_literal(value: int) -> Expr:
    return Expr(NodeKind.EXPR_INTLIT, ValueKind.INT, value=int(value),
                is_const=True)


def float_literal(value: float) -> Expr:
    return Expr(NodeKind.EXPR_FLOATLIT, ValueKind.FLOAT, value=float(value),
                is_const=True)


def string_literal(value: str) -> Expr:
    return Expr(NodeKind.EXPR_STRINGLIT, ValueKind.STRING, value=value,
                is_const=True)


def var_expr(var: Var) -> Expr:
    """An expression naming ``var``, typed as the variable."""
    return Expr(NodeKind.EXPR_VAR, var.type, var=var)