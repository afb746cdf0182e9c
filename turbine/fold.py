"""Constant folding of operator expressions and integer evaluation of constants."""

from __future__ import annotations

import math
import operator
from typing import Any, Callable

from turbine.syntax import Expr, NodeKind, ValueKind

_INT_BITS = 64
_INT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)

_UNARY_KINDS = frozenset({
    NodeKind.EXPR_POS,
    NodeKind.EXPR_NEG,
    NodeKind.EXPR_LOGNOT,
    NodeKind.EXPR_NOT,
})

_BINARY_KINDS = frozenset({
    NodeKind.EXPR_ADD,
    NodeKind.EXPR_SUB,
    NodeKind.EXPR_MUL,
    NodeKind.EXPR_DIV,
    NodeKind.EXPR_REM,
    NodeKind.EXPR_SHL,
    NodeKind.EXPR_SHR,
    NodeKind.EXPR_AND,
    NodeKind.EXPR_OR,
    NodeKind.EXPR_XOR,
    NodeKind.EXPR_LOGAND,
    NodeKind.EXPR_LOGOR,
})

_RELATIONAL_KINDS = frozenset({
    NodeKind.EXPR_EQ,
    NodeKind.EXPR_NEQ,
    NodeKind.EXPR_LT,
    NodeKind.EXPR_LTE,
    NodeKind.EXPR_GT,
    NodeKind.EXPR_GTE,
})

_LITERAL_OF = {
    ValueKind.BOOL: NodeKind.EXPR_BOOLLIT,
    ValueKind.INT: NodeKind.EXPR_INTLIT,
    ValueKind.FLOAT: NodeKind.EXPR_FLOATLIT,
    ValueKind.STRING: NodeKind.EXPR_STRINGLIT,
}


def _wrap(value: int) -> int:
    """Wrap ``value`` into the signed 64-bit range."""
    value &= _INT_MASK
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return _wrap(-quotient if (a < 0) != (b < 0) else quotient)


def _int_rem(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer remainder by zero")
    return _wrap(a - _int_div(a, b) * b)


def _int_shl(a: int, b: int) -> int:
    if b < 0:
        raise ValueError(f"negative shift count: {b}")
    return _wrap(a << b) if b < _INT_BITS else 0


def _int_shr(a: int, b: int) -> int:
    if b < 0:
        raise ValueError(f"negative shift count: {b}")
    return a >> min(b, _INT_BITS - 1)


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if math.isnan(a) or a == 0.0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_rem(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


_Op = Callable[..., Any]

_INT_UNARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_POS: lambda a: a,
    NodeKind.EXPR_NEG: lambda a: _wrap(-a),
    NodeKind.EXPR_NOT: lambda a: ~a,
}

_INT_BINARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_ADD: lambda a, b: _wrap(a + b),
    NodeKind.EXPR_SUB: lambda a, b: _wrap(a - b),
    NodeKind.EXPR_MUL: lambda a, b: _wrap(a * b),
    NodeKind.EXPR_DIV: _int_div,
    NodeKind.EXPR_REM: _int_rem,
    NodeKind.EXPR_SHL: _int_shl,
    NodeKind.EXPR_SHR: _int_shr,
    NodeKind.EXPR_OR: operator.or_,
    NodeKind.EXPR_XOR: operator.xor,
    NodeKind.EXPR_AND: operator.and_,
}

_FLOAT_UNARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_POS: lambda a: a,
    NodeKind.EXPR_NEG: lambda a: -a,
}

_FLOAT_BINARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_ADD: operator.add,
    NodeKind.EXPR_SUB: operator.sub,
    NodeKind.EXPR_MUL: operator.mul,
    NodeKind.EXPR_DIV: _float_div,
    NodeKind.EXPR_REM: _float_rem,
}

_BOOL_UNARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_LOGNOT: lambda a: not a,
}

_BOOL_BINARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_LOGOR: lambda a, b: bool(a or b),
    NodeKind.EXPR_LOGAND: lambda a, b: bool(a and b),
}

_STRING_BINARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_ADD: operator.add,
}

_COMPARE: dict[NodeKind, _Op] = {
    NodeKind.EXPR_EQ: operator.eq,
    NodeKind.EXPR_NEQ: operator.ne,
    NodeKind.EXPR_LT: operator.lt,
    NodeKind.EXPR_LTE: operator.le,
    NodeKind.EXPR_GT: operator.gt,
    NodeKind.EXPR_GTE: operator.ge,
}

_UNARY_OPS = {
    ValueKind.BOOL: _BOOL_UNARY,
    ValueKind.INT: _INT_UNARY,
    ValueKind.FLOAT: _FLOAT_UNARY,
}

_BINARY_OPS = {
    ValueKind.BOOL: _BOOL_BINARY,
    ValueKind.INT: _INT_BINARY,
    ValueKind.FLOAT: _FLOAT_BINARY,
    ValueKind.STRING: _STRING_BINARY,
}

_COMPARABLE = frozenset({ValueKind.INT, ValueKind.FLOAT, ValueKind.STRING})
_EQUATABLE = frozenset({NodeKind.EXPR_EQ, NodeKind.EXPR_NEQ})


def _check_kind(kind: int, allowed: frozenset, what: str) -> NodeKind:
    try:
        node_kind = NodeKind(kind)
    except ValueError:
        raise ValueError(f"unknown node kind: {kind}") from None
    if node_kind not in allowed:
        raise ValueError(f"{node_kind.name} is not a {what} operator")
    return node_kind


def _fold(expr: Expr, op: _Op | None, result_type: ValueKind,
          *operands: Expr) -> Expr:
    if not expr.is_const or op is None:
        return expr
    expr.value = op(*(operand.value for operand in operands))
    expr.kind_orig = expr.kind
    expr.kind = _LITERAL_OF[result_type]
    return expr


def unary(kind: int, operand: Expr) -> Expr:
    """Build a unary expression, folding it when the operand is constant."""
    node_kind = _check_kind(kind, _UNARY_KINDS, "unary")
    expr = Expr(node_kind, operand.type, left=operand, is_const=operand.is_const)
    op = _UNARY_OPS.get(operand.type, {}).get(node_kind)
    return _fold(expr, op, operand.type, operand)


def binary(kind: int, left: Expr, right: Expr) -> Expr:
    """Build an arithmetic, bitwise or logical expression typed as ``left``.

    Folds it into a literal when both operands are constant.
    """
    node_kind = _check_kind(kind, _BINARY_KINDS, "binary")
    expr = Expr(node_kind, left.type, left=left, right=right,
                is_const=left.is_const and right.is_const)
    op = _BINARY_OPS.get(left.type, {}).get(node_kind)
    return _fold(expr, op, left.type, left, right)


def relational(kind: int, left: Expr, right: Expr) -> Expr:
    """Build a comparison, always bool-typed, folding constant operands."""
    node_kind = _check_kind(kind, _RELATIONAL_KINDS, "relational")
    expr = Expr(node_kind, ValueKind.BOOL, left=left, right=right,
                is_const=left.is_const and right.is_const)
    comparable = left.type in _COMPARABLE or (
        left.type == ValueKind.BOOL and node_kind in _EQUATABLE)
    op = _COMPARE[node_kind] if comparable else None
    return _fold(expr, op, ValueKind.BOOL, left, right)


_EVAL_BINARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_ADD: lambda a, b: _wrap(a + b),
    NodeKind.EXPR_SUB: lambda a, b: _wrap(a - b),
    NodeKind.EXPR_MUL: lambda a, b: _wrap(a * b),
    NodeKind.EXPR_DIV: _int_div,
    NodeKind.EXPR_REM: _int_rem,
}

_EVAL_UNARY: dict[NodeKind, _Op] = {
    NodeKind.EXPR_POS: lambda a: a,
    NodeKind.EXPR_NEG: lambda a: _wrap(-a),
    NodeKind.EXPR_LOGNOT: lambda a: int(not a),
    NodeKind.EXPR_NOT: lambda a: ~a,
}


def eval_int_expr(expr: Expr) -> int | None:
    """Evaluate ``expr`` as an integer constant, or None if it is not one.

    Function literals evaluate to the function's id.
    """
    kind = expr.kind

    if kind == NodeKind.EXPR_MODULEACCESS:
        return eval_int_expr(expr.right)

    if kind in (NodeKind.EXPR_BOOLLIT, NodeKind.EXPR_INTLIT):
        return int(expr.value)

    if kind == NodeKind.EXPR_FUNCLIT:
        return int(getattr(expr.value, "id", expr.value))

    if kind in _EVAL_BINARY:
        left = eval_int_expr(expr.left)
        if left is None:
            return None
        right = eval_int_expr(expr.right)
        if right is None:
            return None
        return _EVAL_BINARY[kind](left, right)

    if kind in _EVAL_UNARY:
        operand = eval_int_expr(expr.left)
        if operand is None:
            return None
        return _EVAL_UNARY[kind](operand)

    return None