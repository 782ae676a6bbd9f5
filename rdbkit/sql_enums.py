"""Token codes and data-type helpers for the SQL front end."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class EntityType(IntEnum):
    IDENTIFIER = 0
    IDENTIFIER_IDENTIFIER = 1
    QUERY_TYPE = 2
    AGG_FN = 3
    KEYWORD = 4
    OPERATOR = 5
    DTYPE = 6
    ENTITY_MAX = 7


class QueryType(IntEnum):
    SELECT = EntityType.ENTITY_MAX + 1
    UPDATE = SELECT + 1
    CREATE = SELECT + 2
    DELETE = SELECT + 3
    INSERT = SELECT + 4
    DROP_TABLE = SELECT + 5
    SHOW_CATALOG = SELECT + 6
    UNSUPPORTED = SELECT + 7


class AggFn(IntEnum):
    SUM = QueryType.UNSUPPORTED + 1
    MIN = SUM + 1
    MAX = SUM + 2
    COUNT = SUM + 3
    AVG = SUM + 4
    NONE = SUM + 5


class Keyword(IntEnum):
    FROM = AggFn.NONE + 1
    WHERE = FROM + 1
    GROUP_BY = FROM + 2
    HAVING = FROM + 3
    ORDER_BY = FROM + 4
    LIMIT = FROM + 5
    PRIMARY_KEY = FROM + 6
    NOT_NULL = FROM + 7
    SELECT = FROM + 8
    AS = FROM + 9
    SET = FROM + 10
    KEYWORD_MAX = FROM + 11


class Operator(IntEnum):
    LESS_THAN = Keyword.KEYWORD_MAX + 1
    LESS_THAN_EQ = LESS_THAN + 1
    GREATER_THAN = LESS_THAN + 2
    EQ = LESS_THAN + 3
    NOT_EQ = LESS_THAN + 4
    AND = LESS_THAN + 5
    OR = LESS_THAN + 6
    GREATER_THAN_EQ = LESS_THAN + 7
    NOT = LESS_THAN + 8
    IN = LESS_THAN + 9
    LIKE = LESS_THAN + 10
    BETWEEN = LESS_THAN + 11
    OP_MAX = LESS_THAN + 12


class Dtype(IntEnum):
    FIRST = Operator.OP_MAX + 1
    STRING = FIRST + 1
    INT = FIRST + 2
    DOUBLE = FIRST + 3
    BOOL = FIRST + 4
    IPV4_ADDR = FIRST + 5
    INTERVAL = FIRST + 6
    DTYPE_MAX = FIRST + 7


class DtypeAttr(IntEnum):
    LEN = Dtype.DTYPE_MAX + 1
    ATTR_MAX = LEN + 1


class ValueType(IntEnum):
    INTEGER = DtypeAttr.ATTR_MAX + 1
    STRING = INTEGER + 1
    DOUBLE = INTEGER + 2
    IPV4_ADDR = INTEGER + 3
    INTERVAL = INTEGER + 4
    VALUE_MAX = INTEGER + 5


class MathFn(IntEnum):
    MAX = ValueType.VALUE_MAX + 1
    MIN = MAX + 1
    PLUS = MAX + 2
    MINUS = MAX + 3
    MUL = MAX + 4
    DIV = MAX + 5
    SQRT = MAX + 6
    SQR = MAX + 7
    SIN = MAX + 8
    COS = MAX + 9
    POW = MAX + 10
    MOD = MAX + 11
    FNS_MAX = MAX + 12


class Order(IntEnum):
    ASC = MathFn.FNS_MAX + 1
    DSC = ASC + 1
    ORDER_MAX = ASC + 2


class Misc(IntEnum):
    COMMA = Order.ORDER_MAX + 1
    BRACKET_START = COMMA + 1
    BRACKET_END = COMMA + 2
    QUOTATION_MARK = COMMA + 3
    SHOW_DB_TABLES = COMMA + 4


_DTYPE_NAMES = {
    Dtype.STRING: "SQL_STRING",
    Dtype.INT: "SQL_INT",
    Dtype.DOUBLE: "SQL_DOUBLE",
    Dtype.IPV4_ADDR: "SQL_IPV4_ADDR",
    Dtype.INTERVAL: "SQL_INTERVAL",
}

_DTYPE_SIZES = {
    Dtype.STRING: 1,
    Dtype.INT: 4,
    Dtype.DOUBLE: 8,
    Dtype.IPV4_ADDR: 4,
    Dtype.INTERVAL: 8,
}

_AGG_FN_NAMES = {
    AggFn.SUM: "sum",
    AggFn.MIN: "min",
    AggFn.MAX: "max",
    AggFn.COUNT: "count",
    AggFn.AVG: "avg",
}


def is_valid_dtype(dtype: int) -> bool:
    """Tell whether ``dtype`` is a column type a table may use."""
    return dtype in _DTYPE_NAMES


def dtype_name(dtype: int) -> Optional[str]:
    """Return the printable name of a column type, or None for others."""
    return _DTYPE_NAMES.get(dtype)


def dtype_size(dtype: int) -> int:
    """Return the storage size in bytes of a column type, 0 if unknown."""
    return _DTYPE_SIZES.get(dtype, 0)


def agg_fn_name(agg_fn: int) -> str:
    """Return the SQL spelling of an aggregate function, '' if unknown."""
    return _AGG_FN_NAMES.get(agg_fn, "")