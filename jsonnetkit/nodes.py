"""AST nodes and the enums that describe them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from jsonnetkit.fodder import FodderElement
from jsonnetkit.location import LocationRange


def _fodder() -> list[FodderElement]:
    return field(default_factory=list)


def _loc() -> LocationRange:
    return field(default_factory=LocationRange)


# ---------------------------------------------------------------------------
# Enums


class BinaryOp(IntEnum):
    """Binary operators, in precedence-table order."""

    MULT = 0
    DIV = 1
    PERCENT = 2
    PLUS = 3
    MINUS = 4
    SHIFT_L = 5
    SHIFT_R = 6
    GREATER = 7
    GREATER_EQ = 8
    LESS = 9
    LESS_EQ = 10
    IN = 11
    MANIFEST_EQUAL = 12
    MANIFEST_UNEQUAL = 13
    BITWISE_AND = 14
    BITWISE_XOR = 15
    BITWISE_OR = 16
    AND = 17
    OR = 18

    @property
    def token(self) -> str:
        return _BOP_TOKENS[self]

    def __str__(self) -> str:
        return self.token


_BOP_TOKENS: dict[BinaryOp, str] = {
    BinaryOp.MULT: "*",
    BinaryOp.DIV: "/",
    BinaryOp.PERCENT: "%",
    BinaryOp.PLUS: "+",
    BinaryOp.MINUS: "-",
    BinaryOp.SHIFT_L: "<<",
    BinaryOp.SHIFT_R: ">>",
    BinaryOp.GREATER: ">",
    BinaryOp.GREATER_EQ: ">=",
    BinaryOp.LESS: "<",
    BinaryOp.LESS_EQ: "<=",
    BinaryOp.IN: "in",
    BinaryOp.MANIFEST_EQUAL: "==",
    BinaryOp.MANIFEST_UNEQUAL: "!=",
    BinaryOp.BITWISE_AND: "&",
    BinaryOp.BITWISE_XOR: "^",
    BinaryOp.BITWISE_OR: "|",
    BinaryOp.AND: "&&",
    BinaryOp.OR: "||",
}

_BOP_BY_TOKEN: dict[str, BinaryOp] = {token: op for op, token in _BOP_TOKENS.items()}


class UnaryOp(IntEnum):
    """Unary operators."""

    NOT = 0
    BITWISE_NOT = 1
    PLUS = 2
    MINUS = 3

    @property
    def token(self) -> str:
        return _UOP_TOKENS[self]

    def __str__(self) -> str:
        return self.token


_UOP_TOKENS: dict[UnaryOp, str] = {
    UnaryOp.NOT: "!",
    UnaryOp.BITWISE_NOT: "~",
    UnaryOp.PLUS: "+",
    UnaryOp.MINUS: "-",
}

_UOP_BY_TOKEN: dict[str, UnaryOp] = {token: op for op, token in _UOP_TOKENS.items()}


def binary_op_from_token(token: str) -> BinaryOp:
    """The binary operator written as ``token``."""
    try:
        return _BOP_BY_TOKEN[token]
    except KeyError:
        raise ValueError(f"Unrecognised binary operator: {token!r}") from None


def unary_op_from_token(token: str) -> UnaryOp:
    """The unary operator written as ``token``."""
    try:
        return _UOP_BY_TOKEN[token]
    except KeyError:
        raise ValueError(f"Unrecognised unary operator: {token!r}") from None


class LiteralStringKind(Enum):
    SINGLE = 0
    DOUBLE = 1
    BLOCK = 2
    VERBATIM_DOUBLE = 3
    VERBATIM_SINGLE = 4

    def fully_escaped(self) -> bool:
        """Whether strings of this kind may hold escape sequences."""
        return self in (LiteralStringKind.SINGLE, LiteralStringKind.DOUBLE)


class ObjectFieldKind(Enum):
    ASSERT = 0
    FIELD_ID = 1
    FIELD_EXPR = 2
    FIELD_STR = 3
    LOCAL = 4


class ObjectFieldHide(Enum):
    HIDDEN = 0  # f:: e
    INHERIT = 1  # f: e
    VISIBLE = 2  # f::: e


# ---------------------------------------------------------------------------
# Base node and helper records


@dataclass(kw_only=True)
class Node:
    """Fields common to every AST node."""

    loc_range: LocationRange = _loc()
    # Fodder before the first token; empty for left-recursive nodes.
    fodder: list[FodderElement] = _fodder()
    ctx: str | None = None
    free_vars: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class IfSpec:
    """An ``if`` clause of a comprehension."""

    if_fodder: list[FodderElement] = _fodder()
    expr: Node | None = None


@dataclass(kw_only=True)
class ForSpec:
    """A ``for`` clause of a comprehension; ``outer`` is the enclosing clause."""

    for_fodder: list[FodderElement] = _fodder()
    var_fodder: list[FodderElement] = _fodder()
    var_name: str = ""
    in_fodder: list[FodderElement] = _fodder()
    expr: Node | None = None
    conditions: list[IfSpec] = field(default_factory=list)
    outer: ForSpec | None = None


@dataclass(kw_only=True)
class NamedArgument:
    """A named call argument ``x=1``."""

    name_fodder: list[FodderElement] = _fodder()
    name: str = ""
    eq_fodder: list[FodderElement] = _fodder()
    arg: Node | None = None
    comma_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class CommaSeparatedExpr:
    """An element of a comma-separated expression list."""

    expr: Node | None = None
    comma_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class Arguments:
    """Positional and named arguments of a call."""

    positional: list[CommaSeparatedExpr] = field(default_factory=list)
    named: list[NamedArgument] = field(default_factory=list)


@dataclass(kw_only=True)
class Parameter:
    """A function parameter; it is optional when ``default_arg`` is set."""

    name_fodder: list[FodderElement] = _fodder()
    name: str = ""
    eq_fodder: list[FodderElement] = _fodder()
    default_arg: Node | None = None
    comma_fodder: list[FodderElement] = _fodder()
    loc_range: LocationRange = _loc()


@dataclass(kw_only=True)
class CommaSeparatedID:
    """An element of a comma-separated identifier list."""

    name_fodder: list[FodderElement] = _fodder()
    name: str = ""
    comma_fodder: list[FodderElement] = _fodder()


# ---------------------------------------------------------------------------
# Nodes


@dataclass(kw_only=True)
class Apply(Node):
    """A function call."""

    target: Node | None = None
    fodder_left: list[FodderElement] = _fodder()
    arguments: Arguments = field(default_factory=Arguments)
    trailing_comma: bool = False
    tail_strict: bool = False
    fodder_right: list[FodderElement] = _fodder()
    tail_strict_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class ApplyBrace(Node):
    """``e { }``, desugared to ``e + { }``."""

    left: Node | None = None
    right: Node | None = None


@dataclass(kw_only=True)
class Array(Node):
    """An array constructor ``[1, 2, 3]``."""

    elements: list[CommaSeparatedExpr] = field(default_factory=list)
    trailing_comma: bool = False
    close_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class ArrayComp(Node):
    """An array comprehension."""

    body: Node | None = None
    trailing_comma: bool = False
    trailing_comma_fodder: list[FodderElement] = _fodder()
    spec: ForSpec = field(default_factory=ForSpec)
    close_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class Assert(Node):
    """An assert expression; ``message`` may be None."""

    cond: Node | None = None
    colon_fodder: list[FodderElement] = _fodder()
    message: Node | None = None
    semicolon_fodder: list[FodderElement] = _fodder()
    rest: Node | None = None


@dataclass(kw_only=True)
class Binary(Node):
    """A binary operator application."""

    left: Node | None = None
    op_fodder: list[FodderElement] = _fodder()
    op: BinaryOp
    right: Node | None = None


@dataclass(kw_only=True)
class Conditional(Node):
    """``if cond then a else b``; ``branch_false`` may be None."""

    cond: Node | None = None
    then_fodder: list[FodderElement] = _fodder()
    branch_true: Node | None = None
    else_fodder: list[FodderElement] = _fodder()
    branch_false: Node | None = None


@dataclass(kw_only=True)
class Dollar(Node):
    """The ``$`` keyword."""


@dataclass(kw_only=True)
class Error(Node):
    """``error e``."""

    expr: Node | None = None


@dataclass(kw_only=True)
class Function(Node):
    """A function definition."""

    paren_left_fodder: list[FodderElement] = _fodder()
    parameters: list[Parameter] = field(default_factory=list)
    trailing_comma: bool = False
    paren_right_fodder: list[FodderElement] = _fodder()
    body: Node | None = None


@dataclass(kw_only=True)
class LiteralBoolean(Node):
    """``true`` or ``false``."""

    value: bool = False


@dataclass(kw_only=True)
class LiteralNull(Node):
    """The ``null`` keyword."""


@dataclass(kw_only=True)
class LiteralNumber(Node):
    """A number literal, kept as written."""

    original_string: str = ""


@dataclass(kw_only=True)
class LiteralString(Node):
    """A string literal."""

    value: str = ""
    kind: LiteralStringKind = LiteralStringKind.DOUBLE
    block_indent: str = ""
    block_term_indent: str = ""


@dataclass(kw_only=True)
class Import(Node):
    """``import "file"``."""

    file: LiteralString | None = None


@dataclass(kw_only=True)
class ImportStr(Node):
    """``importstr "file"``."""

    file: LiteralString | None = None


@dataclass(kw_only=True)
class ImportBin(Node):
    """``importbin "file"``."""

    file: LiteralString | None = None


@dataclass(kw_only=True)
class Index(Node):
    """``e[e]`` or ``e.f``; after desugaring ``id`` is None."""

    target: Node | None = None
    left_bracket_fodder: list[FodderElement] = _fodder()
    index: Node | None = None
    right_bracket_fodder: list[FodderElement] = _fodder()
    id: str | None = None


@dataclass(kw_only=True)
class Slice(Node):
    """``a[begin:end:step]``; each part may be None."""

    target: Node | None = None
    left_bracket_fodder: list[FodderElement] = _fodder()
    begin_index: Node | None = None
    end_colon_fodder: list[FodderElement] = _fodder()
    end_index: Node | None = None
    step_colon_fodder: list[FodderElement] = _fodder()
    step: Node | None = None
    right_bracket_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class LocalBind:
    """One binding of a ``local``; when ``fun`` is set its body is ``body``."""

    var_fodder: list[FodderElement] = _fodder()
    variable: str = ""
    eq_fodder: list[FodderElement] = _fodder()
    body: Node | None = None
    fun: Function | None = None
    close_fodder: list[FodderElement] = _fodder()
    loc_range: LocationRange = _loc()


@dataclass(kw_only=True)
class Local(Node):
    """``local x = e; e``."""

    binds: list[LocalBind] = field(default_factory=list)
    body: Node | None = None


@dataclass(kw_only=True)
class ObjectField:
    """A field of an object or object comprehension."""

    kind: ObjectFieldKind = ObjectFieldKind.FIELD_ID
    hide: ObjectFieldHide = ObjectFieldHide.INHERIT
    super_sugar: bool = False
    method: Function | None = None
    fodder1: list[FodderElement] = _fodder()
    expr1: Node | None = None
    id: str | None = None
    fodder2: list[FodderElement] = _fodder()
    op_fodder: list[FodderElement] = _fodder()
    expr2: Node | None = None
    expr3: Node | None = None
    comma_fodder: list[FodderElement] = _fodder()
    loc_range: LocationRange = _loc()


def object_field_local_no_method(
    ident: str | None, body: Node | None, loc: LocationRange
) -> ObjectField:
    """A non-method ``local`` object field."""
    return ObjectField(
        kind=ObjectFieldKind.LOCAL,
        hide=ObjectFieldHide.VISIBLE,
        id=ident,
        expr2=body,
        loc_range=loc,
    )


@dataclass(kw_only=True)
class Object(Node):
    """An object constructor before desugaring."""

    fields: list[ObjectField] = field(default_factory=list)
    trailing_comma: bool = False
    close_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class DesugaredObjectField:
    """A field of a desugared object."""

    hide: ObjectFieldHide = ObjectFieldHide.INHERIT
    name: Node | None = None
    body: Node | None = None
    plus_super: bool = False
    loc_range: LocationRange = _loc()


@dataclass(kw_only=True)
class DesugaredObject(Node):
    """An object constructor after desugaring."""

    asserts: list[Node] = field(default_factory=list)
    fields: list[DesugaredObjectField] = field(default_factory=list)
    locals: list[LocalBind] = field(default_factory=list)


@dataclass(kw_only=True)
class ObjectComp(Node):
    """An object comprehension."""

    fields: list[ObjectField] = field(default_factory=list)
    trailing_comma_fodder: list[FodderElement] = _fodder()
    trailing_comma: bool = False
    spec: ForSpec = field(default_factory=ForSpec)
    close_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class Parens(Node):
    """``( e )``."""

    inner: Node | None = None
    close_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class Self(Node):
    """The ``self`` keyword."""


@dataclass(kw_only=True)
class SuperIndex(Node):
    """``super[e]`` or ``super.f``; after desugaring ``id`` is None."""

    dot_fodder: list[FodderElement] = _fodder()
    index: Node | None = None
    id_fodder: list[FodderElement] = _fodder()
    id: str | None = None


@dataclass(kw_only=True)
class InSuper(Node):
    """``e in super``."""

    index: Node | None = None
    in_fodder: list[FodderElement] = _fodder()
    super_fodder: list[FodderElement] = _fodder()


@dataclass(kw_only=True)
class Unary(Node):
    """A unary operator application."""

    op: UnaryOp
    expr: Node | None = None


@dataclass(kw_only=True)
class Var(Node):
    """A variable reference."""

    id: str = ""