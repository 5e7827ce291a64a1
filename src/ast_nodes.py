from dataclasses import dataclass
from typing import List, Any


@dataclass(frozen=True)
class SourceToken:
    """终结符及其位置：line 从 1 开始，column 从 0 开始"""
    text: str
    line: int
    column: int
    def __repr__(self): return f"Token({self.text!r}@{self.line}:{self.column})"

@dataclass(frozen=True)
class Program:
    stmts: List[Any]
    def __repr__(self): return f"Program({self.stmts})"

@dataclass(frozen=True)
class Block:
    stmts: List[Any]
    lbrace: SourceToken
    def __repr__(self): return f"Block({self.stmts})"

# Statements
@dataclass(frozen=True)
class VarDecl:
    type_token: SourceToken
    name_token: SourceToken
    assign_token: SourceToken
    expr: Any

    @property
    def name(self) -> str:
        return self.name_token.text

    @property
    def type_name(self) -> str:
        return self.type_token.text

    def __repr__(self): return f"VarDecl({self.type_name} {self.name} = {self.expr})"

@dataclass(frozen=True)
class AssignStmt:
    name_token: SourceToken
    assign_token: SourceToken
    expr: Any

    @property
    def name(self) -> str:
        return self.name_token.text

    def __repr__(self): return f"Assign({self.name} = {self.expr})"

@dataclass(frozen=True)
class IfStmt:
    lparen: SourceToken
    cond: Any
    block: Block
    def __repr__(self): return f"If({self.cond}, then={self.block})"

@dataclass(frozen=True)
class PrintStmt:
    print_token: SourceToken
    expr: Any
    def __repr__(self): return f"Print({self.expr})"

# Expressions
@dataclass(frozen=True)
class BinOp:
    op_token: SourceToken
    left: Any
    right: Any

    @property
    def op(self) -> str:
        return self.op_token.text

    def __repr__(self): return f"BinOp({self.left} {self.op} {self.right})"

@dataclass(frozen=True)
class Ident:
    token: SourceToken

    @property
    def name(self) -> str:
        return self.token.text

    def __repr__(self): return f"Ident({self.name})"

@dataclass(frozen=True)
class IntLiteral:
    token: SourceToken
    def __repr__(self): return f"Int({self.token.text})"

@dataclass(frozen=True)
class BoolLiteral:
    token: SourceToken

    @property
    def value(self) -> bool:
        return self.token.text == 'true'

    def __repr__(self): return f"Bool({self.token.text})"
