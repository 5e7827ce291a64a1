from dataclasses import dataclass, asdict
from typing import Iterator, List

from ast_nodes import SourceToken


class SemanticError(Exception):
    pass


class RedeclarationError(SemanticError):
    """同一作用域内重复声明；携带新声明的位置与原声明所在行"""

    def __init__(self, name: str, token: SourceToken, original_line: int):
        super().__init__(
            f"Variable '{name}' was already declared in this scope at line {original_line}."
        )
        self.name = name
        self.token = token
        self.original_line = original_line


@dataclass(frozen=True)
class Diagnostic:
    """
    一条语义诊断。位置在创建时从出错的 token 上取得，之后不可变。

    示例输出:
        Semantic error at line 3:4 -> Variable 'y' has not been declared.
    """
    message: str
    line: int
    column: int

    @classmethod
    def from_token(cls, message: str, token: SourceToken) -> 'Diagnostic':
        return cls(message, token.line, token.column)

    def __str__(self):
        return f"Semantic error at line {self.line}:{self.column} -> {self.message}"

    def to_dict(self) -> dict:
        return asdict(self)

    def render(self, source: str) -> str:
        """附带出错的源码行，并在对应列下方标出 ^"""
        lines = source.splitlines()
        if not 1 <= self.line <= len(lines):
            return str(self)
        text = lines[self.line - 1].rstrip()
        return f"{self}\n    {text}\n    {' ' * self.column}^"


class Diagnostics:
    """按访问顺序追加诊断，只增不删"""

    def __init__(self):
        self._items: List[Diagnostic] = []

    def add(self, message: str, token: SourceToken) -> Diagnostic:
        diagnostic = Diagnostic.from_token(message, token)
        self._items.append(diagnostic)
        return diagnostic

    def has_errors(self) -> bool:
        return bool(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def to_list(self) -> List[dict]:
        return [d.to_dict() for d in self._items]
