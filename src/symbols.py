from dataclasses import dataclass
from typing import Optional

from ast_nodes import SourceToken
from lang_types import TypeDesc


@dataclass
class Symbol:
    """
    一个已声明的名字：
    - type: 声明的类型
    - token: 定义处的 token，用于报告行列
    - value: 执行阶段的当前值，检查阶段始终为 None
    """
    name: str
    type: TypeDesc
    token: SourceToken
    value: Optional[int] = None

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def column(self) -> int:
        return self.token.column

    def __str__(self):
        return f"Symbol(name={self.name!r}, type={self.type}, defined at {self.line}:{self.column})"
