from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TypeDesc:
    """
    类型描述符：
    - kind: 'prim' 或 'error'
    - name: 对于 'prim' 是 'int'/'boolean'

    'error' 不是语言类型，只表示"此表达式的类型因先前的错误无法确定"，
    用于抑制级联诊断。
    """
    kind: str
    name: Optional[str] = None

    def __repr__(self):
        if self.kind == 'prim':
            return self.name or 'unknown'
        if self.kind == 'error':
            return "<error>"
        return f"{self.kind}"

    def is_error(self) -> bool:
        return self.kind == 'error'

    def equals(self, other: 'TypeDesc') -> bool:
        # error 与任何类型（包括自身）都不匹配
        if other is None or self.is_error() or other.is_error():
            return False
        return self.kind == other.kind and self.name == other.name


# 基础类型常量
INT = TypeDesc('prim', 'int')
BOOL = TypeDesc('prim', 'boolean')
ERROR = TypeDesc('error')

_KEYWORD_TYPES = {
    'int': INT,
    'boolean': BOOL,
}


def type_from_keyword(keyword: str) -> TypeDesc:
    """类型关键字 -> TypeDesc"""
    try:
        return _KEYWORD_TYPES[keyword]
    except KeyError:
        raise ValueError(f"Unknown type keyword: {keyword!r}") from None
