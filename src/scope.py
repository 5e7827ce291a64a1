from typing import Dict, List, Optional

from ast_nodes import SourceToken
from diagnostics import RedeclarationError
from lang_types import TypeDesc
from symbols import Symbol


class ScopeStack:
    """作用域栈 - 管理变量声明和查找，栈顶为最内层作用域"""

    def __init__(self):
        self.scopes: List[Dict[str, Symbol]] = []
        # 全局作用域
        self.open_scope()

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def is_global(self) -> bool:
        """检查当前是否在全局作用域"""
        return len(self.scopes) <= 1

    def open_scope(self):
        """进入新作用域"""
        self.scopes.append({})

    def close_scope(self):
        """退出作用域；栈为空时什么也不做"""
        if self.scopes:
            self.scopes.pop()

    def declare(self, name: str, t: TypeDesc, token: SourceToken) -> Symbol:
        """检查阶段的声明：同一作用域内重名则抛出 RedeclarationError，原声明保留"""
        current = self.scopes[-1]
        existing = current.get(name)
        if existing is not None:
            raise RedeclarationError(name, token, existing.line)

        symbol = Symbol(name, t, token)
        current[name] = symbol
        return symbol

    def declare_symbol(self, symbol: Symbol):
        """执行阶段的声明：直接放入当前作用域，同名则覆盖"""
        self.scopes[-1][symbol.name] = symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        """由内向外查找变量，找不到返回 None"""
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        return None
