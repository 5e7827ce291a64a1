from typing import List, Optional, TextIO

from ast_nodes import *
from diagnostics import SemanticError
from lang_types import type_from_keyword
from scope import ScopeStack
from symbols import Symbol

TRUE_VALUE = 1
FALSE_VALUE = 0


class Executor:
    """
    执行阶段：在已经通过语义分析的语法树上计算值并输出。

    不做任何检查（重复声明、类型、未声明变量），前提是
    SemanticAnalyzer 没有报告任何诊断。布尔值以 1/0 表示。
    """

    def __init__(self, stream: Optional[TextIO] = None):
        # 独立于分析阶段的作用域栈，符号携带运行时的值
        self.scope = ScopeStack()
        self.stream = stream
        self.output: List[str] = []

    def run(self, program: Program) -> List[str]:
        for stmt in program.stmts:
            self._exec_stmt(stmt)
        return self.output

    def _exec_stmt(self, stmt):
        method_name = f'_exec_{stmt.__class__.__name__}'
        method = getattr(self, method_name, None)
        if method is None:
            raise SemanticError(f"Unknown statement node: {type(stmt).__name__}")
        method(stmt)

    def _exec_VarDecl(self, node: VarDecl):
        value = self.evaluate(node.expr)
        symbol = Symbol(node.name, type_from_keyword(node.type_name), node.name_token, value)
        self.scope.declare_symbol(symbol)

    def _exec_AssignStmt(self, node: AssignStmt):
        value = self.evaluate(node.expr)
        self.scope.lookup(node.name).value = value

    def _exec_PrintStmt(self, node: PrintStmt):
        line = str(self.evaluate(node.expr))
        self.output.append(line)
        if self.stream is not None:
            self.stream.write(line + "\n")

    def _exec_IfStmt(self, node: IfStmt):
        # 只有 1 被视为 true，没有 else 分支
        if self.evaluate(node.cond) == TRUE_VALUE:
            self._exec_Block(node.block)

    def _exec_Block(self, node: Block):
        self.scope.open_scope()
        for s in node.stmts:
            self._exec_stmt(s)
        self.scope.close_scope()

    # ==================== 表达式求值 ====================

    def evaluate(self, expr) -> int:
        method_name = f'_eval_{expr.__class__.__name__}'
        method = getattr(self, method_name, None)
        if method is None:
            raise SemanticError(f"Unknown expression node: {type(expr).__name__}")
        return method(expr)

    def _eval_BinOp(self, expr: BinOp) -> int:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        if expr.op == '+':
            return left + right
        return left - right

    def _eval_Ident(self, expr: Ident) -> int:
        return self.scope.lookup(expr.name).value

    def _eval_IntLiteral(self, expr: IntLiteral) -> int:
        return int(expr.token.text)

    def _eval_BoolLiteral(self, expr: BoolLiteral) -> int:
        return TRUE_VALUE if expr.value else FALSE_VALUE
