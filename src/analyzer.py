from typing import List

from ast_nodes import *
from diagnostics import Diagnostic, Diagnostics, RedeclarationError, SemanticError
from lang_types import *
from scope import ScopeStack


def _undeclared(name: str) -> str:
    return f"Variable '{name}' has not been declared."

def _assign_mismatch(expr_type: TypeDesc, var_type: TypeDesc) -> str:
    return f"Cannot assign a value of type '{expr_type}' to a variable of type '{var_type}'."


class ExpressionAnalyzer:
    """表达式类型推导 - 被 SemanticAnalyzer 组合使用"""

    def __init__(self, scope: ScopeStack, diagnostics: Diagnostics):
        self.scope = scope
        self.diagnostics = diagnostics

    def analyze(self, expr) -> TypeDesc:
        """表达式分析主入口"""
        method_name = f'_analyze_{expr.__class__.__name__}'
        method = getattr(self, method_name, self._analyze_generic)
        return method(expr)

    def _analyze_generic(self, expr) -> TypeDesc:
        raise SemanticError(f"Unknown expression node: {type(expr).__name__}")

    def _analyze_IntLiteral(self, expr: IntLiteral) -> TypeDesc:
        return INT

    def _analyze_BoolLiteral(self, expr: BoolLiteral) -> TypeDesc:
        return BOOL

    def _analyze_Ident(self, expr: Ident) -> TypeDesc:
        symbol = self.scope.lookup(expr.name)
        if symbol is None:
            self.diagnostics.add(_undeclared(expr.name), expr.token)
            return ERROR
        return symbol.type

    def _analyze_BinOp(self, expr: BinOp) -> TypeDesc:
        left_type = self.analyze(expr.left)
        right_type = self.analyze(expr.right)

        # 操作数已出错：继续传播，不再重复报告
        if left_type.is_error() or right_type.is_error():
            return ERROR

        if left_type.equals(INT) and right_type.equals(INT):
            return INT

        self.diagnostics.add(
            f"Operator '{expr.op}' can only be applied to operands of type 'int', "
            f"but found '{left_type}' and '{right_type}'.",
            expr.op_token,
        )
        return ERROR


class SemanticAnalyzer:
    """
    语义分析器：遍历一次语法树，维护自己的作用域栈，
    把所有问题收集为诊断，不会因单个错误中断遍历。

    每个程序使用一个新的实例。
    """

    def __init__(self):
        self.scope = ScopeStack()
        self.diagnostics = Diagnostics()
        self.expr_analyzer = ExpressionAnalyzer(self.scope, self.diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return list(self.diagnostics)

    def has_errors(self) -> bool:
        return self.diagnostics.has_errors()

    def analyze(self, program: Program) -> Diagnostics:
        """主分析入口，返回按访问顺序排列的诊断"""
        for stmt in program.stmts:
            self._analyze_stmt(stmt)
        return self.diagnostics

    def _analyze_stmt(self, stmt):
        """语句分析分发"""
        method_name = f'_analyze_{stmt.__class__.__name__}'
        method = getattr(self, method_name, None)
        if method is None:
            raise SemanticError(f"Unknown statement node: {type(stmt).__name__}")
        method(stmt)

    def _analyze_VarDecl(self, node: VarDecl):
        """变量声明：重复声明与初始化类型"""
        declared_type = type_from_keyword(node.type_name)

        try:
            self.scope.declare(node.name, declared_type, node.name_token)
        except RedeclarationError as e:
            self.diagnostics.add(str(e), e.token)

        expr_type = self.expr_analyzer.analyze(node.expr)
        if not expr_type.is_error() and not expr_type.equals(declared_type):
            self.diagnostics.add(_assign_mismatch(expr_type, declared_type), node.assign_token)

    def _analyze_AssignStmt(self, node: AssignStmt):
        """赋值语句：变量必须已声明，类型必须一致"""
        symbol = self.scope.lookup(node.name)
        if symbol is None:
            self.diagnostics.add(_undeclared(node.name), node.name_token)

        expr_type = self.expr_analyzer.analyze(node.expr)

        # 未声明或表达式已出错时不再报告类型问题
        if symbol is not None and not expr_type.is_error():
            if not expr_type.equals(symbol.type):
                self.diagnostics.add(_assign_mismatch(expr_type, symbol.type), node.assign_token)

    def _analyze_IfStmt(self, node: IfStmt):
        cond_type = self.expr_analyzer.analyze(node.cond)
        if not cond_type.is_error() and not cond_type.equals(BOOL):
            self.diagnostics.add(
                "The condition of an 'if' statement must be of type 'boolean', "
                f"but found type '{cond_type}'.",
                node.lparen,
            )
        # 条件类型错误时仍然检查代码块
        self._analyze_Block(node.block)

    def _analyze_Block(self, node: Block):
        self.scope.open_scope()
        for s in node.stmts:
            self._analyze_stmt(s)
        self.scope.close_scope()

    def _analyze_PrintStmt(self, node: PrintStmt):
        # 任何类型都可以打印，只收集表达式中的诊断
        self.expr_analyzer.analyze(node.expr)
