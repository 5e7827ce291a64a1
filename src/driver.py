import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from analyzer import SemanticAnalyzer
from ast_nodes import Program
from diagnostics import Diagnostic, Diagnostics
from executor import Executor
from parser import parse


def check(program: Program) -> Diagnostics:
    """语义分析：每次调用都使用新的分析器"""
    return SemanticAnalyzer().analyze(program)


def execute(program: Program) -> List[str]:
    """执行已通过语义分析的程序，返回输出行"""
    return Executor().run(program)


@dataclass
class RunResult:
    diagnostics: List[Diagnostic] = field(default_factory=list)
    output: List[str] = field(default_factory=list)
    executed: bool = False

    @property
    def ok(self) -> bool:
        return not self.diagnostics


class ProgramRunner:
    """解析 -> 语义分析 -> 执行；存在诊断时不执行"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

        self.echo_source = self.config.get("echo_source", False)
        self.stream = self.config.get("stream", sys.stdout)

    def _read(self, source: Union[str, Path]) -> str:
        if isinstance(source, Path) or os.path.isfile(source):
            with open(source, 'r', encoding='utf-8') as f:
                return f.read()
        return str(source)

    def run_source(self, source: Union[str, Path]) -> RunResult:
        """运行源文件或源代码字符串"""
        code = self._read(source)

        if self.echo_source:
            print("\n--- CODE ---")
            print(code)
            print("------------\n")

        # 语法分析
        program = parse(code)

        # 语义分析
        analyzer = SemanticAnalyzer()
        diagnostics = analyzer.analyze(program)

        if diagnostics.has_errors():
            print("[minilang] Semantic errors found; the program will not be executed.")
            for d in diagnostics:
                print(d.render(code), file=sys.stderr)
            return RunResult(diagnostics=list(diagnostics))

        # 执行
        print("[minilang] Semantic analysis succeeded. Running program...")
        output = Executor(stream=self.stream).run(program)
        return RunResult(output=output, executed=True)
