#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
minilang 命令行解释器
用法: minilang <源文件路径> [<源文件路径> ...] [--echo]

示例:
    minilang programs/scoping.lang
    minilang programs/*.lang --echo
    python3 minilang.py programs/arithmetic.lang
"""

import sys
import os
from pathlib import Path

# 确保能导入同级目录的模块
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from driver import ProgramRunner


def print_usage():
    print(__doc__)
    print("\nArguments:")
    print("  source   - program file(s) to check and run (.lang)")
    print("  --echo   - print each program before running it")


def run_file(source_file: str, config: dict) -> bool:
    """检查并运行单个文件，返回是否通过语义分析"""
    source_path = Path(source_file)
    if not source_path.exists():
        print(f"✗ Error: source file does not exist: {source_file}")
        return False

    if not source_path.is_file():
        print(f"✗ Error: source path is not a file: {source_file}")
        return False

    print(f"START: {source_file}")
    try:
        result = ProgramRunner(config).run_source(source_path)
    except SyntaxError as e:
        print(f"✗ Syntax error: {e}")
        return False
    finally:
        print(f"FINISH: {source_file}")

    return result.ok


def main():
    args = sys.argv[1:]
    files = [a for a in args if not a.startswith("--")]

    # 参数检查
    if not files:
        print_usage()
        sys.exit(1)

    # 配置
    config = {
        "echo_source": "--echo" in args,
    }

    failed = 0
    for source_file in files:
        try:
            if not run_file(source_file, config):
                failed += 1
        except Exception as e:
            print(f"\n✗ Failed to run {source_file}!")
            print(f"  Error: {str(e)}")

            # 调试模式显示堆栈
            if os.environ.get("MINILANG_DEBUG"):
                import traceback
                traceback.print_exc()

            failed += 1

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
