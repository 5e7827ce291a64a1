import io

from analyzer import SemanticAnalyzer
from executor import Executor
from parser import parse


def run(src):
    program = parse(src)
    assert not SemanticAnalyzer().analyze(program).has_errors()
    return Executor().run(program)


def test_inner_declaration_shadows_and_is_discarded():
    assert run("int x = 1; if (true) { int x = 2; print(x); } print(x);") == ["2", "1"]


def test_same_precedence_operators_evaluate_left_to_right():
    assert run("print(3 - 1 + 2);") == ["4"]


def test_boolean_literals_print_as_numbers():
    assert run("print(true);\nprint(false);") == ["1", "0"]


def test_assignment_updates_value_in_place():
    assert run("int x = 1;\nx = x + 41;\nprint(x);") == ["42"]


def test_assignment_in_block_updates_outer_variable():
    assert run("int x = 1;\nif (true) { x = 7; }\nprint(x);") == ["7"]


def test_false_condition_skips_block():
    assert run("boolean go = false;\nif (go) { print(1); }\nprint(2);") == ["2"]


def test_boolean_variable_reassigned_before_condition():
    assert run("boolean go = false;\ngo = true;\nif (go) { print(1); }") == ["1"]


def test_negative_results():
    assert run("int a = 2;\nprint(a - 5);") == ["-3"]


def test_nested_blocks():
    src = (
        "int x = 1;\n"
        "{ int y = x + 1;\n"
        "  { int x = y + 1; print(x); }\n"
        "  print(x); }\n"
    )
    assert run(src) == ["3", "1"]


def test_program_without_print_has_no_output():
    assert run("int x = 1;") == []


def test_output_is_written_to_stream():
    stream = io.StringIO()
    lines = Executor(stream=stream).run(parse("print(1);\nprint(2 + 3);"))
    assert lines == ["1", "5"]
    assert stream.getvalue() == "1\n5\n"


def test_repeated_runs_are_deterministic():
    program = parse("int x = 10; if (true) { x = x - 3; print(x); } print(x + 1);")
    first = Executor().run(program)
    second = Executor().run(program)
    assert first == second == ["7", "8"]


def test_only_one_is_true_in_conditions():
    executor = Executor()
    # 绕过语义检查时，条件值可能既不是 0 也不是 1
    executor._eval_BoolLiteral = lambda expr: 2
    program = parse("if (true) { print(1); }")
    assert executor.run(program) == []
