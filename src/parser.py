from ply import yacc

from ast_nodes import *
from lexer import build_lexer, tokens

start = 'program'

precedence = (
    ('left', 'PLUS', 'MINUS'),
)


def _find_column(data: str, lexpos: int) -> int:
    """lexpos 转换为行内列号（从 0 开始）"""
    line_start = data.rfind('\n', 0, lexpos) + 1
    return lexpos - line_start

def _token(p, n) -> SourceToken:
    return SourceToken(str(p[n]), p.lineno(n), _find_column(p.lexer.lexdata, p.lexpos(n)))


# ==================== 程序结构 ====================

def p_program(p):
    "program : stmt_list"
    p[0] = Program(p[1])

def p_stmt_list_multi(p):
    "stmt_list : stmt_list stmt"
    p[0] = p[1] + [p[2]]

def p_stmt_list_empty(p):
    "stmt_list : "
    p[0] = []

def p_stmt_terminated(p):
    """stmt : decl_stmt ';'
            | assign_stmt ';'
            | print_stmt ';'"""
    p[0] = p[1]

def p_stmt(p):
    """stmt : if_stmt
            | block"""
    p[0] = p[1]

# ==================== 语句规则 ====================

def p_decl_stmt(p):
    "decl_stmt : type_kw IDENT '=' expr"
    p[0] = VarDecl(p[1], _token(p, 2), _token(p, 3), p[4])

def p_type_kw(p):
    """type_kw : INT_TYPE
               | BOOLEAN_TYPE"""
    p[0] = _token(p, 1)

def p_assign_stmt(p):
    "assign_stmt : IDENT '=' expr"
    p[0] = AssignStmt(_token(p, 1), _token(p, 2), p[3])

def p_print_stmt(p):
    "print_stmt : PRINT '(' expr ')'"
    p[0] = PrintStmt(_token(p, 1), p[3])

def p_if_stmt(p):
    "if_stmt : IF '(' expr ')' block"
    p[0] = IfStmt(_token(p, 2), p[3], p[5])

def p_block(p):
    "block : '{' stmt_list '}'"
    p[0] = Block(p[2], _token(p, 1))

# ==================== 表达式规则 ====================

def p_expr_binop(p):
    """expr : expr PLUS expr
            | expr MINUS expr"""
    p[0] = BinOp(_token(p, 2), p[1], p[3])

def p_expr_int(p):
    "expr : INT"
    p[0] = IntLiteral(_token(p, 1))

def p_expr_bool(p):
    """expr : TRUE
            | FALSE"""
    p[0] = BoolLiteral(_token(p, 1))

def p_expr_ident(p):
    "expr : IDENT"
    p[0] = Ident(_token(p, 1))

def p_expr_paren(p):
    "expr : '(' expr ')'"
    p[0] = p[2]

def p_error(p):
    if p:
        raise SyntaxError(f"Syntax error at '{p.value}' (type: {p.type}) on line {p.lineno}")
    raise SyntaxError("Syntax error at EOF")


def parse(data, debug=False) -> Program:
    parser = yacc.yacc(debug=debug, write_tables=False)
    return parser.parse(data, lexer=build_lexer())
