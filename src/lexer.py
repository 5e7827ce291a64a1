from ply import lex

reserved = {
    'int': 'INT_TYPE',
    'boolean': 'BOOLEAN_TYPE',
    'if': 'IF',
    'print': 'PRINT',
    'true': 'TRUE',
    'false': 'FALSE',
}

tokens = [
    'IDENT', 'INT',
    'PLUS', 'MINUS',
] + sorted(set(reserved.values()))

literals = ['=', ';', '(', ')', '{', '}']

t_PLUS = r'\+'
t_MINUS = r'-'


def t_INT(t):
    r'\d+'
    # 保留原始文本，由执行阶段解析数值
    return t

def t_IDENT(t):
    r'[A-Za-z_]\w*'
    t.type = reserved.get(t.value, 'IDENT')
    return t

t_ignore = ' \t\r'

def t_newline(t):
    r'\n+'
    t.lexer.lineno += t.value.count('\n')

def t_comment(t):
    r'//[^\n]*'
    pass

def t_multiline_comment(t):
    r'/\*(.|\n)*?\*/'
    t.lexer.lineno += t.value.count('\n')
    pass

def t_error(t):
    raise SyntaxError(f"Illegal character {t.value[0]!r} at line {t.lineno}")


def build_lexer():
    """每次解析都创建新的词法分析器，行号从 1 开始"""
    return lex.lex()
