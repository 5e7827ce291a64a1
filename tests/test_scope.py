import pytest

from ast_nodes import SourceToken
from diagnostics import RedeclarationError
from lang_types import BOOL, ERROR, INT, type_from_keyword
from scope import ScopeStack
from symbols import Symbol


def tok(text, line=1, column=0):
    return SourceToken(text, line, column)


def test_starts_with_global_scope():
    scopes = ScopeStack()
    assert scopes.depth == 1
    assert scopes.is_global()


def test_lookup_searches_inner_to_outer():
    scopes = ScopeStack()
    outer = scopes.declare('x', INT, tok('x'))
    scopes.open_scope()
    assert scopes.lookup('x') is outer

    inner = scopes.declare('x', BOOL, tok('x', 2))
    assert scopes.lookup('x') is inner

    scopes.close_scope()
    assert scopes.lookup('x') is outer


def test_lookup_missing_returns_none():
    assert ScopeStack().lookup('nope') is None


def test_redeclaration_in_same_scope_keeps_original():
    scopes = ScopeStack()
    original = scopes.declare('x', INT, tok('x', 1, 4))
    with pytest.raises(RedeclarationError) as excinfo:
        scopes.declare('x', BOOL, tok('x', 3, 8))

    err = excinfo.value
    assert err.original_line == 1
    assert (err.token.line, err.token.column) == (3, 8)
    assert "line 1" in str(err)
    assert scopes.lookup('x') is original


def test_declare_symbol_overwrites():
    scopes = ScopeStack()
    scopes.declare_symbol(Symbol('x', INT, tok('x'), 1))
    scopes.declare_symbol(Symbol('x', INT, tok('x'), 2))
    assert scopes.lookup('x').value == 2


def test_declarations_vanish_when_scope_closes():
    scopes = ScopeStack()
    scopes.open_scope()
    scopes.declare('tmp', INT, tok('tmp'))
    scopes.close_scope()
    assert scopes.lookup('tmp') is None
    assert scopes.is_global()


def test_close_scope_on_empty_stack_is_noop():
    scopes = ScopeStack()
    scopes.close_scope()
    scopes.close_scope()
    assert scopes.depth == 0


def test_symbol_str_names_definition_site():
    symbol = Symbol('x', INT, tok('x', 2, 4))
    assert str(symbol) == "Symbol(name='x', type=int, defined at 2:4)"
    assert symbol.value is None


def test_error_type_never_matches():
    assert INT.equals(INT)
    assert not INT.equals(BOOL)
    assert not ERROR.equals(ERROR)
    assert not ERROR.equals(INT)
    assert not INT.equals(ERROR)
    assert ERROR.is_error()


def test_type_from_keyword():
    assert type_from_keyword('int') is INT
    assert type_from_keyword('boolean') is BOOL
    with pytest.raises(ValueError):
        type_from_keyword('float')
