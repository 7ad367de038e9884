from elysp.types.symbol import Symbol, SymbolTable


def test_intern_returns_same_object_for_same_name():
    table = SymbolTable()
    a = table.intern("foo")
    b = table.intern("foo")
    assert a is b
    assert isinstance(a, Symbol)
    assert a.name == "foo"


def test_distinct_names_give_distinct_symbols():
    table = SymbolTable()
    assert table.intern("foo") is not table.intern("bar")


def test_equality_is_identity_not_name():
    # Symbols from different tables never compare equal, even with the same name
    a = SymbolTable().intern("x")
    b = SymbolTable().intern("x")
    assert a is not b
    assert a != b


def test_table_only_grows():
    table = SymbolTable()
    assert len(table) == 0
    table.intern("a")
    table.intern("b")
    table.intern("a")
    assert len(table) == 2
    assert "a" in table
    assert "c" not in table


def test_symbol_str_and_repr():
    s = SymbolTable().intern("reader-debug")
    assert str(s) == "reader-debug"
    assert repr(s) == "Symbol('reader-debug')"
