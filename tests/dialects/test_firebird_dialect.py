from birdsql.dialects import FirebirdDialect


def test_firebird_identifier_quoting():
    dialect = FirebirdDialect()
    assert dialect.quote_identifier("orders") == '"orders"'
    assert dialect.quote_identifier('bad"name') == '"bad""name"'
    assert dialect.format_table("orders") == '"orders"'


def test_firebird_limit_clause():
    dialect = FirebirdDialect()
    assert dialect.limit_clause(10, None) == "ROWS 10"
    assert dialect.limit_clause(10, 0) == "ROWS 10"
    assert dialect.limit_clause(10, 20) == "ROWS 21 TO 30"
    assert dialect.limit_clause(None, 5) == ""


def test_firebird_placeholder():
    dialect = FirebirdDialect()
    assert dialect.parameter_placeholder() == "?"
    assert dialect.param_style == "qmark"
