from birdsql.security.redaction import REDACTED_VALUE, redact_mapping, redact_params, redact_value


def test_redact_params_masks_sensitive_strings():
    assert redact_params(["alice", "my password is x", 3]) == ["alice", REDACTED_VALUE, 3]


def test_redact_value_masks_sensitive_keys():
    payload = {"user": "sysdba", "password": "secret", "nested": {"api_key": "k"}}
    assert redact_value(payload) == {
        "user": "sysdba",
        "password": REDACTED_VALUE,
        "nested": {"api_key": REDACTED_VALUE},
    }


def test_redact_mapping_handles_aliases():
    assert redact_mapping({"pass": "secret", "dbname": "employee"}) == {
        "pass": REDACTED_VALUE,
        "dbname": "employee",
    }
