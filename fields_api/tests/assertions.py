"""
Custom Assertions for API Testing

Provides reusable assertion functions for API responses.
"""


def assert_successful_response(response, expected_keys: list[str] | None = None):
    """Assert that an API response is successful and contains expected keys"""
    assert response.status_code == 200, f"Expected 200, got {response.status_code}: {response.text}"

    data = response.json()

    if expected_keys:
        for key in expected_keys:
            assert key in data, f"Missing key '{key}' in response: {data.keys()}"

    return data


def assert_error_response(response, expected_status: int, error_message_contains: str | None = None):
    """Assert that an API response is an error with expected status and message"""
    assert response.status_code == expected_status, f"Expected {expected_status}, got {response.status_code}"

    data = response.json()
    assert "detail" in data, f"Error response missing 'detail' field: {data}"

    if error_message_contains:
        detail = data["detail"].lower()
        assert error_message_contains.lower() in detail, (
            f"Expected '{error_message_contains}' in error message, got: {data['detail']}"
        )

    return data


def assert_schema_fields_equal(actual: dict[str, list[str]], expected: dict[str, list[str]]):
    """Assert two schema field maps hold the same fields per schema, ignoring order"""
    assert set(actual) == set(expected), f"Schemas differ: {sorted(actual)} != {sorted(expected)}"
    for schema_name, fields in expected.items():
        assert len(actual[schema_name]) == len(set(actual[schema_name])), (
            f"Duplicate fields for schema '{schema_name}': {actual[schema_name]}"
        )
        assert set(actual[schema_name]) == set(fields), (
            f"Fields differ for schema '{schema_name}': {actual[schema_name]} != {fields}"
        )
