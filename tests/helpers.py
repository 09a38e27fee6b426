def assert_plain_text_error(response, status_code, message):
    """Assert an error response carries the given status and plain-text body."""
    assert response.status_code == status_code, f"Expected {status_code}, got {response.status_code}: {response.text}"
    assert response.headers["content-type"].startswith("text/plain"), "Error body should be plain text."
    assert response.text == message


def get_message_content(body, role):
    """Return the content of the first message with the given role in an upstream body."""
    for message in body["messages"]:
        if message["role"] == role:
            return message["content"]
    raise AssertionError(f"No '{role}' message in upstream body: {body['messages']}")
