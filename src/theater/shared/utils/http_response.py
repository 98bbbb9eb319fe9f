import json


def api_response(status_code: int, body: dict | str) -> dict:
    """Build an API Gateway HTTP API response

    A ``str`` body is treated as already serialized JSON.
    """
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": body if isinstance(body, str) else json.dumps(body, default=str),
    }
