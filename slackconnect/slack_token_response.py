from typing import Any, Optional

from slackconnect.models.slack_authorization import TokenExchangeResult

#
# Slack returns the same information in different places depending on the
# scopes requested and on the version of the OAuth flow. Each field is read by
# walking an ordered list of paths into the payload; the first path that
# resolves to a non-null value wins.
#

FIELD_RULES = {
    "access_token": [
        ("access_token",),
        ("authed_user", "access_token"),
    ],
    "team_id": [
        ("team", "id"),
        ("team_id",),
    ],
    "team_name": [
        ("team", "name"),
        ("team_name",),
    ],
    "incoming_webhook_url": [
        ("incoming_webhook", "url"),
        ("incoming_webhook_url",),
    ],
    "incoming_webhook_channel": [
        ("incoming_webhook", "channel"),
        ("incoming_webhook", "channel_id"),
    ],
}

def resolve_path(payload: dict, path: tuple) -> Optional[Any]:
    value = payload

    for key in path:
        if not isinstance(value, dict):
            return None

        value = value.get(key)

    return value

def extract_field(payload: dict, rules: list) -> Optional[Any]:
    for path in rules:
        value = resolve_path(payload, path)

        if value is not None:
            return value

    return None

def normalize_token_response(payload: dict) -> TokenExchangeResult:
    fields = {
        name: extract_field(payload, rules)
        for name, rules in FIELD_RULES.items()
    }

    return TokenExchangeResult(ok=bool(payload.get("ok")), **fields)
