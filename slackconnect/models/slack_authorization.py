from pydantic import BaseModel
from typing import Any, Optional

class AuthorizationRequest(BaseModel):
    code: str
    state: str

#
# Slack's values are passed through as-is. Depending on the app and the flow,
# fields like team.id aren't guaranteed to be strings.
#

class TokenExchangeResult(BaseModel):
    ok: bool = False
    access_token: Optional[Any] = None
    team_id: Optional[Any] = None
    team_name: Optional[Any] = None
    incoming_webhook_url: Optional[Any] = None
    incoming_webhook_channel: Optional[Any] = None

class SlackConnectionRecord(BaseModel):
    slack_access_token: Any
    slack_team_id: Optional[Any] = None
    slack_team_name: Optional[Any] = None
    slack_channel: Optional[Any] = None
    slack_webhook_url: Optional[Any] = None
    slack_connected_at: str
