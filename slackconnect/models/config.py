import os

from pydantic import BaseModel
from typing import Mapping, Optional

DEFAULT_APP_URL = "http://localhost:5173"
CALLBACK_PATH = "/functions/v1/slack-oauth-callback"

class SlackConnectConfig(BaseModel):
    slack_client_id: Optional[str] = None
    slack_client_secret: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    app_url: str = DEFAULT_APP_URL
    slack_http_timeout: float = 10.0
    slack_scopes: str = "incoming-webhook"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None):
        if environ is None:
            environ = os.environ

        # Empty strings are treated the same as unset variables.

        def value(name):
            return environ.get(name) or None

        return cls(
            slack_client_id=value("SLACK_CLIENT_ID"),
            slack_client_secret=value("SLACK_CLIENT_SECRET"),
            supabase_url=value("SUPABASE_URL"),
            supabase_service_role_key=value("SUPABASE_SERVICE_ROLE_KEY"),
            app_url=value("APP_URL") or DEFAULT_APP_URL,
            slack_http_timeout=float(value("SLACK_HTTP_TIMEOUT") or 10.0),
            slack_scopes=value("SLACK_SCOPES") or "incoming-webhook",
        )

    @property
    def redirect_uri(self) -> str:
        return f"{self.supabase_url}{CALLBACK_PATH}"

    @property
    def slack_oauth_configured(self) -> bool:
        return bool(self.slack_client_id and self.slack_client_secret)

    @property
    def database_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)
