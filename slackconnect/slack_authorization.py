import requests

from datetime import datetime, timezone
from postgrest.exceptions import APIError
from urllib.parse import urlencode

from slackconnect.context import SlackConnectContext
from slackconnect.errors import ConfigurationError, PersistenceError, ProviderRejectionError
from slackconnect.models.slack_authorization import AuthorizationRequest, SlackConnectionRecord, TokenExchangeResult
from slackconnect.slack_token_response import normalize_token_response
from slackconnect.store.profile import ProfileStore

SLACK_AUTHORIZE_URL = "https://slack.com/oauth/v2/authorize"
SLACK_TOKEN_URL = "https://slack.com/api/oauth.v2.access"

class SlackAuthorization:
    def __init__(self, context: SlackConnectContext, store=None):
        self.context = context

        if store is None:
            store = ProfileStore(context)

        self.store = store

    @property
    def config(self):
        return self.context.config

    def get_slack_redirect_link(self, user_id: str) -> str:
        self.__require_slack_oauth()

        params = {
            "client_id": self.config.slack_client_id,
            "scope": self.config.slack_scopes,
            "user_scope": "",
            "redirect_uri": self.config.redirect_uri,
            "state": user_id,
        }

        url = SLACK_AUTHORIZE_URL + "?" + urlencode(params)

        return url

    def exchange_code_for_token(self, authorization: AuthorizationRequest) -> SlackConnectionRecord:
        self.__require_slack_oauth()

        result = self.__get_slack_token(authorization.code)

        self.__require_database()

        #
        # The state parameter carries the user ID of the profile being
        # connected.
        #

        user_id = authorization.state

        record = SlackConnectionRecord(
            slack_access_token=result.access_token,
            slack_team_id=result.team_id,
            slack_team_name=result.team_name,
            slack_channel=result.incoming_webhook_channel,
            slack_webhook_url=result.incoming_webhook_url,
            slack_connected_at=utc_timestamp(),
        )

        try:
            self.store.save_slack_connection(user_id, record)
        except APIError as e:
            self.context.logger.error(f"Database update error for user_id={user_id}: {e.message}")

            raise PersistenceError("Failed to save Slack connection", details=e.json())

        self.context.logger.info(f"Saved Slack connection for user_id={user_id}, team_id={result.team_id}")

        return record

    def __get_slack_token(self, code: str) -> TokenExchangeResult:
        params = {
            "client_id": self.config.slack_client_id,
            "client_secret": self.config.slack_client_secret,
            "code": code,
            "redirect_uri": self.config.redirect_uri,
        }

        r = requests.post(
            SLACK_TOKEN_URL,
            data=params,
            timeout=self.config.slack_http_timeout,
        )

        response = r.json()

        if not response.get("ok"):
            self.context.logger.error(f"Slack OAuth error (full response): {response}")

            raise ProviderRejectionError("Failed to authenticate with Slack")

        result = normalize_token_response(response)

        self.context.logger.info(
            f"Slack token response fields: has_access_token={bool(result.access_token)}, "
            f"has_team_id={bool(result.team_id)}, has_incoming_webhook={bool(result.incoming_webhook_url)}"
        )

        if not result.access_token:
            # Only the keys; the payload may still carry other credentials.

            self.context.logger.error(f"No access token found in Slack response, keys={sorted(response.keys())}")

            raise ProviderRejectionError("Slack did not return an access token")

        return result

    def __require_slack_oauth(self):
        if not self.config.slack_oauth_configured:
            self.context.logger.error("Missing SLACK_CLIENT_ID or SLACK_CLIENT_SECRET")

            raise ConfigurationError("Slack OAuth not configured")

    def __require_database(self):
        if not self.config.supabase_service_role_key:
            self.context.logger.error("Missing SUPABASE_SERVICE_ROLE_KEY")

            raise ConfigurationError("Server misconfigured: SUPABASE_SERVICE_ROLE_KEY missing")

def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)

    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
