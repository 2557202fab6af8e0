import json

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from slackconnect.context import SlackConnectContext
from slackconnect.errors import ClientInputError, SlackConnectError
from slackconnect.models.slack_authorization import AuthorizationRequest
from slackconnect.slack_authorization import SlackAuthorization

#
# Every JSON response carries the CORS headers so the browser-side app can
# read error payloads. The HTML success page is loaded in the OAuth popup
# itself and doesn't need them.
#

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}

def json_response(payload: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=payload, status_code=status_code, headers=CORS_HEADERS)

def preflight_response() -> Response:
    return Response(content=None, status_code=200, headers=CORS_HEADERS)

def success_page(app_url: str) -> str:
    #
    # The URL ends up inside a <script> block, so the characters that could
    # close the block or open markup are escaped as well as the quotes.
    #

    redirect_target = (
        json.dumps(app_url)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )

    return f"""<!DOCTYPE html>
<html>
  <head>
    <title>Slack Connected</title>
  </head>
  <body>
    <h1>Successfully connected to Slack!</h1>
    <p>You can close this window and return to the app.</p>
    <script>
      window.close();

      setTimeout(() => {{
        window.location.href = {redirect_target};
      }}, 2000);
    </script>
  </body>
</html>
"""

def parse_authorization_request(request: Request) -> AuthorizationRequest:
    code = request.query_params.get("code")
    state = request.query_params.get("state")

    if not code or not state:
        raise ClientInputError("Missing code or state parameter")

    return AuthorizationRequest(code=code, state=state)

class OAuthCallbackHandler:
    def __init__(self, context: SlackConnectContext, authorization: SlackAuthorization = None):
        self.context = context

        if authorization is None:
            authorization = SlackAuthorization(context)

        self.authorization = authorization

    def handle(self, request: Request) -> Response:
        if request.method == "OPTIONS":
            return preflight_response()

        try:
            authorization_request = parse_authorization_request(request)

            self.context.logger.info(f"Slack OAuth callback received for user_id={authorization_request.state}")

            self.authorization.exchange_code_for_token(authorization_request)
        except SlackConnectError as e:
            return json_response(e.to_payload(), status_code=e.status_code)
        except Exception as e:
            self.context.logger.exception(f"Error: {e}")

            return json_response({"error": str(e) or "Internal server error"}, status_code=500)

        return HTMLResponse(content=success_page(self.context.config.app_url), status_code=200)

    def redirect_link(self, request: Request) -> Response:
        state = request.query_params.get("state")

        try:
            if not state:
                raise ClientInputError("Missing state parameter")

            link = self.authorization.get_slack_redirect_link(state)
        except SlackConnectError as e:
            return json_response(e.to_payload(), status_code=e.status_code)

        return json_response({"redirect_link": link})
