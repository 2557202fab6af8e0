import os
import uvicorn

from fastapi import FastAPI, Request
from fastapi.responses import Response

from slackconnect.context import SlackConnectContext
from slackconnect.oauth_callback import OAuthCallbackHandler

app = FastAPI()

context = SlackConnectContext()

@app.api_route("/slack-oauth-callback", methods=["GET", "POST", "OPTIONS"])
def slack_oauth_callback(request: Request) -> Response:
    handler = OAuthCallbackHandler(context)

    return handler.handle(request)

@app.get("/slack-redirect-link")
def get_slack_redirect_link(request: Request) -> Response:
    handler = OAuthCallbackHandler(context)

    return handler.redirect_link(request)

@app.get("/health")
def health_check() -> dict:
    return {
        "status": "healthy",
        "configured": {
            "slack_oauth": context.config.slack_oauth_configured,
            "database": context.config.database_configured,
        },
    }

if __name__ == "__main__":
    port = int(os.environ.get("SLACKCONNECT_PORT", "11030"))
    certificate = os.environ.get("SLACKCONNECT_TLS_CERTIFICATE")
    private_key = os.environ.get("SLACKCONNECT_TLS_PRIVATE_KEY")

    if certificate and private_key:
        uvicorn.run(
            app,
            host=None,
            port=port,
            ssl_certfile=certificate,
            ssl_keyfile=private_key
        )
    else:
        uvicorn.run(app, host=None, port=port)
