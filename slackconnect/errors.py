from typing import Any

class SlackConnectError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)

        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload = {
            "error": self.message,
        }

        if self.details is not None:
            payload["details"] = self.details

        return payload

class ClientInputError(SlackConnectError):
    status_code = 400

class ConfigurationError(SlackConnectError):
    status_code = 500

class ProviderRejectionError(SlackConnectError):
    status_code = 400

class PersistenceError(SlackConnectError):
    status_code = 500
