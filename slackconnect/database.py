from supabase import Client, create_client

from slackconnect.models.config import SlackConnectConfig

class SupabaseDatabase:
    def __init__(self, config: SlackConnectConfig):
        self.config = config
        self._client = None

    @property
    def client(self) -> Client:
        #
        # The service role key bypasses row-level security, which we need in
        # order to write to a profile row that isn't owned by the caller.
        #

        if self._client is None:
            self._client = create_client(
                self.config.supabase_url or "",
                self.config.supabase_service_role_key,
            )

        return self._client

    def table(self, name: str):
        return self.client.table(name)
