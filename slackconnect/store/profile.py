from slackconnect.context import SlackConnectContext
from slackconnect.models.slack_authorization import SlackConnectionRecord

class ProfileStore:
    def __init__(self, context: SlackConnectContext):
        self.context = context

    def save_slack_connection(self, user_id: str, record: SlackConnectionRecord):
        #
        # Only the Slack columns are written. The row itself is owned by the
        # application, so a missing profile is a no-op rather than an insert.
        #

        response = (
            self.context.dbh.table("profiles")
            .update(record.model_dump())
            .eq("id", user_id)
            .execute()
        )

        return response.data
