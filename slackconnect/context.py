from slackconnect.database import SupabaseDatabase
from slackconnect.logging import setup_logger
from slackconnect.models.config import SlackConnectConfig

class SlackConnectContext:
    def __init__(self, config: SlackConnectConfig = None, dbh: SupabaseDatabase = None):
        if config is None:
            config = SlackConnectConfig.from_env()

        if dbh is None:
            dbh = SupabaseDatabase(config)

        self.config = config
        self.dbh = dbh
        self.logger = setup_logger()
