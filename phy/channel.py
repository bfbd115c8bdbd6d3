import logging
from utils import config

# config logging
logging.basicConfig(filename='running_log.log',
                    filemode='w',  # there are two modes: 'a' and 'w'
                    format='%(asctime)s - %(levelname)s - %(message)s',
                    level=config.LOGGING_LEVEL
                    )

FREE = 0
OCCUPIED = 1


class Channel:
    """
    Shared wireless channel of one access point

    The channel is the only shared resource of a run. Since the clients access it one after another, there is never
    a real concurrent holder, occupying the channel only marks it as unavailable for the following attempts.

    Attributes:
        identifier: name of the channel, e.g., "WiFi6_Channel"
        state: FREE or OCCUPIED
        sub_channel_index: the OFDMA sub-channel that is currently served, -1 for contention-based channels
        holder: identifier of the client that occupies the channel, None if it is free

    """

    def __init__(self, identifier='Default'):
        self.identifier = identifier
        self.state = FREE
        self.sub_channel_index = -1
        self.holder = None

    def occupy(self, client_id=None):
        if self.state == OCCUPIED:
            logging.warning('Channel: %s is already occupied by client: %s, client: %s takes it over',
                            self.identifier, self.holder, client_id)

        self.state = OCCUPIED
        self.holder = client_id

    def release(self):
        self.state = FREE
        self.holder = None

    def is_available(self):
        return self.state == FREE

    def serve_sub_channel(self, sub_channel):
        self.sub_channel_index = sub_channel
