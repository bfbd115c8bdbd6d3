import logging
from mac.csma_ca import CsmaCa
from mac.ofdma import Ofdma
from utils import config
from utils.util_function import backoff_interval

# config logging
logging.basicConfig(filename='running_log.log',
                    filemode='w',  # there are two modes: 'a' and 'w'
                    format='%(asctime)s - %(levelname)s - %(message)s',
                    level=config.LOGGING_LEVEL
                    )


class ContentionClient:
    """
    WiFi 4 / WiFi 5 client that competes for the channel with CSMA/CA

    Attributes:
        identifier: used to uniquely represent a client
        variate: random source shared with the simulator
        collision_count: number of consecutive collisions, reset to 0 by a successful transmission
        backoff_interval: current backoff in ms, recomputed after every collision
        waiting_for_access: set by a collision, the next attempt is consumed silently as a backoff "cool-down" round
        mac_protocol: installed mac protocol

    """

    def __init__(self, identifier, variate, ideal_duration):
        self.identifier = identifier
        self.variate = variate
        self.collision_count = 0
        self.backoff_interval = 0.0
        self.waiting_for_access = False

        self.mac_protocol = CsmaCa(self, ideal_duration)

        self.reset_backoff_interval()

    def reset_backoff_interval(self):
        slot = self.variate.next_int(config.BACKOFF_SLOT_MAX) + 1
        self.backoff_interval = backoff_interval(slot, self.collision_count)

    def attempt(self, channel, congestion_factor):
        return self.mac_protocol.attempt(channel, congestion_factor)


class OfdmaClient:
    """
    WiFi 6 client which is served on a dedicated sub-channel

    Attributes:
        identifier: used to uniquely represent a client
        variate: random source shared with the simulator
        allocated_sub_channel: sub-channel given by the access point in this round, -1 before the first allocation
        mac_protocol: installed mac protocol

    """

    def __init__(self, identifier, variate, throughput_share, release_channel=None):
        self.identifier = identifier
        self.variate = variate
        self.allocated_sub_channel = -1

        self.mac_protocol = Ofdma(self, throughput_share, release_channel)

    def allocate_sub_channel(self, sub_channel):
        self.allocated_sub_channel = sub_channel

    def attempt(self, channel, round_sub_channel):
        return self.mac_protocol.attempt(channel, self.allocated_sub_channel, round_sub_channel)
