import logging
from entities.outcome import success, failure
from utils import config

# config logging
logging.basicConfig(filename='running_log.log',
                    filemode='w',  # there are two modes: 'a' and 'w'
                    format='%(asctime)s - %(levelname)s - %(message)s',
                    level=config.LOGGING_LEVEL
                    )


class Ofdma:
    """
    Medium access control protocol: slotted OFDMA used by WiFi 6 clients

    The access point splits the channel into sub-channels and allocates them round-robin. A client transmits only when
    the sub-channel allocated to it is the one served by the channel at that moment, and the channel is free.

    Whether the channel is released after a successful attempt is a configuration choice:
        - release_channel = True: every sub-channel slot re-arbitrates, so each allocated client can succeed
        - release_channel = False: the first successful client keeps the channel for the rest of the run, which is a
          single exclusive winner per access point

    Main attributes:
        my_client: the client that installed the OFDMA protocol
        variate: random source
        throughput_share: throughput contribution of a successful attempt, in bit/s
        release_channel: release the channel after each attempt or not

    """

    def __init__(self, client, throughput_share, release_channel=None):
        self.my_client = client
        self.variate = client.variate
        self.throughput_share = throughput_share
        if release_channel is None:
            release_channel = config.OFDMA_RELEASE_CHANNEL
        self.release_channel = release_channel

    def attempt(self, channel, assigned_sub_channel, round_sub_channel):
        """
        One access attempt of the client
        :param channel: the shared channel of the access point
        :param assigned_sub_channel: the sub-channel allocated to the client
        :param round_sub_channel: the sub-channel served in this slot
        :return: AccessOutcome of the attempt
        """

        client = self.my_client

        if assigned_sub_channel != round_sub_channel or not channel.is_available():
            logging.info('Client: %s cannot use sub-channel: %s (allocated: %s, channel free: %s)',
                         client.identifier, round_sub_channel, assigned_sub_channel, channel.is_available())
            return failure()

        channel.occupy(client.identifier)

        # queuing delay, uniformly drawn from [0, 10) ms
        latency = self.variate.next_int(config.OFDMA_LATENCY_RANGE) * config.OFDMA_LATENCY_UNIT

        logging.info('Client: %s transmits on sub-channel: %s, latency is: %s ms',
                     client.identifier, round_sub_channel, latency)

        if self.release_channel:
            channel.release()

        return success(latency, self.throughput_share)
