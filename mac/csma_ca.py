import logging
from entities.outcome import success, failure
from utils import config

# config logging
logging.basicConfig(filename='running_log.log',
                    filemode='w',  # there are two modes: 'a' and 'w'
                    format='%(asctime)s - %(levelname)s - %(message)s',
                    level=config.LOGGING_LEVEL
                    )


class CsmaCa:
    """
    Medium access control protocol: statistical CSMA/CA used by WiFi 4 and WiFi 5 clients

    The basic flow of one access attempt is as follows:
        1) if the client collided in its previous attempt, it spends this attempt in backoff ("cool-down" round) and
           reports a failure without any latency
        2) otherwise a random integer is drawn from [0, COLLISION_DRAW_RANGE - 1], the attempt collides if the draw is
           less than "congestion_factor * 100"
        3) without collision, the client occupies the channel for an instantaneous transmission, releases it, and the
           latency of the packet is its current backoff plus the ideal transmission time
        4) with collision, the collision counter is increased, a new (exponentially larger) backoff is drawn and the
           client enters the waiting state

    WiFi 4 and WiFi 5 only differ in the congestion factor passed by the simulator: the former grows with the client
    population, the latter is fixed (MU-MIMO).

    Main attributes:
        my_client: the client that installed the CSMA/CA protocol
        variate: random source
        ideal_duration: ideal transmission time of one packet, in ms

    """

    def __init__(self, client, ideal_duration):
        self.my_client = client
        self.variate = client.variate
        self.ideal_duration = ideal_duration

    def attempt(self, channel, congestion_factor):
        """
        One access attempt of the client
        :param channel: the shared channel of the access point
        :param congestion_factor: probability weight of a collision, in [0, 1]
        :return: AccessOutcome of the attempt
        """

        client = self.my_client

        if client.waiting_for_access:
            client.waiting_for_access = False
            logging.info('Client: %s spends this round in backoff', client.identifier)
            return failure()

        draw = self.variate.next_int(config.COLLISION_DRAW_RANGE)
        collision_occurred = draw < congestion_factor * 100

        if not collision_occurred:
            channel.occupy(client.identifier)
            latency = client.backoff_interval + self.ideal_duration
            client.collision_count = 0
            channel.release()

            logging.info('Client: %s transmits on channel: %s, latency is: %s ms',
                         client.identifier, channel.identifier, latency)
            return success(latency)
        else:
            client.collision_count += 1
            client.reset_backoff_interval()
            client.waiting_for_access = True

            logging.info('Client: %s collides (count: %s), new backoff is: %s ms',
                         client.identifier, client.collision_count, client.backoff_interval)
            return failure(collided=True)

    def ideal_outcome(self):
        # a sole client on the channel: no contention, no backoff
        return success(self.ideal_duration)
