import math
import logging
import simpy
from phy.channel import Channel
from entities.client import ContentionClient, OfdmaClient
from simulator.metrics import Metrics
from utils import config
from utils.errors import DegenerateRunError, InvalidParameterError
from utils.random_variate import default_variate
from utils.util_function import check_positive_int, check_phy_config, check_phy_profile
from utils.util_function import transfer_rate, ideal_packet_duration

# config logging
logging.basicConfig(filename='running_log.log',
                    filemode='w',  # there are two modes: 'a' and 'w'
                    format='%(asctime)s - %(levelname)s - %(message)s',
                    level=config.LOGGING_LEVEL
                    )

INIT = 'INIT'
RUNNING = 'RUNNING'
DONE = 'DONE'


class Simulator:
    """
    Access point of one WiFi generation together with its clients

    The simulator owns the channel and the clients for the duration of one run. Each packet round is one unit of
    simpy logical time, in each round the clients attempt to access the channel one after another, in registration
    order, so no two attempts are ever concurrent. A failed attempt is never retried by the simulator, its consequence
    (waiting state, larger backoff) is carried to the next round by the client itself.

    Lifecycle: INIT -> RUNNING -> DONE

    Attributes:
        generation: 4, 5 or 6
        client_count: number of clients associated with the access point
        packets_per_client: number of packet rounds
        phy_profile: bandwidth, bits per symbol, coding rate and sub-channel count
        variate: random source, the process-wide default one if not given
        release_channel: OFDMA only, release the channel after every attempt
        env: simulation environment created by simpy
        channel: the shared channel of the access point
        clients: list of clients, in registration order
        outcomes: AccessOutcome of every (round, client) pair
        elapsed_duration: total elapsed duration in second
        delivered_bits: bits delivered by the successful attempts
        ofdma_throughput: sum of the OFDMA throughput contributions, in bit/s
        state: INIT, RUNNING or DONE

    """

    def __init__(self,
                 generation,
                 client_count,
                 packets_per_client,
                 phy_profile=None,
                 variate=None,
                 release_channel=None):

        if generation not in config.GENERATIONS:
            logging.error('Unknown WiFi generation: %s', generation)
            raise InvalidParameterError('unknown WiFi generation: %r' % (generation,))

        check_positive_int('client_count', client_count)
        check_positive_int('packets_per_client', packets_per_client)

        if phy_profile is None:
            phy_profile = config.IEEE_802_11.profile(generation)
        check_phy_profile(phy_profile)

        self.generation = generation
        self.client_count = client_count
        self.packets_per_client = packets_per_client
        self.phy_profile = phy_profile
        self.variate = variate if variate is not None else default_variate()
        if release_channel is None:
            release_channel = config.OFDMA_RELEASE_CHANNEL
        self.release_channel = release_channel

        self.transfer_rate = transfer_rate(phy_profile['bandwidth'],
                                           phy_profile['bits_per_symbol'],
                                           phy_profile['coding_rate'])  # bit/s
        self.max_throughput = self.transfer_rate / 1e6  # Mbps
        self.packet_length = config.DATA_PACKET_PAYLOAD_LENGTH
        self.ideal_duration = ideal_packet_duration(self.packet_length, self.transfer_rate)  # s

        self.env = simpy.Environment()
        self.channel = Channel('WiFi%s_Channel' % generation)
        self.metrics = Metrics(generation, client_count, packets_per_client)

        self.clients = []
        for i in range(client_count):
            self.clients.append(self.create_client(i))

        self.outcomes = []
        self.elapsed_duration = 0
        self.delivered_bits = 0
        self.ofdma_throughput = 0

        self.state = INIT

    def create_client(self, identifier):
        if self.generation == 6:
            throughput_share = ((self.phy_profile['bandwidth'] / self.client_count) *
                                self.phy_profile['bits_per_symbol'] * self.phy_profile['coding_rate'])
            return OfdmaClient(identifier, self.variate, throughput_share, self.release_channel)
        else:
            return ContentionClient(identifier, self.variate, self.ideal_duration * 1e3)

    def congestion_factor(self):
        if self.generation == 4:
            return min(config.WIFI4_CONGESTION_PER_CLIENT * self.client_count, config.WIFI4_MAX_CONGESTION)
        else:
            return config.WIFI5_CONGESTION

    def run(self):
        """
        Run all packet rounds and summarize the outcomes
        :return: SimulationResult
        """

        if self.state != INIT:
            raise RuntimeError('a simulator can only be run once')

        logging.info('WiFi %s simulation starts: %s clients, %s packets per client',
                     self.generation, self.client_count, self.packets_per_client)
        if 'carrier_frequency' in self.phy_profile:
            logging.info('Carrier frequency: %s GHz, bandwidth: %s MHz',
                         self.phy_profile['carrier_frequency'] / 1e9, self.phy_profile['bandwidth'] / 1e6)

        self.state = RUNNING
        if self.generation == 6:
            self.env.process(self.ofdma_rounds())
        elif self.generation == 4 and self.client_count == 1:
            self.env.process(self.single_client_rounds())
        else:
            self.env.process(self.contention_rounds(self.congestion_factor()))
        self.env.run()
        self.state = DONE

        if self.generation == 6:
            aggregate_throughput = self.ofdma_throughput / 1e6
        else:
            aggregate_throughput = None

        try:
            result = self.metrics.summarize(self.outcomes, self.elapsed_duration, self.delivered_bits,
                                            self.max_throughput, aggregate_throughput)
        except DegenerateRunError as e:
            logging.warning('WiFi %s simulation is degenerate: %s, reporting zero statistics', self.generation, e)
            collision_num = sum(1 for outcome in self.outcomes if outcome.collided)
            result = self.metrics.zero_result(self.max_throughput, collision_num)

        logging.info('WiFi %s simulation finishes at round: %s, successful transfers: %s',
                     self.generation, self.env.now, result.successful_transfers)
        return result

    def single_client_rounds(self):
        """
        A sole WiFi 4 client never contends with anyone, every packet is sent in the ideal duration
        """

        for packet_index in range(self.packets_per_client):
            self.record(self.clients[0].mac_protocol.ideal_outcome())
            self.elapsed_duration += self.ideal_duration
            yield self.env.timeout(1)

    def contention_rounds(self, congestion_factor):
        for packet_index in range(self.packets_per_client):
            for client in self.clients:
                contention_delay = self.variate.next_int(config.CONTENTION_DELAY_RANGE) * config.CONTENTION_DELAY_UNIT

                outcome = client.attempt(self.channel, congestion_factor)
                if outcome.succeeded:
                    outcome = outcome._replace(latency=outcome.latency + contention_delay)
                    self.elapsed_duration += outcome.latency / 1e3
                else:
                    self.elapsed_duration += contention_delay / 1e3

                self.record(outcome)

            yield self.env.timeout(1)

    def ofdma_rounds(self):
        sub_channel_count = self.phy_profile['sub_channel_count']
        slots_per_round = math.ceil(self.client_count / sub_channel_count)
        slot_duration = self.packet_length * sub_channel_count / self.transfer_rate  # one packet over one sub-channel

        sub_channel_index = 0
        for packet_index in range(self.packets_per_client):
            for client in self.clients:
                client.allocate_sub_channel(sub_channel_index)
                self.channel.serve_sub_channel(sub_channel_index)

                self.record(client.attempt(self.channel, self.channel.sub_channel_index))

                sub_channel_index = (sub_channel_index + 1) % sub_channel_count

            self.elapsed_duration += slots_per_round * slot_duration
            yield self.env.timeout(1)

    def record(self, outcome):
        if outcome.succeeded:
            self.delivered_bits += self.packet_length
            self.ofdma_throughput += outcome.throughput
        self.outcomes.append(outcome)


def run_simulation(generation, client_count, packets_per_client, phy_config=None, variate=None,
                   release_channel=None):
    """
    Simulate one WiFi generation
    :param generation: 4, 5 or 6
    :param client_count: number of clients
    :param packets_per_client: number of packet rounds
    :param phy_config: mapping overriding "bandwidth", "bits_per_symbol", "coding_rate" and "sub_channel_count" of
                       the generation's default profile
    :param variate: random source, the process-wide one if not given
    :param release_channel: OFDMA only, release the channel after every attempt
    :return: SimulationResult
    """

    if phy_config is not None:
        check_phy_config(phy_config)

    phy_profile = config.IEEE_802_11.profile(generation)
    if phy_profile is not None and phy_config:
        phy_profile.update(phy_config)

    sim = Simulator(generation, client_count, packets_per_client, phy_profile=phy_profile, variate=variate,
                    release_channel=release_channel)
    return sim.run()


def run_sweep(generation, packets_per_client, client_counts=None, phy_config=None, variate=None,
              release_channel=None):
    if client_counts is None:
        client_counts = config.CLIENT_COUNTS

    results = []
    for client_count in client_counts:
        results.append(run_simulation(generation, client_count, packets_per_client, phy_config=phy_config,
                                      variate=variate, release_channel=release_channel))

    return results
