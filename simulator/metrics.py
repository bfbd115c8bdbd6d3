import numpy as np
from collections import namedtuple
from utils.errors import DegenerateRunError

SimulationResult = namedtuple('SimulationResult', ['generation',
                                                   'client_count',
                                                   'packets_per_client',
                                                   'successful_transfers',
                                                   'collision_count',
                                                   'total_elapsed_duration',  # s
                                                   'average_latency',  # ms
                                                   'peak_latency',  # ms
                                                   'achievable_throughput_mbps',
                                                   'max_throughput_mbps',
                                                   'aggregate_throughput_mbps'])


class Metrics:
    """
    Tools for statistics of the access performance

    1. Successful transfers: number of attempts that delivered their packet
    2. Average latency: arithmetic mean of the latency of successful attempts, in ms
    3. Peak latency: maximum latency of successful attempts, in ms
    4. Achievable throughput: delivered bits divided by the elapsed duration, capped at the physical channel capacity
    5. Aggregate throughput: the sum of the throughput credited by the generation itself (packets delivered for
       WiFi 4 / WiFi 5, per-client OFDMA shares for WiFi 6)
    6. Collision num: number of attempts that ended with a collision

    "summarize" never mutates the outcome sequence and keeps no state between calls, running it twice on the same
    outcomes gives the same result.

    Attributes:
        generation: simulated WiFi generation
        client_count: number of clients in the run
        packets_per_client: number of packet rounds in the run

    """

    def __init__(self, generation, client_count, packets_per_client):
        self.generation = generation
        self.client_count = client_count
        self.packets_per_client = packets_per_client

    def summarize(self, outcomes, elapsed_duration, total_bits, max_channel_capacity_mbps,
                  aggregate_throughput_mbps=None):
        """
        Reduce the outcome sequence into a SimulationResult
        :param outcomes: sequence of AccessOutcome
        :param elapsed_duration: total elapsed logical duration of the run, in second
        :param total_bits: number of bits delivered by the successful attempts
        :param max_channel_capacity_mbps: physical ceiling of the channel
        :param aggregate_throughput_mbps: throughput credited by the generation, defaults to delivered megabits
        :return: SimulationResult
        """

        latencies = np.array([outcome.latency for outcome in outcomes if outcome.succeeded], dtype=float)
        successful_transfers = len(latencies)
        collision_num = sum(1 for outcome in outcomes if outcome.collided)

        if elapsed_duration <= 0 and successful_transfers == 0:
            raise DegenerateRunError('no packet delivered in zero elapsed time (%s clients, %s packets)'
                                     % (self.client_count, self.packets_per_client))

        if successful_transfers:
            average_latency = float(np.mean(latencies))
            peak_latency = float(np.max(latencies))
        else:
            average_latency = 0.0
            peak_latency = 0.0

        if elapsed_duration > 0:
            actual_throughput = total_bits / elapsed_duration / 1e6  # Mbps
        else:
            actual_throughput = max_channel_capacity_mbps
        achievable_throughput = min(actual_throughput, max_channel_capacity_mbps)

        if aggregate_throughput_mbps is None:
            aggregate_throughput_mbps = total_bits / 1e6

        return SimulationResult(generation=self.generation,
                                client_count=self.client_count,
                                packets_per_client=self.packets_per_client,
                                successful_transfers=successful_transfers,
                                collision_count=collision_num,
                                total_elapsed_duration=elapsed_duration,
                                average_latency=average_latency,
                                peak_latency=peak_latency,
                                achievable_throughput_mbps=achievable_throughput,
                                max_throughput_mbps=max_channel_capacity_mbps,
                                aggregate_throughput_mbps=aggregate_throughput_mbps)

    def zero_result(self, max_channel_capacity_mbps, collision_num=0):
        return SimulationResult(generation=self.generation,
                                client_count=self.client_count,
                                packets_per_client=self.packets_per_client,
                                successful_transfers=0,
                                collision_count=collision_num,
                                total_elapsed_duration=0.0,
                                average_latency=0.0,
                                peak_latency=0.0,
                                achievable_throughput_mbps=0.0,
                                max_throughput_mbps=max_channel_capacity_mbps,
                                aggregate_throughput_mbps=0.0)


def print_metrics(result):
    print('--------------------------------------------------------')
    print('Simulation results of WiFi', result.generation, 'for', result.client_count, 'clients:')
    print('Successful transfers: ', result.successful_transfers, '/',
          result.client_count * result.packets_per_client)
    print('Collision num is: ', result.collision_count)
    print('Throughput: ', result.max_throughput_mbps, 'Mbps')
    print('Achievable throughput: ', result.achievable_throughput_mbps, 'Mbps')
    print('Aggregate throughput: ', result.aggregate_throughput_mbps, 'Mbps')
    print('Average latency: ', result.average_latency, 'ms')
    print('Peak latency: ', result.peak_latency, 'ms')
