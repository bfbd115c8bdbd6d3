from collections import namedtuple

"""
Result of one access attempt of one client in one round

    succeeded: whether the packet went through
    latency: latency contribution of the attempt in ms, zero for failed attempts
    throughput: throughput contribution in bit/s (OFDMA only, zero otherwise)
    collided: whether the attempt ended with a collision
"""
AccessOutcome = namedtuple('AccessOutcome', ['succeeded', 'latency', 'throughput', 'collided'])


def success(latency, throughput=0.0):
    return AccessOutcome(True, latency, throughput, False)


def failure(collided=False):
    return AccessOutcome(False, 0.0, 0.0, collided)
