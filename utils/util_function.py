import math
import logging
import numbers
from collections.abc import Mapping
from utils import config
from utils.errors import InvalidParameterError


def transfer_rate(bandwidth, bits_per_symbol, coding_rate):
    """
    Calculate the physical transfer rate of the channel
    :param bandwidth: channel bandwidth in Hz
    :param bits_per_symbol: modulation order, e.g., 8 for 256-QAM
    :param coding_rate: forward error correction coding rate
    :return: transfer rate in bit/s
    """

    return bandwidth * bits_per_symbol * coding_rate


def ideal_packet_duration(packet_length, rate):
    """
    Time needed to transmit one packet without any contention
    :param packet_length: packet length in bit
    :param rate: transfer rate in bit/s
    :return: duration in second
    """

    return packet_length / rate


def backoff_interval(slot, collision_count):
    """
    Exponential backoff, capped at MAX_BACKOFF_INTERVAL

    The exponent is saturated first, so arbitrarily long collision streaks never produce huge intermediate values
    :param slot: random multiplier drawn from [1, BACKOFF_SLOT_MAX]
    :param collision_count: number of consecutive collisions of the client
    :return: backoff interval in ms
    """

    exponent = min(collision_count, config.MAX_BACKOFF_EXPONENT)
    return min(slot * (2 ** exponent), float(config.MAX_BACKOFF_INTERVAL))


def _fail(message, *args):
    logging.error(message, *args)
    raise InvalidParameterError(message % args)


def check_positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        _fail('%s must be an integer, got: %r', name, value)
    if value <= 0:
        _fail('%s must be positive, got: %s', name, value)


def check_positive_real(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        _fail('%s must be a number, got: %r', name, value)
    if not math.isfinite(value) or value <= 0:
        _fail('%s must be a positive finite number, got: %s', name, value)


def check_phy_config(phy_config):
    if not isinstance(phy_config, Mapping):
        _fail('physical layer configuration must be a mapping, got: %r', phy_config)


def check_phy_profile(profile):
    """
    Validate a physical layer profile before it is used by the simulator
    :param profile: dictionary with "bandwidth", "bits_per_symbol", "coding_rate" and "sub_channel_count"
    :return: none
    """

    check_phy_config(profile)

    for key in ('bandwidth', 'bits_per_symbol', 'coding_rate', 'sub_channel_count'):
        if key not in profile:
            _fail('missing physical layer parameter: %s', key)

    check_positive_real('bandwidth', profile['bandwidth'])
    check_positive_real('bits_per_symbol', profile['bits_per_symbol'])
    check_positive_real('coding_rate', profile['coding_rate'])
    if profile['coding_rate'] > 1:
        _fail('coding_rate cannot exceed 1, got: %s', profile['coding_rate'])
    check_positive_int('sub_channel_count', profile['sub_channel_count'])
