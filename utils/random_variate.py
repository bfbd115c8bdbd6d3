import random
from utils import config


class RandomVariate:
    """
    Source of the random draws used for collision detection, backoff and allocation jitter

    Each instance owns its own generator, so a simulator built with an explicitly seeded instance is fully
    reproducible and does not disturb (nor is disturbed by) the process-wide source.

    Attributes:
        rng: the underlying generator

    """

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def next_uniform(self):
        """
        Draw a real number uniformly from [0, 1)
        :return: the random number
        """

        return self.rng.random()

    def next_int(self, n):
        """
        Draw an integer uniformly from [0, n - 1]
        :param n: size of the range
        :return: the random integer
        """

        return self.rng.randrange(n)


# process-wide default source, seeded once when the module is first imported
DEFAULT_VARIATE = RandomVariate(config.SIM_SEED)


def default_variate():
    return DEFAULT_VARIATE
