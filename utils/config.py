import logging
from utils.ieee_802_11 import IEEE_802_11

IEEE_802_11 = IEEE_802_11()

# --------------------- simulation parameters --------------------- #
SIM_SEED = None  # seed of the process-wide random source, "None" means seeding from OS entropy
CLIENT_COUNTS = (1, 10, 100)  # client populations simulated for each generation
PACKETS_PER_CLIENT = 100  # number of logical packet rounds
GENERATIONS = (4, 5, 6)  # WiFi 4, WiFi 5, WiFi 6
LOGGING_LEVEL = logging.INFO  # whether to print the detail information during simulation
DRAW_RESULTS = 0  # draw bar charts after the sweep

# ---------------------- packet parameters ----------------------- #
DATA_PACKET_PAYLOAD_LENGTH = 1024 * 8  # 1024 byte, in bit

# ----------------------- radio parameters ----------------------- #
DEFAULT_BANDWIDTH = IEEE_802_11.n['bandwidth']  # Hz
DEFAULT_BITS_PER_SYMBOL = IEEE_802_11.n['bits_per_symbol']  # 256-QAM
DEFAULT_CODING_RATE = IEEE_802_11.n['coding_rate']

# --------------------- mac layer parameters --------------------- #
BACKOFF_SLOT_MAX = 21  # backoff multiplier is drawn from [1, BACKOFF_SLOT_MAX]
MAX_BACKOFF_INTERVAL = 450  # ms, cap of the backoff interval
MAX_BACKOFF_EXPONENT = 9  # 2 ** 9 > MAX_BACKOFF_INTERVAL, larger exponents cannot change the capped result
COLLISION_DRAW_RANGE = 150  # collision if randint(0, 149) < congestion * 100
CONTENTION_DELAY_RANGE = 50  # contention delay is randint(0, 49) * CONTENTION_DELAY_UNIT
CONTENTION_DELAY_UNIT = 0.001  # ms

# congestion factor of WiFi 4 grows linearly with the population and saturates
WIFI4_CONGESTION_PER_CLIENT = 0.05
WIFI4_MAX_CONGESTION = 0.5

# WiFi 5 (MU-MIMO) uses a fixed low congestion factor regardless of the population
WIFI5_CONGESTION = 0.1

# ------------------------ ofdma parameters ----------------------- #
SUB_CHANNEL_COUNT = IEEE_802_11.ax['sub_channel_count']
OFDMA_RELEASE_CHANNEL = True  # release the channel after each attempt so every sub-channel slot re-arbitrates
OFDMA_LATENCY_RANGE = 100  # queuing latency is randint(0, 99) * OFDMA_LATENCY_UNIT
OFDMA_LATENCY_UNIT = 0.1  # ms
