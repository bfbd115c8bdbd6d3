class IEEE_802_11:
    def __init__(self):
        # IEEE 802.11n (WiFi 4)
        self.n = {'carrier_frequency': 2.4 * 1e9,  # 2.4 GHz
                  'bandwidth': 20 * 1e6,  # 20 MHz
                  'bits_per_symbol': 8.0,
                  'coding_rate': 5.0 / 6.0,
                  'sub_channel_count': 1}

        # IEEE 802.11ac (WiFi 5)
        """
        Several notes about IEEE 802.11ac:
        - MU-MIMO lets the AP serve several spatial streams in the downlink at the same time
        - The contention procedure (EDCA) itself is unchanged with respect to 802.11n, so in this simulator the gain
          of spatial multiplexing is only reflected by a lower, population-independent congestion factor
        """
        self.ac = {'carrier_frequency': 5 * 1e9,  # 5 GHz
                   'bandwidth': 20 * 1e6,  # 20 MHz
                   'bits_per_symbol': 8.0,
                   'coding_rate': 5.0 / 6.0,
                   'sub_channel_count': 1}

        # IEEE 802.11ax (WiFi 6)
        """
        Several notes about IEEE 802.11ax:
        - OFDMA splits the channel into resource units (RU), each of them is dedicated to one station per slot
        - A 20 MHz channel holds up to 9 RUs of 26 tones, here it is rounded to 10 sub-channels
        - 1024-QAM is optional, the default profile uses 256-QAM (8 bits per symbol) with coding rate 5/6
        """
        self.ax = {'carrier_frequency': 5 * 1e9,  # 5 GHz
                   'bandwidth': 20 * 1e6,  # 20 MHz
                   'bits_per_symbol': 8.0,
                   'coding_rate': 5.0 / 6.0,
                   'sub_channel_count': 10}

    def profile(self, generation):
        """
        Get the physical layer profile of one WiFi generation
        :param generation: 4, 5 or 6
        :return: a copy of the profile dictionary, or None for unknown generation
        """

        profiles = {4: self.n, 5: self.ac, 6: self.ax}
        if generation not in profiles:
            return None

        return dict(profiles[generation])
