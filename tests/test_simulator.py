import logging
import pytest
from simulator.simulator import Simulator, run_simulation, run_sweep, DONE, INIT
from utils import config
from utils.errors import InvalidParameterError
from utils.random_variate import RandomVariate, default_variate

IDEAL_MS = config.DATA_PACKET_PAYLOAD_LENGTH / (20e6 * 8 * 5 / 6) * 1e3


def test_single_wifi4_client_is_ideal(seeded):
    sim = Simulator(4, 1, 50, variate=seeded)
    result = sim.run()

    assert result.successful_transfers == 50
    assert result.collision_count == 0
    assert result.average_latency == pytest.approx(IDEAL_MS)
    assert result.peak_latency == pytest.approx(IDEAL_MS)
    assert all(outcome.latency == pytest.approx(IDEAL_MS) for outcome in sim.outcomes)
    assert result.achievable_throughput_mbps == pytest.approx(result.max_throughput_mbps)


@pytest.mark.parametrize('packets', [1, 7, 300])
def test_single_wifi4_client_ignores_random_source(always_collide, packets):
    result = run_simulation(4, 1, packets, variate=always_collide)
    assert result.successful_transfers == packets
    assert result.average_latency == pytest.approx(IDEAL_MS)


def test_wifi4_without_collisions_delivers_every_packet(never_collide):
    result = run_simulation(4, 10, 1, variate=never_collide)
    assert result.successful_transfers == 10
    assert result.collision_count == 0


def test_wifi4_forced_collisions(always_collide):
    sim = Simulator(4, 10, 1, variate=always_collide)
    result = sim.run()

    assert result.successful_transfers == 0
    assert result.collision_count == 10
    assert [client.collision_count for client in sim.clients] == [1] * 10
    assert result.average_latency == 0
    assert result.peak_latency == 0
    assert result.achievable_throughput_mbps == 0


def test_wifi5_uses_fixed_congestion(seeded):
    assert Simulator(5, 100, 1, variate=seeded).congestion_factor() == config.WIFI5_CONGESTION
    assert Simulator(4, 100, 1, variate=seeded).congestion_factor() == config.WIFI4_MAX_CONGESTION
    assert Simulator(4, 2, 1, variate=seeded).congestion_factor() == pytest.approx(0.1)


def test_wifi5_aggregate_throughput_counts_packets(seeded):
    result = run_simulation(5, 10, 20, variate=seeded)
    assert result.aggregate_throughput_mbps == pytest.approx(
        result.successful_transfers * config.DATA_PACKET_PAYLOAD_LENGTH / 1e6)


def test_wifi5_single_client_still_contends(always_collide):
    result = run_simulation(5, 1, 2, variate=always_collide)
    assert result.successful_transfers == 0
    assert result.collision_count == 1


def test_wifi6_round_robin_allocation(seeded):
    sim = Simulator(6, 10, 1, variate=seeded)
    sim.run()

    allocated = [client.allocated_sub_channel for client in sim.clients]
    assert sorted(allocated) == list(range(10))


def test_wifi6_round_robin_carries_across_rounds(seeded):
    sim = Simulator(6, 3, 4, variate=seeded)
    sim.run()

    # 12 allocations over 10 sub-channels, the last round got indexes 9, 0, 1
    assert [client.allocated_sub_channel for client in sim.clients] == [9, 0, 1]


def test_wifi6_with_release_every_client_succeeds(seeded):
    result = run_simulation(6, 10, 2, variate=seeded)

    share = 20e6 / 10 * 8 * 5 / 6
    assert result.successful_transfers == 20
    assert result.aggregate_throughput_mbps == pytest.approx(20 * share / 1e6)
    assert result.achievable_throughput_mbps == pytest.approx(result.max_throughput_mbps)
    assert 0 <= result.average_latency <= result.peak_latency < 10


def test_wifi6_without_release_has_single_winner(seeded):
    sim = Simulator(6, 10, 5, variate=seeded, release_channel=False)
    result = sim.run()

    assert result.successful_transfers == 1
    assert sim.outcomes[0].succeeded
    assert not sim.channel.is_available()


def test_wifi6_custom_sub_channel_count(seeded):
    sim = Simulator(6, 4, 1, variate=seeded, phy_profile={'bandwidth': 40e6,
                                                           'bits_per_symbol': 10.0,
                                                           'coding_rate': 0.75,
                                                           'sub_channel_count': 2})
    sim.run()
    assert [client.allocated_sub_channel for client in sim.clients] == [0, 1, 0, 1]


@pytest.mark.parametrize('generation', [4, 5, 6])
@pytest.mark.parametrize('client_count', [1, 10, 100])
def test_results_stay_within_bounds(generation, client_count):
    result = run_simulation(generation, client_count, 20, variate=RandomVariate(client_count))

    assert result.achievable_throughput_mbps <= result.max_throughput_mbps
    assert result.successful_transfers <= client_count * 20
    assert result.peak_latency >= result.average_latency >= 0


def test_same_seed_gives_same_result():
    first = run_simulation(4, 10, 30, variate=RandomVariate(11))
    second = run_simulation(4, 10, 30, variate=RandomVariate(11))
    assert first == second


def test_lifecycle(seeded):
    sim = Simulator(4, 3, 5, variate=seeded)
    assert sim.state == INIT

    sim.run()
    assert sim.state == DONE
    assert sim.env.now == 5
    assert len(sim.outcomes) == 15

    with pytest.raises(RuntimeError):
        sim.run()


def test_phy_config_overrides_profile(seeded):
    result = run_simulation(4, 1, 1, phy_config={'bandwidth': 40e6}, variate=seeded)
    assert result.max_throughput_mbps == pytest.approx(40e6 * 8 * 5 / 6 / 1e6)


@pytest.mark.parametrize('kwargs', [
    dict(generation=3, client_count=10, packets_per_client=1),
    dict(generation=4, client_count=0, packets_per_client=1),
    dict(generation=4, client_count=-5, packets_per_client=1),
    dict(generation=4, client_count=10, packets_per_client=0),
    dict(generation=5, client_count=2.5, packets_per_client=1),
    dict(generation=5, client_count=True, packets_per_client=1),
    dict(generation=6, client_count=10, packets_per_client=1, phy_config={'bandwidth': 0}),
    dict(generation=6, client_count=10, packets_per_client=1, phy_config={'coding_rate': -0.5}),
    dict(generation=6, client_count=10, packets_per_client=1, phy_config={'coding_rate': 1.5}),
    dict(generation=6, client_count=10, packets_per_client=1, phy_config={'bits_per_symbol': 0}),
    dict(generation=6, client_count=10, packets_per_client=1, phy_config={'sub_channel_count': 0}),
    dict(generation=4, client_count=10, packets_per_client=1, phy_config={'bandwidth': float('inf')}),
    dict(generation=4, client_count=10, packets_per_client=1, phy_config={'coding_rate': float('nan')}),
    dict(generation=4, client_count=10, packets_per_client=1, phy_config=5),
    dict(generation=4, client_count=10, packets_per_client=1, phy_config='bandwidth'),
    dict(generation=4, client_count=10, packets_per_client=1, phy_config=['bandwidth']),
])
def test_invalid_parameters_are_rejected(kwargs):
    with pytest.raises(InvalidParameterError):
        run_simulation(**kwargs)


def test_default_variate_is_shared():
    assert default_variate() is default_variate()
    result = run_simulation(4, 10, 5)
    assert result.successful_transfers <= 50


def test_sweep_runs_each_client_count(seeded):
    results = run_sweep(5, 3, client_counts=(1, 10, 100), variate=seeded)
    assert [result.client_count for result in results] == [1, 10, 100]
    assert all(result.generation == 5 for result in results)


def test_non_mapping_profile_is_rejected(seeded):
    with pytest.raises(InvalidParameterError):
        Simulator(6, 10, 1, phy_profile=[('bandwidth', 20e6)], variate=seeded)


def test_infinite_bandwidth_is_rejected_before_running(seeded):
    with pytest.raises(InvalidParameterError):
        run_simulation(4, 1, 3, phy_config={'bandwidth': float('inf')}, variate=seeded)


def test_release_flag_is_read_at_run_time(seeded, monkeypatch):
    monkeypatch.setattr(config, 'OFDMA_RELEASE_CHANNEL', False)
    sim = Simulator(6, 10, 5, variate=seeded)
    assert not sim.release_channel
    assert sim.run().successful_transfers == 1

    monkeypatch.setattr(config, 'OFDMA_RELEASE_CHANNEL', True)
    assert run_simulation(6, 10, 5, variate=seeded).successful_transfers == 50


def test_sweep_client_counts_are_read_at_run_time(seeded, monkeypatch):
    monkeypatch.setattr(config, 'CLIENT_COUNTS', (2, 3))
    results = run_sweep(4, 2, variate=seeded)
    assert [result.client_count for result in results] == [2, 3]


def test_carrier_frequency_is_logged(seeded, caplog):
    caplog.set_level(logging.INFO)
    run_simulation(6, 2, 1, variate=seeded)
    assert 'Carrier frequency: 5.0 GHz, bandwidth: 20.0 MHz' in caplog.text
