from utils import config
from simulator.metrics import print_metrics
from simulator.simulator import run_sweep

r"""
 __        __ _  _____  _     ____   _
 \ \      / /(_)|  ___|(_)   / ___| (_) _ __ ___
  \ \ /\ / / | || |_   | |   \___ \ | || '_ ` _ \
   \ V  V /  | ||  _|  | |    ___) || || | | | | |
    \_/\_/   |_||_|    |_|   |____/ |_||_| |_| |_|

"""

if __name__ == "__main__":
    results_by_generation = {}

    for generation in config.GENERATIONS:
        print('\nWiFi', generation, 'simulation')
        results = run_sweep(generation, config.PACKETS_PER_CLIENT, client_counts=config.CLIENT_COUNTS)
        for result in results:
            print_metrics(result)
        results_by_generation[generation] = results

    if config.DRAW_RESULTS:
        from drawing.comparison import draw_results
        draw_results(results_by_generation)
