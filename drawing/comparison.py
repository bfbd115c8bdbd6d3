import matplotlib.pyplot as plt
import numpy as np

COLORS = {4: 'orangered', 5: 'green', 6: 'cornflowerblue'}


# grouped bar chart of one result field, one group per client count and one bar per generation
def bar_plot(results_by_generation, field, ylabel, show=True):
    generations = sorted(results_by_generation.keys())
    client_counts = [result.client_count for result in results_by_generation[generations[0]]]

    fig, ax = plt.subplots()
    index = np.arange(len(client_counts))
    bar_width = 0.8 / len(generations)
    opacity = 0.5

    for offset, generation in enumerate(generations):
        values = [getattr(result, field) for result in results_by_generation[generation]]
        ax.bar(index + offset * bar_width, values, bar_width,
               alpha=opacity, color=COLORS.get(generation, 'gray'),
               label='WiFi %s' % generation)

    ax.set_xticks(index + (len(generations) - 1) * bar_width / 2)
    ax.set_xticklabels([str(n) for n in client_counts])
    ax.legend()
    plt.ylabel(ylabel)
    plt.xlabel("Number of clients")

    if show:
        plt.show()

    return fig


def draw_results(results_by_generation, show=True):
    figures = [bar_plot(results_by_generation, 'achievable_throughput_mbps', "Achievable throughput (Mbps)", show),
               bar_plot(results_by_generation, 'average_latency', "Average latency (ms)", show),
               bar_plot(results_by_generation, 'peak_latency', "Peak latency (ms)", show)]
    return figures
