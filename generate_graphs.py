import random

import matplotlib.pyplot as plt

from comparator import PATTERNS, generate_reference_string, print_comparison, run_all
from policies import Algorithm

algorithms = [str(algorithm) for algorithm in Algorithm]


def collect_results(length=200, max_page=20, frame_count=4, random_seed=0):
    rng = random.Random(random_seed)
    results = {}
    for pattern in PATTERNS:
        reference_string = generate_reference_string(length, max_page, pattern, rng=rng)
        results[pattern] = run_all(reference_string, frame_count)
    return results


def plot_results(results, filename='algorithm_comparison.png'):
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    # Fault counts per algorithm, one bar group per workload pattern
    ax = axes[0]
    patterns = list(results)
    x = range(len(algorithms))
    width = 0.8 / len(patterns)
    for idx, pattern in enumerate(patterns):
        faults = [results[pattern][alg].fault_count for alg in algorithms]
        offset = (idx - (len(patterns) - 1) / 2) * width
        bars = ax.bar([i + offset for i in x], faults, width, label=pattern)
        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    f'{int(height)}', ha='center', va='bottom', fontsize=8)
    ax.set_title('Page Faults')
    ax.set_xticks(list(x))
    ax.set_xticklabels(algorithms)
    ax.grid(axis='y', alpha=0.3)
    ax.legend()

    # Cumulative faults over time for the first workload
    ax = axes[1]
    pattern = patterns[0]
    for alg in algorithms:
        history = results[pattern][alg].faults_history
        ax.plot(range(1, len(history) + 1), history, label=alg)
    ax.set_title(f'Cumulative Page Faults ({pattern})')
    ax.set_xlabel('Reference Steps')
    ax.set_ylabel('Page Faults')
    ax.grid(alpha=0.3)
    ax.legend()

    plt.tight_layout()
    plt.savefig(filename, dpi=150, bbox_inches='tight')
    return fig


def main():
    print("Running simulations...")
    results = collect_results()
    for pattern, simulators in results.items():
        print_comparison({alg: simulators[alg].fault_count for alg in algorithms}, title=pattern)

    plot_results(results)
    print("\nGraph saved as 'algorithm_comparison.png'")
    plt.show()


if __name__ == '__main__':
    main()
