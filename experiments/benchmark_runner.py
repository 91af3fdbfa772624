import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from crucible.map.generator import CostMapGenerator
from crucible.planning.planners import CrucibleDijkstraPlanner, GridDijkstraPlanner
from crucible.vehicles.crucible import CrucibleVehicle
from crucible.visualization.observers import ExperimentObserver
from benchmark_config import BenchmarkConfig as Cfg


def run_experiment():
    results = []

    print(f"{'Size':<6} | {'Config':<16} | {'Solved%':<8} | {'Time(ms)':<10} | {'Expanded':<10} | {'Cost':<8} | {'Free':<8}")
    print("-" * 90)

    reference = GridDijkstraPlanner()

    for size in Cfg.GRID_SIZES:
        stats = {name: {'solved': 0, 'time': [], 'nodes': [], 'cost': [], 'free': []}
                 for name in Cfg.CONFIGS}

        for i in range(Cfg.NUM_TRIALS):
            # A. 生成地图 (同一 seed 保证两种配置在同一张图上跑)
            seed = Cfg.RANDOM_SEED_BASE + size * 100 + i
            generator = CostMapGenerator(Cfg.MIN_COST, Cfg.MAX_COST, seed=seed)
            grid = generator.generate(size, size)

            # 无约束最短路，作为代价下界
            free_cost = reference.plan(grid)

            # B. 遍历所有配置
            for name, limits in Cfg.CONFIGS.items():
                planner = CrucibleDijkstraPlanner(CrucibleVehicle(limits))
                observer = ExperimentObserver()

                t0 = time.perf_counter()
                cost = planner.plan(grid, debugger=observer)
                t1 = time.perf_counter()

                if cost is not None:
                    stats[name]['solved'] += 1
                    stats[name]['time'].append((t1 - t0) * 1000)
                    stats[name]['nodes'].append(len(observer.expanded_nodes))
                    stats[name]['cost'].append(cost)
                    stats[name]['free'].append(free_cost)

        # C. 汇总当前 size 的数据
        for name in Cfg.CONFIGS:
            s = stats[name]
            solved = s['solved'] / Cfg.NUM_TRIALS * 100
            avg_time = np.mean(s['time']) if s['time'] else 0
            avg_nodes = np.mean(s['nodes']) if s['nodes'] else 0
            avg_cost = np.mean(s['cost']) if s['cost'] else 0
            avg_free = np.mean(s['free']) if s['free'] else 0

            print(f"{size:<6} | {name:<16} | {solved:<8.0f} | {avg_time:<10.2f} | {avg_nodes:<10.0f} | {avg_cost:<8.1f} | {avg_free:<8.1f}")

            results.append({
                'Size': size,
                'Config': name,
                'SolvedRate': solved,
                'TimeMean': avg_time,
                'TimeStd': np.std(s['time']) if s['time'] else 0,
                'ExpandedMean': avg_nodes,
                'CostMean': avg_cost,
                'FreeCostMean': avg_free,
            })

    return pd.DataFrame(results)


def plot_comparisons(df, save_path):
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    metrics = [
        ('TimeMean', 'Computation Time (ms)', 'Time Complexity'),
        ('ExpandedMean', 'Expanded States', 'Space Complexity'),
        ('CostMean', 'Heat Loss', 'Optimal Cost'),
    ]

    for ax, (metric, ylabel, title) in zip(axes, metrics):
        for name in df['Config'].unique():
            data = df[df['Config'] == name]
            ax.plot(data['Size'], data[metric], 'o-', linewidth=2, label=name)
        if metric == 'CostMean':
            free = df.groupby('Size')['FreeCostMean'].mean()
            ax.plot(free.index, free.values, 'k--', label='Unconstrained')
        ax.set_title(title)
        ax.set_xlabel('Grid Size')
        ax.set_ylabel(ylabel)
        ax.grid(True, linestyle='--', alpha=0.5)
        ax.legend()

    plt.tight_layout()
    plt.savefig(save_path)
    plt.close(fig)
    print(f"Figure saved to {save_path}")


if __name__ == "__main__":
    os.makedirs(Cfg.LOG_DIR, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")

    df = run_experiment()

    csv_path = os.path.join(Cfg.LOG_DIR, f"benchmark_{timestamp}.csv")
    df.to_csv(csv_path, index=False)
    print(f"Results saved to {csv_path}")

    plot_comparisons(df, os.path.join(Cfg.LOG_DIR, f"benchmark_{timestamp}.png"))
