# pathfinding_lab/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from typing import Dict, List
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

def load_rows(path: Path = RESULTS_JSON) -> List[dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m pathfinding_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)

def _by_problem(rows) -> Dict[str, List[dict]]:
    groups: Dict[str, List[dict]] = {}
    for r in rows:
        groups.setdefault(r["problem"], []).append(r)
    return groups

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]
    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")
    top = max(vals) or 1
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if isinstance(v, float) and v < 0.01 else (f"{v:.3f}" if isinstance(v, float) else f"{v}")
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def fmt_table(rows) -> str:
    # Markdown table
    lines = [
        "| Problem | Algorithm | Cost | Paths | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)) and not isinstance(x, bool):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['problem']} | {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('paths'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def plot_problem(problem: str, rows: List[dict], out_dir: Path = OUT_DIR) -> Path:
    """One figure per problem: expansions and wall time side by side."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(11, 4))
    _bar(ax1, _sorted(rows, "nodes_expanded"), "nodes_expanded", "Nodes Expanded (lower is better)", "nodes")
    _bar(ax2, _sorted(rows, "time_s"), "time_s", "Wall Time (lower is better)", "seconds")
    fig.suptitle(problem)
    fig.tight_layout()
    path = out_dir / f"{problem.replace(' ', '_')}.png"
    path.write_bytes(fig_to_png_bytes(fig))
    plt.close(fig)
    return path

def main():
    rows = load_rows()

    md_path = OUT_DIR / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    for problem, group in _by_problem(rows).items():
        print(f"Wrote {plot_problem(problem, group)}")

if __name__ == "__main__":
    main()
