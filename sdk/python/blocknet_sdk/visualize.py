"""
BlockNet Visualization Suite
Generates activity charts from a chain snapshot
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .models import Chain
from .view import user_transactions

logger = logging.getLogger("blocknet_sdk.visualize")

# Configuration
COLORS = {
    'primary': '#3B82F6',      # Sender blue
    'secondary': '#22C55E',    # Recipient green
    'accent': '#FACC15',       # Amount yellow
    'reward': '#F87171',       # Mining reward red
    'dark': '#0f172a',
    'light': '#eaeaea'
}

STYLE = {
    'figure.facecolor': COLORS['dark'],
    'axes.facecolor': '#1e293b',
    'axes.edgecolor': COLORS['light'],
    'text.color': COLORS['light'],
    'axes.labelcolor': COLORS['light'],
    'xtick.color': COLORS['light'],
    'ytick.color': COLORS['light'],
    'font.size': 12,
    'axes.titlesize': 16,
    'axes.labelsize': 14,
}

DEFAULT_OUTPUT_DIR = Path('datagraphics')


def block_activity(chain: Chain) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Per block: index, user transaction count, reward transaction count"""
    indices = np.array([b.index for b in chain.blocks], dtype=int)
    users = np.array(
        [sum(1 for tx in b.transactions if not tx.is_reward) for b in chain.blocks], dtype=int
    )
    rewards = np.array(
        [sum(1 for tx in b.transactions if tx.is_reward) for b in chain.blocks], dtype=int
    )
    return indices, users, rewards


def sender_volume(chain: Chain) -> Dict[str, float]:
    """Total amount sent per sender, largest first"""
    totals: Dict[str, float] = {}
    for tx in user_transactions(chain):
        totals[tx.sender] = totals.get(tx.sender, 0.0) + tx.amount
    return dict(sorted(totals.items(), key=lambda item: item[1], reverse=True))


def cumulative_volume(chain: Chain) -> Tuple[np.ndarray, np.ndarray]:
    """Block timestamps and running total of user amounts up to each block"""
    timestamps = np.array([b.timestamp for b in chain.blocks], dtype=float)
    per_block = np.array(
        [sum(tx.amount for tx in b.transactions if not tx.is_reward) for b in chain.blocks],
        dtype=float,
    )
    return timestamps, np.cumsum(per_block)


def plot_block_activity(chain: Chain, output_dir: Path) -> Path:
    """Stacked bar chart: transactions per block"""
    fig, ax = plt.subplots(figsize=(10, 6))

    indices, users, rewards = block_activity(chain)
    ax.bar(indices, users, color=COLORS['primary'], edgecolor='white', label='Transfers')
    ax.bar(indices, rewards, bottom=users, color=COLORS['reward'], edgecolor='white', label='Rewards')

    ax.set_xlabel('Block Index')
    ax.set_ylabel('Transactions')
    ax.set_title('Transactions per Block', fontsize=18, fontweight='bold')
    if len(users):
        ax.axhline(np.mean(users), color=COLORS['accent'], linestyle='--', alpha=0.7,
                   label=f'Mean transfers: {np.mean(users):.1f}')
    ax.legend()
    ax.grid(axis='y', alpha=0.3)

    path = output_dir / 'block_activity.png'
    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_sender_volume(chain: Chain, output_dir: Path, top: int = 10) -> Path:
    """Horizontal bar chart: amount sent per sender"""
    fig, ax = plt.subplots(figsize=(10, 6))

    volume = list(sender_volume(chain).items())[:top]
    names = [name for name, _ in volume]
    values = [amount for _, amount in volume]

    bars = ax.barh(names, values, color=COLORS['secondary'], edgecolor='white')
    for bar, val in zip(bars, values):
        ax.text(bar.get_width(), bar.get_y() + bar.get_height() / 2.,
                f' {val:,.2f}', va='center', fontsize=11)

    ax.invert_yaxis()
    ax.set_xlabel('Amount Sent')
    ax.set_title('Volume by Sender', fontsize=18, fontweight='bold')
    ax.grid(axis='x', alpha=0.3)

    path = output_dir / 'sender_volume.png'
    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_cumulative_volume(chain: Chain, output_dir: Path) -> Path:
    """Line chart: cumulative transfer volume over block time"""
    fig, ax = plt.subplots(figsize=(10, 6))

    timestamps, totals = cumulative_volume(chain)
    elapsed = timestamps - timestamps[0] if len(timestamps) else timestamps

    ax.plot(elapsed, totals, 'o-', color=COLORS['primary'], linewidth=3, markersize=8)
    if len(totals):
        ax.fill_between(elapsed, totals, alpha=0.3, color=COLORS['primary'])

    ax.set_xlabel('Seconds since genesis')
    ax.set_ylabel('Cumulative Amount')
    ax.set_title('Transfer Volume Over Time', fontsize=18, fontweight='bold')
    ax.grid(alpha=0.3)

    path = output_dir / 'cumulative_volume.png'
    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def render_all(chain: Chain, output_dir: Path = DEFAULT_OUTPUT_DIR) -> List[Path]:
    """Render every chart for ``chain`` into ``output_dir``"""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    with plt.style.context('dark_background'), plt.rc_context(STYLE):
        paths = [
            plot_block_activity(chain, output_dir),
            plot_sender_volume(chain, output_dir),
            plot_cumulative_volume(chain, output_dir),
        ]
    for path in paths:
        logger.info(f"Wrote {path}")
    return paths
