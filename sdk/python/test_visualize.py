"""Tests for chain activity charts."""

import numpy as np

from blocknet_sdk.models import Chain
from blocknet_sdk.visualize import block_activity, cumulative_volume, render_all, sender_volume


def test_block_activity(busy_chain):
    indices, users, rewards = block_activity(busy_chain)
    assert indices.tolist() == [0, 1, 2]
    assert users.tolist() == [0, 2, 1]
    assert rewards.tolist() == [1, 1, 1]


def test_sender_volume_sorted(busy_chain):
    assert list(sender_volume(busy_chain).items()) == [("Alan", 5.0), ("Bob", 2.5), ("Carol", 1.0)]


def test_cumulative_volume(busy_chain):
    timestamps, totals = cumulative_volume(busy_chain)
    assert np.all(np.diff(timestamps) > 0)
    assert totals.tolist() == [0.0, 7.5, 8.5]


def test_render_all(tmp_path, busy_chain):
    paths = render_all(busy_chain, tmp_path / "out")
    assert [p.name for p in paths] == ["block_activity.png", "sender_volume.png", "cumulative_volume.png"]
    assert all(p.stat().st_size > 0 for p in paths)


def test_render_empty_chain(tmp_path):
    paths = render_all(Chain.empty(), tmp_path)
    assert len(paths) == 3
