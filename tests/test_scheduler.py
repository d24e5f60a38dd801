import re

from lvmcsi.scheduler import (
    CAPACITY_WEIGHTED,
    SPACE_WEIGHTED,
    VOLUME_WEIGHTED,
    LVMNode,
    LVMVolume,
    VolumeGroup,
    capacity_weighted_map,
    max_free_capacity,
    node_map,
    space_weighted_map,
    volume_weighted_map,
)

INT64_MAX = 2**63 - 1


def _volumes():
    on_a = [
        LVMVolume("v1", vol_group="lvmvg", owner_node_id="node-a", capacity="1024"),
        LVMVolume("v2", vol_group="lvmvg", owner_node_id="node-a", capacity="2048"),
    ]
    on_b = [
        LVMVolume("v3", vol_group="lvmvg", owner_node_id="node-b", capacity="4096"),
    ]
    other = [
        LVMVolume("v4", vol_group="othervg", owner_node_id="node-c", capacity="8192"),
    ]
    return on_a, on_b, other


def test_volume_weighted_counts_matching_volumes():
    on_a, on_b, other = _volumes()
    result = volume_weighted_map(on_a + on_b + other, re.compile("^lvmvg$"))
    assert result == {"node-a": len(on_a), "node-b": len(on_b)}


def test_capacity_weighted_sums_matching_capacity():
    on_a, on_b, other = _volumes()
    result = capacity_weighted_map(on_a + on_b + other, "^lvmvg$")
    assert result["node-a"] == sum(int(v.capacity) for v in on_a)
    assert result["node-b"] == int(on_b[0].capacity)
    assert "node-c" not in result


def test_capacity_weighted_skips_unparsable_capacity():
    vols = [
        LVMVolume("v1", vol_group="vg", owner_node_id="n", capacity="1Gi"),
        LVMVolume("v2", vol_group="vg", owner_node_id="n", capacity=" 5"),
        LVMVolume("v3", vol_group="vg", owner_node_id="m", capacity="5"),
    ]
    assert capacity_weighted_map(vols, "vg") == {"m": 5}


def test_pattern_matches_anywhere_in_name():
    vols = [LVMVolume("v", vol_group="fast-lvmvg-1", owner_node_id="n")]
    assert volume_weighted_map(vols, "lvmvg") == {"n": 1}


def test_space_weighted_prefers_more_free_space():
    nodes = [
        LVMNode("small", [VolumeGroup("lvmvg", free=10)]),
        LVMNode("big", [VolumeGroup("lvmvg", free=1000), VolumeGroup("x", free=10**9)]),
        LVMNode("none", [VolumeGroup("x", free=500)]),
        LVMNode("full", [VolumeGroup("lvmvg", free=0)]),
    ]
    result = space_weighted_map(nodes, "^lvmvg$")
    assert set(result) == {"small", "big"}
    assert result["big"] < result["small"]
    assert result["big"] == INT64_MAX - nodes[1].volume_groups[0].free


def test_node_map_dispatch():
    on_a, on_b, other = _volumes()
    vols = on_a + on_b + other
    nodes = [LVMNode("node-a", [VolumeGroup("lvmvg", free=7)])]
    assert node_map(VOLUME_WEIGHTED, "lvmvg", vols, nodes) == volume_weighted_map(vols, "lvmvg")
    assert node_map(CAPACITY_WEIGHTED, "lvmvg", vols, nodes) == capacity_weighted_map(vols, "lvmvg")
    assert node_map(SPACE_WEIGHTED, "lvmvg", vols, nodes) == space_weighted_map(nodes, "lvmvg")
    assert node_map("unknown", "lvmvg", vols, nodes) == space_weighted_map(nodes, "lvmvg")


def test_max_free_capacity_is_largest_single_group():
    nodes = [
        LVMNode("a", [VolumeGroup("lvmvg", free=300), VolumeGroup("lvmvg2", free=400)]),
        LVMNode("b", [VolumeGroup("lvmvg", free=350), VolumeGroup("other", free=10**6)]),
    ]
    assert max_free_capacity(nodes, "^lvmvg") == 400
    assert max_free_capacity(nodes, "^lvmvg$") == 350


def test_max_free_capacity_without_match_is_zero():
    nodes = [LVMNode("a", [VolumeGroup("other", free=100)])]
    assert max_free_capacity(nodes, "^lvmvg$") == 0
    assert max_free_capacity([], "lvmvg") == 0