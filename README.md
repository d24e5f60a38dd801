# lvmcsi

Core logic for a storage driver that provisions volumes from LVM volume
groups in a container cluster. It reads storage-class and snapshot-class
parameters, rounds volume and snapshot sizes, weighs nodes to pick where a
new volume goes, filters nodes by topology, and parses the driver's
endpoint. It has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `lvmcsi.config`: the `Config` dataclass holding the driver's settings
  (driver name, plugin type, endpoint, node id, metrics address and path,
  rate limits and so on) and `default_config()`, which returns one with
  every setting at its zero value.
- `lvmcsi.quantity`: `parse_quantity()` reads resource quantities such as
  `"3Gi"`, `"500M"`, `"1.5k"` or `"1e9"` into an integer, rounding a
  fractional result up. It raises `ValueError` for malformed text or a value
  outside a signed 64-bit integer.
- `lvmcsi.params`: `new_volume_params()` builds a `VolumeParams` from a
  storage class's parameters (`volgroup`, `vgpattern`, `scheduler`,
  `shared`, `thinprovision` and the provisioner's PVC/PV name keys), and
  `new_snapshot_params()` builds a `SnapshotParams` from `snapsize`, given
  either as a percentage from 1 to 100 (`"50%"`) or as an absolute quantity
  (`"3Gi"`). Keys are matched without regard to case; `volgroup` wins over
  `vgpattern` and is anchored as `^name$`. Invalid values raise `ValueError`.
- `lvmcsi.sizes`: `round_capacity()` rounds a byte count up to a whole Mi,
  or to a whole Gi once it is over one Gi, so the smallest size is 1Mi.
  `snapshot_size()` takes a percentage of the volume's capacity, or an
  absolute size capped at the capacity, and rounds it the same way. The
  constants `MB`, `GB`, `Mi` and `Gi` are exported.
- `lvmcsi.scheduler`: the `VolumeGroup`, `LVMNode` and `LVMVolume`
  dataclasses and the node weightings `volume_weighted_map()` (number of
  matching volumes per node), `capacity_weighted_map()` (their total
  capacity per node) and `space_weighted_map()` (nodes with more free space
  in a matching group weigh less). `node_map()` picks one by name
  (`"VolumeWeighted"`, `"CapacityWeighted"`, `"SpaceWeighted"`); any other
  name weighs by space. `max_free_capacity()` gives the largest free space of
  any single matching volume group.
- `lvmcsi.endpoint`: `parse_endpoint()` splits a `unix://` or `tcp://`
  endpoint into protocol and address and raises `ValueError` otherwise;
  `is_informative_log()` tells whether calls to a method are worth logging
  (polling calls such as `NodeGetVolumeStats` are not).
- `lvmcsi.topology`: `label_index_name()` and `label_index_values()` for
  indexing objects by a label, and `filter_nodes_by_topology()`, which keeps
  the nodes whose labels carry every requested key and value.
- `lvmcsi.metrics`: `metrics_index_page()` gives the HTML page linking to
  the metrics path, and `node_topology()` gives the topology segments a node
  reports: `openebs.io/nodename` mapped to the node id, plus each allowed key
  found among the node's labels. The allowed keys come from a
  comma-separated string, a list, or, when not given, the
  `ALLOWED_TOPOLOGIES` environment variable.

## Examples

```python
from lvmcsi.params import new_volume_params, new_snapshot_params
from lvmcsi.sizes import Gi, Mi, MB, round_capacity, snapshot_size

params = new_volume_params({"VolGroup": "lvmvg", "thinProvision": "yes"})
params.vg_pattern.pattern          # "^lvmvg$"
params.thin_provision              # "yes"
params.scheduler                   # "SpaceWeighted"

round_capacity(5 * MB)             # 5 * Mi

snap = new_snapshot_params({"snapSize": "50%"})
snapshot_size(snap, 4 * Gi)        # 2 * Gi
```

```python
from lvmcsi.scheduler import LVMNode, VolumeGroup, node_map

nodes = [
    LVMNode("node-a", [VolumeGroup("lvmvg", free=10 * 2**30)]),
    LVMNode("node-b", [VolumeGroup("lvmvg", free=20 * 2**30)]),
]
weights = node_map("SpaceWeighted", "^lvmvg$", [], nodes)
min(weights, key=weights.get)      # "node-b"
```

```python
from lvmcsi.endpoint import parse_endpoint
from lvmcsi.quantity import parse_quantity

parse_endpoint("unix:///csi/csi.sock")   # ("unix", "/csi/csi.sock")
parse_quantity("3Gi")                    # 3221225472
```

## What this package does not do

It is a library of the driver's decision logic only. It does not serve the
driver's RPC interface, talk to the cluster's API, create or remove logical
volumes, mount filesystems, or serve metrics over HTTP, and it installs no
command. The node and volume data the scheduler and topology functions work
on must be gathered by the caller and passed in.