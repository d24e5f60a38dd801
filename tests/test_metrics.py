from lvmcsi.metrics import (
    ALLOWED_TOPOLOGIES_ENV,
    TOPOLOGY_KEY,
    metrics_index_page,
    node_topology,
)

LABELS = {
    "kubernetes.io/hostname": "worker-1",
    "openebs.io/zone": "zone1",
    "kubernetes.io/os": "linux",
}


def test_index_page_links_metrics_path():
    page = metrics_index_page("/metrics")
    assert '<a href="/metrics">Metrics</a>' in page


def test_index_page_structure():
    page = metrics_index_page("/custom")
    assert page.startswith("<html>")
    assert page.endswith("</html>")
    assert "<title>LVM Exporter</title>" in page
    assert "<h1>LVM Exporter</h1>" in page


def test_index_page_differs_only_in_path():
    a = metrics_index_page("/a")
    b = metrics_index_page("/b")
    assert a.replace('"/a"', '"/b"') == b


def test_topology_without_allowed_keys():
    assert node_topology("worker-1", LABELS, "") == {TOPOLOGY_KEY: "worker-1"}


def test_topology_with_allowed_keys():
    topo = node_topology("worker-1", LABELS, "openebs.io/zone,kubernetes.io/os")
    assert topo == {
        TOPOLOGY_KEY: "worker-1",
        "openebs.io/zone": "zone1",
        "kubernetes.io/os": "linux",
    }


def test_topology_ignores_missing_and_empty_keys():
    topo = node_topology("n", LABELS, ",missing/key,,openebs.io/zone,")
    assert topo == {TOPOLOGY_KEY: "n", "openebs.io/zone": "zone1"}


def test_topology_accepts_list_of_keys():
    topo = node_topology("n", LABELS, ["kubernetes.io/hostname"])
    assert topo == {TOPOLOGY_KEY: "n", "kubernetes.io/hostname": "worker-1"}


def test_topology_with_no_labels():
    assert node_topology("n", None, "openebs.io/zone") == {TOPOLOGY_KEY: "n"}


def test_topology_reads_environment(monkeypatch):
    monkeypatch.setenv(ALLOWED_TOPOLOGIES_ENV, "openebs.io/zone")
    topo = node_topology("n", LABELS)
    assert topo == {TOPOLOGY_KEY: "n", "openebs.io/zone": "zone1"}


def test_topology_environment_unset(monkeypatch):
    monkeypatch.delenv(ALLOWED_TOPOLOGIES_ENV, raising=False)
    assert node_topology("n", LABELS) == {TOPOLOGY_KEY: "n"}


def test_topology_values_come_from_labels():
    keys = list(LABELS)
    topo = node_topology("n", LABELS, ",".join(keys))
    assert all(topo[key] == LABELS[key] for key in keys)
    assert topo[TOPOLOGY_KEY] == "n"