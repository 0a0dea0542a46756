from cwm.core.live_ui import MemoryLiveUI, get_live_ui, set_live_ui


def test_memory_backend_round_trip():
    backend = MemoryLiveUI({"name": {"Value": "alice"}})
    assert backend.query_widget("name", "Value") == "alice"
    assert backend.query_widget("name", "Enabled") is None
    assert backend.query_widget("unknown", "Value") is None

    backend.change_widget("name", "Enabled", False)
    assert backend.snapshot() == {"name": {"Value": "alice", "Enabled": False}}


def test_snapshot_is_a_copy():
    backend = MemoryLiveUI()
    backend.change_widget("list", "SelectedItems", ["a"])
    backend.snapshot()["list"]["SelectedItems"].append("b")
    assert backend.query_widget("list", "SelectedItems") == ["a"]


def test_set_live_ui_returns_previous(live_ui):
    replacement = MemoryLiveUI()
    assert set_live_ui(replacement) is live_ui
    assert get_live_ui() is replacement
    set_live_ui(live_ui)
