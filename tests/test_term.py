from cwm.core.term import HBox, Id, Item, PushButton, Term, VBox, collect_ids, item_pairs, ui_term


def test_term_structure():
    term = PushButton(Id("ok"), "OK")
    assert term.value == "PushButton"
    assert term.params == (Id("ok"), "OK")
    assert list(term) == [Id("ok"), "OK"]
    assert repr(term) == "PushButton(id('ok'), 'OK')"


def test_terms_compare_by_value():
    assert HBox(Id("a")) == Term("HBox", Term("id", "a"))
    assert HBox(Id("a")) != VBox(Id("a"))


def test_collect_ids_ignores_leaves():
    assert collect_ids("plain text") == []
    assert collect_ids(HBox("a", 1, None)) == []


def test_collect_ids_in_order_without_duplicates():
    tree = VBox(
        HBox(PushButton(Id("reset"), "Reset"), PushButton(Id("undo"), "Undo")),
        PushButton(Id("reset"), "Reset again"),
    )
    assert collect_ids(tree) == ["reset", "undo"]


def test_collect_ids_includes_root():
    assert collect_ids(Id("root")) == ["root"]


def test_custom_tag():
    frame = ui_term("Frame")
    assert frame("Title").value == "Frame"


def test_item_pairs_accepts_terms_and_tuples():
    items = [Item(Id("a"), "A"), ("b", "B")]
    assert item_pairs(items) == [("a", "A"), ("b", "B")]
    assert item_pairs(None) == []
