from cdl_fixer.contracts.artifacts import PatternRule
from cdl_fixer.domain.cdl.lines import LineStore


def test_split_drops_blank_lines():
    store = LineStore.split("a\n\n\nb\n")
    assert list(store) == ["a", "b"]
    assert store.join() == "a\nb\n"


def test_join_always_ends_with_newline():
    assert LineStore.split("a\nb").join() == "a\nb\n"


def test_empty_input_joins_to_empty():
    store = LineStore.split("")
    assert len(store) == 0
    assert store.join() == ""


def test_prepend_keeps_multiline_entry_intact():
    store = LineStore.split("a\nb\n")
    store.prepend("x\ny")
    assert len(store) == 3
    assert store[0] == "x\ny"
    assert store.join() == "x\ny\na\nb\n"


def test_replace_all_is_literal_not_regex():
    store = LineStore(["a.b", "ab"])
    changed = store.replace_all([PatternRule(".", "!")])
    assert changed == 1
    assert list(store) == ["a!b", "ab"]


def test_replace_all_non_overlapping_in_rule_order():
    store = LineStore(["aaaa"])
    store.replace_all([PatternRule("aa", "b"), PatternRule("bb", "c")])
    assert store[0] == "c"
