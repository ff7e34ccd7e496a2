from cdl_fixer.domain.cdl.lines import LineStore
from cdl_fixer.domain.cdl.pininfo import annotate_pininfo, build_pininfo_line, subckt_name


def test_build_pininfo_line(inv_modules):
    assert build_pininfo_line(inv_modules["inv"]) == "*.PININFO A:I Y:O VDD:B"


def test_subckt_name():
    assert subckt_name(".SUBCKT inv A Y VDD") == "inv"
    assert subckt_name(".SUBCKT") is None
    assert subckt_name("X1 a b inv") is None


def test_pininfo_inserted_after_subckt(inv_modules):
    store = LineStore([".SUBCKT inv A Y VDD", "M1 Y A VDD VDD pch", ".ENDS"])
    assert annotate_pininfo(store, inv_modules) == 1
    assert list(store) == [
        ".SUBCKT inv A Y VDD",
        "*.PININFO A:I Y:O VDD:B",
        "M1 Y A VDD VDD pch",
        ".ENDS",
    ]


def test_existing_pininfo_is_overwritten(inv_modules):
    store = LineStore([".SUBCKT inv A Y VDD", "*.PININFO A:B Y:B", ".ENDS"])
    annotate_pininfo(store, inv_modules)
    assert list(store) == [".SUBCKT inv A Y VDD", "*.PININFO A:I Y:O VDD:B", ".ENDS"]


def test_unknown_or_pinless_modules_are_untouched(inv_modules):
    lines = [".SUBCKT nand A B Y", ".ENDS", ".SUBCKT empty", ".ENDS", ".subckt inv A Y VDD", ".ENDS"]
    store = LineStore(lines)
    assert annotate_pininfo(store, inv_modules) == 0
    assert list(store) == lines


def test_subckt_on_last_line_gets_annotation(inv_modules):
    store = LineStore([".SUBCKT inv A Y VDD"])
    annotate_pininfo(store, inv_modules)
    assert list(store) == [".SUBCKT inv A Y VDD", "*.PININFO A:I Y:O VDD:B"]


def test_every_matching_subckt_is_annotated(inv_modules):
    store = LineStore([".SUBCKT inv A Y VDD", ".ENDS", ".SUBCKT inv A Y VDD", ".ENDS"])
    assert annotate_pininfo(store, inv_modules) == 2
    assert store[1] == store[4] == "*.PININFO A:I Y:O VDD:B"
