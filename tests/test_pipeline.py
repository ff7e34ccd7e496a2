from cdl_fixer.config import FixerConfig
from cdl_fixer.domain.cdl.sections import SECTION_RULES
from cdl_fixer.pipeline import fix_cdl_text, load_module_table


def test_full_pipeline_output_layout(inv_netlist, inv_modules):
    out = fix_cdl_text(inv_netlist, modules=inv_modules)
    lines = out.splitlines()

    assert out.startswith("*" * 72 + "\n* Generated by cdl_fixer\n")
    markers = [rule.replacement for rule in SECTION_RULES]
    positions = [lines.index(m) for m in markers]
    assert positions == sorted(positions, reverse=True)
    assert lines.index(".PARAM") < lines.index("* CDL netlist") < lines.index(".SUBCKT inv A Y VDD")

    subckt = lines.index(".SUBCKT inv A Y VDD")
    assert lines[subckt + 1] == "*.PININFO A:I Y:O VDD:B"
    assert lines[subckt + 2] == "M1 Y A VDD VDD pch w=2u l=180n fingers=2 fw=1u"
    assert out.endswith(".ENDS\n")


def test_existing_marker_survives_once():
    out = fix_cdl_text(".PARAM vdd=1.8\nR1 a b R=1k\n")
    lines = out.splitlines()
    assert [line for line in lines if line.startswith(".PARAM")] == [".PARAM vdd=1.8"]
    assert "R1 a b r=1k" in lines


def test_geometry_depends_on_case_conversion(inv_netlist):
    out = fix_cdl_text(inv_netlist, FixerConfig(case_conversion=False))
    assert "M1 Y A VDD VDD pch W=2u L=180n FINGERS=2" in out.splitlines()


def test_no_param_still_writes_banners(inv_netlist):
    out = fix_cdl_text(inv_netlist, FixerConfig(param=False))
    lines = out.splitlines()
    assert "* CDL netlist" in lines
    assert "* Generated by cdl_fixer" in lines
    assert "*.MEGA" not in lines


def test_missing_module_file_disables_annotation(tmp_path, inv_netlist):
    cfg = FixerConfig(soc_module=tmp_path / "missing.soc_mod")
    out = fix_cdl_text(inv_netlist, cfg)
    assert "*.PININFO" not in out


def test_module_file_from_config(tmp_path, inv_netlist):
    path = tmp_path / "inv.soc_mod"
    path.write_text("inv:\n    A:\n      direction: in\n    Y:\n      direction: out\n")
    assert load_module_table(path)["inv"].pins[0].name == "A"

    out = fix_cdl_text(inv_netlist, FixerConfig(soc_module=path))
    assert "*.PININFO A:I Y:O" in out.splitlines()


def test_blank_lines_vanish():
    out = fix_cdl_text("R1 a b 1k\n\n\nR2 b c 2k", FixerConfig(param=False))
    body = out.split("* CDL netlist\n", 1)[1]
    assert body.endswith("R1 a b 1k\nR2 b c 2k\n")
