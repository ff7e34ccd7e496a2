from .si_units import SI_PREFIXES, format_si, parse_si
from .lines import LineStore
from .sections import (
    NETLIST_BANNER,
    SECTION_RULES,
    ensure_present,
    generator_banner,
    inject_section_markers,
    prepend_generator_banner,
    prepend_netlist_banner,
)
from .case import CASE_RULES, normalize_case
from .geometry import DerivedLine, GeometryStats, derive_geometry, derive_line, solve_rectangle
from .pininfo import annotate_pininfo, build_pininfo_line, subckt_name
