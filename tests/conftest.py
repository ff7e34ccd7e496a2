import pytest

from cdl_fixer.contracts.artifacts import Module, Pin
from cdl_fixer.contracts.enums import PinDirection


@pytest.fixture
def inv_modules():
    return {
        "inv": Module(
            name="inv",
            pins=(
                Pin("A", PinDirection.input),
                Pin("Y", PinDirection.output),
                Pin("VDD", PinDirection.inout),
            ),
        ),
        "empty": Module(name="empty", pins=()),
    }


@pytest.fixture
def inv_netlist():
    return "\n".join(
        [
            ".SUBCKT inv A Y VDD",
            "M1 Y A VDD VDD pch W=2u L=180n FINGERS=2",
            ".ENDS",
        ]
    ) + "\n"
