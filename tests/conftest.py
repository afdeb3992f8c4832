"""Shared test fixtures for stone profile tests."""
import pytest
from stone.edges import EdgeType
from stone.params import ParameterSet
from stone.section import build_cross_section


# Reference stone: 1000 long, 700 wide, 100 slab, 150 × 200 lip, Tr = 50
_REF = dict(length=1000.0, width=700.0, thickness=100.0,
            lip_width=150.0, lip_height=200.0, edge_depth=50.0, quantity=1)


@pytest.fixture(scope="session")
def chamfer_params():
    return ParameterSet(**_REF, edge_type=EdgeType.CHAMFER)


@pytest.fixture(scope="session")
def bullnose_params():
    return ParameterSet(**_REF, edge_type=EdgeType.BULLNOSE)


@pytest.fixture(scope="session")
def sharp_params(chamfer_params):
    """Reference stone with no edge treatment."""
    return chamfer_params._replace(edge_depth=0.0)


@pytest.fixture(scope="session")
def sharp_section(sharp_params):
    return build_cross_section(sharp_params)


@pytest.fixture(scope="session")
def chamfer_section(chamfer_params):
    return build_cross_section(chamfer_params)


@pytest.fixture(scope="session")
def bullnose_section(bullnose_params):
    return build_cross_section(bullnose_params)
