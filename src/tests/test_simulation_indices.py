import numpy as np

from PfSolnEngine.enumerations import BusMode
from PfSolnEngine.Topology.simulation_indices import compile_types, compile_bus_types, get_generator_indices
from PfSolnEngine.Topology.topology import get_C_elm_bus, dev_per_bus


def test_compile_types():
    types = np.array([3, 2, 1, 2, 4], dtype=np.int64)
    ref, pq, pv, pvpq = compile_types(types, 1, 2, 3)

    assert np.array_equal(ref, [0])
    assert np.array_equal(pq, [2])
    assert np.array_equal(pv, [1, 3])
    assert np.array_equal(pvpq, [1, 2, 3])


def test_compile_bus_types(case4):
    ref, pq, pv, pvpq = compile_bus_types(case4.bus)
    assert np.array_equal(ref, case4.ref)
    assert np.array_equal(pvpq, case4.pvpq)


def test_generator_indices(case4):
    on, off = get_generator_indices(case4.gen, case4.bus)
    assert np.array_equal(on, [0, 1, 2, 3, 4])
    assert np.array_equal(off, [5])


def test_generator_connectivity():
    gbus = np.array([3, 3, 0, 1])
    Cg = get_C_elm_bus(4, gbus)
    assert Cg.shape == (4, 4)
    assert np.array_equal(np.asarray(Cg.sum(axis=0)).ravel(), [1, 1, 0, 2])
    assert np.array_equal(dev_per_bus(4, gbus), [1, 1, 0, 2])


def test_bus_mode_names():
    assert BusMode.as_str(BusMode.Slack_tpe.value) == "Slack"
    assert BusMode.as_str(9) == ""
    assert str(BusMode.PV_tpe) == "2"
    assert BusMode.argparse("PQ_tpe") == BusMode.PQ_tpe
