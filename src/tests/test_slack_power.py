import numpy as np
import pytest

from PfSolnEngine.basic_structures import Logger
from PfSolnEngine.exceptions import SlackError
from PfSolnEngine.IO.matpower.matpower_gen_definitions import PG, GEN_BUS, GEN_STATUS
from PfSolnEngine.Simulations.PowerFlow.dc_solution_options import DcPfSolutionOptions
from PfSolnEngine.Simulations.PowerFlow.dc_solution_worker import (dcpfsoln, dc_pf_solution, reassign_slack_power,
                                                                    compute_bus_injections)


def test_slack_generators_balance_the_reference_bus(case4):
    """
    Bus 0 has two generators: the first takes the injection plus the local demand
    minus what the second one produces, which keeps its dispatch.
    """
    bus, gen, branch = dcpfsoln(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                                case4.Ybus, case4.Yf, case4.Yt, case4.V, case4.ref, case4.pvpq)

    S0 = compute_bus_injections(case4.V, case4.Ybus, np.array([0]))[0]
    Pbus = S0.real * case4.baseMVA + 20.0  # local Pd of bus 0

    assert gen[1, PG] == case4.gen[1, PG]
    assert np.isclose(gen[0, PG], Pbus - 30.0)
    assert np.isclose(gen[0, PG] + gen[1, PG], Pbus)

    # the other generators keep their active power
    assert np.array_equal(gen[2:, PG], case4.gen[2:, PG])


def test_single_slack_generator():
    gen = np.zeros((1, 10))
    gen[0, PG] = 100.0
    Sbus = np.array([0.5 + 0.1j])

    reassign_slack_power(gen=gen, on=np.array([0]), gbus=np.array([0]), ref=np.array([0]),
                         Sbus=Sbus, Pd_gbus=np.array([15.0]), baseMVA=100.0)

    assert np.isclose(gen[0, PG], 65.0)


def test_reference_bus_compiled_from_bus_types(case4):
    """
    Without ref and pvpq the reference buses come from the bus types
    """
    res1 = dc_pf_solution(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                          case4.Ybus, case4.Yf, case4.Yt, case4.V, case4.ref, case4.pvpq)
    res2 = dc_pf_solution(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                          case4.Ybus, case4.Yf, case4.Yt, case4.V)

    assert np.allclose(res1.gen, res2.gen)


def test_reference_bus_without_generation_raises(case4):
    """
    Bus 2 is a PQ bus, its generator does not count as active
    """
    with pytest.raises(SlackError):
        dcpfsoln(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                 case4.Ybus, case4.Yf, case4.Yt, case4.V, np.array([2]), np.array([0, 1, 3]))


def test_reference_bus_without_generation_is_logged(case4):
    options = DcPfSolutionOptions(strict_slack=False)
    logger = Logger()

    res = dc_pf_solution(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                         case4.Ybus, case4.Yf, case4.Yt, case4.V, np.array([2]), np.array([0, 1, 3]),
                         options=options, logger=logger)

    assert logger.error_count() == 1
    assert np.array_equal(res.gen[:, PG], case4.gen[:, PG])


def test_slack_error_message():
    e = SlackError(bus_idx=4)
    assert e.bus_idx == 4
    assert "bus 4" in str(e)


def test_off_line_generator_at_the_reference_bus_is_ignored(case4):
    case4.gen[1, GEN_STATUS] = 0
    assert case4.gen[1, GEN_BUS] == 0

    bus, gen, branch = dcpfsoln(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                                case4.Ybus, case4.Yf, case4.Yt, case4.V, case4.ref, case4.pvpq)

    S0 = compute_bus_injections(case4.V, case4.Ybus, np.array([0]))[0]
    assert np.isclose(gen[0, PG], S0.real * case4.baseMVA + 20.0)
