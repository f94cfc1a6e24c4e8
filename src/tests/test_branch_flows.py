import numpy as np

from PfSolnEngine.IO.matpower.matpower_branch_definitions import PF, QF, PT, QT, BRANCH_MIN_COLS, F_BUS, T_BUS
from PfSolnEngine.Simulations.PowerFlow.dc_solution_options import DcPfSolutionOptions
from PfSolnEngine.Simulations.PowerFlow.dc_solution_worker import (dcpfsoln, compute_branch_flows,
                                                                    widen_branch_table)


def test_branch_table_is_widened(case4):
    assert case4.branch.shape[1] == 13

    bus, gen, branch = dcpfsoln(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                                case4.Ybus, case4.Yf, case4.Yt, case4.V, case4.ref, case4.pvpq)

    assert branch.shape == (5, BRANCH_MIN_COLS)
    assert np.array_equal(branch[:, :13], case4.branch)


def test_wider_minimum_from_the_options(case4):
    options = DcPfSolutionOptions(min_branch_cols=21)
    bus, gen, branch = dcpfsoln(case4.baseMVA, case4.bus, case4.gen, case4.branch, case4.load,
                                case4.Ybus, case4.Yf, case4.Yt, case4.V, case4.ref, case4.pvpq,
                                options=options)
    assert branch.shape == (5, 21)
    assert np.all(branch[:, 17:] == 0)


def test_widen_keeps_wide_tables():
    branch = np.ones((3, 20))
    assert widen_branch_table(branch) is branch


def test_branch_flows_formula(case4):
    """
    S = V[f] * conj(Yf x V) * baseMVA for the in-service branches
    """
    branch, Sf, St = compute_branch_flows(case4.branch.copy(), case4.V, case4.Yf, case4.Yt, case4.baseMVA)

    Yf = case4.Yf.toarray()
    Yt = case4.Yt.toarray()
    f = case4.branch[:, F_BUS].astype(int)
    t = case4.branch[:, T_BUS].astype(int)

    for k in range(4):
        sf = case4.V[f[k]] * np.conj(Yf[k, :] @ case4.V) * case4.baseMVA
        st = case4.V[t[k]] * np.conj(Yt[k, :] @ case4.V) * case4.baseMVA
        assert np.isclose(branch[k, PF], sf.real)
        assert np.isclose(branch[k, QF], sf.imag)
        assert np.isclose(branch[k, PT], st.real)
        assert np.isclose(branch[k, QT], st.imag)
        assert np.isclose(Sf[k], sf)
        assert np.isclose(St[k], st)


def test_out_of_service_branches_have_zero_flow(case4_all_branches):
    """
    The admittances here keep the out-of-service branch, its flows must be zero anyway
    """
    case4 = case4_all_branches
    assert case4.Yf[4, :].count_nonzero() > 0

    # stale flow values from a previous run
    branch = np.hstack((case4.branch, np.full((5, 4), 99.0)))

    branch, Sf, St = compute_branch_flows(branch, case4.V, case4.Yf, case4.Yt, case4.baseMVA)

    assert np.all(branch[4, [PF, QF, PT, QT]] == 0.0)
    assert Sf[4] == 0.0
    assert St[4] == 0.0
    assert np.all(branch[:4, PF] != 99.0)


def test_branch_flows_are_idempotent(case4):
    branch1, Sf1, St1 = compute_branch_flows(case4.branch.copy(), case4.V, case4.Yf, case4.Yt, case4.baseMVA)
    branch2, Sf2, St2 = compute_branch_flows(branch1.copy(), case4.V, case4.Yf, case4.Yt, case4.baseMVA)

    assert np.allclose(branch1, branch2)
    assert np.array_equal(branch2[:, :13], case4.branch)


def test_losses_are_the_flow_sum(case4):
    """
    Branch 3 has no charging, so its active losses are positive
    """
    branch, Sf, St = compute_branch_flows(case4.branch.copy(), case4.V, case4.Yf, case4.Yt, case4.baseMVA)
    loss = Sf + St
    assert loss[3].real > 0
    assert loss[4] == 0
