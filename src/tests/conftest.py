from pathlib import Path
from types import SimpleNamespace

import numpy as np
import scipy.sparse as sp
import pytest

from PfSolnEngine.IO.matpower.matpower_bus_definitions import PQ, PV, REF
from PfSolnEngine.IO.matpower.matpower_branch_definitions import F_BUS, T_BUS, BR_R, BR_X, BR_B, TAP, SHIFT, BR_STATUS
from PfSolnEngine.IO.matpower.matpower_bus_definitions import GS, BS

ROOT_PATH = Path(__file__).parent

INF = np.inf


@pytest.fixture
def root_path():
    return ROOT_PATH


def build_admittances(baseMVA, bus, branch, use_status=True):
    """
    Build Ybus, Yf and Yt of a case with the usual pi model of the branches
    :param baseMVA: base power
    :param bus: bus matrix
    :param branch: branch matrix
    :param use_status: if False, the out of service branches are kept in the matrices
    :return: Ybus, Yf, Yt (CSC)
    """
    nbus = bus.shape[0]
    nbr = branch.shape[0]
    f = branch[:, F_BUS].astype(int)
    t = branch[:, T_BUS].astype(int)
    stat = branch[:, BR_STATUS] if use_status else np.ones(nbr)

    Cf = sp.csc_matrix((np.ones(nbr), (np.arange(nbr), f)), shape=(nbr, nbus))
    Ct = sp.csc_matrix((np.ones(nbr), (np.arange(nbr), t)), shape=(nbr, nbus))

    ys = stat / (branch[:, BR_R] + 1j * branch[:, BR_X])
    bc = stat * branch[:, BR_B]
    tap = np.ones(nbr)
    tap[branch[:, TAP] != 0] = branch[branch[:, TAP] != 0, TAP]
    tap = tap * np.exp(1j * np.pi / 180.0 * branch[:, SHIFT])

    Ytt = ys + 1j * bc / 2.0
    Yff = Ytt / (tap * np.conj(tap))
    Yft = -ys / np.conj(tap)
    Ytf = -ys / tap

    Yf = sp.diags(Yff) @ Cf + sp.diags(Yft) @ Ct
    Yt = sp.diags(Ytf) @ Cf + sp.diags(Ytt) @ Ct
    Ysh = (bus[:, GS] + 1j * bus[:, BS]) / baseMVA
    Ybus = Cf.T @ Yf + Ct.T @ Yt + sp.diags(Ysh)

    return sp.csc_matrix(Ybus), sp.csc_matrix(Yf), sp.csc_matrix(Yt)


def make_case4():
    """
    Four bus case:
        bus 0: slack with two generators
        bus 1: PV with one active generator and one off-line generator
        bus 2: PQ with a generator that is on (not active for the update)
        bus 3: PV with two generators, one unlimited and one limited to [-50, 50] MVAr
    Branch 4 is out of service
    """
    baseMVA = 100.0

    #                 i  type  Pd   Qd  Gs  Bs  area Vm   Va  kV   zone Vmax Vmin
    bus = np.array([[0, REF, 0.0, 0.0, 0.0, 0.0, 1, 1.0, 0.0, 230, 1, 1.1, 0.9],
                    [1, PV, 0.0, 0.0, 0.0, 0.0, 1, 1.0, 0.0, 230, 1, 1.1, 0.9],
                    [2, PQ, 0.0, 0.0, 0.0, 5.0, 1, 1.0, 0.0, 230, 1, 1.1, 0.9],
                    [3, PV, 0.0, 0.0, 0.0, 0.0, 1, 1.0, 0.0, 230, 1, 1.1, 0.9]], dtype=float)

    gen = np.zeros((7, 21))
    #            bus  Pg     Qg    Qmax   Qmin  Vg  mBase status
    gen[0, :8] = [0, 0.0, 0.0, 300.0, -300.0, 1.0, 100, 1]
    gen[1, :8] = [0, 30.0, 0.0, 100.0, -100.0, 1.0, 100, 1]
    gen[2, :8] = [1, 40.0, 0.0, INF, -INF, 1.0, 100, 1]
    gen[3, :8] = [3, 20.0, 0.0, INF, -INF, 1.0, 100, 1]
    gen[4, :8] = [3, 10.0, 0.0, 50.0, -50.0, 1.0, 100, 1]
    gen[5, :8] = [1, 15.0, 12.0, 20.0, -20.0, 1.0, 100, 0]
    gen[6, :8] = [2, 5.0, 7.0, 10.0, -10.0, 1.0, 100, 1]
    gen[:, 8] = 500.0  # Pmax

    branch = np.zeros((5, 13))
    #                f  t  r     x     b     rateA rateB rateC tap shift status angmin angmax
    branch[0, :] = [0, 1, 0.01, 0.10, 0.02, 250, 250, 250, 0, 0, 1, -360, 360]
    branch[1, :] = [1, 2, 0.02, 0.20, 0.04, 250, 250, 250, 0, 0, 1, -360, 360]
    branch[2, :] = [0, 2, 0.01, 0.15, 0.03, 250, 250, 250, 0.98, 0, 1, -360, 360]
    branch[3, :] = [2, 3, 0.03, 0.25, 0.00, 250, 250, 250, 0, 0, 1, -360, 360]
    branch[4, :] = [1, 3, 0.02, 0.20, 0.01, 250, 250, 250, 0, 0, 0, -360, 360]

    #                 i  bus status  Pd    Qd  z    i    p
    load = np.array([[0, 0, 1, 20.0, 5.0, 0.0, 0.0, 0.0],
                     [1, 2, 1, 50.0, 10.0, 0.0, 0.0, 0.0],
                     [2, 3, 1, 10.0, 4.0, 0.0, 0.0, 0.0]], dtype=float)

    Vm = np.array([1.0, 1.02, 0.98, 1.01])
    Va = np.array([0.0, -0.05, -0.12, -0.08])
    V = Vm * np.exp(1j * Va)

    Ybus, Yf, Yt = build_admittances(baseMVA, bus, branch)

    return SimpleNamespace(baseMVA=baseMVA, bus=bus, gen=gen, branch=branch, load=load,
                           Ybus=Ybus, Yf=Yf, Yt=Yt, V=V,
                           ref=np.array([0]), pvpq=np.array([1, 2, 3]))


@pytest.fixture
def case4():
    return make_case4()


@pytest.fixture
def case4_all_branches(case4):
    """
    case4 with admittances that keep the out of service branch
    """
    case4.Ybus, case4.Yf, case4.Yt = build_admittances(case4.baseMVA, case4.bus, case4.branch, use_status=False)
    return case4
