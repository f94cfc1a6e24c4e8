# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

from typing import Tuple, Union
import numpy as np
import scipy.sparse as sp
from PfSolnEngine.basic_structures import Logger, Mat, Vec, CxVec, IntVec, CscMat
from PfSolnEngine.exceptions import TableShapeError, BusIndexError, SlackError
from PfSolnEngine.IO.matpower.matpower_bus_definitions import BUS_TYPE, VM, VA
from PfSolnEngine.IO.matpower.matpower_gen_definitions import GEN_BUS, PG, QG, QMAX, QMIN, GEN_STATUS
from PfSolnEngine.IO.matpower.matpower_branch_definitions import (F_BUS, T_BUS, BR_STATUS, PF, QF, PT, QT,
                                                                   BRANCH_MIN_COLS)
from PfSolnEngine.Topology.topology import get_C_elm_bus, dev_per_bus
from PfSolnEngine.Topology.simulation_indices import compile_bus_types, get_generator_indices
from PfSolnEngine.Simulations.PowerFlow.dc_solution_options import DcPfSolutionOptions, EPS
from PfSolnEngine.Simulations.PowerFlow.dc_solution_results import DcPfSolutionResults
from PfSolnEngine.Simulations.PowerFlow.load_aggregation import normalize_load_table, total_load, LoadAggregator

AnyMat = Union[CscMat, sp.csr_matrix, Mat]


def check_dimensions(bus: Mat, gen: Mat, branch: Mat, Ybus: AnyMat, Yf: AnyMat, Yt: AnyMat, V: CxVec) -> None:
    """
    Check that the tables, the admittance matrices and the voltage agree in size,
    and that every bus reference exists.
    Raises TableShapeError or BusIndexError otherwise.
    """
    nbus = bus.shape[0]
    nbr = branch.shape[0]

    if V.ndim != 1 or V.shape[0] != nbus:
        raise TableShapeError(name="voltage vector", found=V.shape, expected=(nbus,))

    if bus.ndim != 2 or bus.shape[1] <= max(BUS_TYPE, VM, VA):
        raise TableShapeError(name="bus columns", found=bus.shape, expected=max(BUS_TYPE, VM, VA) + 1)

    if Ybus.shape != (nbus, nbus):
        raise TableShapeError(name="Ybus", found=Ybus.shape, expected=(nbus, nbus))

    if Yf.shape != (nbr, nbus):
        raise TableShapeError(name="Yf", found=Yf.shape, expected=(nbr, nbus))

    if Yt.shape != (nbr, nbus):
        raise TableShapeError(name="Yt", found=Yt.shape, expected=(nbr, nbus))

    if gen.ndim != 2 or gen.shape[1] <= max(GEN_BUS, PG, QG, QMAX, QMIN, GEN_STATUS):
        raise TableShapeError(name="generator columns", found=gen.shape, expected=GEN_STATUS + 1)

    if branch.ndim != 2 or branch.shape[1] <= BR_STATUS:
        raise TableShapeError(name="branch columns", found=branch.shape, expected=BR_STATUS + 1)

    for name, idx in [("generators", gen[:, GEN_BUS]),
                      ("branches 'from'", branch[:, F_BUS]),
                      ("branches 'to'", branch[:, T_BUS])]:
        idx = idx.astype(int)
        wrong = np.where((idx < 0) | (idx >= nbus))[0]
        if len(wrong):
            raise BusIndexError(name=name, indices=idx[wrong], nbus=nbus)


def update_bus_voltages(bus: Mat, V: CxVec, update_angles: bool = False) -> Mat:
    """
    Write the voltage solution in the bus matrix (in-place)
    :param bus: bus matrix
    :param V: solved complex voltage vector
    :param update_angles: also write the voltage angles in degrees
    :return: the same bus matrix
    """
    if V.shape[0] != bus.shape[0]:
        raise TableShapeError(name="voltage vector", found=V.shape[0], expected=bus.shape[0])

    bus[:, VM] = np.abs(V)

    if update_angles:
        bus[:, VA] = np.angle(V, deg=True)

    return bus


def compute_bus_injections(V: CxVec, Ybus: AnyMat, bus_idx: IntVec) -> CxVec:
    """
    Complex power injected at the given buses (p.u.)
    S = V * conj(Ybus x V), only for the rows in bus_idx (they may repeat)
    :param V: complex voltage vector
    :param Ybus: admittance matrix
    :param bus_idx: bus indices
    :return: complex power array of size len(bus_idx)
    """
    if len(bus_idx) == 0:
        return np.zeros(0, dtype=complex)

    return V[bus_idx] * np.conj(Ybus[bus_idx, :] @ V)


def fix_zero_range_generators(Qg: Vec,
                              Qmin: Vec,
                              gbus: IntVec,
                              nbus: int,
                              Qg_tot: Vec,
                              Qg_min: Vec,
                              Qg_max: Vec,
                              tol: float = 10.0 * EPS,
                              logger: Logger | None = None) -> Tuple[Vec, bool]:
    """
    Equal violation for the generators sharing a bus whose total reactive range is zero:
    every generator at such bus gets its own minimum plus an equal part of the bus mismatch.
    The correction never raises, if it cannot be computed the input values are returned
    and the issue is reported to the logger.
    :param Qg: reactive power of the active generators after the proportional split (MVAr)
    :param Qmin: minimum reactive power of the active generators, infinite values replaced (MVAr)
    :param gbus: bus index of each active generator
    :param nbus: number of buses
    :param Qg_tot: total reactive power per bus (MVAr)
    :param Qg_min: total minimum reactive power per bus (MVAr)
    :param Qg_max: total maximum reactive power per bus (MVAr)
    :param tol: the range of a bus is zero if |Qg_max - Qg_min| < tol
    :param logger: Logger
    :return: corrected Qg, was any generator corrected?
    """
    try:
        ngen_bus = dev_per_bus(nbus, gbus)

        # buses with Qg range = 0, only those shared among several generators
        ib = np.where((ngen_bus > 1) & (np.abs(Qg_max - Qg_min) < tol))[0]

        if len(ib) == 0:
            return Qg, False

        # gens at buses with Qg range = 0, each generator appears once
        ig = np.where(np.isin(gbus, ib))[0]

        # total mismatch @ bus div by number of gens
        mis = np.zeros(nbus)
        mis[ib] = (Qg_tot[ib] - Qg_min[ib]) / ngen_bus[ib]

        Qg2 = Qg.copy()
        Qg2[ig] = Qmin[ig] + mis[gbus[ig]]

        return Qg2, True

    except Exception as e:
        if logger is not None:
            logger.add_warning("Error in the correction of the zero reactive range buses",
                               value=str(e), device_class="Generator", device_property="Qg")
        return Qg, False


def split_reactive_power(Qg: Vec,
                         Qmin: Vec,
                         Qmax: Vec,
                         gbus: IntVec,
                         nbus: int,
                         eps: float = EPS,
                         zero_range_tol: float = 10.0 * EPS,
                         logger: Logger | None = None) -> Vec:
    """
    Split the reactive power of every bus among its active generators, proportionally to their range.
    :param Qg: reactive power of the bus of each active generator (bus total, MVAr)
    :param Qmin: minimum reactive power of each active generator (MVAr), may be -inf
    :param Qmax: maximum reactive power of each active generator (MVAr), may be +inf
    :param gbus: bus index of each active generator
    :param nbus: number of buses
    :param eps: guard added to the split denominator
    :param zero_range_tol: tolerance under which a bus reactive range is zero
    :param logger: Logger
    :return: reactive power of each active generator (MVAr)
    """
    # connection matrix, element i, j is 1 if active generator i is at bus j
    Cg = get_C_elm_bus(nbus, gbus)

    # number of generators at the bus of each generator
    ngg = Cg @ np.asarray(Cg.sum(axis=0)).ravel()

    # divide Qg by the number of generators at the bus to distribute equally
    Qg = Qg / ngg

    # finite proxy M for infinite limits (for ~ proportional splitting)
    # equal to sum over all gens at bus of abs(Qg) plus any finite Q limits
    M = np.abs(Qg)
    fin_max = ~np.isinf(Qmax)
    fin_min = ~np.isinf(Qmin)
    M[fin_max] += np.abs(Qmax[fin_max])
    M[fin_min] += np.abs(Qmin[fin_min])
    M = Cg @ (Cg.T @ M)

    # replace +/- Inf limits with proxy +/- M
    Qmin = Qmin.copy()
    Qmax = Qmax.copy()
    Qmin[Qmin == np.inf] = M[Qmin == np.inf]
    Qmin[Qmin == -np.inf] = -M[Qmin == -np.inf]
    Qmax[Qmax == np.inf] = M[Qmax == np.inf]
    Qmax[Qmax == -np.inf] = -M[Qmax == -np.inf]

    # totals per bus
    Qg_tot = Cg.T @ Qg
    Qg_min = Cg.T @ Qmin
    Qg_max = Cg.T @ Qmax

    # divide proportionally
    Qg_split = Qmin + (Cg @ ((Qg_tot - Qg_min) / (Qg_max - Qg_min + eps))) * (Qmax - Qmin)

    # generators alone at their bus keep the bus value
    Qg_split = np.where(ngg > 1, Qg_split, Qg)

    Qg_split, _ = fix_zero_range_generators(Qg=Qg_split,
                                            Qmin=Qmin,
                                            gbus=gbus,
                                            nbus=nbus,
                                            Qg_tot=Qg_tot,
                                            Qg_min=Qg_min,
                                            Qg_max=Qg_max,
                                            tol=zero_range_tol,
                                            logger=logger)

    return Qg_split


def reassign_slack_power(gen: Mat,
                         on: IntVec,
                         gbus: IntVec,
                         ref: IntVec,
                         Sbus: CxVec,
                         Pd_gbus: Vec,
                         baseMVA: float,
                         strict: bool = True,
                         logger: Logger | None = None) -> Mat:
    """
    Set the active power of the generators at the reference buses (in-place).
    The first active generator at each reference bus takes the injected power plus the local demand
    minus what the other active generators at the same bus produce.
    :param gen: generator matrix
    :param on: indices of the active generators
    :param gbus: bus of each active generator
    :param ref: reference bus indices
    :param Sbus: complex power injected at the bus of each active generator (p.u.)
    :param Pd_gbus: local active demand at the bus of each active generator (MW)
    :param baseMVA: base power (MVA)
    :param strict: raise SlackError if a reference bus has no active generator, otherwise log it
    :param logger: Logger
    :return: the same generator matrix
    """
    for r in ref:
        refgen = np.where(gbus == r)[0]  # which is(are) the reference gen(s)?

        if len(refgen) == 0:
            if strict:
                raise SlackError(bus_idx=int(r), message="No active generator at the reference bus")
            if logger is not None:
                logger.add_error("No active generator at the reference bus", device=int(r), device_class="Bus")
            continue

        k = on[refgen[0]]
        gen[k, PG] = Sbus[refgen[0]].real * baseMVA + Pd_gbus[refgen[0]]  # inj P + local Pd

        if len(refgen) > 1:
            # subtract off what is generated by other gens at this bus
            gen[k, PG] -= np.sum(gen[on[refgen[1:]], PG])

    return gen


def update_generators(gen: Mat,
                      bus: Mat,
                      load: Mat,
                      Ybus: AnyMat,
                      V: CxVec,
                      ref: IntVec,
                      baseMVA: float,
                      options: DcPfSolutionOptions,
                      load_aggregator: LoadAggregator = total_load,
                      logger: Logger | None = None) -> Tuple[Mat, IntVec, CxVec]:
    """
    Update Qg for the generators at PV/slack buses and Pg for the slack bus(es) (in-place)
    :param gen: generator matrix
    :param bus: bus matrix with the voltages already updated
    :param load: normalized load matrix (one row per bus)
    :param Ybus: admittance matrix
    :param V: complex voltage vector
    :param ref: reference bus indices
    :param baseMVA: base power (MVA)
    :param options: DcPfSolutionOptions
    :param load_aggregator: function (bus rows, load rows) -> Pd, Qd
    :param logger: Logger
    :return: generator matrix, active generator indices, complex power at their buses (p.u.)
    """
    on, off = get_generator_indices(gen, bus)
    gbus = gen[on, GEN_BUS].astype(int)

    # zero out off-line Qg
    gen[off, QG] = 0.0

    # compute total injected bus powers
    Sbus = compute_bus_injections(V, Ybus, gbus)

    Pd_gbus, Qd_gbus = load_aggregator(bus[gbus, :], load[gbus, :])

    # inj Q + local Qd
    gen[on, QG] = Sbus.imag * baseMVA + Qd_gbus

    if len(on) > 1:
        gen[on, QG] = split_reactive_power(Qg=gen[on, QG],
                                           Qmin=gen[on, QMIN],
                                           Qmax=gen[on, QMAX],
                                           gbus=gbus,
                                           nbus=bus.shape[0],
                                           eps=options.eps,
                                           zero_range_tol=options.zero_range_tol,
                                           logger=logger)

    reassign_slack_power(gen=gen,
                         on=on,
                         gbus=gbus,
                         ref=ref,
                         Sbus=Sbus,
                         Pd_gbus=Pd_gbus,
                         baseMVA=baseMVA,
                         strict=options.strict_slack,
                         logger=logger)

    return gen, on, Sbus


def widen_branch_table(branch: Mat, ncols: int = BRANCH_MIN_COLS) -> Mat:
    """
    Append zero columns to the branch matrix until it has at least ncols columns
    :param branch: branch matrix
    :param ncols: minimum number of columns
    :return: branch matrix (the same object if it was wide enough)
    """
    rows, cols = branch.shape
    cols_to_add = ncols - cols
    if cols_to_add > 0:
        branch = np.hstack((branch, np.zeros((rows, cols_to_add))))
    return branch


def compute_branch_flows(branch: Mat,
                         V: CxVec,
                         Yf: AnyMat,
                         Yt: AnyMat,
                         baseMVA: float,
                         min_cols: int = BRANCH_MIN_COLS) -> Tuple[Mat, CxVec, CxVec]:
    """
    Compute the branch power flows and store them in the branch matrix
    :param branch: branch matrix (it is widened if needed)
    :param V: complex voltage vector
    :param Yf: admittance matrix of the branches with their "from" bus
    :param Yt: admittance matrix of the branches with their "to" bus
    :param baseMVA: base power (MVA)
    :param min_cols: minimum number of columns of the branch matrix
    :return: branch matrix, Sf (MVA), St (MVA)
    """
    nbr = branch.shape[0]
    out = np.where(branch[:, BR_STATUS] <= 0)[0]  # out-of-service branches
    br = np.where(branch[:, BR_STATUS] > 0)[0]  # in-service branches

    Sf = np.zeros(nbr, dtype=complex)
    St = np.zeros(nbr, dtype=complex)

    if len(br):
        f = branch[br, F_BUS].astype(int)
        t = branch[br, T_BUS].astype(int)
        Sf[br] = V[f] * np.conj(Yf[br, :] @ V) * baseMVA  # complex power at "from" bus
        St[br] = V[t] * np.conj(Yt[br, :] @ V) * baseMVA  # complex power injected at "to" bus

    branch = widen_branch_table(branch, max(min_cols, BRANCH_MIN_COLS))

    branch[br, PF] = Sf[br].real
    branch[br, QF] = Sf[br].imag
    branch[br, PT] = St[br].real
    branch[br, QT] = St[br].imag
    branch[np.ix_(out, [PF, QF, PT, QT])] = 0.0

    return branch, Sf, St


def dc_pf_solution(baseMVA: float,
                   bus0: Mat,
                   gen0: Mat,
                   branch0: Mat,
                   load0: Mat | None,
                   Ybus: AnyMat,
                   Yf: AnyMat,
                   Yt: AnyMat,
                   V: CxVec,
                   ref: IntVec | None = None,
                   pvpq: IntVec | None = None,
                   options: DcPfSolutionOptions | None = None,
                   load_aggregator: LoadAggregator = total_load,
                   logger: Logger | None = None) -> DcPfSolutionResults:
    """
    Update the power system state after a DC power flow solution.
    The input matrices are not modified.
    :param baseMVA: base power (MVA)
    :param bus0: bus matrix
    :param gen0: generator matrix
    :param branch0: branch matrix
    :param load0: load matrix (may be None)
    :param Ybus: admittance matrix
    :param Yf: admittance matrix of the branches with their "from" bus
    :param Yt: admittance matrix of the branches with their "to" bus
    :param V: solved complex voltage vector
    :param ref: reference bus indices (compiled from the bus types if None)
    :param pvpq: non reference bus indices (compiled from the bus types if None)
    :param options: DcPfSolutionOptions
    :param load_aggregator: function (bus rows, load rows) -> Pd, Qd
    :param logger: Logger
    :return: DcPfSolutionResults
    """
    if options is None:
        options = DcPfSolutionOptions()

    if logger is None:
        logger = Logger()

    V = np.asarray(V, dtype=complex)
    bus = np.array(bus0, dtype=float)
    gen = np.array(gen0, dtype=float)
    branch = np.array(branch0, dtype=float)

    check_dimensions(bus=bus, gen=gen, branch=branch, Ybus=Ybus, Yf=Yf, Yt=Yt, V=V)

    nbus = bus.shape[0]
    if ref is None or pvpq is None:
        ref_c, pq, pv, pvpq_c = compile_bus_types(bus)
        ref = ref_c if ref is None else ref
        pvpq = pvpq_c if pvpq is None else pvpq

    ref = np.asarray(ref, dtype=int)
    pvpq = np.asarray(pvpq, dtype=int)
    wrong = ref[(ref < 0) | (ref >= nbus)]
    if len(wrong):
        raise BusIndexError(name="reference buses", indices=wrong, nbus=nbus)

    overlap = np.intersect1d(ref, pvpq)
    if len(overlap):
        logger.add_warning("Reference buses also listed as non-reference buses", device=overlap.tolist(),
                           device_class="Bus")

    load = normalize_load_table(nbus, load0)

    # update bus voltages
    update_bus_voltages(bus, V, update_angles=options.update_angles)

    # update Qg for gens at PV/slack buses and Pg for slack bus(es)
    gen, gen_on, Sbus_gen = update_generators(gen=gen,
                                              bus=bus,
                                              load=load,
                                              Ybus=Ybus,
                                              V=V,
                                              ref=ref,
                                              baseMVA=baseMVA,
                                              options=options,
                                              load_aggregator=load_aggregator,
                                              logger=logger)

    # update/compute branch power flows
    branch, Sf, St = compute_branch_flows(branch=branch,
                                          V=V,
                                          Yf=Yf,
                                          Yt=Yt,
                                          baseMVA=baseMVA,
                                          min_cols=options.min_branch_cols)

    return DcPfSolutionResults(bus=bus,
                               gen=gen,
                               branch=branch,
                               load=load,
                               Sf=Sf,
                               St=St,
                               gen_on=gen_on,
                               Sbus_gen=Sbus_gen * baseMVA,
                               logger=logger)


def dcpfsoln(baseMVA: float,
             bus0: Mat,
             gen0: Mat,
             branch0: Mat,
             load0: Mat | None,
             Ybus: AnyMat,
             Yf: AnyMat,
             Yt: AnyMat,
             V: CxVec,
             ref: IntVec | None = None,
             pvpq: IntVec | None = None,
             options: DcPfSolutionOptions | None = None,
             load_aggregator: LoadAggregator = total_load,
             logger: Logger | None = None) -> Tuple[Mat, Mat, Mat]:
    """
    Update bus, generator and branch matrices after a DC power flow solution.
    See dc_pf_solution for the arguments.
    :return: bus, gen, branch
    """
    res = dc_pf_solution(baseMVA=baseMVA, bus0=bus0, gen0=gen0, branch0=branch0, load0=load0,
                         Ybus=Ybus, Yf=Yf, Yt=Yt, V=V, ref=ref, pvpq=pvpq, options=options,
                         load_aggregator=load_aggregator, logger=logger)
    return res.bus, res.gen, res.branch
