# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

from PfSolnEngine.enumerations import BusMode, LogSeverity
from PfSolnEngine.basic_structures import Logger, Mat, CxVec, IntVec
from PfSolnEngine.exceptions import PowerFlowError, SlackError, TableShapeError, BusIndexError
from PfSolnEngine.Topology.simulation_indices import compile_types, compile_bus_types
from PfSolnEngine.Simulations.PowerFlow.dc_solution_options import DcPfSolutionOptions
from PfSolnEngine.Simulations.PowerFlow.dc_solution_results import DcPfSolutionResults
from PfSolnEngine.Simulations.PowerFlow.dc_solution_driver import DcPfSolutionDriver
from PfSolnEngine.Simulations.PowerFlow.dc_solution_worker import (dcpfsoln, dc_pf_solution, update_bus_voltages,
                                                                    update_generators, split_reactive_power,
                                                                    fix_zero_range_generators,
                                                                    reassign_slack_power, compute_branch_flows,
                                                                    widen_branch_table, AnyMat)
from PfSolnEngine.Simulations.PowerFlow.load_aggregation import normalize_load_table, total_load, LoadAggregator


def dc_power_flow_solution(baseMVA: float,
                           bus: Mat,
                           gen: Mat,
                           branch: Mat,
                           load: Mat | None,
                           Ybus: AnyMat,
                           Yf: AnyMat,
                           Yt: AnyMat,
                           V: CxVec,
                           ref: IntVec | None = None,
                           pvpq: IntVec | None = None,
                           options: DcPfSolutionOptions | None = None,
                           load_aggregator: LoadAggregator = total_load) -> DcPfSolutionResults:
    """
    Run the DC power flow solution update
    :param baseMVA: base power (MVA)
    :param bus: bus matrix
    :param gen: generator matrix
    :param branch: branch matrix
    :param load: load matrix (may be None)
    :param Ybus: admittance matrix
    :param Yf: admittance matrix of the branches with their "from" bus
    :param Yt: admittance matrix of the branches with their "to" bus
    :param V: solved complex voltage vector
    :param ref: reference bus indices (optional)
    :param pvpq: non reference bus indices (optional)
    :param options: DcPfSolutionOptions (optional)
    :param load_aggregator: function (bus rows, load rows) -> Pd, Qd (optional)
    :return: DcPfSolutionResults
    """
    driver = DcPfSolutionDriver(baseMVA=baseMVA, bus=bus, gen=gen, branch=branch, load=load,
                                Ybus=Ybus, Yf=Yf, Yt=Yt, V=V, ref=ref, pvpq=pvpq,
                                options=options, load_aggregator=load_aggregator)
    driver.run()

    return driver.results
