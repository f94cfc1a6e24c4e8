# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations
import numpy as np
from typing import Union
from PfSolnEngine.basic_structures import Mat, CxVec, IntVec, get_message_summary
from PfSolnEngine.IO.matpower.matpower_bus_definitions import VM, VMAX, VMIN
from PfSolnEngine.IO.matpower.matpower_gen_definitions import QG, QMAX, QMIN
from PfSolnEngine.Simulations.driver_template import DriverTemplate
from PfSolnEngine.Simulations.PowerFlow.dc_solution_options import DcPfSolutionOptions
from PfSolnEngine.Simulations.PowerFlow.dc_solution_results import DcPfSolutionResults
from PfSolnEngine.Simulations.PowerFlow.dc_solution_worker import dc_pf_solution, AnyMat
from PfSolnEngine.Simulations.PowerFlow.load_aggregation import total_load, LoadAggregator


class DcPfSolutionDriver(DriverTemplate):
    """
    Driver that finishes a DC power flow: voltages, generator powers and branch flows
    """
    name = 'DC power flow solution update'

    def __init__(self,
                 baseMVA: float,
                 bus: Mat,
                 gen: Mat,
                 branch: Mat,
                 load: Union[Mat, None],
                 Ybus: AnyMat,
                 Yf: AnyMat,
                 Yt: AnyMat,
                 V: CxVec,
                 ref: Union[IntVec, None] = None,
                 pvpq: Union[IntVec, None] = None,
                 options: Union[DcPfSolutionOptions, None] = None,
                 load_aggregator: LoadAggregator = total_load):
        """
        DcPfSolutionDriver class constructor
        :param baseMVA: base power (MVA)
        :param bus: bus matrix
        :param gen: generator matrix
        :param branch: branch matrix
        :param load: load matrix (optional)
        :param Ybus: admittance matrix
        :param Yf: admittance matrix of the branches with their "from" bus
        :param Yt: admittance matrix of the branches with their "to" bus
        :param V: solved complex voltage vector
        :param ref: reference bus indices (optional)
        :param pvpq: non reference bus indices (optional)
        :param options: DcPfSolutionOptions (optional)
        :param load_aggregator: function (bus rows, load rows) -> Pd, Qd (optional)
        """
        DriverTemplate.__init__(self)

        self.baseMVA = baseMVA
        self.bus = bus
        self.gen = gen
        self.branch = branch
        self.load = load
        self.Ybus = Ybus
        self.Yf = Yf
        self.Yt = Yt
        self.V = V
        self.ref = ref
        self.pvpq = pvpq
        self.load_aggregator = load_aggregator

        self.options: DcPfSolutionOptions = DcPfSolutionOptions() if options is None else options

        self.results: Union[DcPfSolutionResults, None] = None

    def add_report(self) -> None:
        """
        Add a report of the results (in-place)
        """
        bus = self.results.bus
        for i in range(bus.shape[0]):
            if bus.shape[1] > VMAX and bus[i, VMAX] > 0 and bus[i, VM] > bus[i, VMAX]:
                self.logger.add_warning("Overvoltage",
                                        device=i,
                                        value=bus[i, VM],
                                        expected_value=bus[i, VMAX])
            elif bus.shape[1] > VMIN and bus[i, VM] < bus[i, VMIN]:
                self.logger.add_warning("Undervoltage",
                                        device=i,
                                        value=bus[i, VM],
                                        expected_value=bus[i, VMIN])

        gen = self.results.gen
        for i in self.results.gen_on:
            if not (gen[i, QMIN] <= gen[i, QG] <= gen[i, QMAX]):
                self.logger.add_warning("Generator Q out of bounds",
                                        device=i,
                                        value=gen[i, QG],
                                        expected_value=f"[{gen[i, QMIN]}, {gen[i, QMAX]}]")

    def run(self) -> None:
        """
        Run the solution update
        """
        self.tic()

        self.results = dc_pf_solution(baseMVA=self.baseMVA,
                                      bus0=self.bus,
                                      gen0=self.gen,
                                      branch0=self.branch,
                                      load0=self.load,
                                      Ybus=self.Ybus,
                                      Yf=self.Yf,
                                      Yt=self.Yt,
                                      V=np.asarray(self.V),
                                      ref=self.ref,
                                      pvpq=self.pvpq,
                                      options=self.options,
                                      load_aggregator=self.load_aggregator,
                                      logger=self.logger)

        self.add_report()

        self.toc()

        if self.options.verbose > 0:
            n_err, n_warn, n_info = get_message_summary(self.logger)
            print("{0}: {1} errors, {2} warnings, {3} infos".format(self.name, n_err, n_warn, n_info))
            self.logger.print()
