# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0

import numpy as np
import pandas as pd
from PfSolnEngine.basic_structures import Logger, Mat, CxVec, IntVec
from PfSolnEngine.enumerations import BusMode
from PfSolnEngine.IO.matpower.matpower_bus_definitions import bus_headers, BUS_TYPE, VM, VA
from PfSolnEngine.IO.matpower.matpower_gen_definitions import gen_headers, PG, QG
from PfSolnEngine.IO.matpower.matpower_branch_definitions import branch_headers
from PfSolnEngine.IO.matpower.matpower_load_definitions import load_headers


def _headers(n: int, headers, prefix: str):
    """
    Column names for a matrix with n columns, extra columns get a generic name
    """
    return [headers[i] if i < len(headers) else f"{prefix}{i}" for i in range(n)]


class DcPfSolutionResults:
    """
    Results of the DC power flow solution update
    """

    def __init__(self,
                 bus: Mat,
                 gen: Mat,
                 branch: Mat,
                 load: Mat,
                 Sf: CxVec,
                 St: CxVec,
                 gen_on: IntVec,
                 Sbus_gen: CxVec,
                 logger: Logger):
        """

        :param bus: updated bus matrix
        :param gen: updated generator matrix
        :param branch: updated (and maybe widened) branch matrix
        :param load: normalized load matrix (one row per bus)
        :param Sf: branch power at the "from" side (MVA)
        :param St: branch power at the "to" side (MVA)
        :param gen_on: indices of the active generators
        :param Sbus_gen: power injected at the bus of each active generator (MVA)
        :param logger: Logger
        """
        self.bus = bus
        self.gen = gen
        self.branch = branch
        self.load = load
        self.Sf = Sf
        self.St = St
        self.gen_on = gen_on
        self.Sbus_gen = Sbus_gen
        self.logger = logger

    @property
    def losses(self) -> CxVec:
        """
        Branch losses (MVA)
        """
        return self.Sf + self.St

    def get_bus_df(self) -> pd.DataFrame:
        """
        Get a DataFrame with the buses results
        :return: DataFrame
        """
        df = pd.DataFrame(data=self.bus, columns=_headers(self.bus.shape[1], bus_headers, "col"))
        df["mode"] = [BusMode.as_str(int(t)) for t in self.bus[:, BUS_TYPE]]
        return df

    def get_gen_df(self) -> pd.DataFrame:
        """
        Get a DataFrame with the generators results
        :return: DataFrame
        """
        return pd.DataFrame(data=self.gen, columns=_headers(self.gen.shape[1], gen_headers, "col"))

    def get_load_df(self) -> pd.DataFrame:
        """
        Get a DataFrame with the load of every bus
        :return: DataFrame
        """
        return pd.DataFrame(data=self.load, columns=_headers(self.load.shape[1], load_headers, "col"))

    def get_branch_df(self) -> pd.DataFrame:
        """
        Get a DataFrame with the branches results
        :return: DataFrame
        """
        df = pd.DataFrame(data=self.branch, columns=_headers(self.branch.shape[1], branch_headers, "col"))
        df["Ploss"] = self.losses.real
        df["Qloss"] = self.losses.imag
        return df

    def get_summary_df(self) -> pd.DataFrame:
        """
        Get a one row DataFrame with the system totals
        :return: DataFrame
        """
        return pd.DataFrame(data={'Vm min': [np.min(self.bus[:, VM]) if self.bus.shape[0] else 0.0],
                                  'Vm max': [np.max(self.bus[:, VM]) if self.bus.shape[0] else 0.0],
                                  'Va max': [np.max(np.abs(self.bus[:, VA])) if self.bus.shape[0] else 0.0],
                                  'Pg': [np.sum(self.gen[:, PG])],
                                  'Qg': [np.sum(self.gen[:, QG])],
                                  'Ploss': [np.sum(self.losses.real)],
                                  'Qloss': [np.sum(self.losses.imag)]})
