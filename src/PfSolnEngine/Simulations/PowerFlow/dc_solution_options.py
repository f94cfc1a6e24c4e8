# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

from typing import Dict, Any
from PfSolnEngine.Simulations.options_template import OptionsTemplate
from PfSolnEngine.IO.matpower.matpower_branch_definitions import BRANCH_MIN_COLS

# machine epsilon used by the reactive power split
EPS = 2.2204e-16


class DcPfSolutionOptions(OptionsTemplate):
    """
    DC power flow solution update options
    """

    def __init__(self,
                 eps: float = EPS,
                 zero_range_factor: float = 10.0,
                 min_branch_cols: int = BRANCH_MIN_COLS,
                 update_angles: bool = False,
                 strict_slack: bool = True,
                 verbose: int = 0):
        """
        DC power flow solution update options
        :param eps: small value added to the denominator of the proportional reactive power split
        :param zero_range_factor: a bus has a zero reactive range when |Qmax - Qmin| < zero_range_factor * eps
        :param min_branch_cols: minimum number of columns of the branch matrix (it is widened if smaller)
        :param update_angles: write the voltage angles (degrees) too, besides the voltage modules
        :param strict_slack: if True, a reference bus without active generators raises SlackError,
                             otherwise it is logged and skipped
        :param verbose: Print additional details in the console (0: no details, 1: some details)
        """
        OptionsTemplate.__init__(self, name='DcPfSolutionOptions')

        self.eps = eps

        self.zero_range_factor = zero_range_factor

        self.min_branch_cols = min_branch_cols

        self.update_angles = update_angles

        self.strict_slack = strict_slack

        self.verbose = verbose

        self.register(key="eps", tpe=float, definition="Reactive split denominator guard")
        self.register(key="zero_range_factor", tpe=float, definition="Zero reactive range threshold in eps units")
        self.register(key="min_branch_cols", tpe=int, definition="Minimum number of branch matrix columns")
        self.register(key="update_angles", tpe=bool, definition="Write the voltage angles")
        self.register(key="strict_slack", tpe=bool, definition="Fail on reference buses without generation")
        self.register(key="verbose", tpe=int, definition="Console verbosity")

    @property
    def zero_range_tol(self) -> float:
        """
        Tolerance under which the reactive range of a bus is considered zero
        :return: float
        """
        return self.zero_range_factor * self.eps

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "DcPfSolutionOptions":
        """
        Build the options from a dictionary
        :param data: Dict[property name, value]
        :return: DcPfSolutionOptions
        """
        options = DcPfSolutionOptions()
        options.parse_dict(data)
        return options
