# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0


class PowerFlowError(Exception):
    """Base class for exceptions in this module."""
    pass


class SlackError(PowerFlowError):
    """Exception raised when there is a problem with the slack bus in a power flow study."""
    def __init__(self, bus_idx=None, message="Invalid or undefined slack bus configuration"):
        self.bus_idx = bus_idx
        self.message = message if bus_idx is None else f"{message}: bus {bus_idx}"
        super().__init__(self.message)


class TableShapeError(PowerFlowError):
    """Exception raised when a table or array does not have the size the network requires."""
    def __init__(self, name, found, expected, message="Unexpected size"):
        self.name = name
        self.found = found
        self.expected = expected
        self.message = f"{message} of {name}: found {found}, expected {expected}"
        super().__init__(self.message)


class BusIndexError(PowerFlowError):
    """Exception raised when a table references a bus that does not exist."""
    def __init__(self, name, indices, nbus, message="Bus index out of range"):
        self.name = name
        self.indices = indices
        self.nbus = nbus
        self.message = f"{message} in {name}: {list(indices)} (there are {nbus} buses)"
        super().__init__(self.message)
