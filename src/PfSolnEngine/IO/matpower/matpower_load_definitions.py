# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
"""
Defines constants for named column indices to the load matrix.

The load matrix holds the demand separately from the bus matrix, one row
per load record, several records may point to the same bus:

    0.  C{LOAD_I}          load index
    1.  C{LOAD_CND}        bus index the load is connected to (zero based)
    2.  C{LOAD_STATUS}     1 - connected, 0 - disconnected
    3.  C{LOAD_PD}         real power demand (MW)
    4.  C{LOAD_QD}         reactive power demand (MVAr)
    5.  C{LOADZ_PERCENT}   constant impedance fraction of the load (0-1)
    6.  C{LOADI_PERCENT}   constant current fraction of the load (0-1)
    7.  C{LOADP_PERCENT}   constant power fraction of the load (0-1)
"""

LOAD_I = 0
LOAD_CND = 1
LOAD_STATUS = 2
LOAD_PD = 3
LOAD_QD = 4
LOADZ_PERCENT = 5
LOADI_PERCENT = 6
LOADP_PERCENT = 7

# minimum number of columns of a load matrix
LOAD_MIN_COLS = LOADP_PERCENT + 1

load_headers = ["load_i",
                "bus",
                "status",
                "Pd",
                "Qd",
                "z_percent",
                "i_percent",
                "p_percent"]
