# Copyright (c) 1996-2015 PSERC. All rights reserved.
# Use of this source code is governed by a BSD-style
# license that can be found in the LICENSE file.
"""
Defines constants for named column indices to branch matrix.

Some examples of usage, after defining the constants using the line above,
are::

    branch[3, BR_STATUS] = 0              # take branch 4 out of service
    Ploss = branch[:, PF] + branch[:, PT] # compute real power loss vector

The index, name and meaning of each column of the branch matrix is given
below:

columns 0-10 must be included in input matrix (in case file)
    0.  C{F_BUS}       from bus index
    1.  C{T_BUS}       to bus index
    2.  C{BR_R}        resistance (p.u.)
    3.  C{BR_X}        reactance (p.u.)
    4.  C{BR_B}        total line charging susceptance (p.u.)
    5.  C{RATE_A}      MVA rating A (long term rating)
    6.  C{RATE_B}      MVA rating B (short term rating)
    7.  C{RATE_C}      MVA rating C (emergency rating)
    8.  C{TAP}         transformer off nominal turns ratio
    9.  C{SHIFT}       transformer phase shift angle (degrees)
    10. C{BR_STATUS}   initial branch status, 1 - in service, 0 - out of service
    11. C{ANGMIN}      minimum angle difference, angle(Vf) - angle(Vt) (degrees)
    12. C{ANGMAX}      maximum angle difference, angle(Vf) - angle(Vt) (degrees)

columns 13-16 are added to matrix after power flow solution
they are typically not present in the input matrix
    13. C{PF}          real power injected at "from" bus end (MW)
    14. C{QF}          reactive power injected at "from" bus end (MVAr)
    15. C{PT}          real power injected at "to" bus end (MW)
    16. C{QT}          reactive power injected at "to" bus end (MVAr)
"""

# define the indices
F_BUS = 0  # f, from bus index
T_BUS = 1  # t, to bus index
BR_R = 2  # r, resistance (p.u.)
BR_X = 3  # x, reactance (p.u.)
BR_B = 4  # b, total line charging susceptance (p.u.)
RATE_A = 5  # rateA, MVA rating A (long term rating)
RATE_B = 6  # rateB, MVA rating B (short term rating)
RATE_C = 7  # rateC, MVA rating C (emergency rating)
TAP = 8  # ratio, transformer off nominal turns ratio
SHIFT = 9  # angle, transformer phase shift angle (degrees)
BR_STATUS = 10  # initial branch status, 1 - in service, 0 - out of service
ANGMIN = 11  # minimum angle difference, angle(Vf) - angle(Vt) (degrees)
ANGMAX = 12  # maximum angle difference, angle(Vf) - angle(Vt) (degrees)

# included in power flow solution, not necessarily in input
PF = 13  # real power injected at "from" bus end (MW)
QF = 14  # reactive power injected at "from" bus end (MVAr)
PT = 15  # real power injected at "to" bus end (MW)
QT = 16  # reactive power injected at "to" bus end (MVAr)

# minimum number of columns able to hold the power flow results
BRANCH_MIN_COLS = QT + 1

branch_headers = ["fbus",
                  "tbus",
                  "r",
                  "x",
                  "b",
                  "rateA",
                  "rateB",
                  "rateC",
                  "ratio",
                  "angle",
                  "status",
                  "angmin",
                  "angmax",
                  "Pf",
                  "Qf",
                  "Pt",
                  "Qt"]
