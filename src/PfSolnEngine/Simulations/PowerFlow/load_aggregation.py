# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

from typing import Tuple, Callable
import numpy as np
from PfSolnEngine.basic_structures import Mat, Vec
from PfSolnEngine.exceptions import TableShapeError, BusIndexError
from PfSolnEngine.IO.matpower.matpower_bus_definitions import VM
from PfSolnEngine.IO.matpower.matpower_load_definitions import (LOAD_I, LOAD_CND, LOAD_STATUS, LOAD_PD, LOAD_QD,
                                                                 LOADZ_PERCENT, LOADI_PERCENT, LOADP_PERCENT,
                                                                 LOAD_MIN_COLS)

# (bus rows, load rows aligned by position) -> (Pd, Qd) in MW and MVAr
LoadAggregator = Callable[[Mat, Mat], Tuple[Vec, Vec]]


def normalize_load_table(nbus: int, load: Mat | None) -> Mat:
    """
    Build a load matrix with exactly one row per bus, so that row i describes the load of bus i.
    The default row of a bus is connected and has no demand; the explicit load records
    override the row of the bus they point to (the last record wins).
    :param nbus: number of buses
    :param load: load matrix (nload, ncol) or list of rows, may be None or empty
    :return: load matrix (nbus, ncol)
    """
    load = np.zeros((0, LOAD_MIN_COLS)) if load is None else np.asarray(load, dtype=float)

    # no records, whatever the number of columns
    if load.ndim == 0 or load.shape[0] == 0:
        ncol = load.shape[1] if load.ndim == 2 else 0
        load = np.zeros((0, max(ncol, LOAD_MIN_COLS)))

    if load.ndim != 2 or load.shape[1] < LOAD_MIN_COLS:
        raise TableShapeError(name="load columns",
                              found=load.shape[1] if load.ndim == 2 else load.ndim,
                              expected=LOAD_MIN_COLS)

    Ld = np.zeros((nbus, load.shape[1]))
    Ld[:, LOAD_I] = np.arange(nbus)
    Ld[:, LOAD_CND] = np.arange(nbus)
    Ld[:, LOAD_STATUS] = 1

    if load.shape[0] > 0:
        load_bus = load[:, LOAD_CND].astype(int)
        wrong = np.where((load_bus < 0) | (load_bus >= nbus))[0]
        if len(wrong):
            raise BusIndexError(name="load", indices=load_bus[wrong], nbus=nbus)

        Ld[load_bus, LOAD_CND:] = load[:, LOAD_CND:]

    return Ld


def total_load(bus: Mat, load: Mat) -> Tuple[Vec, Vec]:
    """
    Local demand of every queried bus.
    The rows of bus and load are aligned (load[k] is the load of bus[k]).
    The demand of each load is scaled by its ZIP composition using the bus voltage module:
    z * Vm^2 + i * Vm + p, a load with no composition given is constant power.
    :param bus: bus matrix rows (n, nbus_cols)
    :param load: normalized load matrix rows (n, nload_cols)
    :return: Pd (MW), Qd (MVAr), arrays of size n
    """
    if bus.shape[0] != load.shape[0]:
        raise TableShapeError(name="load rows", found=load.shape[0], expected=bus.shape[0])

    Vm = bus[:, VM]
    z = load[:, LOADZ_PERCENT]
    i = load[:, LOADI_PERCENT]
    p = load[:, LOADP_PERCENT]

    # no composition -> constant power
    p = np.where((z + i + p) == 0, 1.0, p)

    factor = load[:, LOAD_STATUS] * (z * Vm * Vm + i * Vm + p)

    Pd = load[:, LOAD_PD] * factor
    Qd = load[:, LOAD_QD] * factor

    return Pd, Qd
