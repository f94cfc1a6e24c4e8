# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Tuple
import numpy as np
import numba as nb
from PfSolnEngine.basic_structures import IntVec, Mat
from PfSolnEngine.IO.matpower.matpower_bus_definitions import BUS_TYPE, PQ, PV, REF
from PfSolnEngine.IO.matpower.matpower_gen_definitions import GEN_BUS, GEN_STATUS


@nb.njit(cache=True)
def compile_types(types: IntVec,
                  pq_val=1,
                  pv_val=2,
                  vd_val=3) -> Tuple[IntVec, IntVec, IntVec, IntVec]:
    """
    Compile the types.
    :param types: array of node types
    :param pq_val: value of PQ type
    :param pv_val: value of PV type
    :param vd_val: value of the reference (slack) type
    :return: ref, pq, pv, pvpq
    """
    pq = np.where(types == pq_val)[0]
    pv = np.where(types == pv_val)[0]
    ref = np.where(types == vd_val)[0]

    pvpq = np.concatenate((pv, pq))
    pvpq.sort()

    return ref, pq, pv, pvpq


def compile_bus_types(bus: Mat) -> Tuple[IntVec, IntVec, IntVec, IntVec]:
    """
    Compile the bus indices per type straight from the bus matrix
    :param bus: bus matrix
    :return: ref, pq, pv, pvpq
    """
    types = bus[:, BUS_TYPE].astype(np.int64)
    return compile_types(types, PQ, PV, REF)


def get_generator_indices(gen: Mat, bus: Mat) -> Tuple[IntVec, IntVec]:
    """
    Classify the generators for the solution update
    :param gen: generator matrix
    :param bus: bus matrix
    :return: on (in service and not at a PQ bus), off (out of service)
    """
    gbus_all = gen[:, GEN_BUS].astype(int)
    is_on = gen[:, GEN_STATUS] > 0
    not_pq = bus[gbus_all, BUS_TYPE] != PQ
    on = np.where(is_on & not_pq)[0]
    off = np.where(gen[:, GEN_STATUS] <= 0)[0]
    return on, off
