# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from __future__ import annotations

import numpy as np
import numba as nb
from scipy.sparse import csc_matrix, coo_matrix
from PfSolnEngine.basic_structures import IntVec, Vec


def get_C_elm_bus(nbus: int, bus_indices: IntVec, data: Vec | None = None) -> csc_matrix:
    """
    Get the element-bus incidence matrix (nelm, nbus)
    Element k sits at row k, and has its value at the column of its bus.
    :param nbus: number of buses
    :param bus_indices: elements' bus indices
    :param data: values to store (ones if None)
    :return: CSC matrix
    """
    nelm = len(bus_indices)
    i = np.arange(nelm, dtype=int)
    if data is None:
        data = np.ones(nelm, dtype=float)
    return coo_matrix((data, (i, bus_indices)), shape=(nelm, nbus), dtype=float).tocsc()


@nb.njit(cache=True)
def dev_per_bus(nbus: int, bus_indices: IntVec) -> IntVec:
    """
    Number of devices per bus
    :param nbus: number of buses
    :param bus_indices: elements' bus indices
    :return: array of size nbus
    """
    res = np.zeros(nbus, dtype=np.int64)
    for i in range(len(bus_indices)):
        res[bus_indices[i]] += 1
    return res
