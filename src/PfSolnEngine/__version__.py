# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0

# do not forget to keep a three-number version!!!
__PfSolnEngine_VERSION__ = "1.0.0"

about_msg = "PfSolnEngine v" + str(__PfSolnEngine_VERSION__) + '\n\n'

about_msg += """
Update of the power system state after a DC power flow solution:
bus voltages, generator powers and branch flows.

This program is free software; you can redistribute it and/or
modify it subject to the terms of the Mozilla Public License, v. 2.0.
If a copy of the MPL was not distributed with this file,
You can obtain one at https://mozilla.org/MPL/2.0/.
"""
