# -*- coding: utf-8 -*-

"""
pyHydrawise
This module provides a way to interface with Hydrawise sprinkler controllers
(e.g. the Hunter HC and HPC-FP series), either through the Hydrawise cloud or
directly on the local network.

Cloud bindings talk to https://app.hydrawise.com/api/v1/ and authenticate
with the API key found in the account settings of the Hydrawise app.

Local bindings talk to the controller itself over plain HTTP, authenticated
with the user name (admin by default) and password of the controller.

All functionality is available through the `Hydrawise` class:

    h = Hydrawise("LOCAL", host="192.168.1.1", password="secret")
    print(h.get_zones())

Zones and controllers returned by the binding can be commanded directly,
e.g. `zone.run(60)` or `controller.stop_all_zones()`.

Module-specific errors are raised as `HydrawiseCommandException` and are
expected to be handled by the user of the library.
"""

__author__ = """Martijn Dierckx"""
__version__ = '1.1.0'

# flake8: noqa
from .client import (HydrawiseClient, HydrawiseCommandException,
                     HydrawiseConnectionType)
from .hydrawise import Hydrawise
from .hydrawisecontroller import HydrawiseController
from .hydrawisezone import HydrawiseZone
