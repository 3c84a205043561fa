from datetime import datetime
from typing import Dict, List


class HydrawiseController(object):
    """Representation of a Hydrawise controller.

    A cloud account can hold several controllers, a local binding always
    exposes a single controller named after the url of the device.
    """

    def __init__(self,
                 api_binding,
                 name: str,
                 id: int = None,
                 serial_number: str = None,
                 last_contact_with_cloud: datetime = None,
                 status: str = None) -> None:
        self.api_binding = api_binding
        self.id = id
        self.name = name
        self.serial_number = serial_number
        self.last_contact_with_cloud = last_contact_with_cloud
        self.status = status

    def get_zones(self) -> List:
        """
        Retrieve the zones of this controller.

        :rtype: list of HydrawiseZone
        """
        return self.api_binding.get_zones(self)

    def run_all_zones(self, duration: int = None) -> Dict:
        return self.api_binding.command_all_zones('runall', self, duration)

    def stop_all_zones(self) -> Dict:
        return self.api_binding.command_all_zones('stopall', self)

    def suspend_all_zones(self, duration: int = None) -> Dict:
        return self.api_binding.command_all_zones('suspendall', self,
                                                  duration)

    def __repr__(self):
        return "<%s %s (%s)>" % (
            self.__class__.__name__,
            self.id,
            self.name)
