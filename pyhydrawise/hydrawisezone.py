from datetime import datetime
from typing import Dict


class HydrawiseZone(object):
    """Representation of a zone/relay of a Hydrawise controller.

    Usage example when used as library:
    h = Hydrawise("LOCAL", host="192.168.1.105", password="secret")
    zone = h.get_zones()[0]
    # print the zone name and whether it is watering
    print(zone.name, zone.is_running)
    # water the zone for 5 minutes
    zone.run(300)
    zone.stop()

    Zones are snapshots of a single status/schedule response, call
    get_zones() again to see changes.
    """

    def __init__(self,
                 api_binding,
                 relay_id: int,
                 zone: int,
                 name: str,
                 next_run_at: datetime = None,
                 next_run_duration: int = None,
                 is_suspended: bool = False,
                 is_running: bool = False,
                 remaining_running_time: int = 0,
                 default_run_duration: int = None,
                 controller=None) -> None:
        """
        Create a new HydrawiseZone instance.

        :param api_binding: the Hydrawise binding used to send commands
        :param int relay_id: unique relay id known to the Hydrawise cloud
        :param int zone: the local zone/relay number
        :param next_run_at: date and time of the next scheduled run
        :param int next_run_duration: run time in seconds of the next run
        :param int default_run_duration: default run time in seconds
            (local bindings only)
        :param controller: the HydrawiseController the zone belongs to
        """
        self.api_binding = api_binding
        self.relay_id = relay_id
        self.zone = zone
        self.name = name
        self.next_run_at = next_run_at
        self.next_run_duration = next_run_duration
        self.is_suspended = is_suspended
        self.is_running = is_running
        self.remaining_running_time = remaining_running_time
        self.default_run_duration = default_run_duration
        self.controller = controller

    def run(self, duration: int = None) -> Dict:
        """
        Start watering the zone.

        :param int duration: number of seconds to run, the controller
            default is used when omitted
        """
        return self.api_binding.command_zone('run', self, duration)

    def stop(self) -> Dict:
        """
        Stop watering the zone.
        """
        return self.api_binding.command_zone('stop', self)

    def suspend(self, duration: int = None) -> Dict:
        """
        Suspend the schedule of the zone.

        :param int duration: number of seconds to suspend
        """
        return self.api_binding.command_zone('suspend', self, duration)

    def __repr__(self):
        return "<%s %s (%s)%s>" % (
            self.__class__.__name__,
            self.zone,
            self.name,
            " running" if self.is_running else "")
