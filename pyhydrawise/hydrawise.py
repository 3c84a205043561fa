"""
pyhydrawise
Python library supporting Hydrawise sprinkler controllers through the
Hydrawise cloud or the local API of the controller.
"""
import logging
from datetime import datetime
from typing import Dict, List, Union

from .client import (HydrawiseClient, HydrawiseCommandException,
                     HydrawiseConnectionType)
from .hydrawisecontroller import HydrawiseController
from .hydrawisezone import HydrawiseZone

ZoneOrRelay = Union[HydrawiseZone, int]
ControllerOrId = Union[HydrawiseController, int]


class Hydrawise(object):
    """Binding to the Hydrawise API, either local or cloud based.

    Usage example when used as library:
    h = Hydrawise("CLOUD", api_key="0123-4567-89AB-CDEF")
    for controller in h.get_controllers():
        for zone in controller.get_zones():
            print(zone)
    h.run_zone(h.get_zones()[0], 60)

    Errors reported by the API are raised as HydrawiseCommandException,
    and should be handled by the user of the library.
    """

    # action used for manual runs
    MANUAL_PERIOD_ID = 998

    ZONE_ACTIONS = ('run', 'suspend', 'stop')
    ALL_ZONES_ACTIONS = ('runall', 'suspendall', 'stopall')

    def __init__(self,
                 type: Union[str, HydrawiseConnectionType],
                 host: str = None,
                 user: str = HydrawiseClient.DEFAULT_USER,
                 password: str = None,
                 api_key: str = None,
                 timeout: float = HydrawiseClient.DEFAULT_TIMEOUT,
                 logger=None) -> None:
        """
        Create a new Hydrawise binding.

        :param type: the type of binding, LOCAL or CLOUD
        :param str host: host name or ip address of the controller
            (local only)
        :param str user: user name of the controller, admin by default
            (local only)
        :param str password: password of the controller (local only)
        :param str api_key: API key of the Hydrawise account (cloud only)
        :param timeout: seconds to wait for a response
        """
        if logger is None:
            self.logger = logging.getLogger(__name__)
        else:
            self.logger = logger

        self.client = HydrawiseClient(
            type,
            host=host,
            user=user,
            password=password,
            api_key=api_key,
            timeout=timeout,
            logger=self.logger
        )

    @property
    def type(self) -> HydrawiseConnectionType:
        return self.client.type

    @property
    def url(self) -> str:
        return self.client.url

    @property
    def is_local(self) -> bool:
        return self.client.is_local

    # Commands

    def command_zone(self, action: str, zone_or_relay: ZoneOrRelay,
                     duration: int = None) -> Dict:
        """
        Send a command to a single zone/relay.

        :param str action: run, suspend or stop
        :param zone_or_relay: a zone as returned by get_zones, or a
            relay number (local) or relay id (cloud)
        :param int duration: how long the command applies, in seconds
            (run and suspend only)
        :raises ValueError: on an unknown action
        """
        if action not in Hydrawise.ZONE_ACTIONS:
            raise ValueError("Zone action %s is not valid." % action)

        params = {
            'period_id': Hydrawise.MANUAL_PERIOD_ID,
            'action': action,
        }

        if self.is_local:
            params['relay'] = self._relay_for(zone_or_relay)
        else:
            params['relay_id'] = self._relay_for(zone_or_relay)

        if duration is not None:
            params['custom'] = duration

        if (not self.is_local and isinstance(zone_or_relay, HydrawiseZone)
                and isinstance(zone_or_relay.controller,
                               HydrawiseController)):
            params['controller_id'] = zone_or_relay.controller.id

        self.logger.debug('Sending %s command to zone %s', action,
                          zone_or_relay)
        return self.set_zone(params)

    def command_all_zones(self, action: str,
                          controller: ControllerOrId = None,
                          duration: int = None) -> Dict:
        """
        Send a command to all zones/relays.

        :param str action: runall, suspendall or stopall
        :param controller: restrict the command to a controller (cloud only)
        :param int duration: how long the command applies, in seconds
            (runall and suspendall only)
        :raises ValueError: on an unknown action
        """
        if action not in Hydrawise.ALL_ZONES_ACTIONS:
            raise ValueError("All zones action %s is not valid." % action)

        params = {
            'period_id': Hydrawise.MANUAL_PERIOD_ID,
            'action': action,
        }

        if duration is not None:
            params['custom'] = duration

        controller_id = None
        if not self.is_local:
            controller_id = self._controller_id_for(controller)

        self.logger.debug('Sending %s command to all zones', action)
        return self.set_zone(params, controller_id)

    def run_zone(self, zone_or_relay: ZoneOrRelay,
                 duration: int = None) -> Dict:
        return self.command_zone('run', zone_or_relay, duration)

    def suspend_zone(self, zone_or_relay: ZoneOrRelay,
                     duration: int = None) -> Dict:
        return self.command_zone('suspend', zone_or_relay, duration)

    def stop_zone(self, zone_or_relay: ZoneOrRelay) -> Dict:
        return self.command_zone('stop', zone_or_relay)

    def run_all_zones(self, controller: ControllerOrId = None,
                      duration: int = None) -> Dict:
        return self.command_all_zones('runall', controller, duration)

    def suspend_all_zones(self, controller: ControllerOrId = None,
                          duration: int = None) -> Dict:
        return self.command_all_zones('suspendall', controller, duration)

    def stop_all_zones(self, controller: ControllerOrId = None) -> Dict:
        return self.command_all_zones('stopall', controller)

    # Zones & controllers

    def get_zones(self, controller: ControllerOrId = None
                  ) -> List[HydrawiseZone]:
        """
        Retrieve the configured zones/relays known to the controller.

        :param controller: only return the zones of this controller,
            the default controller is used when omitted
        :rtype: list of HydrawiseZone
        """
        data = self.get_status_and_schedule(
            self._controller_id_for(controller))

        running = {}
        for entry in data.get('running') or []:
            running[str(entry.get('relay_id'))] = entry

        zones = []
        for relay in data.get('relays', []):

            # unconfigured relays have never been watered
            if self.is_local and relay.get('lastwaterepoch') in (0, '0'):
                continue

            zone = HydrawiseZone(
                self,
                relay_id=relay.get('relay_id'),
                zone=relay.get('relay'),
                name=relay.get('name'),
                next_run_at=self._next_run_at(data, relay),
                next_run_duration=relay.get('run') or relay.get(
                    'run_seconds'),
                is_suspended=str(relay.get('suspended')) == '1',
            )

            if isinstance(controller, HydrawiseController):
                zone.controller = controller

            if self.is_local and relay.get('normalRuntime') is not None:
                zone.default_run_duration = int(relay['normalRuntime']) * 60

            running_zone = running.get(str(relay.get('relay_id')))
            if running_zone is not None:
                zone.is_running = True
                zone.remaining_running_time = running_zone.get('time_left', 0)

            elif not self.is_local and relay.get('time') == 1:
                # the cloud reports a next run in 1 second for running zones
                zone.is_running = True
                zone.remaining_running_time = relay.get('run') or 0

            zones.append(zone)

        self.logger.debug('%i zones found', len(zones))
        return zones

    def get_controllers(self) -> List[HydrawiseController]:
        """
        Retrieve all controllers known to the Hydrawise cloud, or a
        single controller for a local binding.

        :rtype: list of HydrawiseController
        """
        if self.is_local:
            return [HydrawiseController(self, name=self.url)]

        data = self.get_customer_details('controllers')

        controllers = []
        for entry in data.get('controllers', []):
            last_contact = entry.get('last_contact')

            controllers.append(HydrawiseController(
                self,
                id=entry.get('controller_id'),
                name=entry.get('name'),
                serial_number=entry.get('serial_number'),
                last_contact_with_cloud=(
                    datetime.fromtimestamp(last_contact)
                    if last_contact is not None else None),
                status=entry.get('status')
            ))

        return controllers

    # Raw API calls

    def get_customer_details(self, type: str) -> Dict:
        """
        Get the customer id and the controllers configured in the cloud.
        Only available on cloud bindings.

        :param str type: type of details to retrieve, e.g. controllers
        :raises HydrawiseCommandException: on a local binding
        """
        if self.is_local:
            raise HydrawiseCommandException(
                'Calling Cloud API function on a Local Binding')

        return self.client.request('customerdetails.php', {'type': type})

    def get_status_and_schedule(self, controller: int = None,
                                tag: str = None,
                                hours: int = None) -> Dict:
        """
        Get the status and schedule of the local controller, or of the
        controllers in the cloud.

        :param int controller: id of the controller to query
        :param str tag: only return relays with this tag (when no
            controller is given)
        :param int hours: schedule window in hours (when no controller
            is given)
        """
        path = ('get_sched_json.php' if self.is_local
                else 'statusschedule.php')

        params = {}
        if controller is not None:
            params['controller_id'] = controller
        else:
            if tag is not None:
                params['tag'] = tag
            if hours is not None:
                params['hours'] = hours

        return self.client.request(path, params)

    def set_zone(self, params: Dict = None, controller: int = None) -> Dict:
        """
        Send an action request to a single zone or to all zones.

        :param dict params: request parameters, at least action
        :param int controller: id of the controller (cloud accounts with
            multiple controllers)
        """
        path = 'set_manual_data.php' if self.is_local else 'setzone.php'

        params = dict(params or {})
        if controller is not None:
            params['controller_id'] = controller

        return self.client.request(path, params)

    # Helpers

    def _relay_for(self, zone_or_relay: ZoneOrRelay):
        if isinstance(zone_or_relay, HydrawiseZone):
            if self.is_local:
                return zone_or_relay.zone
            return zone_or_relay.relay_id

        return zone_or_relay

    @staticmethod
    def _controller_id_for(controller: ControllerOrId):
        if isinstance(controller, HydrawiseController):
            return controller.id

        return controller

    @staticmethod
    def _next_run_at(data: Dict, relay: Dict):
        if data.get('time') is None or relay.get('time') is None:
            return None

        return datetime.fromtimestamp(data['time'] + relay['time'])

    def __repr__(self):
        return "<%s %s at %s>" % (
            self.__class__.__name__,
            self.type.value,
            self.url)
