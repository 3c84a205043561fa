import enum
import logging
from datetime import datetime
from typing import Dict, Union

import requests


class HydrawiseConnectionType(enum.Enum):
    """
    The two flavours of API binding: the hosted Hydrawise cloud or a
    controller on the local network
    """
    LOCAL = 'LOCAL'
    CLOUD = 'CLOUD'

    @classmethod
    def parse(cls, value: Union[str, 'HydrawiseConnectionType']):
        if isinstance(value, cls):
            return value

        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError("Connection type %s is not valid." % value)


class HydrawiseCommandException(Exception):
    """Error reported by the Hydrawise API, or raised on misuse of the
    binding (e.g. a cloud only call on a local binding)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.date = datetime.now()


class HydrawiseClient:
    """
    Implementation of the Hydrawise HTTP API, as exposed by the Hydrawise
    cloud and by the controllers themselves on the local network.

    Every call is a single GET request, there is no session or state kept
    between calls.
    """

    """
    Initialise class with connection parameters

    :param type: LOCAL or CLOUD
    :param str host: host name or ip address of the controller (local only)
    :param str user: user name of the controller (local only)
    :param str password: password of the controller (local only)
    :param str api_key: API key of the Hydrawise account (cloud only)
    :return:
    """

    DEFAULT_TIMEOUT = 5
    DEFAULT_USER = 'admin'
    CLOUD_URL = 'https://app.hydrawise.com/api/v1/'

    def __init__(self, type: Union[str, HydrawiseConnectionType],
                 host: str = None,
                 user: str = DEFAULT_USER,
                 password: str = None,
                 api_key: str = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 logger: logging.Logger = None):

        self._type = HydrawiseConnectionType.parse(type)
        self._host = host
        self._user = user or HydrawiseClient.DEFAULT_USER
        self._password = password
        self._api_key = api_key
        self._timeout = timeout
        self.logger = logger

        if self.logger is None:
            self.logger = logging.getLogger(__name__)

        if self._type == HydrawiseConnectionType.LOCAL:
            if not host:
                raise ValueError("A host is required for a local binding.")
            if not password:
                raise ValueError(
                    "A password is required for a local binding.")
            self._url = 'http://' + host + '/'

        else:
            if not api_key:
                raise ValueError("An API key is required for a cloud binding.")
            self._url = HydrawiseClient.CLOUD_URL

    @property
    def type(self) -> HydrawiseConnectionType:
        return self._type

    @property
    def url(self) -> str:
        return self._url

    @property
    def host(self) -> str:
        return self._host

    @property
    def user(self) -> str:
        return self._user

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_local(self) -> bool:
        return self._type == HydrawiseConnectionType.LOCAL

    def get_auth(self):

        if not self.is_local:
            return None

        return (self._user, self._password)

    def request(self, path: str = '', params: Dict = None) -> Dict:
        """
        Send a GET request to the local controller or the cloud
        and return the decoded response.

        :param path: path of the API endpoint, relative to the base url
        :param params: query parameters to add to the url
        :raises HydrawiseCommandException: when the API reports an error
        :raises requests.RequestException: on network or HTTP failure
        :return: the decoded JSON body
        """

        query = dict(params or {})

        if not self.is_local:
            query['api_key'] = self._api_key

        url = self._url + path
        self.logger.debug('Sending request to %s: %s', url,
                          {k: v for k, v in query.items() if k != 'api_key'})

        response = requests.get(url, params=query,
                                auth=self.get_auth(),
                                timeout=self._timeout)
        response.raise_for_status()
        data = response.json()

        self.logger.debug('response received: %s %s', response, data)

        if isinstance(data, dict) and data.get('messageType') == 'error':
            self.logger.warning('error received from %s: %s', url,
                                data.get('message'))
            raise HydrawiseCommandException(data.get('message'))

        return data

    def __repr__(self):
        return "<%s %s at %s>" % (
            self.__class__.__name__,
            self._type.value,
            self._url)
