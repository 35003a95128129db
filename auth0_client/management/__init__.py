from .blacklisted_tokens import BlacklistedTokensClient
from .client import ManagementApiClient
from .clients import ClientsClient
from .connections import ConnectionsClient
from .device_credentials import DeviceCredentialsClient
from .rules import RulesClient
from .tickets import TicketsClient
from .users import UsersClient

__all__ = [
    "ManagementApiClient",
    "BlacklistedTokensClient",
    "ClientsClient",
    "ConnectionsClient",
    "DeviceCredentialsClient",
    "RulesClient",
    "TicketsClient",
    "UsersClient",
]
