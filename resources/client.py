"""Client facade: one settings/transport pair shared by every resource."""

from __future__ import annotations

from config.settings import Settings, get_settings
from protocols.http_client import HttpClient
from resources.channels import Channels, MessageTypes
from resources.events import Events
from resources.lists import Lists
from resources.users import Users


class IterableClient:
    """Bundles all resources over the same settings and HTTP client.

    Usage::

        client = IterableClient(Settings(token="..."))
        client.lists.create("VIP")
        client.users.for_email("jane@example.com")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: HttpClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.http_client = client

        self.lists = Lists(self.settings, client)
        self.users = Users(self.settings, client)
        self.events = Events(self.settings, client)
        self.channels = Channels(self.settings, client)
        self.message_types = MessageTypes(self.settings, client)
