"""
apps.stripe_demo.panel
~~~~~~~~~~~~~~~~~~~~~~
State and actions of the Stripe configuration panel.

The panel keeps the key in two places: ``initial_key``, the value last
confirmed by the server, and ``stripe_key``, the edit buffer.  Unsaved changes
are detected by comparing them.  Requests go through a :class:`FetchClient`;
user feedback goes to a notification callback.

Typical use from a UI layer::

    panel = ConfigPanel(client, notify=show_toast)
    await panel.mount()
    panel.edit("sk_live_...")
    if panel.can_save:
        await panel.submit()
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass

import structlog

from .constants import PLUGIN_ID
from .fetch_client import FetchClient, FetchError
from .redaction import mask_secret
from .translations import format_message
from .validators import StripeKeyValidationError, clean_stripe_key

logger = structlog.get_logger(__name__)

WARNING = "warning"
SUCCESS = "success"


@dataclass(frozen=True)
class Notification:
    type: str
    message: str


NotificationSink = Callable[[Notification], None]


def log_notification(notification: Notification) -> None:
    logger.info("panel_notification", type=notification.type, message=notification.message)


class ConfigPanel:
    """
    Load / validate / save flow for the Stripe secret key.

    Attributes:
        stripe_key: Edit buffer, the text currently in the input.
        initial_key: Last value loaded from or saved to the server.
        is_loading: ``True`` until the first load completes and during reloads.
        is_saving: ``True`` while a save request is in flight.
        error: Message of the most recent failure, cleared by new input.
    """

    def __init__(
        self,
        client: FetchClient,
        *,
        notify: NotificationSink = log_notification,
        messages: Mapping[str, str] | None = None,
        plugin_id: str = PLUGIN_ID,
    ) -> None:
        self.client = client
        self.notify = notify
        self.messages = messages
        self.config_path = f"/{plugin_id}/config/"

        self.stripe_key: str = ""
        self.initial_key: str | None = None
        self.is_loading: bool = True
        self.is_saving: bool = False
        self.error: str | None = None
        self._mounted = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def has_unsaved_changes(self) -> bool:
        return self.stripe_key != (self.initial_key or "")

    @property
    def can_save(self) -> bool:
        return not self.is_loading and not self.is_saving and self.has_unsaved_changes

    @property
    def masked_key(self) -> str | None:
        """Redacted saved key for display; ``None`` while loading or unset."""
        if self.is_loading or not self.initial_key:
            return None
        return mask_secret(self.initial_key)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def mount(self) -> None:
        """Load the configuration the first time the panel is shown."""
        if self._mounted:
            return
        self._mounted = True
        await self.load()

    async def load(self) -> None:
        """Fetch the stored key into both the baseline and the edit buffer."""
        with self._flag("is_loading"):
            self.error = None
            try:
                response = await self.client.get(self.config_path)
            except FetchError as exc:
                self._fail(exc.server_message or self._message("config.load.error"))
                return

            data = response.data if isinstance(response.data, dict) else {}
            stripe_key = data.get("stripeKey")
            if stripe_key:
                self.stripe_key = stripe_key
                self.initial_key = stripe_key

    def edit(self, value: str) -> None:
        """Replace the edit buffer with user input."""
        self.stripe_key = value
        self.error = None

    async def submit(self, candidate: str | None = None) -> bool:
        """
        Validate and save *candidate*, defaulting to the edit buffer.

        Returns:
            ``True`` when the server accepted the key.  ``False`` on a
            validation failure, a server or transport failure, or when a save
            is already in flight.
        """
        if self.is_saving:
            logger.info("panel_submit_ignored", reason="save_in_flight")
            return False
        if candidate is not None:
            self.stripe_key = candidate
        self.error = None

        try:
            stripe_key = clean_stripe_key(self.stripe_key)
        except StripeKeyValidationError as exc:
            self._fail(self._message(exc.message_id))
            return False

        with self._flag("is_saving"):
            try:
                await self.client.put(self.config_path, json={"stripeKey": stripe_key})
            except FetchError as exc:
                self._fail(exc.server_message or self._message("config.save.error"))
                return False

            self.initial_key = stripe_key
            self.stripe_key = stripe_key
            self.notify(Notification(SUCCESS, self._message("config.save.success")))
            return True

    def dismiss_error(self) -> None:
        self.error = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @contextmanager
    def _flag(self, name: str) -> Iterator[None]:
        setattr(self, name, True)
        try:
            yield
        finally:
            setattr(self, name, False)

    def _fail(self, message: str) -> None:
        self.error = message
        self.notify(Notification(WARNING, message))

    def _message(self, message_id: str) -> str:
        return format_message(message_id, self.messages)
