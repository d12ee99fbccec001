from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from ..config.settings import SupabaseSettings
from ..errors import RemoteStoreError

logger = logging.getLogger(__name__)


class SupabaseNotInitializedError(RemoteStoreError):
    """Raised when accessing the Supabase client before it can be configured."""


@dataclass
class SupabaseGateway:
    """Thin wrapper around the Supabase Python client.

    Calendars are shared by token only, so the anon key is used without a
    user session.
    """

    settings: SupabaseSettings
    _client: Optional[Client] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase settings are missing: {missing}.")
        self._client = create_client(self.settings.url, self.settings.anon_key)
        return self._client

    def table(self, name: str):
        return self.ensure_client().table(name)

    def execute(self, query: Any, *, action: str) -> Any:
        """Run a prepared query, normalising backend failures."""

        try:
            return query.execute()
        except APIError as exc:
            logger.warning("Supabase rejected %s: %s", action, exc.message)
            raise RemoteStoreError(f"Failed to {action}: {exc.message}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Supabase unreachable during %s: %s", action, exc)
            raise RemoteStoreError(f"Failed to {action}: {exc}") from exc
