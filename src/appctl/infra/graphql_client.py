"""httpx-backed implementation of :class:`~appctl.core.protocols.ControlPlaneClient`.

This module is the **only** place in the codebase that imports ``httpx``.
All transport exceptions are caught here and re-raised as typed
:class:`~appctl.exceptions.AppctlError` subclasses — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from appctl.core.models import Application, Organization
from appctl.exceptions import NotFoundError, SessionRequiredError, TransportError
from appctl.infra.settings import ClientSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# GraphQL documents
# ---------------------------------------------------------------------------

_APP_FIELDS = """
    id
    name
    status
    deployed
    hostname
    version
    organization { id slug name }
"""

LIST_APPS = """
query {
  apps(type: "container") {
    nodes {%s}
  }
}
""" % _APP_FIELDS

GET_APP = """
query ($appName: String!) {
  app(name: $appName) {%s}
}
""" % _APP_FIELDS

CREATE_APP = """
mutation ($input: CreateAppInput!) {
  createApp(input: $input) {
    app {%s
      config { definition }
    }
  }
}
""" % _APP_FIELDS

DELETE_APP = """
mutation ($appId: ID!) {
  deleteApp(appId: $appId) {
    organization { id }
  }
}
"""

MOVE_APP = """
mutation ($input: MoveAppInput!) {
  moveApp(input: $input) {
    app {%s}
  }
}
""" % _APP_FIELDS

PAUSE_APP = """
mutation ($input: PauseAppInput!) {
  pauseApp(input: $input) {
    app {%s}
  }
}
""" % _APP_FIELDS

RESUME_APP = """
mutation ($input: ResumeAppInput!) {
  resumeApp(input: $input) {
    app {%s}
  }
}
""" % _APP_FIELDS

RESTART_APP = """
mutation ($input: RestartAppInput!) {
  restartApp(input: $input) {
    app {%s}
  }
}
""" % _APP_FIELDS

LIST_ORGANIZATIONS = """
query {
  organizations {
    nodes { id slug name type }
  }
}
"""


class GraphQLControlPlaneClient:
    """Concrete :class:`ControlPlaneClient` speaking GraphQL over HTTPS.

    Usage::

        client = GraphQLControlPlaneClient(ClientSettings())
        apps = client.list_applications()

    *transport* exists for tests (``httpx.MockTransport``); production
    code leaves it unset.
    """

    _NOT_FOUND_SIGNALS: tuple[str, ...] = (
        "could not resolve",
        "not found",
    )

    def __init__(
        self,
        settings: ClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not settings.access_token:
            raise SessionRequiredError(
                "No access token available.",
                hint="Set APPCTL_ACCESS_TOKEN (or FLY_API_TOKEN) and retry.",
            )
        self._settings = settings
        self._http = httpx.Client(
            timeout=httpx.Timeout(settings.http_timeout_seconds),
            headers={
                "Authorization": f"Bearer {settings.access_token}",
                "User-Agent": settings.user_agent,
                "Accept": "application/json",
            },
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> GraphQLControlPlaneClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def list_applications(self) -> list[Application]:
        data = self._execute("apps", LIST_APPS)
        nodes = (data.get("apps") or {}).get("nodes") or []
        return [self._parse_app(node) for node in nodes if isinstance(node, dict)]

    def get_application(self, name: str) -> Application:
        data = self._execute("app", GET_APP, {"appName": name})
        return self._parse_app(self._require(data, "app", name))

    def create_application(self, name: str, org_id: str) -> Application:
        payload: dict[str, Any] = {"organizationId": org_id, "runtime": "FIRECRACKER"}
        if name:
            payload["name"] = name
        data = self._execute("createApp", CREATE_APP, {"input": payload})
        return self._parse_app(self._payload_app(data, "createApp", name))

    def delete_application(self, name: str) -> None:
        self._execute("deleteApp", DELETE_APP, {"appId": name})

    def move_application(self, name: str, org_id: str) -> Application:
        data = self._execute(
            "moveApp", MOVE_APP, {"input": {"appId": name, "organizationId": org_id}},
        )
        return self._parse_app(self._payload_app(data, "moveApp", name))

    def pause_application(self, name: str) -> Application:
        return self._transition("pauseApp", PAUSE_APP, name)

    def resume_application(self, name: str) -> Application:
        return self._transition("resumeApp", RESUME_APP, name)

    def restart_application(self, name: str) -> Application:
        return self._transition("restartApp", RESTART_APP, name)

    def list_organizations(self) -> list[Organization]:
        data = self._execute("organizations", LIST_ORGANIZATIONS)
        nodes = (data.get("organizations") or {}).get("nodes") or []
        return [self._parse_org(node) for node in nodes if isinstance(node, dict)]

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _transition(self, operation: str, document: str, name: str) -> Application:
        data = self._execute(operation, document, {"input": {"appId": name}})
        return self._parse_app(self._payload_app(data, operation, name))

    def _execute(
        self,
        operation: str,
        document: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """POST one GraphQL document and return its ``data`` mapping."""
        logger.debug("GraphQL %s %s", operation, variables or {})
        try:
            response = self._http.post(
                self._settings.graphql_url,
                json={"query": document, "variables": variables or {}},
            )
            response.raise_for_status()
            body: Any = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("%s failed with HTTP %s", operation, exc.response.status_code)
            if exc.response.status_code == 401:
                raise SessionRequiredError(
                    "The control plane rejected the access token.",
                    hint="Check APPCTL_ACCESS_TOKEN (or FLY_API_TOKEN).",
                ) from exc
            raise TransportError(
                f"{operation} failed: HTTP {exc.response.status_code}",
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s failed: %s", operation, exc)
            raise TransportError(
                f"{operation} failed: {exc}",
                hint="Check your network connection.",
            ) from exc
        except ValueError as exc:
            raise TransportError(f"{operation} returned invalid JSON") from exc

        if not isinstance(body, dict):
            raise TransportError(f"{operation} returned an unexpected payload")

        errors = body.get("errors")
        if errors:
            self._raise_mapped(operation, errors)

        data = body.get("data")
        return data if isinstance(data, dict) else {}

    @classmethod
    def _raise_mapped(cls, operation: str, errors: list[Any]) -> None:
        """Translate GraphQL ``errors`` into a domain exception.  Always raises."""
        messages = [
            str(err.get("message", "unknown error")) if isinstance(err, dict) else str(err)
            for err in errors
        ]
        codes = {
            str((err.get("extensions") or {}).get("code", ""))
            for err in errors
            if isinstance(err, dict)
        }
        message = "; ".join(messages)
        if "NOT_FOUND" in codes or any(
            signal in message.lower() for signal in cls._NOT_FOUND_SIGNALS
        ):
            raise NotFoundError(message)
        raise TransportError(message or f"{operation} failed")

    @classmethod
    def _payload_app(cls, data: dict[str, Any], key: str, name: str) -> dict[str, Any]:
        """Return the ``app`` object nested in a mutation payload."""
        return cls._require(cls._require(data, key, name), "app", name)

    @staticmethod
    def _require(data: dict[str, Any], key: str, name: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise NotFoundError(f"Could not find app {name!r}")
        return value

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_org(raw: dict[str, Any]) -> Organization:
        return Organization(
            id=str(raw.get("id", "")),
            slug=str(raw.get("slug", "")),
            name=str(raw.get("name") or ""),
        )

    @classmethod
    def _parse_app(cls, raw: dict[str, Any]) -> Application:
        org_raw = raw.get("organization")
        config = raw.get("config")
        definition = config.get("definition") if isinstance(config, dict) else None
        version = raw.get("version")
        return Application(
            name=str(raw.get("name", "")),
            status=str(raw.get("status") or ""),
            organization=cls._parse_org(org_raw) if isinstance(org_raw, dict) else None,
            id=str(raw.get("id", "")),
            hostname=str(raw.get("hostname") or ""),
            version=version if isinstance(version, int) else None,
            deployed=bool(raw.get("deployed")),
            definition=dict(definition) if isinstance(definition, dict) else {},
        )
