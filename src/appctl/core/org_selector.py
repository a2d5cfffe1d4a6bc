"""Organization selection for commands that need an owning organization.

The selector never returns a bare ``None``: every call ends in exactly
one of three outcomes, carried by :class:`OrgResolution`:

* ``RESOLVED``  — an :class:`~appctl.core.models.Organization` was found.
* ``CANCELLED`` — the user aborted the interactive choice.
* ``FAILED``    — listing failed or the slug hint matched nothing.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from appctl.core.models import Organization
from appctl.core.protocols import ControlPlaneClient, Prompter
from appctl.exceptions import (
    AppctlError,
    OperationCancelled,
    OrganizationResolutionError,
)

logger = logging.getLogger(__name__)

SELECT_PROMPT = "Select organization:"


class Outcome(enum.Enum):
    RESOLVED = "resolved"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class OrgResolution:
    """Result of :func:`select_organization`."""

    outcome: Outcome
    organization: Organization | None = None
    reason: str = ""

    @classmethod
    def resolved(cls, org: Organization) -> OrgResolution:
        return cls(Outcome.RESOLVED, organization=org)

    @classmethod
    def cancelled(cls) -> OrgResolution:
        return cls(Outcome.CANCELLED)

    @classmethod
    def failed(cls, reason: str) -> OrgResolution:
        return cls(Outcome.FAILED, reason=reason)

    def unwrap(self) -> Organization:
        """Return the organization or raise the matching error.

        A ``RESOLVED`` outcome without an organization is treated as a
        failure as well.
        """
        if self.outcome is Outcome.CANCELLED:
            raise OperationCancelled("Organization selection cancelled.")
        if self.outcome is Outcome.RESOLVED and self.organization is not None:
            return self.organization
        raise OrganizationResolutionError(
            f"Error setting organization: {self.reason or 'no organization selected'}",
        )


def _choice_label(org: Organization) -> str:
    if org.name and org.name != org.slug:
        return f"{org.name} ({org.slug})"
    return org.slug


def select_organization(
    client: ControlPlaneClient,
    prompter: Prompter,
    slug: str = "",
) -> OrgResolution:
    """Resolve an organization from an optional *slug* hint.

    A non-empty hint must match an accessible organization exactly; an
    unmatched hint fails without prompting.  Without a hint the user
    picks one interactively.
    """
    try:
        orgs = client.list_organizations()
    except AppctlError as exc:
        logger.debug("Listing organizations failed: %s", exc)
        return OrgResolution.failed(str(exc))

    if slug:
        match = next((org for org in orgs if org.slug == slug), None)
        if match is None:
            return OrgResolution.failed(f'organization "{slug}" not found')
        logger.debug("Organization %s matched slug hint", match.id)
        return OrgResolution.resolved(match)

    if not orgs:
        return OrgResolution.failed("no organizations available to this account")

    by_id = {org.id: org for org in orgs}
    choices = [
        (_choice_label(org), org.id)
        for org in sorted(orgs, key=lambda org: org.slug)
    ]
    try:
        chosen = prompter.select(SELECT_PROMPT, choices)
    except OperationCancelled:
        return OrgResolution.cancelled()

    org = by_id.get(chosen)
    if org is None:
        return OrgResolution.failed(f"unknown organization {chosen!r} selected")
    return OrgResolution.resolved(org)
