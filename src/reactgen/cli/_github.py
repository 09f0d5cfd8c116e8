"""GitHub username lookup used to suggest an author URL."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
_TIMEOUT = 5.0


def github_username(email: str, client: httpx.Client | None = None) -> str | None:
    """Find the GitHub login registered with *email*.

    Returns ``None`` when the email is empty, nothing matches, or the request
    fails. The lookup only feeds a prompt default.
    """
    if not email:
        return None

    owns_client = client is None
    if client is None:
        client = httpx.Client(base_url=GITHUB_API, timeout=_TIMEOUT)

    try:
        response = client.get(
            "/search/users",
            params={"q": f"{email} in:email"},
            headers={"Accept": "application/vnd.github+json"},
        )
        response.raise_for_status()
        items = response.json().get("items") or []
    except (httpx.HTTPError, ValueError) as e:
        logger.debug("GitHub username lookup for %s failed: %s", email, e)
        return None
    finally:
        if owns_client:
            client.close()

    if not items:
        return None
    return items[0].get("login") or None


def github_profile_url(email: str) -> str:
    username = github_username(email)
    return f"https://github.com/{username}" if username else ""
