#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/utils/network.py
"""HTTP client construction shared by the Notion client and image downloads."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

import httpx

from notion2md.constants import DEFAULT_NETWORK_TIMEOUT, DEFAULT_USER_AGENT, USER_AGENT_ENV_VAR

logger = logging.getLogger(__name__)


def get_user_agent(user_agent: Optional[str] = None) -> str:
    """Return the User-Agent header value.

    An explicit value wins, then the ``NOTION2MD_USER_AGENT`` environment
    variable, then the library default.
    """
    return user_agent or os.getenv(USER_AGENT_ENV_VAR) or DEFAULT_USER_AGENT


def create_http_client(
    timeout: float = DEFAULT_NETWORK_TIMEOUT,
    headers: Optional[Mapping[str, str]] = None,
    base_url: str = "",
    user_agent: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create an httpx client with a timeout and default headers.

    Parameters
    ----------
    timeout : float, default 30.0
        Request timeout in seconds
    headers : Mapping[str, str], optional
        Extra headers sent with every request
    base_url : str, default ""
        Base URL for relative request paths
    user_agent : str, optional
        Custom User-Agent header
    transport : httpx.BaseTransport, optional
        Transport to use instead of the network (e.g. ``httpx.MockTransport``)

    Returns
    -------
    httpx.Client
        Configured HTTP client; the caller closes it

    """
    merged_headers = {"User-Agent": get_user_agent(user_agent)}
    if headers:
        merged_headers.update(headers)

    logger.debug("Creating HTTP client (base_url=%r, timeout=%s)", base_url, timeout)
    return httpx.Client(
        base_url=base_url,
        timeout=timeout,
        follow_redirects=True,
        headers=merged_headers,
        transport=transport,
    )
