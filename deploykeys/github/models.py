"""Typed GitHub REST payloads."""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec


class DeployKey(msgspec.Struct, kw_only=True, omit_defaults=True):
    """SSH public key authorised for a single repository.

    Attributes
    ----------
    id : int, optional
        Server-assigned identifier; ``None`` until the key is created.
    title : str, optional
        Label shown in the repository settings.
    key : str, optional
        Public key material in OpenSSH format.
    url : str, optional
        API URL of the key, assigned by the server.
    verified : bool, optional
        Whether GitHub has verified the key.
    read_only : bool, optional
        ``False`` grants push access; sent on create.
    created_at : datetime, optional
        Creation timestamp, assigned by the server.
    added_by : str, optional
        Login of the user that added the key.
    last_used : datetime, optional
        Last time the key authenticated, when GitHub reports it.

    Fields left at ``None`` are omitted from encoded request bodies.

    """

    id: int | None = None
    title: str | None = None
    key: str | None = None
    url: str | None = None
    verified: bool | None = None
    read_only: bool | None = None
    created_at: dt.datetime | None = None
    added_by: str | None = None
    last_used: dt.datetime | None = None


class GitHubErrorPayload(msgspec.Struct, kw_only=True):
    """Body GitHub returns alongside 4xx and 5xx statuses."""

    message: str | None = None
    errors: list[typ.Any] = msgspec.field(default_factory=list)
    documentation_url: str | None = None
