"""Unit tests for the DeployKey model."""

from __future__ import annotations

import datetime as dt

import msgspec

from deploykeys.github import DeployKey

_GITHUB_KEY = b"""
{
  "id": 1,
  "key": "ssh-rsa AAA...",
  "url": "https://api.github.com/repos/octocat/Hello-World/keys/1",
  "title": "octocat@octomac",
  "verified": true,
  "created_at": "2014-12-10T15:53:42Z",
  "read_only": true,
  "added_by": "octocat",
  "last_used": "2022-01-10T15:53:42Z",
  "enabled": true
}
"""


def test_decodes_github_payload_and_ignores_unknown_fields() -> None:
    """Server fields decode into typed attributes; extras are dropped."""
    key = msgspec.json.decode(_GITHUB_KEY, type=DeployKey)

    assert key.id == 1
    assert key.title == "octocat@octomac"
    assert key.verified is True
    assert key.read_only is True
    assert key.created_at == dt.datetime(2014, 12, 10, 15, 53, 42, tzinfo=dt.UTC)
    assert key.last_used == dt.datetime(2022, 1, 10, 15, 53, 42, tzinfo=dt.UTC)


def test_encoding_omits_unset_fields() -> None:
    """A new key only carries what the caller set."""
    key = DeployKey(title="ci", key="ssh-ed25519 AAAA", read_only=False)

    assert msgspec.json.decode(msgspec.json.encode(key)) == {
        "title": "ci",
        "key": "ssh-ed25519 AAAA",
        "read_only": False,
    }


def test_new_key_has_no_id() -> None:
    """id stays empty until the server assigns one."""
    assert DeployKey(title="ci").id is None
