"""Fixtures for tests that talk to the real API.

Credentials come from the environment (or a ``.env`` file): ``MC_EMAIL``,
``MC_PASSWORD`` and ``MC_TOTP_SECRET``. Without them every live test is skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pyotp
import pytest
from dotenv import load_dotenv

from bombay.auth import Authenticated, Credentials
from bombay.client import Client
from bombay.config import (
    AccountConfig,
    MissingConfigurationError,
    get_account_config,
    get_client_config,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(scope="session")
def account() -> AccountConfig:
    load_dotenv()
    try:
        account = get_account_config()
    except MissingConfigurationError as exc:
        pytest.skip(str(exc))
    if account.totp_secret is None:
        pytest.skip("MC_TOTP_SECRET is not set")
    return account


@pytest.fixture
def live_client(account: AccountConfig) -> Iterator[Client]:
    with Client(get_client_config()) as client:
        yield client


@pytest.fixture
def signed_in_live_client(live_client: Client, account: AccountConfig) -> Client:
    assert account.totp_secret is not None
    code = pyotp.TOTP(account.totp_secret).now()
    outcome = live_client.sign_in(Credentials.from_account(account, totp_code=code))
    assert isinstance(outcome, Authenticated)
    return live_client
