"""Account credentials taken from the environment."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars

EMAIL_VAR = "MC_EMAIL"
PASSWORD_VAR = "MC_PASSWORD"
TOTP_SECRET_VAR = "MC_TOTP_SECRET"


@dataclass(frozen=True)
class AccountConfig:
    """Holds the account used for signed-in calls."""

    email: str
    password: str = field(repr=False)
    totp_secret: str | None = field(default=None, repr=False)


def get_account_config() -> AccountConfig:
    values = require_env_vars((EMAIL_VAR, PASSWORD_VAR))
    return AccountConfig(
        email=values[EMAIL_VAR],
        password=values[PASSWORD_VAR],
        totp_secret=optional_env_var(TOTP_SECRET_VAR),
    )
