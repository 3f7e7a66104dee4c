"""Credentials domain model."""

from pydantic import BaseModel, ConfigDict, SecretStr


class Credentials(BaseModel):
    """Developer identifier and secret key issued by PTV.

    The secret key is only used to compute request signatures and is never sent.
    """

    model_config = ConfigDict(frozen=True)

    developer_id: int
    secret_key: SecretStr = SecretStr("")
