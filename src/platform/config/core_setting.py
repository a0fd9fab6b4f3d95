from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Ticketing Ledger'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_SERIALIZE: bool = False  # JSON lines on stdout instead of the colored format

    # Accounts used when the ledgers are deployed at startup
    DEPLOYER_ADDRESS: str = '0x00000000000000000000000000000000000d3910'
    REGISTRY_ADDRESS: str = '0x000000000000000000000000000000000e7e0001'

    # Caller identity (wallet address) is taken from this request header
    CALLER_ADDRESS_HEADER: str = 'X-Caller-Address'

    # Per-subscriber buffer of the notification broadcaster
    NOTIFICATION_BUFFER_SIZE: int = 100

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    @field_validator('NOTIFICATION_BUFFER_SIZE')
    @classmethod
    def validate_buffer_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('NOTIFICATION_BUFFER_SIZE must be a positive integer')
        return v


settings = Settings()
