import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("SHOPQUERY_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    log_level: str
    currency_symbol: str
    default_fruit_prefix: str

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            log_level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
            currency_symbol=os.environ.get("CURRENCY_SYMBOL", "$"),
            default_fruit_prefix=os.environ.get("DEFAULT_FRUIT_PREFIX", "a"),
        )

    def format_money(self, amount) -> str:
        return f"{self.currency_symbol}{amount:,.2f}"


config = Config.from_env()
