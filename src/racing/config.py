import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("RACING_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    database_url: str
    seed_race_count: int
    seed_meeting_count: int
    log_level: str

    @classmethod
    def from_env(cls, environment: str = None) -> "Config":
        environment = environment or env
        # The test session drops and recreates its database
        default_db = "racing_test" if environment == "test" else "racing"
        return cls(
            environment=environment,
            database_url=os.environ.get(
                "DATABASE_URL", f"postgresql://localhost:5432/{default_db}"
            ),
            seed_race_count=int(os.environ.get("RACING_SEED_RACES", "100")),
            seed_meeting_count=int(os.environ.get("RACING_SEED_MEETINGS", "10")),
            log_level=os.environ.get("RACING_LOG_LEVEL", "INFO").upper(),
        )


config = Config.from_env()
