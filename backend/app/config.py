from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from pawgraph.config.settings import SeedConfig, PawgraphConfig

settings = Dynaconf(
    envvar_prefix="PAWGRAPH",
    load_dotenv=True,
    settings_files=[],
)


def _setting(key):
    return settings.get(key, DEFAULTS[key])


def _optional_int(value):
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = _setting("APP_NAME")
    api_prefix: str = _setting("API_PREFIX")
    graphql_path: str = _setting("GRAPHQL_PATH")
    graphiql_enabled: bool = _setting("GRAPHIQL_ENABLED")
    latency_ms: int = _setting("LATENCY_MS")

    # ---------------- Server ----------------
    host: str = _setting("HOST")
    port: int = _setting("PORT")
    log_level: str = _setting("LOG_LEVEL")

    # ---------------- Pawgraph ----------------
    pawgraph: PawgraphConfig = PawgraphConfig(
        seed=SeedConfig(
            people_count=_setting("SEED_PEOPLE_COUNT"),
            dog_count=_setting("SEED_DOG_COUNT"),
            photo_api_url=_setting("SEED_PHOTO_API_URL"),
            photo_timeout_s=_setting("SEED_PHOTO_TIMEOUT_S"),
            fallback_photo=_setting("SEED_FALLBACK_PHOTO") or None,
            random_seed=_optional_int(_setting("SEED_RANDOM_SEED")),
        ),
    )
