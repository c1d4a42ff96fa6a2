"""
modelindex configuration

We read configuration from 2 sources, in order of precedence (higher is more priority)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the MODELINDEX_ENV_FILE environment variable
"""

import functools
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "modelindex_"


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    elastic_password: Annotated[
        str | None,
        Field(
            description=(
                "Elasticsearch password. This the password for the 'elastic' user when Elastic xpack security is enabled"
            )
        ),
    ] = None

    elastic_host: Annotated[
        str | None,
        Field(
            description=(
                "Elasticsearch host. "
                "Default: https://localhost:9200 if elastic_password is set, http://localhost:9200 otherwise"
            )
        ),
    ] = None

    elastic_verify_ssl: Annotated[
        bool | None,
        Field(
            description=(
                "Elasticsearch verify SSL (only used if elastic_password is set). Default: True unless host is localhost)"
            ),
        ),
    ] = None

    models_namespace: Annotated[
        str | None,
        Field(
            description="Dotted module path that contains the model classes, e.g. myapp.models",
        ),
    ] = None

    nested_fields_limit: Annotated[
        int,
        Field(description="Maximum number of nested fields per index (index.mapping.nested_fields.limit)"),
    ] = 75

    max_result_window: Annotated[int, Field(description="Maximum from + size of a search request")] = 50000

    max_clause_count: Annotated[
        int | None,
        Field(description="index.query.bool.max_clause_count setting. Leave empty to omit it from the index settings"),
    ] = 1000000

    mapping_types: Annotated[
        bool,
        Field(
            description=(
                "Key mappings by document type name and send the type with documents. "
                "Disable for clusters that no longer support mapping types"
            )
        ),
    ] = True

    @model_validator(mode="after")
    def set_ssl(self: Any) -> "Settings":
        if not self.elastic_host:
            self.elastic_host = ("https" if self.elastic_password else "http") + "://localhost:9200"
        if not self.elastic_verify_ssl:
            self.elastic_verify_ssl = self.elastic_host not in {
                "http://localhost:9200",
                "https://localhost:9200",
            }
        return self

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    # Settings() does not read the .env file by itself, so load it into the environment first
    # (without overriding variables that are already set)
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
