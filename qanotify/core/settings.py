from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from qanotify.core.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    redact_log_emails: bool = Field(default=True, alias="REDACT_LOG_EMAILS")

    resources_dir: str = Field(default="resources", alias="RESOURCES_DIR")
    curators_file: str = Field(default="curators.csv", alias="CURATORS_FILE")
    descriptions_file: str = Field(default="descriptions.tsv", alias="DESCRIPTIONS_FILE")

    mail_from: str = Field(alias="MAIL_FROM")
    smtp_host: str = Field(default="localhost", alias="SMTP_HOST")
    smtp_port: int = Field(default=25, alias="SMTP_PORT")
    mail_subject: str = Field(default="Reactome Weekly QA", alias="MAIL_SUBJECT")

    host_name: str | None = Field(default=None, alias="QA_HOST_NAME")
    url_scheme: str = Field(default="http", alias="URL_SCHEME")
    reports_url_path: str = Field(default="QAReports", alias="REPORTS_URL_PATH")
    instance_browser_path: str = Field(
        default="cgi-bin/instancebrowser?DB=gk_central&ID=",
        alias="INSTANCE_BROWSER_PATH",
    )
    db_name_prefix: str = Field(default="test_slice_", alias="DB_NAME_PREFIX")
    check_description_url: str = Field(
        default=(
            "https://docs.google.com/spreadsheets/d/"
            "1eoVAE4lKXSisxZl29fJR-9MhkUoUzTDJFz9qHRGUS1s/edit#gid=1104781337"
        ),
        alias="CHECK_DESCRIPTION_URL",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(
            str(err["loc"][0]) for err in exc.errors() if err.get("loc")
        )
        raise ConfigurationError(f"Invalid mail/runtime settings: {fields}") from exc
