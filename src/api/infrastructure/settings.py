"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from typing import Literal
from urllib.parse import urlsplit

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared_kernel.currencies import DEFAULT_CURRENCY_CODE, SUPPORTED_CURRENCY_CODES


class SiteSettings(BaseSettings):
    """Canonical site settings.

    Environment variables:
        INFINIA_SITE_URL: Public URL of the platform (default: http://localhost:3001).
            Its hostname is the platform hostname used for tenant resolution.
        INFINIA_ENVIRONMENT: development, test or production (default: development)
    """

    model_config = SettingsConfigDict(
        env_prefix="INFINIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    site_url: str = Field(
        default="http://localhost:3001",
        description="Canonical platform URL",
    )
    environment: Literal["development", "test", "production"] = Field(
        default="development",
        description="Deployment environment",
    )

    @field_validator("site_url")
    @classmethod
    def validate_site_url(cls, value: str) -> str:
        """Reject URLs that do not carry a hostname."""
        if not urlsplit(value).hostname:
            raise ValueError(f"site_url must be an absolute URL, got: '{value}'")
        return value

    @property
    def platform_hostname(self) -> str:
        """Hostname of the platform's own domain, without port."""
        return urlsplit(self.site_url).hostname or ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class SupabaseSettings(BaseSettings):
    """Hosted database and auth provider settings.

    Environment variables:
        INFINIA_SUPABASE_URL: Project URL (default: http://localhost:54321)
        INFINIA_SUPABASE_ANON_KEY: Public anon key (required in production)
        INFINIA_SUPABASE_TIMEOUT_SECONDS: HTTP timeout for every call (default: 5.0)
        INFINIA_SUPABASE_AUTH_COOKIE_NAME: Override for the session cookie name
    """

    model_config = SettingsConfigDict(
        env_prefix="INFINIA_SUPABASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(default="http://localhost:54321", description="Project URL")
    anon_key: SecretStr = Field(
        default=SecretStr(""),
        description="Public anon API key",
    )
    timeout_seconds: float = Field(
        default=5.0,
        description="HTTP timeout for database and auth calls",
        gt=0,
        le=60,
    )
    auth_cookie_name: str | None = Field(
        default=None,
        description="Session cookie name (derived from the project ref when unset)",
    )

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")

    @property
    def project_ref(self) -> str:
        """First DNS label of the project URL (e.g. ``abcd`` for abcd.supabase.co)."""
        hostname = urlsplit(self.url).hostname or ""
        return hostname.split(".")[0]

    @property
    def session_cookie_name(self) -> str:
        if self.auth_cookie_name:
            return self.auth_cookie_name
        return f"sb-{self.project_ref}-auth-token"


class CurrencySettings(BaseSettings):
    """Currency preference cookie settings.

    Environment variables:
        INFINIA_CURRENCY_COOKIE_NAME: Cookie name (default: preferred-currency)
        INFINIA_CURRENCY_COOKIE_MAX_AGE: Cookie lifetime in seconds (default: one year)
        INFINIA_CURRENCY_DEFAULT_CODE: Fallback currency (default: AED)
        INFINIA_CURRENCY_ENABLED_CODES: JSON list of enabled codes (default: all supported)
    """

    model_config = SettingsConfigDict(
        env_prefix="INFINIA_CURRENCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cookie_name: str = Field(default="preferred-currency", description="Cookie name")
    cookie_max_age: int = Field(
        default=60 * 60 * 24 * 365,
        description="Cookie max-age in seconds",
        ge=0,
    )
    default_code: str = Field(default=DEFAULT_CURRENCY_CODE, description="Fallback currency")
    enabled_codes: list[str] = Field(
        default_factory=lambda: list(SUPPORTED_CURRENCY_CODES),
        description="Currencies offered to visitors",
    )

    @field_validator("default_code")
    @classmethod
    def validate_default_code(cls, value: str) -> str:
        code = value.upper()
        if code not in SUPPORTED_CURRENCY_CODES:
            raise ValueError(f"Unsupported default currency: {value}")
        return code

    @field_validator("enabled_codes")
    @classmethod
    def validate_enabled_codes(cls, value: list[str]) -> list[str]:
        codes = [code.upper() for code in value]
        unsupported = [code for code in codes if code not in SUPPORTED_CURRENCY_CODES]
        if unsupported:
            raise ValueError(f"Unsupported currencies enabled: {', '.join(unsupported)}")
        return codes


class TenancySettings(BaseSettings):
    """Tenant route isolation settings.

    Environment variables:
        INFINIA_TENANCY_ALLOWED_PATH_PREFIXES: JSON list of paths servable on tenant domains
        INFINIA_TENANCY_DEVELOPMENT_HOSTS: JSON list of local hostnames
        INFINIA_TENANCY_BUSINESS_NOT_FOUND_PATH: Landing page for unknown tenants
    """

    model_config = SettingsConfigDict(
        env_prefix="INFINIA_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allowed_path_prefixes: list[str] = Field(
        default_factory=lambda: [
            "/business",
            "/api/business",
            "/business-not-found",
            "/unauthorized",
            "/privacy",
            "/terms",
        ],
        description="Path prefixes a tenant hostname may serve",
    )
    development_hosts: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Hostnames treated as local development",
    )
    business_not_found_path: str = Field(
        default="/business-not-found",
        description="Redirect target for tenant hostnames without a business",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Infinia Edge", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def site(self) -> SiteSettings:
        """Get site settings."""
        return get_site_settings()

    @property
    def supabase(self) -> SupabaseSettings:
        """Get hosted provider settings."""
        return get_supabase_settings()

    @property
    def currency(self) -> CurrencySettings:
        """Get currency settings."""
        return get_currency_settings()

    @property
    def tenancy(self) -> TenancySettings:
        """Get tenancy settings."""
        return get_tenancy_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_site_settings() -> SiteSettings:
    """Get cached site settings."""
    return SiteSettings()


@lru_cache
def get_supabase_settings() -> SupabaseSettings:
    """Get cached hosted provider settings."""
    return SupabaseSettings()


@lru_cache
def get_currency_settings() -> CurrencySettings:
    """Get cached currency settings."""
    return CurrencySettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings."""
    return TenancySettings()
