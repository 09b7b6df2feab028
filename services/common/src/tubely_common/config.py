"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel, computed_field


class ObjectStoreConfig(BaseModel, frozen=True):
    """S3-compatible object store configuration."""

    endpoint: str = "s3.amazonaws.com"
    user: str
    password: str
    bucket_name: str = "tubely"
    region: str = "us-east-1"
    secure: bool = True
    public_base_url: str | None = None

    @computed_field
    @property
    def public_url(self) -> str:
        """Returns the base URL under which stored objects are reachable."""
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com"


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full PostgreSQL connection URL."""
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )
