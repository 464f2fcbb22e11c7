"""Process-level configuration for SFC Pipeline.

Settings are loaded from environment variables (prefix ``SFC_``) with .env
file support via pydantic-settings. Per-pipeline behaviour (tags, compilers,
modifiers) is configured with PipelineOptions instead.

Environment variables:
    SFC_MAX_CONCURRENT_DOCUMENTS: Documents processed at once by ComponentPipeline.run
    SFC_OUTPUT_ENCODING: Encoding used for artifact content
    SFC_FALLBACK_EXTENSION: Extension used when a tag resolver yields nothing

Example:
    >>> from sfc_pipeline.settings import settings
    >>> settings.max_concurrent_documents
    4

Note:
    Settings are loaded once at module import and frozen.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Core configuration for pipeline runs.

    Attributes:
        max_concurrent_documents: Upper bound of documents in flight during
            ComponentPipeline.run. Set to 1 for strictly sequential runs.

        output_encoding: Codec used to turn merged section content into
            artifact bytes.

        fallback_extension: Extension applied when a registered tag's
            resolver returns an empty value for a section.
    """

    model_config = SettingsConfigDict(
        env_prefix="SFC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    max_concurrent_documents: int = Field(default=4, ge=1)
    output_encoding: str = "utf-8"
    fallback_extension: str = Field(default="txt", min_length=1)


settings = Settings()
"""Global settings instance, created at import."""
