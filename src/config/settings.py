"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use ENERATOR_ prefix (e.g., ENERATOR_CLASS_PREFIX=hl-).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use ENERATOR_ prefix.

    Examples:
        ENERATOR_CLASS_PREFIX=hl-
        ENERATOR_STRICT_MODE=true
        ENERATOR_ENABLE_TABLES=false
    """

    model_config = SettingsConfigDict(
        env_prefix="ENERATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Highlighting configuration
    class_prefix: str = Field(
        default="syn-",
        description="Prefix applied to every generated token class name",
    )

    css_scope: str = Field(
        default="pre",
        description="Selector that scopes generated theme CSS rules",
    )

    # Markdown extensions
    enable_strikethrough: bool = Field(
        default=True,
        description="Enable ~~strikethrough~~ (not part of CommonMark)",
    )

    enable_tables: bool = Field(
        default=True,
        description="Enable GFM-style pipe tables",
    )

    enable_smart_punctuation: bool = Field(
        default=True,
        description="Convert quotes, dashes and ellipses to typographic forms",
    )

    html_passthrough: bool = Field(
        default=True,
        description="Pass raw HTML in the source through to the output",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: requesting CSS for an unknown theme is an error",
    )

    def markdownRules_get(self) -> list[str]:
        """
        List the markdown-it rules to enable on top of the commonmark preset.

        Returns:
            Rule names accepted by MarkdownIt.enable()

        Example:
            >>> AppSettings().markdownRules_get()
            ['strikethrough', 'table', 'replacements', 'smartquotes']
        """
        rules: list[str] = []
        if self.enable_strikethrough:
            rules.append("strikethrough")
        if self.enable_tables:
            rules.append("table")
        if self.enable_smart_punctuation:
            rules.extend(["replacements", "smartquotes"])
        return rules


# Singleton instance - import this in your code
appsettings = AppSettings()
