"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use EKAN_ prefix (e.g., EKAN_HIGHLIGHT_CODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use EKAN_ prefix.

    Examples:
        EKAN_STRIKETHROUGH=false
        EKAN_HIGHLIGHT_CODE=true
        EKAN_PYGMENTS_STYLE=dracula
    """

    model_config = SettingsConfigDict(
        env_prefix="EKAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Markdown grammar
    strikethrough: bool = Field(
        default=True,
        description="Enable ~~strikethrough~~ on top of the CommonMark grammar",
    )

    allow_html: bool = Field(
        default=True,
        description="Pass raw HTML found in notes through to the rendered output",
    )

    # Code blocks
    highlight_code: bool = Field(
        default=False,
        description="Syntax-highlight fenced code blocks with Pygments",
    )

    pygments_style: str = Field(
        default="monokai",
        description="Pygments style used when highlight_code is enabled",
    )

    # CLI output
    output_suffix: str = Field(
        default=".html",
        description="Suffix of the rendered file when no explicit output name is given",
    )

    def outputName_make(self, input_name: str) -> str:
        """
        Derive the rendered file name for a markdown note.

        Args:
            input_name: File name of the markdown note

        Returns:
            File name with the markdown suffix swapped for output_suffix

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make('secrets.md')
            'secrets.html'
        """
        stem = input_name.rsplit('.', 1)[0] if '.' in input_name else input_name
        return f"{stem}{self.output_suffix}"


# Singleton instance - import this in your code
appsettings = AppSettings()
