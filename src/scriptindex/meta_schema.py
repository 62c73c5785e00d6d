"""Script metadata record definitions using Pydantic.

One ScriptMeta is produced per script file that carries a valid
``==UserScript==`` header. Field order here is the field order of the
JSON index.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Fields that are always emitted, even when empty
LIST_FIELDS = ("update_urls", "depents")


class ScriptMeta(BaseModel):
    """Extracted and normalized metadata of one script file."""

    model_config = ConfigDict(frozen=True)

    path: str | None = Field(default=None, description="File path relative to the working directory")
    name: str | None = Field(default=None, description="From @name")
    home_page: str | None = Field(default=None, description="From @homepageURL")
    license: str | None = Field(default=None, description="From @license")
    author: str | None = Field(default=None, description="From @author")
    version: str | None = Field(default=None, description="From @version")
    description: str | None = Field(default=None, description="From @description")
    update_time: str | None = Field(
        default=None,
        description="From @timestamp, formatted YYYY-MM-DD HH:MM:SS in local time",
    )
    update_urls: list[str] = Field(default_factory=list, description="Every @updateURL, in file order")
    etag: str | None = Field(default=None, description="From @etag")
    depents: list[str] = Field(default_factory=list, description="Every @depents, in file order")
    download_url: str | None = Field(default=None, description="Raw download URL computed from path")

    def to_record(self) -> dict[str, Any]:
        """Return the JSON-ready form of this record.

        Absent or empty scalar fields are omitted; list fields are always
        present.
        """
        record: dict[str, Any] = {}
        for key, value in self.model_dump().items():
            if key in LIST_FIELDS:
                record[key] = list(value)
            elif value:
                record[key] = value
        return record
