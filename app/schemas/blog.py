from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostMetadata(BaseModel):
    """Front-matter of a post: typed title/date plus any other keys as extras."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1)
    date: str = Field(min_length=1)

    @field_validator("title", mode="before")
    @classmethod
    def _scalar_title(cls, value: Any) -> Any:
        # YAML reads `title: 2020` as an int
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class PostSummary(PostMetadata):
    id: str


class PostDetail(PostSummary):
    contentHtml: str


class PostParams(BaseModel):
    id: str


class PostPath(BaseModel):
    params: PostParams
