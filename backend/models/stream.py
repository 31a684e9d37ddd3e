from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class VideoType(StrEnum):
    CAMERA = "camera"
    SCREEN = "screen"
    CUSTOM = "custom"


class StreamInfo(BaseModel):
    """Stream details as returned by GET /v2/project/{key}/session/{sid}/stream/{id}."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    video_type: VideoType = Field(alias="videoType")
    name: str
    layout_class_list: list[str] = Field(alias="layoutClassList")
