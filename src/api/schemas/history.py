"""
History schemas.
"""

from typing import List

from pydantic import BaseModel, Field

from src.content.models import HistoryItem

from .generation import GenerationParamsModel, GenerationResultModel


class HistoryItemResponse(BaseModel):
    """One recorded run."""

    id: str
    timestamp: int
    params: GenerationParamsModel
    result: GenerationResultModel

    @classmethod
    def from_item(cls, item: HistoryItem) -> "HistoryItemResponse":
        return cls(
            id=item.id,
            timestamp=item.timestamp,
            params=GenerationParamsModel.from_params(item.params),
            result=GenerationResultModel.from_result(item.result),
        )


class HistoryListResponse(BaseModel):
    """History, newest first."""

    items: List[HistoryItemResponse] = Field(default=[])
    total: int


class HistoryDeleteResponse(BaseModel):
    deleted: int
    message: str
