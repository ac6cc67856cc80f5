from typing import Optional

from pydantic import BaseModel, Field


class CreateTopicParameters(BaseModel):
    topic_memo: Optional[str] = Field(None, description="Memo for the topic")
    is_submit_key: bool = Field(
        False, description="Whether submissions require the operator key"
    )


class CreateTopicParametersNormalised(BaseModel):
    topic_memo: Optional[str] = None
    admin_key: Optional[str] = None
    submit_key: Optional[str] = None


class DeleteTopicParameters(BaseModel):
    topic_id: str = Field(..., description="Topic to delete")


class SubmitTopicMessageParameters(BaseModel):
    topic_id: str = Field(..., description="Topic to submit to")
    message: str = Field(..., min_length=1, description="Message content")


class GetTopicMessagesParameters(BaseModel):
    topic_id: str = Field(..., description="Topic to read")
    start_time: Optional[str] = Field(
        None, description="ISO 8601 lower bound for consensus timestamps"
    )
    end_time: Optional[str] = Field(
        None, description="ISO 8601 upper bound for consensus timestamps"
    )
    limit: int = Field(100, gt=0, le=100, description="Maximum messages to return")
