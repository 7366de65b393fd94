from pydantic import BaseModel, Field


class ValidateMatchRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=50000, description="Job description text")
    user_id: str | None = Field(None, max_length=128, description="Caller identity for the audit log")
