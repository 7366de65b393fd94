from pydantic import BaseModel, ConfigDict, Field


class ValidationThresholds(BaseModel):
    """Trigger thresholds: a dimension warns only when its score is below these."""
    model_config = ConfigDict(frozen=True)

    keyword: float = 0.6
    skills: float = 0.7
    experience: float = 0.7
    achievements: float = 0.8
    industry: float = 0.5
    ats: float = 0.5
    # Final precision filter: warnings with criticality <= this are dropped
    significance: float = 0.5


class ValidatorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    cache_ttl_seconds: float = Field(3600.0, gt=0)
    max_recursion_depth: int = Field(3, ge=1)
    max_input_chars: int = Field(50000, gt=0)
    scorer_workers: int = Field(6, ge=1)
    audit_enabled: bool = True
    thresholds: ValidationThresholds = ValidationThresholds()
