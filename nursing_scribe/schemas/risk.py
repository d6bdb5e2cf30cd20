"""
Data models for derived risk scores.
"""

from enum import Enum

from pydantic import BaseModel


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskScore(BaseModel):
    score_name: str
    score_value: int
    max_score: int
    risk_level: RiskLevel
    description: str
