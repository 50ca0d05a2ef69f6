"""
Analyze Schemas
===============
Request and response models for the analyze endpoints.
"""
from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class AnalyzeRequest(BaseModel):
    """Request to analyze one unit of source"""

    source: str = Field(..., description="TypeScript source text")
    filename: Optional[str] = Field(
        default=None,
        description="Filename hint; a .tsx suffix selects the TSX grammar",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "source": "function process(data: any): any {\n    return data;\n}\n",
                "filename": "process.ts",
            }
        }


class FindingModel(BaseModel):
    """One detected smell"""

    id: str
    name: str
    description: str
    line: int = Field(..., ge=1)
    message: str
    severity: Literal["high", "medium", "low"]


class DiagnosticModel(BaseModel):
    """A rule evaluation that was skipped"""

    rule_id: str
    node_type: str
    line: int
    error: str


class AnalyzeResponse(BaseModel):
    """Response from a completed analysis"""

    status: Literal["complete"] = "complete"
    variant: Literal["typescript", "tsx"]
    count: int = Field(default=0, description="Number of findings")
    findings: List[FindingModel] = Field(default_factory=list)
    diagnostics: List[DiagnosticModel] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "status": "complete",
                "variant": "typescript",
                "count": 2,
                "findings": [
                    {
                        "id": "any-type",
                        "name": "Any Type Abuse",
                        "description": "Usage of \"any\" disables type checking.",
                        "line": 1,
                        "message": "Avoid using \"any\". It bypasses the type system.",
                        "severity": "high",
                    }
                ],
                "diagnostics": [],
            }
        }


class AnalysisFailure(BaseModel):
    """Why the source could not be analyzed"""

    status: Literal["failed"] = "failed"
    error: str
    line: Optional[int] = None
    column: Optional[int] = None


class RuleInfo(BaseModel):
    """One entry of the compiled-in rule set"""

    id: str
    name: str
    severity: Literal["high", "medium", "low"]
    message: str
