# text_summarizer/api/schemas.py
from typing import Any, Dict, List, Literal, Optional
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
    model_validator,
)

from text_summarizer.summarizer.models import SummaryResult

ModeLiteral = Literal["concise", "standard", "detailed"]
EngineLiteral = Literal["local", "remote"]


class SummarizeRequestModel(BaseModel):
    model_config = ConfigDict(
        protected_namespaces=(), populate_by_name=True, extra="forbid"
    )

    text: Optional[str] = Field(default=None, description="Inline text to summarize.")

    # accept BOTH "url" and "source_url" on input
    url: Optional[HttpUrl] = Field(
        default=None,
        validation_alias=AliasChoices("url", "source_url"),
        description="Web page whose paragraph text is summarized.",
    )

    mode: Optional[ModeLiteral] = Field(
        default=None, description="Verbosity; server default when omitted."
    )
    engine: EngineLiteral = Field(default="local")
    api_key: Optional[str] = Field(
        default=None, description="Credential for the remote provider."
    )

    @model_validator(mode="after")
    def ensure_text_source(self) -> "SummarizeRequestModel":
        if self.text is None and self.url is None:
            raise ValueError("Either `text` or `url` must be provided.")
        return self

    @field_validator("api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, value: Any) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SummaryResultModel(BaseModel):
    summary: str
    keywords: List[str] = Field(default_factory=list)
    highlights: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: SummaryResult) -> "SummaryResultModel":
        return cls(
            summary=result.summary,
            keywords=list(result.keywords),
            highlights=list(result.highlights),
        )

    def to_domain(self) -> SummaryResult:
        return SummaryResult(
            summary=self.summary,
            keywords=list(self.keywords),
            highlights=list(self.highlights),
        )


class SummaryResponseModel(SummaryResultModel):
    engine: EngineLiteral
    outcome: str
    stats: Dict[str, int]
