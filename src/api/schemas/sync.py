"""Pydantic schemas for the sync endpoint."""

from pydantic import BaseModel, Field, SecretStr

from domain.models import (
    Difficulty,
    GitHubSettings,
    ProblemMetadata,
    Site,
    SubmissionType,
    SyncRequest,
)


class ProblemMetadataSchema(BaseModel):
    """Problem metadata as produced by the page scrapers (camelCase keys)."""

    site: Site
    type: SubmissionType
    problem_name: str = Field(alias="problemName")
    problem_id: str | None = Field(default=None, alias="problemId")
    url: str = ""
    rating: int | None = None
    difficulty: Difficulty | None = None
    language: str
    timestamp: str
    contest_name: str | None = Field(default=None, alias="contestName")
    code: str
    solve_time_minutes: int | None = Field(default=None, alias="solveTimeMinutes")
    is_accepted: bool | None = Field(default=None, alias="isAccepted")

    class Config:
        populate_by_name = True

    def to_domain(self) -> ProblemMetadata:
        return ProblemMetadata.from_dict(self.model_dump(mode="json", by_alias=True, exclude_none=True))


class GitHubSettingsSchema(BaseModel):
    """Target repository and access token."""

    token: SecretStr
    owner: str
    repo: str

    def to_domain(self) -> GitHubSettings:
        return GitHubSettings(token=self.token.get_secret_value(), owner=self.owner, repo=self.repo)


class SyncRequestSchema(BaseModel):
    """Request to archive one solution."""

    metadata: ProblemMetadataSchema
    settings: GitHubSettingsSchema
    include_screenshot: bool = Field(default=False, alias="includeScreenshot")
    screenshot_source: str | None = Field(default=None, alias="screenshotSource")

    class Config:
        populate_by_name = True

    def to_domain(self) -> SyncRequest:
        return SyncRequest(
            metadata=self.metadata.to_domain(),
            settings=self.settings.to_domain(),
            include_screenshot=self.include_screenshot,
            screenshot_source=self.screenshot_source,
        )


class PushResultResponse(BaseModel):
    """Outcome for one written file."""

    path: str
    status: str

    class Config:
        from_attributes = True


class SyncResponse(BaseModel):
    """Sync outcome. On failure ``result`` lists the files written before the error."""

    success: bool
    result: list[PushResultResponse] = []
    error: str | None = None
