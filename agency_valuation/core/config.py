from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    APP_ENV: str = "development"
    ASSESSMENT_VARIANT: str = "agency"  # "agency" or "inhouse" weight profile

    # Valuation heuristics
    ASSUMED_EBIT_MARGIN: float = 0.15
    MAX_EBIT_IMPROVEMENT_PERCENT: float = 30.0
    POTENTIAL_UPLIFT: float = 2.5  # multiple points unlocked by the roadmap
    DEFAULT_EBITDA_MARGIN_PERCENT: float = 15.0

    # Recommendations
    DASHBOARD_MIN_RECOMMENDATIONS: int = 8
    SIMPLE_MIN_RECOMMENDATIONS: int = 4

    # Score substituted everywhere when the pipeline fails
    FALLBACK_SCORE: int = 50

    @model_validator(mode="after")
    def _validate_ranges(self) -> "Settings":
        if self.ASSESSMENT_VARIANT not in ("agency", "inhouse"):
            raise ValueError("ASSESSMENT_VARIANT must be 'agency' or 'inhouse'")
        if not 0 < self.ASSUMED_EBIT_MARGIN <= 1:
            raise ValueError("ASSUMED_EBIT_MARGIN must be in (0, 1]")
        if self.MAX_EBIT_IMPROVEMENT_PERCENT < 0:
            raise ValueError("MAX_EBIT_IMPROVEMENT_PERCENT must not be negative")
        if self.DASHBOARD_MIN_RECOMMENDATIONS < 1 or self.SIMPLE_MIN_RECOMMENDATIONS < 1:
            raise ValueError("Recommendation minimums must be positive")
        if not 0 <= self.FALLBACK_SCORE <= 100:
            raise ValueError("FALLBACK_SCORE must be within 0-100")
        return self


settings = Settings()
