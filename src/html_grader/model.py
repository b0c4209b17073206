# src/html_grader/model.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CheckMode(str, Enum):
    FILE = "file"
    URL = "url"


class GraderConfig(BaseModel):
    """Resolved command-line configuration for a single grading run."""
    model_config = ConfigDict(frozen=True)

    verbose: bool = False
    checks_path: str = Field(description="Path to the JSON array of selectors.")
    mode: CheckMode = CheckMode.FILE
    target: str = Field(description="HTML file path or URL, depending on the mode.")


class FileCheck(BaseModel):
    """Outcome of a file existence check."""
    model_config = ConfigDict(frozen=True)

    path: str
    exists: bool

    @property
    def ok(self) -> bool:
        return self.exists

    @property
    def message(self) -> str:
        return f"{self.path} does not exist. Exiting."
