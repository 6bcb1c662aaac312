"""Dataset summary model."""

from typing import Any, List

from pydantic import BaseModel, Field


class Summary(BaseModel):
    """Statistics collected about a validated dataset.

    Attributes:
        subjects: Subject labels (without the "sub-" prefix)
        sessions: Session labels (without the "ses-" prefix)
        tasks: Task names taken from TaskName in task sidecars
        modalities: Grouped modality labels (e.g., ["T1w", "bold", "fieldmap"])
        raw_modalities: Modality tokens before grouping (e.g., ["T1w", "bold", "epi"])
        total_files: Number of files in the dataset
        size: Total size in bytes
    """

    subjects: List[str] = Field(default_factory=list)
    sessions: List[str] = Field(default_factory=list)
    tasks: List[str] = Field(default_factory=list)
    modalities: List[str] = Field(default_factory=list)
    raw_modalities: List[str] = Field(default_factory=list, serialization_alias="rawModalities")
    total_files: int = Field(default=0, serialization_alias="totalFiles")
    size: int = 0

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
