"""Data models for the JSON flattener."""
import os

from pydantic import BaseModel, Field, root_validator


class ProcessingRoots(BaseModel):
    """Input and output roots for a flattening run."""
    input_root: str
    output_root: str

    @root_validator(pre=True)
    def check_roots(cls, values):
        """Validator to ensure both roots are set and point at different directories."""
        input_root = values.get('input_root')
        output_root = values.get('output_root')

        if not input_root or not output_root:
            raise ValueError("Input and output directories must be specified")

        # Compare normalised absolute paths so "out" and "./out/" count as the same root
        if os.path.abspath(input_root) == os.path.abspath(output_root):
            raise ValueError("Input and output directories must be different")

        return values

    class Config:
        """Pydantic configuration."""
        frozen = True


class FileTask(BaseModel):
    """A single input file and the output path it will be written to."""
    input_path: str = Field(..., min_length=1)
    output_path: str = Field(..., min_length=1)


class RunSummary(BaseModel):
    """Tally of a batch run."""
    success_count: int = Field(0, ge=0)
    total_count: int = Field(0, ge=0)

    @property
    def failed_count(self) -> int:
        return self.total_count - self.success_count

    def __str__(self):
        return f"{self.success_count}/{self.total_count}"
