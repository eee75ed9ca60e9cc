from pydantic import BaseModel, ConfigDict, Field


class CompletionRange(BaseModel):
    """Span on the cursor's line that a suggestion replaces (0-based)."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, description="Line of the cursor")
    start_column: int = Field(ge=0, description="Start of the word under the cursor")
    end_column: int = Field(ge=0, description="Cursor column")


class CompletionItem(BaseModel):
    """A completion candidate handed to the editor's suggestion UI."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Text shown in the suggestion list")
    insert_text: str = Field(description="Text inserted when the item is accepted")
    documentation: str = Field(default="AI Suggestion", description="Detail shown next to the item")
    range: CompletionRange = Field(description="Range replaced by insert_text")
