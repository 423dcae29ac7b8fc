from pydantic import BaseModel, ConfigDict, PositiveInt


class Occurrence(BaseModel):
    """A keyword appearing `frequency` times in `document`."""

    model_config = ConfigDict(frozen=True)

    document: str  # name exactly as listed in the document list
    frequency: PositiveInt

    def incremented(self) -> "Occurrence":
        return Occurrence(document=self.document, frequency=self.frequency + 1)
